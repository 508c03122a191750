"""
Byte-chaining RSA16 encryption.
"""
from .chained_cipher import ChainedCipher

__all__ = [
    'ChainedCipher',
]
