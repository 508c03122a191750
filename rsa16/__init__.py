"""
RSA16 - Educational RSA with 16-bit keys.

Usage:
    >>> from rsa16 import RSA16
    >>> 
    >>> rsa = RSA16(323, 5, 173)
    >>> rsa.validate_signature_bytes(b"hi", rsa.sign_bytes(b"hi"))
    True

Keys this small are trivially factorable; use for teaching only.
"""
from .client import RSA16
from .core.logging import setup_logging

# Configuration and errors
from .core.config import RSA16Config
from .core.exceptions import (
    RSA16Exception,
    RSA16PreconditionError,
    RSA16KeyError,
    RSA16InvariantError
)

# Components
from .core.crypto import (
    KeyContext,
    KeyGenerator,
    KeyMaterial,
    RandomSource,
    SystemRandomSource,
    ChainedCipher,
    Signer,
    CompactSigner,
    CRC16,
    calculate_crc16,
    modular_exponentiation,
    generate_keys
)

__version__ = '1.0.0'

__all__ = [
    'RSA16',
    'RSA16Config',
    'RSA16Exception',
    'RSA16PreconditionError',
    'RSA16KeyError',
    'RSA16InvariantError',
    'KeyContext',
    'KeyGenerator',
    'KeyMaterial',
    'RandomSource',
    'SystemRandomSource',
    'ChainedCipher',
    'Signer',
    'CompactSigner',
    'CRC16',
    'calculate_crc16',
    'modular_exponentiation',
    'generate_keys',
    'setup_logging',
]
