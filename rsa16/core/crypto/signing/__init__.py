"""
RSA16 signatures: per-byte and CRC16-based compact signatures.
"""
from .signer import Signer
from .compact_signer import CompactSigner

__all__ = [
    'Signer',
    'CompactSigner',
]
