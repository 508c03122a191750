"""Crypto module: 16-bit RSA arithmetic, keys, chained cipher and signatures."""
from .arithmetic import modular_exponentiation, extended_gcd, modular_inverse, is_prime
from .hashing import CRC16, calculate_crc16
from .keys import (
    RandomSource,
    SystemRandomSource,
    KeyGenerator,
    KeyMaterial,
    KeyContext,
    generate_keys,
)
from .cipher import ChainedCipher
from .signing import Signer, CompactSigner


# Function-based API over an explicit key context
def encrypt(context, message):
    """Encrypts one byte without chaining."""
    return ChainedCipher(context).encrypt(message)

def decrypt(context, cipher):
    """Decrypts one value produced by ``encrypt``."""
    return ChainedCipher(context).decrypt(cipher)

def encrypt_bytes(context, message):
    """Encrypts a buffer in chained mode, advancing ``context.iv_enc``."""
    return ChainedCipher(context).encrypt_bytes(message)

def decrypt_bytes(context, cipher):
    """Decrypts a chained buffer, advancing ``context.iv_dec``."""
    return ChainedCipher(context).decrypt_bytes(cipher)

def sign(context, message):
    """Signs one byte."""
    return Signer(context).sign(message)

def verify(context, signature):
    """Recovers the byte signed by ``signature``."""
    return Signer(context).verify(signature)

def validate_signature(context, message, signature):
    """Checks a single-byte signature."""
    return Signer(context).validate_signature(message, signature)

def sign_bytes(context, message):
    """Signs every byte of a buffer."""
    return Signer(context).sign_bytes(message)

def verify_bytes(context, signature):
    """Recovers a buffer from its per-byte signature."""
    return Signer(context).verify_bytes(signature)

def validate_signature_bytes(context, message, signature):
    """Checks a per-byte signature."""
    return Signer(context).validate_signature_bytes(message, signature)

def sign_crc(context, data):
    """Signs the CRC16 of a buffer."""
    return CompactSigner(context).sign_crc(data)

def validate_signature_crc(context, data, signature):
    """Checks a CRC16 signature."""
    return CompactSigner(context).validate_signature_crc(data, signature)


__all__ = [
    # Classes
    'CRC16',
    'RandomSource',
    'SystemRandomSource',
    'KeyGenerator',
    'KeyMaterial',
    'KeyContext',
    'ChainedCipher',
    'Signer',
    'CompactSigner',
    # Arithmetic
    'modular_exponentiation',
    'extended_gcd',
    'modular_inverse',
    'is_prime',
    'calculate_crc16',
    'generate_keys',
    # Operations
    'encrypt',
    'decrypt',
    'encrypt_bytes',
    'decrypt_bytes',
    'sign',
    'verify',
    'validate_signature',
    'sign_bytes',
    'verify_bytes',
    'validate_signature_bytes',
    'sign_crc',
    'validate_signature_crc',
]
