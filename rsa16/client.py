"""
RSA16 - High-level facade over one key context.

Example:
    >>> rsa = RSA16.generate()
    >>> cipher = rsa.encrypt_bytes(b"hello")
    >>> rsa.decrypt_bytes(cipher)
    b'hello'
"""
from typing import Optional, Tuple

from .core.config import RSA16Config
from .core.crypto import (
    ChainedCipher,
    CompactSigner,
    KeyContext,
    KeyGenerator,
    RandomSource,
    Signer,
)
from .core.crypto.utils.encoding import BytesLike


class RSA16:
    """
    16-bit RSA encryptor and signer.
    
    Wraps a ``KeyContext`` together with the cipher and signers that
    operate on it. Chained encryption and decryption each keep their own
    feedback byte, so one instance can both produce and consume a stream.
    """
    
    def __init__(
        self,
        n: int,
        e: int,
        d: int,
        iv: Optional[int] = None,
        config: Optional[RSA16Config] = None
    ):
        """
        Initializes an encryptor with the key (n, e, d).
        
        Args:
            n: Modulus
            e: Public exponent (0 for a private-only instance)
            d: Private exponent (0 for a public-only instance)
            iv: Initial chaining byte; None selects the configured default
            config: Optional configuration
        """
        self.context = KeyContext(n, e, d, iv, config)
        self._cipher = ChainedCipher(self.context)
        self._signer = Signer(self.context)
        self._compact_signer = CompactSigner(self.context, self._signer)
    
    @classmethod
    def from_context(cls, context: KeyContext) -> 'RSA16':
        """Wrap an existing key context, sharing its chaining state."""
        rsa = cls.__new__(cls)
        rsa.context = context
        rsa._cipher = ChainedCipher(context)
        rsa._signer = Signer(context)
        rsa._compact_signer = CompactSigner(context, rsa._signer)
        return rsa
    
    @classmethod
    def generate(
        cls,
        random_source: Optional[RandomSource] = None,
        iv: Optional[int] = None,
        config: Optional[RSA16Config] = None
    ) -> 'RSA16':
        """Create an instance with a freshly generated key."""
        n, e, d = KeyGenerator(random_source, config).generate()
        return cls(n, e, d, iv, config)
    
    @staticmethod
    def generate_keys(
        random_source: Optional[RandomSource] = None,
        config: Optional[RSA16Config] = None
    ) -> Tuple[int, int, int]:
        """Generate a key triple (n, e, d)."""
        return KeyGenerator(random_source, config).generate()
    
    # Key views
    
    @property
    def public_key(self) -> Tuple[int, int]:
        return self.context.public_key
    
    @property
    def private_key(self) -> Tuple[int, int]:
        return self.context.private_key
    
    @property
    def key(self) -> Tuple[int, int, int]:
        return self.context.key
    
    def reset_iv(self, iv: Optional[int] = None) -> None:
        """Reset the chaining bytes of both directions."""
        self.context.reset_iv(iv)
    
    # Encryption
    
    def encrypt(self, message: int) -> int:
        return self._cipher.encrypt(message)
    
    def decrypt(self, cipher: int) -> int:
        return self._cipher.decrypt(cipher)
    
    def encrypt_bytes(self, message: BytesLike) -> bytes:
        return self._cipher.encrypt_bytes(message)
    
    def decrypt_bytes(self, cipher: BytesLike) -> bytes:
        return self._cipher.decrypt_bytes(cipher)
    
    # Signing
    
    def sign(self, message: int) -> int:
        return self._signer.sign(message)
    
    def verify(self, signature: int) -> int:
        return self._signer.verify(signature)
    
    def validate_signature(self, message: int, signature: int) -> bool:
        return self._signer.validate_signature(message, signature)
    
    def sign_bytes(self, message: BytesLike) -> bytes:
        return self._signer.sign_bytes(message)
    
    def verify_bytes(self, signature: BytesLike) -> bytes:
        return self._signer.verify_bytes(signature)
    
    def validate_signature_bytes(self, message: BytesLike, signature: BytesLike) -> bool:
        return self._signer.validate_signature_bytes(message, signature)
    
    def sign_crc(self, data: BytesLike) -> int:
        return self._compact_signer.sign_crc(data)
    
    def validate_signature_crc(self, data: BytesLike, signature: int) -> bool:
        return self._compact_signer.validate_signature_crc(data, signature)
    
    def __repr__(self) -> str:
        return f"RSA16(n={self.context.n}, e={self.context.e})"
