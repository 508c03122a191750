"""
Key context: one RSA16 key pair plus the chaining state of both
stream directions.
"""
from typing import Optional, Tuple

from ...config import RSA16Config, BYTE_MAX, WORD_MAX
from ...exceptions import RSA16KeyError, RSA16PreconditionError
from .generator import KeyGenerator
from .random_source import RandomSource


class KeyContext:
    """
    Mutable RSA16 key context.
    
    Holds the key triple ``(n, e, d)`` and the independent chaining
    bytes ``iv_enc`` and ``iv_dec``. Either exponent may be 0 for a
    half-populated (public-only or private-only) context.
    
    A context is not safe for concurrent chained encryption or
    decryption: the chaining bytes are updated in place by every call.
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
        Initializes the context.
        
        Args:
            n: Modulus, greater than 255 and at most 0xFFFF
            e: Public exponent (> 1), or 0 if absent
            d: Private exponent (> 1), or 0 if absent
            iv: Initial chaining byte in [1, 255]; None selects ``config.default_iv``
            config: Configuration supplying the default IV
        """
        self.config = config or RSA16Config.default()
        self._check_word('n', n)
        self._check_word('e', e)
        self._check_word('d', d)
        if n <= BYTE_MAX:
            raise RSA16PreconditionError(f"modulus must exceed {BYTE_MAX}, got {n}")
        if e == 0 and d == 0:
            raise RSA16PreconditionError("at least one of e and d must be non-zero")
        if e == 1 or d == 1:
            raise RSA16PreconditionError("exponents must be greater than 1 (1 is the identity map)")
        self.n = n
        self.e = e
        self.d = d
        self.iv_enc = self.iv_dec = self.config.resolve_iv(iv)
    
    @staticmethod
    def _check_word(name: str, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= WORD_MAX:
            raise RSA16PreconditionError(f"{name} must be an integer in [0, {WORD_MAX}], got {value!r}")
    
    @classmethod
    def from_public_key(cls, n: int, e: int, iv: Optional[int] = None,
                        config: Optional[RSA16Config] = None) -> 'KeyContext':
        """Create a context able to encrypt and verify only."""
        return cls(n, e, 0, iv, config)
    
    @classmethod
    def from_private_key(cls, n: int, d: int, iv: Optional[int] = None,
                         config: Optional[RSA16Config] = None) -> 'KeyContext':
        """Create a context able to decrypt and sign only."""
        return cls(n, 0, d, iv, config)
    
    @classmethod
    def generate(
        cls,
        random_source: Optional[RandomSource] = None,
        iv: Optional[int] = None,
        config: Optional[RSA16Config] = None
    ) -> 'KeyContext':
        """Create a context holding a freshly generated key."""
        n, e, d = KeyGenerator(random_source, config).generate()
        return cls(n, e, d, iv, config)
    
    def reset_iv(self, iv: Optional[int] = None) -> None:
        """Reset both chaining bytes; None restores the configured default."""
        self.iv_enc = self.iv_dec = self.config.resolve_iv(iv)
    
    @property
    def public_key(self) -> Tuple[int, int]:
        """Public key (n, e)."""
        return self.n, self.e
    
    @property
    def private_key(self) -> Tuple[int, int]:
        """Private key (n, d)."""
        return self.n, self.d
    
    @property
    def key(self) -> Tuple[int, int, int]:
        """Key triple (n, e, d)."""
        return self.n, self.e, self.d
    
    @property
    def has_public_key(self) -> bool:
        return self.e != 0
    
    @property
    def has_private_key(self) -> bool:
        return self.d != 0
    
    def require_public_key(self, operation: str) -> None:
        """Raise RSA16KeyError if ``operation`` cannot run without ``e``."""
        if not self.has_public_key:
            raise RSA16KeyError(
                f"{operation} requires the public exponent e", operation=operation, missing='e'
            )
    
    def require_private_key(self, operation: str) -> None:
        """Raise RSA16KeyError if ``operation`` cannot run without ``d``."""
        if not self.has_private_key:
            raise RSA16KeyError(
                f"{operation} requires the private exponent d", operation=operation, missing='d'
            )
    
    def __repr__(self) -> str:
        return f"KeyContext(n={self.n}, e={self.e}, iv_enc={self.iv_enc}, iv_dec={self.iv_dec})"
