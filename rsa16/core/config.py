"""
RSA16 configuration module.

Centralizes the constants shared by key generation and the chained
cipher so they can be overridden in one place.
"""
from dataclasses import dataclass

from .exceptions import RSA16PreconditionError

WORD_MAX = 0xFFFF
BYTE_MAX = 0xFF


@dataclass(frozen=True)
class RSA16Config:
    """
    RSA16 configuration.
    
    Attributes:
        default_iv: Chaining IV used when none is supplied (must be non-zero)
        prime_min: Smallest prime candidate for key generation
        prime_max: Largest prime candidate for key generation
        min_modulus: Generated moduli are at least this large
    """
    default_iv: int = 0x5A
    prime_min: int = 16
    prime_max: int = 255
    min_modulus: int = 256
    
    def __post_init__(self) -> None:
        for name in ('default_iv', 'prime_min', 'prime_max', 'min_modulus'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise RSA16PreconditionError(f"{name} must be an integer, got {value!r}")
        if not 1 <= self.default_iv <= BYTE_MAX:
            raise RSA16PreconditionError(
                f"default_iv must be in [1, {BYTE_MAX}], got {self.default_iv}"
            )
        if not 2 <= self.prime_min < self.prime_max <= BYTE_MAX:
            raise RSA16PreconditionError(
                f"prime range [{self.prime_min}, {self.prime_max}] must lie "
                f"within [2, {BYTE_MAX}] and hold more than one value"
            )
        if not BYTE_MAX < self.min_modulus <= WORD_MAX:
            raise RSA16PreconditionError(
                f"min_modulus must be in [{BYTE_MAX + 1}, {WORD_MAX}], got {self.min_modulus}"
            )
    
    @classmethod
    def default(cls) -> 'RSA16Config':
        """Create default configuration."""
        return cls()
    
    def resolve_iv(self, iv=None) -> int:
        """Return ``iv`` validated, or the default IV when ``iv`` is None."""
        if iv is None:
            return self.default_iv
        if isinstance(iv, bool) or not isinstance(iv, int) or not 1 <= iv <= BYTE_MAX:
            raise RSA16PreconditionError(f"IV must be an integer in [1, {BYTE_MAX}], got {iv!r}")
        return iv
