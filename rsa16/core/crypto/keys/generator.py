"""RSA16 key generation."""
from dataclasses import dataclass
from typing import Optional, Tuple

from ...config import RSA16Config
from ...exceptions import RSA16PreconditionError
from ...logging import get_logger
from ..arithmetic import extended_gcd, is_prime, modular_inverse
from .random_source import RandomSource, SystemRandomSource

logger = get_logger(__name__)


@dataclass(frozen=True)
class KeyMaterial:
    """
    Everything produced by one key generation run.
    
    Attributes:
        p: First prime factor
        q: Second prime factor
        phi: Euler totient (p-1)*(q-1)
        n: Modulus p*q
        e: Public exponent
        d: Private exponent
    """
    p: int
    q: int
    phi: int
    n: int
    e: int
    d: int
    
    @property
    def key(self) -> Tuple[int, int, int]:
        """Key triple (n, e, d)."""
        return self.n, self.e, self.d


class KeyGenerator:
    """
    Generates 16-bit RSA keys.
    
    Primes are drawn uniformly from the configured range by rejection
    sampling; the public exponent is drawn uniformly from ``[2, phi-1]``
    until it is coprime with ``phi``.
    """
    
    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        config: Optional[RSA16Config] = None
    ):
        """
        Initializes the generator.
        
        Args:
            random_source: Object with ``randint(a, b)``; defaults to the system RNG
            config: Prime range and modulus bound; defaults to ``RSA16Config()``
        """
        self.random_source = random_source or SystemRandomSource()
        self.config = config or RSA16Config.default()
        self._check_prime_range()
    
    def _check_prime_range(self) -> None:
        primes = [
            number
            for number in range(self.config.prime_min, self.config.prime_max + 1)
            if is_prime(number)
        ]
        if len(primes) < 2:
            raise RSA16PreconditionError(
                f"prime range [{self.config.prime_min}, {self.config.prime_max}] "
                f"contains fewer than two primes"
            )
        if primes[-1] * primes[-2] < self.config.min_modulus:
            raise RSA16PreconditionError(
                f"largest modulus {primes[-1] * primes[-2]} from the prime range "
                f"is below min_modulus {self.config.min_modulus}"
            )
    
    def generate(self) -> Tuple[int, int, int]:
        """Generates a key triple ``(n, e, d)``."""
        return self.generate_material().key
    
    def generate_material(self) -> KeyMaterial:
        """Generates a key and returns it with its factors and totient."""
        while True:
            p = self._random_prime()
            q = self._random_prime()
            while q == p:
                q = self._random_prime()
            n = p * q
            if n >= self.config.min_modulus:
                break
            logger.debug(f"Modulus {n} below {self.config.min_modulus}, resampling primes")
        
        phi = (p - 1) * (q - 1)
        logger.debug(f"Selected primes p={p}, q={q}, phi={phi}")
        
        e = self._random_public_exponent(phi)
        d = modular_inverse(e, phi)
        logger.info(f"Generated RSA16 key n={n}, e={e}")
        return KeyMaterial(p=p, q=q, phi=phi, n=n, e=e, d=d)
    
    def _random_prime(self) -> int:
        attempts = 0
        while True:
            attempts += 1
            candidate = self.random_source.randint(self.config.prime_min, self.config.prime_max)
            if is_prime(candidate):
                logger.debug(f"Prime {candidate} found after {attempts} candidate(s)")
                return candidate
    
    def _random_public_exponent(self, phi: int) -> int:
        while True:
            candidate = self.random_source.randint(2, phi - 1)
            g, _, _ = extended_gcd(candidate, phi)
            if g == 1:
                return candidate


def generate_keys(
    random_source: Optional[RandomSource] = None,
    config: Optional[RSA16Config] = None
) -> Tuple[int, int, int]:
    """Generates a key triple ``(n, e, d)``, with the default configuration unless given."""
    return KeyGenerator(random_source, config).generate()
