"""Extended Euclid, modular inverse and the trial-division primality test."""
from typing import Tuple

from ...exceptions import RSA16InvariantError
from ...logging import get_logger

logger = get_logger(__name__)


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Iterative extended Euclidean algorithm.
    
    Returns:
        Tuple ``(g, x, y)`` with ``g = gcd(a, b)`` and ``a*x + b*y == g``
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y
    return old_r, old_x, old_y


def modular_inverse(a: int, m: int) -> int:
    """
    Computes the inverse of ``a`` modulo ``m``, normalised to ``[0, m)``.
    
    Raises:
        RSA16InvariantError: If ``gcd(a, m) != 1``
    """
    g, x, _ = extended_gcd(a, m)
    if g != 1:
        logger.error(f"modular inverse of {a} mod {m} does not exist (gcd={g})")
        raise RSA16InvariantError(f"modular inverse does not exist: gcd({a}, {m}) = {g}")
    return x % m


def is_prime(number: int) -> bool:
    """Deterministic primality test by trial division with 6k +/- 1 candidates."""
    if number <= 1:
        return False
    if number <= 3:
        return True
    if number % 2 == 0 or number % 3 == 0:
        return False
    i = 5
    while i * i <= number:
        if number % i == 0 or number % (i + 2) == 0:
            return False
        i += 6
    return True
