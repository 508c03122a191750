"""
Randomness sources for key generation.

Key generation only needs uniform integers in a closed range, so any
object with a ``randint(a, b)`` method works, ``random.Random`` included.
Tests pass a seeded ``random.Random`` for reproducible keys.
"""
from typing import Protocol, runtime_checkable

from Crypto.Random import random as crypto_random


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for uniform integer sources."""
    
    def randint(self, a: int, b: int) -> int:
        """
        Return a uniformly distributed integer N with ``a <= N <= b``.
        """
        ...


class SystemRandomSource:
    """Cryptographically strong source backed by the operating system RNG."""
    
    def randint(self, a: int, b: int) -> int:
        return crypto_random.randint(a, b)
