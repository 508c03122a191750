"""
Integer arithmetic for 16-bit RSA.
"""
from .modexp import modular_exponentiation
from .number_theory import extended_gcd, modular_inverse, is_prime

__all__ = [
    'modular_exponentiation',
    'extended_gcd',
    'modular_inverse',
    'is_prime',
]
