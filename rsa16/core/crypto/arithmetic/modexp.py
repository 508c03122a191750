"""Square-and-multiply modular exponentiation over 16-bit operands."""
from ...config import WORD_MAX
from ...exceptions import RSA16PreconditionError


def _check_word(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RSA16PreconditionError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= WORD_MAX:
        raise RSA16PreconditionError(f"{name} must be in [0, {WORD_MAX}], got {value}")


def modular_exponentiation(base: int, exponent: int, modulus: int) -> int:
    """
    Computes ``(base ** exponent) % modulus`` by square-and-multiply.
    
    All operands are unsigned 16-bit values. The exponent is consumed
    least-significant bit first, so the loop runs once per exponent bit.
    
    Args:
        base: Base value, reduced modulo ``modulus`` before use
        exponent: Exponent; zero yields ``1 % modulus``
        modulus: Non-zero modulus
        
    Returns:
        Result in ``[0, modulus)``
        
    Raises:
        RSA16PreconditionError: If an operand is out of range or modulus is zero
    """
    _check_word("base", base)
    _check_word("exponent", exponent)
    _check_word("modulus", modulus)
    if modulus == 0:
        raise RSA16PreconditionError("modulus must be non-zero")
    
    result = 1 % modulus
    power = base % modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * power) % modulus
        power = (power * power) % modulus
        exponent >>= 1
    return result
