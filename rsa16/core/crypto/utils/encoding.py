"""Byte and word encoding utilities."""
from typing import Tuple, Union

from ...exceptions import RSA16PreconditionError

BytesLike = Union[bytes, bytearray, memoryview, str]


def to_bytes(data: BytesLike) -> bytes:
    """Normalizes a buffer argument to bytes; strings are UTF-8 encoded."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode()
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise RSA16PreconditionError(f"expected a bytes-like buffer, got {type(data).__name__}")


def split_word(value: int) -> Tuple[int, int]:
    """Splits a 16-bit value into ``(low, high)`` bytes."""
    return value & 0xFF, (value >> 8) & 0xFF


def join_word(low: int, high: int) -> int:
    """Joins ``low`` and ``high`` bytes into a 16-bit value."""
    return low | (high << 8)


def hex_dump(data: BytesLike, width: int = 16) -> str:
    """Formats bytes as uppercase hex pairs, ``width`` bytes per line."""
    data = to_bytes(data)
    lines = []
    for offset in range(0, len(data), width):
        lines.append(' '.join(f"{b:02X}" for b in data[offset:offset + width]))
    return '\n'.join(lines)
