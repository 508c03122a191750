"""
Hashing utilities.
"""
from .crc16 import CRC16, calculate_crc16

__all__ = [
    'CRC16',
    'calculate_crc16',
]
