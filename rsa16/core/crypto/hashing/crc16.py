"""Table-free CRC-16 used to compress a message before compact signing."""
from ..utils.encoding import to_bytes


class CRC16:
    """Bit-serial, LSB-first CRC-16 calculator with configurable polynomial."""
    
    DEFAULT = None  # CRC-16/ARC, assigned below
    
    def __init__(self, polynomial: int = 0xA001, preset: int = 0x0000):
        """
        Initialize the calculator.
        
        Args:
            polynomial: Reflected generator polynomial (0xA001 is 0x8005 reflected)
            preset: Initial register value
        """
        self._polynomial = polynomial & 0xFFFF
        self._preset = preset & 0xFFFF
    
    @property
    def polynomial(self) -> int:
        return self._polynomial
    
    def calculate(self, data) -> int:
        """Calculates the CRC of ``data``. No final XOR is applied."""
        return self.update(self._preset, data)
    
    def update(self, crc: int, data) -> int:
        """Feeds ``data`` into a running CRC value and returns the new value."""
        crc &= 0xFFFF
        for byte in to_bytes(data):
            crc ^= byte
            for _ in range(8):
                if crc & 0x0001:
                    crc = (crc >> 1) ^ self._polynomial
                else:
                    crc >>= 1
        return crc


CRC16.DEFAULT = CRC16()


def calculate_crc16(data) -> int:
    """CRC-16/ARC of ``data``: polynomial 0xA001, init 0, no final XOR."""
    return CRC16.DEFAULT.calculate(data)
