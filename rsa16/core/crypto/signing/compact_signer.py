"""Compact 32-bit signatures over the CRC16 of a buffer."""
from typing import Optional

from ...exceptions import RSA16PreconditionError
from ..hashing import CRC16
from ..keys import KeyContext
from ..utils.encoding import BytesLike, split_word
from .signer import Signer


class CompactSigner:
    """
    Signs the two bytes of a buffer's CRC16 separately and packs both
    signatures as ``(high_signature << 16) | low_signature``.
    """
    
    def __init__(
        self,
        context: KeyContext,
        signer: Optional[Signer] = None,
        crc: Optional[CRC16] = None
    ):
        """Initializes compact signer."""
        self.context = context
        self.signer = signer or Signer(context)
        self.crc = crc or CRC16.DEFAULT
    
    def sign_crc(self, data: BytesLike) -> int:
        """Returns the 32-bit signature of ``data``'s CRC16."""
        low, high = split_word(self.crc.calculate(data))
        lower = self.signer.sign(low)
        upper = self.signer.sign(high)
        return (upper << 16) | lower
    
    def validate_signature_crc(self, data: BytesLike, signature: int) -> bool:
        """Checks a ``sign_crc`` signature against ``data``."""
        if isinstance(signature, bool) or not isinstance(signature, int) or not 0 <= signature <= 0xFFFFFFFF:
            raise RSA16PreconditionError(f"signature must be a 32-bit value, got {signature!r}")
        low, high = split_word(self.crc.calculate(data))
        lower = self.signer.validate_signature(low, signature & 0xFFFF)
        upper = self.signer.validate_signature(high, signature >> 16)
        return lower and upper
