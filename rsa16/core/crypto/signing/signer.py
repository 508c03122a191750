"""Stateless per-byte signing and verification."""
from ...config import BYTE_MAX, WORD_MAX
from ...exceptions import RSA16PreconditionError
from ..arithmetic import modular_exponentiation
from ..keys import KeyContext
from ..utils.encoding import BytesLike, join_word, split_word, to_bytes


class Signer:
    """Signs with the private key (n, d) and verifies with the public key (n, e).
    
    Never reads or writes the chaining state of the context.
    """
    
    def __init__(self, context: KeyContext):
        """Initializes the signer over ``context``."""
        self.context = context
    
    def sign(self, message: int) -> int:
        """Signs one byte: ``message ** d mod n``."""
        self.context.require_private_key('sign')
        _check_byte(message)
        return modular_exponentiation(message, self.context.d, self.context.n)
    
    def verify(self, signature: int) -> int:
        """Recovers the signed byte: ``(signature ** e mod n) mod 256``."""
        self.context.require_public_key('verify')
        _check_signature(signature)
        return modular_exponentiation(signature, self.context.e, self.context.n) & 0xFF
    
    def validate_signature(self, message: int, signature: int) -> bool:
        """Checks that ``signature`` is a signature of ``message``."""
        _check_byte(message)
        return self.verify(signature) == message
    
    def sign_bytes(self, message: BytesLike) -> bytes:
        """Signs every byte independently; the signature is twice the message length."""
        self.context.require_private_key('sign_bytes')
        signature = bytearray()
        for m in to_bytes(message):
            signature.extend(split_word(modular_exponentiation(m, self.context.d, self.context.n)))
        return bytes(signature)
    
    def verify_bytes(self, signature: BytesLike) -> bytes:
        """
        Recovers the message bytes from a ``sign_bytes`` signature.
        
        Raises:
            RSA16PreconditionError: If the signature length is odd
        """
        self.context.require_public_key('verify_bytes')
        signature = to_bytes(signature)
        if len(signature) % 2:
            raise RSA16PreconditionError(f"signature length must be even, got {len(signature)}")
        return bytes(
            self.verify(join_word(signature[i], signature[i + 1]))
            for i in range(0, len(signature), 2)
        )
    
    def validate_signature_bytes(self, message: BytesLike, signature: BytesLike) -> bool:
        """
        Checks a ``sign_bytes`` signature against ``message``.
        
        Stops at the first mismatching byte. A signature whose length is
        not twice the message length never validates.
        """
        self.context.require_public_key('validate_signature_bytes')
        message = to_bytes(message)
        signature = to_bytes(signature)
        if len(signature) != 2 * len(message):
            return False
        for i, m in enumerate(message):
            if self.verify(join_word(signature[2 * i], signature[2 * i + 1])) != m:
                return False
        return True


def _check_byte(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= BYTE_MAX:
        raise RSA16PreconditionError(f"message must be a byte value, got {value!r}")


def _check_signature(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= WORD_MAX:
        raise RSA16PreconditionError(f"signature must be a 16-bit value, got {value!r}")
