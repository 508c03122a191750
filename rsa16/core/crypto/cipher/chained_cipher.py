"""Stateful byte-chaining encryption over a key context."""
from ...config import BYTE_MAX, WORD_MAX
from ...exceptions import RSA16PreconditionError
from ...logging import get_logger
from ..arithmetic import modular_exponentiation
from ..keys import KeyContext
from ..utils.encoding import BytesLike, join_word, split_word, to_bytes

logger = get_logger(__name__)


class ChainedCipher:
    """
    RSA16 cipher with byte-level feedback chaining.
    
    Each plaintext byte ``m`` is XORed with the running feedback byte
    before exponentiation, and both output bytes are XORed with it too.
    The feedback for the next byte is ``m ^ hi`` where ``hi`` is the
    emitted high byte, so identical plaintext bytes produce different
    ciphertext pairs. Every byte expands to two (low byte first).
    
    The feedback starts from ``context.iv_enc`` / ``context.iv_dec`` and
    is written back at the end of each call, so consecutive calls on the
    same context continue one stream.
    """
    
    def __init__(self, context: KeyContext):
        """Initializes the cipher over ``context``."""
        self.context = context
    
    def encrypt(self, message: int) -> int:
        """Encrypts one byte without chaining: ``message ** e mod n``."""
        self.context.require_public_key('encrypt')
        if isinstance(message, bool) or not isinstance(message, int) or not 0 <= message <= BYTE_MAX:
            raise RSA16PreconditionError(f"message must be a byte value, got {message!r}")
        return modular_exponentiation(message, self.context.e, self.context.n)
    
    def decrypt(self, cipher: int) -> int:
        """Decrypts one value produced by ``encrypt``; the result is truncated to a byte."""
        self.context.require_private_key('decrypt')
        if isinstance(cipher, bool) or not isinstance(cipher, int) or not 0 <= cipher <= WORD_MAX:
            raise RSA16PreconditionError(f"cipher must be a 16-bit value, got {cipher!r}")
        return modular_exponentiation(cipher, self.context.d, self.context.n) & 0xFF
    
    def encrypt_bytes(self, message: BytesLike) -> bytes:
        """
        Encrypts a buffer in chained mode.
        
        Args:
            message: Plaintext buffer
            
        Returns:
            Ciphertext, twice the length of ``message``
        """
        self.context.require_public_key('encrypt_bytes')
        message = to_bytes(message)
        n, e = self.context.n, self.context.e
        prev = self.context.iv_enc
        start_iv = prev
        
        cipher = bytearray()
        for m in message:
            c = modular_exponentiation(m ^ prev, e, n)
            low, high = split_word(c)
            high ^= prev
            cipher.append(low ^ prev)
            cipher.append(high)
            prev = m ^ high
        
        self.context.iv_enc = prev
        logger.debug(
            f"Encrypted {len(message)} bytes into {len(cipher)} (iv_enc 0x{start_iv:02x} -> 0x{prev:02x})"
        )
        return bytes(cipher)
    
    def decrypt_bytes(self, cipher: BytesLike) -> bytes:
        """
        Decrypts a buffer produced by ``encrypt_bytes``.
        
        Args:
            cipher: Ciphertext buffer of even length
            
        Returns:
            Plaintext, half the length of ``cipher``
            
        Raises:
            RSA16PreconditionError: If the ciphertext length is odd
        """
        self.context.require_private_key('decrypt_bytes')
        cipher = to_bytes(cipher)
        if len(cipher) % 2:
            raise RSA16PreconditionError(
                f"ciphertext length must be even, got {len(cipher)}"
            )
        n, d = self.context.n, self.context.d
        prev = self.context.iv_dec
        start_iv = prev
        
        message = bytearray()
        for i in range(0, len(cipher), 2):
            low, high = cipher[i], cipher[i + 1]
            c = join_word(low ^ prev, high ^ prev)
            m = (modular_exponentiation(c, d, n) ^ prev) & 0xFF
            message.append(m)
            prev = m ^ high
        
        self.context.iv_dec = prev
        logger.debug(
            f"Decrypted {len(cipher)} bytes into {len(message)} (iv_dec 0x{start_iv:02x} -> 0x{prev:02x})"
        )
        return bytes(message)
