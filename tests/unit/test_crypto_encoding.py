"""Tests for byte and word encoding utilities."""
import pytest

from rsa16.core.crypto.utils.encoding import hex_dump, join_word, split_word, to_bytes
from rsa16.core.exceptions import RSA16PreconditionError


class TestWordEncoding:
    """Test suite for split_word/join_word."""
    
    def test_split_low_byte_first(self):
        """Test split returns (low, high)."""
        assert split_word(0x1234) == (0x34, 0x12)
        assert split_word(12) == (12, 0)
    
    def test_join(self):
        """Test join rebuilds the word."""
        assert join_word(0x34, 0x12) == 0x1234
    
    def test_all_words_survive(self):
        """Test split/join over the full 16-bit range."""
        for value in range(0, 0x10000, 257):
            assert join_word(*split_word(value)) == value


class TestToBytes:
    """Test suite for to_bytes."""
    
    def test_bytes_passthrough(self):
        """Test bytes are returned unchanged."""
        data = b"abc"
        assert to_bytes(data) is data
    
    def test_conversions(self):
        """Test str, bytearray and memoryview inputs."""
        assert to_bytes("héllo") == "héllo".encode('utf-8')
        assert to_bytes(bytearray(b"xy")) == b"xy"
        assert to_bytes(memoryview(b"xy")) == b"xy"
    
    def test_invalid_type_raises(self):
        """Test unsupported types are rejected."""
        with pytest.raises(RSA16PreconditionError):
            to_bytes(42)


class TestHexDump:
    """Test suite for hex_dump."""
    
    def test_sixteen_per_line(self):
        """Test default line width."""
        dump = hex_dump(bytes(range(20)))
        lines = dump.split('\n')
        
        assert len(lines) == 2
        assert lines[0].split() == [f"{i:02X}" for i in range(16)]
        assert lines[1] == "10 11 12 13"
    
    def test_empty(self):
        """Test empty input gives an empty dump."""
        assert hex_dump(b"") == ""
