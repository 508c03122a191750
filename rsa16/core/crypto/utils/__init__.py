"""Shared utilities for the crypto module."""
from .encoding import to_bytes, split_word, join_word, hex_dump

__all__ = [
    'to_bytes',
    'split_word',
    'join_word',
    'hex_dump',
]
