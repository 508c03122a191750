"""
Key generation and key contexts.
"""
from .random_source import RandomSource, SystemRandomSource
from .generator import KeyGenerator, KeyMaterial, generate_keys
from .context import KeyContext

__all__ = [
    'RandomSource',
    'SystemRandomSource',
    'KeyGenerator',
    'KeyMaterial',
    'generate_keys',
    'KeyContext',
]
