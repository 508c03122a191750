"""Pytest fixtures for RSA16 tests."""
import random

import pytest

from rsa16.core.crypto import KeyContext

# p=17, q=19: n=323, phi=288, e=5, d=173
TEXTBOOK_KEY = (323, 5, 173)


class ScriptedSource:
    """Random source returning a fixed sequence of values."""
    
    def __init__(self, values):
        self.values = list(values)
        self.calls = []
    
    def randint(self, a, b):
        value = self.values.pop(0)
        self.calls.append((a, b, value))
        assert a <= value <= b
        return value


@pytest.fixture
def textbook_key():
    """Returns the (n, e, d) key built from p=17, q=19, e=5."""
    return TEXTBOOK_KEY


@pytest.fixture
def textbook_context():
    """Returns a key context over the textbook key with the default IV."""
    return KeyContext(*TEXTBOOK_KEY)


@pytest.fixture
def seeded_source():
    """Returns a deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def sample_message():
    """Returns a 256-byte message covering every byte value."""
    return bytes(range(256))


@pytest.fixture
def scripted_source():
    """Returns a factory for sources replaying a fixed value sequence."""
    return ScriptedSource
