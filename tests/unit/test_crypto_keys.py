"""Tests for key generation and key contexts."""
import math
import random

import pytest

from rsa16.core.config import RSA16Config
from rsa16.core.crypto.arithmetic import is_prime
from rsa16.core.crypto.keys import (
    KeyContext,
    KeyGenerator,
    KeyMaterial,
    RandomSource,
    SystemRandomSource,
    generate_keys,
)
from rsa16.core.crypto.keys import generator as generator_module
from rsa16.core.exceptions import (
    RSA16InvariantError,
    RSA16KeyError,
    RSA16PreconditionError,
)


class TestRandomSource:
    """Test suite for randomness sources."""
    
    def test_system_source_satisfies_protocol(self):
        """Test the default source implements RandomSource."""
        assert isinstance(SystemRandomSource(), RandomSource)
    
    def test_stdlib_random_satisfies_protocol(self):
        """Test random.Random can be injected."""
        assert isinstance(random.Random(1), RandomSource)
    
    def test_system_source_bounds(self):
        """Test system source stays within inclusive bounds."""
        source = SystemRandomSource()
        values = {source.randint(3, 5) for _ in range(200)}
        assert values <= {3, 4, 5}


class TestKeyGenerator:
    """Test suite for KeyGenerator."""
    
    @pytest.mark.parametrize("seed", range(25))
    def test_key_invariants(self, seed):
        """Test generated keys satisfy the RSA invariants."""
        material = KeyGenerator(random.Random(seed)).generate_material()
        
        assert is_prime(material.p) and is_prime(material.q)
        assert material.p != material.q
        assert 16 <= material.p <= 255
        assert 16 <= material.q <= 255
        assert material.n == material.p * material.q
        assert material.n > 255
        assert material.n <= 0xFFFF
        assert material.phi == (material.p - 1) * (material.q - 1)
        assert 2 <= material.e < material.phi
        assert math.gcd(material.e, material.phi) == 1
        assert 0 <= material.d < material.phi
        assert (material.e * material.d) % material.phi == 1
    
    def test_generate_returns_triple(self, seeded_source):
        """Test generate returns (n, e, d)."""
        key = KeyGenerator(seeded_source).generate()
        
        assert isinstance(key, tuple)
        assert len(key) == 3
    
    def test_same_seed_same_key(self):
        """Test an injected seeded source makes generation reproducible."""
        first = KeyGenerator(random.Random(42)).generate()
        second = KeyGenerator(random.Random(42)).generate()
        
        assert first == second
    
    def test_default_source(self):
        """Test generation with the system source."""
        n, e, d = KeyGenerator().generate()
        assert n > 255
    
    def test_module_level_generate_keys(self):
        """Test generate_keys helper."""
        n, e, d = generate_keys(random.Random(3))
        assert n > 255
        assert e > 1 and d > 0
    
    def test_rejection_sampling_sequence(self, scripted_source):
        """Test composites, repeated primes and non-coprime exponents are redrawn."""
        # 16 composite, 17 -> p; 17 equal to p, 19 -> q; 2 and 3 share factors with 288
        source = scripted_source([16, 17, 17, 19, 2, 3, 5])
        material = KeyGenerator(source).generate_material()
        
        assert material == KeyMaterial(p=17, q=19, phi=288, n=323, e=5, d=173)
        assert material.key == (323, 5, 173)
        assert source.values == []
    
    def test_draw_ranges(self, scripted_source):
        """Test primes come from [16, 255] and e from [2, phi-1]."""
        source = scripted_source([17, 19, 5])
        KeyGenerator(source).generate()
        
        assert [(a, b) for a, b, _ in source.calls] == [(16, 255), (16, 255), (2, 287)]
    
    def test_custom_config_modulus_bound(self):
        """Test moduli below min_modulus are resampled."""
        config = RSA16Config(prime_min=16, prime_max=40, min_modulus=1000)
        for seed in range(10):
            material = KeyGenerator(random.Random(seed), config).generate_material()
            assert material.n >= 1000
            assert 16 <= material.p <= 40 and 16 <= material.q <= 40
    
    def test_missing_inverse_is_fatal(self, scripted_source, monkeypatch):
        """Test a non-invertible exponent surfaces as an invariant error."""
        monkeypatch.setattr(generator_module, 'extended_gcd', lambda a, b: (1, 0, 0))
        source = scripted_source([17, 19, 2])
        
        with pytest.raises(RSA16InvariantError):
            KeyGenerator(source).generate()
    
    def test_range_with_single_prime_rejected(self):
        """Test a prime range holding one prime is rejected."""
        with pytest.raises(RSA16PreconditionError):
            KeyGenerator(config=RSA16Config(prime_min=16, prime_max=18))
    
    def test_unreachable_min_modulus_rejected(self):
        """Test a modulus bound the range cannot reach is rejected."""
        with pytest.raises(RSA16PreconditionError):
            KeyGenerator(config=RSA16Config(prime_min=16, prime_max=30, min_modulus=60000))


class TestKeyContext:
    """Test suite for KeyContext."""
    
    def test_init_stores_key(self, textbook_key):
        """Test explicit initialization."""
        context = KeyContext(*textbook_key, iv=7)
        
        assert context.key == (323, 5, 173)
        assert context.public_key == (323, 5)
        assert context.private_key == (323, 173)
        assert context.iv_enc == 7
        assert context.iv_dec == 7
    
    def test_default_iv(self, textbook_key):
        """Test IV defaults to the configured non-zero constant."""
        context = KeyContext(*textbook_key)
        
        assert context.iv_enc == 0x5A
        assert context.iv_dec == 0x5A
    
    def test_default_iv_from_config(self, textbook_key):
        """Test a custom configuration changes the default IV."""
        context = KeyContext(*textbook_key, config=RSA16Config(default_iv=0x11))
        
        assert context.iv_enc == 0x11
    
    @pytest.mark.parametrize("iv", [0, 256, -1, True, 1.5])
    def test_invalid_iv_rejected(self, textbook_key, iv):
        """Test zero or non-byte IVs are rejected."""
        with pytest.raises(RSA16PreconditionError):
            KeyContext(*textbook_key, iv=iv)
    
    def test_reset_iv(self, textbook_context):
        """Test reset_iv overwrites both IVs and keeps the key."""
        textbook_context.iv_enc = 1
        textbook_context.iv_dec = 2
        
        textbook_context.reset_iv(9)
        
        assert textbook_context.iv_enc == 9
        assert textbook_context.iv_dec == 9
        assert textbook_context.key == (323, 5, 173)
    
    def test_reset_iv_default(self, textbook_context):
        """Test reset_iv without argument restores the default."""
        textbook_context.reset_iv(3)
        textbook_context.reset_iv()
        
        assert textbook_context.iv_enc == 0x5A
    
    def test_reset_iv_zero_rejected(self, textbook_context):
        """Test reset_iv rejects zero and leaves state unchanged."""
        with pytest.raises(RSA16PreconditionError):
            textbook_context.reset_iv(0)
        assert textbook_context.iv_enc == 0x5A
    
    @pytest.mark.parametrize("key", [
        (255, 5, 173),
        (0, 5, 173),
        (0x10000, 5, 173),
        (323, -5, 173),
        (323, 5, 0x10000),
        (323, 0, 0),
        (323, 1, 173),
        (323, 5, 1),
        (323, 1, 0),
    ])
    def test_invalid_key_rejected(self, key):
        """Test out-of-range or empty keys are rejected."""
        with pytest.raises(RSA16PreconditionError):
            KeyContext(*key)
    
    def test_public_only_context(self):
        """Test public-only context capabilities."""
        context = KeyContext.from_public_key(323, 5)
        
        assert context.has_public_key
        assert not context.has_private_key
        context.require_public_key('encrypt')
        with pytest.raises(RSA16KeyError) as exc_info:
            context.require_private_key('decrypt')
        assert exc_info.value.missing == 'd'
        assert exc_info.value.operation == 'decrypt'
    
    def test_private_only_context(self):
        """Test private-only context capabilities."""
        context = KeyContext.from_private_key(323, 173)
        
        assert context.has_private_key
        assert not context.has_public_key
        with pytest.raises(RSA16KeyError) as exc_info:
            context.require_public_key('verify')
        assert exc_info.value.missing == 'e'
    
    def test_generate(self, seeded_source):
        """Test context creation from a generated key."""
        context = KeyContext.generate(seeded_source, iv=0x33)
        
        assert context.n > 255
        assert context.iv_enc == 0x33
    
    def test_repr_hides_private_exponent(self, textbook_context):
        """Test repr does not expose d."""
        assert '173' not in repr(textbook_context)
        assert 'n=323' in repr(textbook_context)
