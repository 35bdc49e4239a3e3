"""Tests for seed resolution and source construction."""

import random

import pytest

from src.models import IntegerSeed, SourceSeed, StringSeed, Unseeded, resolve_seed
from src.rng import MersenneSource, make_source


class TestResolveSeed:
    """Test classification of raw seeds."""

    def test_none_is_unseeded(self):
        """Test that a missing seed resolves to Unseeded."""
        assert resolve_seed(None) == Unseeded()

    def test_int(self):
        """Test integer seeds."""
        assert resolve_seed(42) == IntegerSeed(42)

    def test_negative_int_wraps(self):
        """Test that negative seeds wrap into the uint32 range."""
        assert resolve_seed(-1) == IntegerSeed(0xFFFFFFFF)

    def test_float_truncates(self):
        """Test that real numbers are truncated toward zero."""
        assert resolve_seed(3.99) == IntegerSeed(3)

    def test_string(self):
        """Test string seeds."""
        assert resolve_seed("hello") == StringSeed("hello")

    def test_numeric_string_stays_string(self):
        """Test that digits in a string are not parsed."""
        assert resolve_seed("42") == StringSeed("42")

    def test_source_object(self):
        """Test that objects with random() are adopted."""
        source = random.Random(1)
        seed = resolve_seed(source)
        assert isinstance(seed, SourceSeed)
        assert seed.source is source

    def test_resolved_seed_passes_through(self):
        """Test that an already-resolved seed is returned unchanged."""
        seed = StringSeed("x")
        assert resolve_seed(seed) is seed

    @pytest.mark.parametrize(
        "raw",
        [object(), True, [1, 2], b"bytes", float("nan"), float("inf"), float("-inf")],
    )
    def test_invalid(self, raw):
        """Test that other shapes raise TypeError."""
        with pytest.raises(TypeError, match="Invalid seed"):
            resolve_seed(raw)


class TestMakeSource:
    """Test source construction from seeds."""

    def test_unseeded(self):
        """Test that Unseeded builds an entropy-seeded MersenneSource."""
        source = make_source(Unseeded())
        assert isinstance(source, MersenneSource)
        assert source.seed is None

    def test_integer(self):
        """Test that IntegerSeed builds a MersenneSource with that seed."""
        source = make_source(IntegerSeed(17))
        assert source.seed == 17
        assert source.random() == random.Random(17).random()

    def test_string_uses_hasher(self):
        """Test that StringSeed goes through the hasher."""
        seen = []

        def hasher(text):
            seen.append(text)
            return 99

        source = make_source(StringSeed("abc"), hasher)
        assert seen == ["abc"]
        assert source.seed == 99

    def test_string_hash_reduced_to_32_bits(self):
        """Test that oversized hashes are masked like integer seeds."""
        source = make_source(StringSeed("abc"), lambda text: 2**40 + 3)
        assert source.seed == 3

    def test_source_adopted(self):
        """Test that SourceSeed returns the caller's own object."""
        inner = MersenneSource(1)
        assert make_source(SourceSeed(inner)) is inner

    def test_unknown_variant(self):
        """Test that non-seed values are rejected."""
        with pytest.raises(TypeError, match="Unsupported seed variant"):
            make_source("not resolved")
