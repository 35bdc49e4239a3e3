"""Tests for curve functions and curved generators."""

import math

import pytest

from src.rng import CURVES, Generator, back, front, get_curve, identity


def mean_of(rng, amount=20000):
    return sum(rng.random() for _ in range(amount)) / amount


class TestCurveFunctions:
    """Test the named curves."""

    def test_identity(self):
        """Test that identity returns its input."""
        assert identity(0.25) == 0.25

    def test_front_squares(self):
        """Test that the front curve squares its input."""
        assert front(0.5) == 0.25

    def test_back_square_root(self):
        """Test that the back curve takes the square root."""
        assert back(0.25) == 0.5

    def test_get_curve(self):
        """Test lookup by name."""
        assert get_curve("front") is front
        assert set(CURVES) == {"identity", "front", "back"}

    def test_get_curve_unknown(self):
        """Test that unknown curve names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown curve"):
            get_curve("sideways")


class TestWeighting:
    """Test generators with curves."""

    def test_front_weight_mean(self):
        """Test that front weighting averages around 1/3."""
        rng = Generator(31).weight_front()
        assert mean_of(rng) == pytest.approx(1 / 3, abs=0.05)

    def test_back_weight_mean(self):
        """Test that back weighting averages around 2/3."""
        rng = Generator(32).weight_back()
        assert mean_of(rng) == pytest.approx(2 / 3, abs=0.05)

    def test_curve_applied_to_raw_draw(self):
        """Test that a curved draw equals the curve of the raw draw."""
        plain = Generator(33)
        curved = Generator(33).curve(lambda n: n / 2)
        for _ in range(10):
            assert curved.random() == plain.random() / 2

    def test_curve_keyword_on_construction(self):
        """Test passing a curve to the constructor."""
        a = Generator(34, curve=math.sqrt)
        b = Generator(34)
        assert a.random() == math.sqrt(b.random())

    def test_curve_returns_new_generator(self):
        """Test that curve() leaves the original generator unweighted."""
        rng = Generator(35)
        weighted = rng.weight_front()
        assert weighted is not rng
        assert rng.curve_fn is identity
        assert weighted.curve_fn is front

    def test_curved_generator_shares_source(self):
        """Test that draws through a curved generator advance the original's stream."""
        rng = Generator(36)
        weighted = rng.weight_back()
        reference = Generator(36)

        first = weighted.random()
        second = rng.random()

        assert first == math.sqrt(reference.random())
        assert second == reference.random()

    def test_curve_replaces_existing_curve(self):
        """Test that the original generator's curve is not applied twice."""
        reference = Generator(37)
        rng = Generator(37).weight_front().weight_back()
        assert rng.random() == math.sqrt(reference.random())

    def test_front_weighted_ints_favour_low(self):
        """Test that front weighting shifts integer ranges downward."""
        rng = Generator(38).weight_front()
        rolls = [rng.random_int(0, 6) for _ in range(6000)]
        assert rolls.count(0) > rolls.count(5)
