"""
Tests for the sampling capability.

These tests verify:
1. Seeded generators are reproducible, unseeded ones draw fresh entropy
2. Draws are unwrapped to plain Python numbers
3. Continuous / discrete classification of scipy.stats distributions
4. Custom samplers satisfying the rvs protocol
"""

import pytest
import numpy as np
from scipy.stats import binom, expon, norm, poisson

from multilinear import Sampler, Variance, random_sample_seeded
from multilinear.sampling import (
    draw,
    is_continuous,
    is_discrete,
    make_rng,
    require_continuous,
    require_discrete,
    require_sampler,
)


class ConstantSampler:
    """Minimal sampler returning a counter, ignoring the generator."""

    def __init__(self):
        self.calls = 0

    def rvs(self, size=None, random_state=None):
        self.calls += 1
        return self.calls


class TestRng:
    """Test generator construction."""

    def test_seeded_rng_reproducible(self):
        a = make_rng(42).standard_normal(5)
        b = make_rng(42).standard_normal(5)
        np.testing.assert_array_equal(a, b)

    @pytest.mark.parametrize("seed", [-1, -2**63, np.int64(-7)])
    def test_negative_seed_accepted(self, seed):
        a = make_rng(seed).standard_normal(4)
        b = make_rng(seed).standard_normal(4)
        np.testing.assert_array_equal(a, b)

    def test_negative_seed_wraps_to_64_bits(self):
        a = make_rng(-1).standard_normal(4)
        b = make_rng(2**64 - 1).standard_normal(4)
        np.testing.assert_array_equal(a, b)

    def test_non_negative_seed_unchanged(self):
        a = make_rng(99).standard_normal(4)
        b = np.random.default_rng(99).standard_normal(4)
        np.testing.assert_array_equal(a, b)

    def test_unseeded_rng_fresh(self):
        a = make_rng().standard_normal(8)
        b = make_rng().standard_normal(8)
        assert not np.array_equal(a, b)


class TestDraw:
    """Test single draws."""

    def test_continuous_draw_is_float(self):
        value = draw(norm(), make_rng(0))
        assert type(value) is float

    def test_discrete_draw_is_int(self):
        value = draw(poisson(2.0), make_rng(0))
        assert type(value) is int

    def test_custom_sampler_value_passed_through(self):
        sampler = ConstantSampler()
        assert draw(sampler, make_rng(0)) == 1
        assert draw(sampler, make_rng(0)) == 2

    def test_custom_sampler_builds_in_index_order(self):
        sampler = ConstantSampler()
        t = random_sample_seeded("ij", [2, 2], sampler, 0, Variance.COVARIANT)

        assert list(t.leaves()) == [1, 2, 3, 4]
        assert sampler.calls == 4


class TestClassification:
    """Test scipy.stats distribution classification."""

    @pytest.mark.parametrize("dist", [norm(), expon(2.0)])
    def test_continuous(self, dist):
        assert is_continuous(dist)
        assert not is_discrete(dist)
        require_continuous(dist)

    @pytest.mark.parametrize("dist", [poisson(1.0), binom(5, 0.5)])
    def test_discrete(self, dist):
        assert is_discrete(dist)
        assert not is_continuous(dist)
        require_discrete(dist)

    def test_custom_sampler_is_neither(self):
        sampler = ConstantSampler()

        assert isinstance(sampler, Sampler)
        assert not is_continuous(sampler)
        assert not is_discrete(sampler)
        with pytest.raises(TypeError):
            require_continuous(sampler)
        with pytest.raises(TypeError):
            require_discrete(sampler)

    def test_require_sampler(self):
        require_sampler(norm())
        with pytest.raises(TypeError, match="got int"):
            require_sampler(3)
