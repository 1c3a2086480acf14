"""
Tests for log_gamma() against closed forms and scipy.special.gammaln.
"""

import math

import numpy as np
import pytest
from scipy import special as sp_special

from pairstats.core.compute.tolerances import LOG_GAMMA
from pairstats.special import log_gamma


class TestKnownValues:

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 10, 20])
    def test_factorials(self, n):
        """ln G(n) = ln((n-1)!)."""
        expected = math.log(math.factorial(n - 1))
        assert log_gamma(float(n)) == pytest.approx(expected, rel=1e-12, abs=1e-13)

    def test_half(self):
        """G(1/2) = sqrt(pi)."""
        assert log_gamma(0.5) == pytest.approx(0.5 * math.log(math.pi), rel=1e-13)

    def test_three_halves(self):
        """G(3/2) = sqrt(pi) / 2."""
        expected = math.log(math.sqrt(math.pi) / 2.0)
        assert log_gamma(1.5) == pytest.approx(expected, rel=1e-12)


class TestReflection:

    def test_small_argument(self):
        """Reflection branch: G(0.25) from G(0.75)."""
        assert log_gamma(0.25) == pytest.approx(math.lgamma(0.25), rel=1e-12)

    def test_continuous_across_half(self):
        below = log_gamma(0.5 - 1e-9)
        above = log_gamma(0.5 + 1e-9)
        assert below == pytest.approx(above, abs=1e-8)

    def test_negative_non_integer(self):
        """ln|G(z)| for z = -0.5: G(-0.5) = -2 sqrt(pi)."""
        expected = math.log(2.0 * math.sqrt(math.pi))
        assert log_gamma(-0.5) == pytest.approx(expected, rel=1e-12)


class TestAgainstScipy:

    @pytest.mark.parametrize(
        "z", [1e-3, 0.1, 0.3, 0.5, 0.9, 1.0, 1.7, 2.0, 3.5, 7.25, 15.0, 50.5, 120.0, 171.3]
    )
    def test_grid(self, z):
        expected = float(sp_special.gammaln(z))
        assert log_gamma(z) == pytest.approx(expected, rel=LOG_GAMMA.rtol, abs=LOG_GAMMA.atol)

    def test_degrees_of_freedom_range(self):
        """Every a = df/2 and a + 1/2 used by the t CDF for df up to 1000."""
        halves = np.arange(1, 2001) / 2.0
        ours = np.array([log_gamma(float(a)) for a in halves])
        np.testing.assert_allclose(
            ours, sp_special.gammaln(halves), rtol=LOG_GAMMA.rtol, atol=LOG_GAMMA.atol
        )
