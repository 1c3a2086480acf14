"""
Tests for pearson_correlation_significance().

Reference values computed with SciPy (np.corrcoef and stats.t.sf).
"""

import math

import numpy as np
import pytest

from pairstats.core.compute.tolerances import P_VALUE, STATISTIC
from pairstats.correlation import (
    PERFECT_CORRELATION_TOL,
    PairedDesign,
    SignificanceResult,
    pearson_correlation,
    pearson_correlation_significance,
)


class TestUndefined:

    @pytest.mark.parametrize("pairs", [[], [(1, 2)], [(1, 2), (2, 4)]])
    def test_fewer_than_three_pairs(self, pairs):
        assert pearson_correlation_significance(pairs) is None

    def test_overflowing_sums(self):
        pairs = [(1e200, 1e200), (2e200, 2e200), (3e200, 3e200)]
        assert pearson_correlation_significance(pairs) is None

    def test_zero_variance_x(self):
        assert pearson_correlation_significance([(3, 10), (3, 30), (3, 50)]) is None

    def test_zero_variance_y(self):
        assert pearson_correlation_significance([(1, 4), (2, 4), (3, 4), (9, 4)]) is None


class TestPerfectCorrelation:

    def test_positive(self):
        result = pearson_correlation_significance([(1, 10), (2, 20), (3, 30), (4, 40)])
        assert result is not None
        assert result.t_statistic == math.inf
        assert result.p_value == 0.0
        assert result.df == 2

    def test_negative(self):
        pairs = [(x, -3 * x + 10) for x in range(1, 6)]
        result = pearson_correlation_significance(pairs)
        assert result.t_statistic == -math.inf
        assert result.p_value == 0.0

    def test_rounding_below_one_still_perfect(self):
        """Exact lines through non-representable values land within the tolerance."""
        x = [0.1 * i for i in range(1, 8)]
        pairs = [(xi, 0.3 * xi + 0.7) for xi in x]
        r = pearson_correlation(pairs)
        assert abs(r) >= 1.0 - PERFECT_CORRELATION_TOL

        result = pearson_correlation_significance(pairs)
        assert result.t_statistic == math.inf
        assert result.p_value == 0.0


class TestReferenceValues:

    def test_positive_sample(self, positive_pairs):
        result = pearson_correlation_significance(positive_pairs)
        assert result is not None
        assert result.df == 4
        assert result.t_statistic == pytest.approx(4.889732381083922, abs=STATISTIC.atol)
        assert result.p_value == pytest.approx(0.008103606238573598, abs=P_VALUE.atol)

    def test_negative_sample(self, negative_pairs):
        result = pearson_correlation_significance(negative_pairs)
        assert result is not None
        assert result.df == 6
        assert result.t_statistic == pytest.approx(-4.560146566598576, abs=STATISTIC.atol)
        assert result.p_value == pytest.approx(0.0038503204637324014, abs=P_VALUE.atol)

    def test_result_type(self, positive_pairs):
        result = pearson_correlation_significance(positive_pairs)
        assert isinstance(result, SignificanceResult)
        assert isinstance(result.df, int)


class TestProperties:

    def test_sign_symmetry(self, positive_pairs, negative_pairs):
        for pairs in (positive_pairs, negative_pairs):
            flipped = [(x, -y) for x, y in pairs]
            original = pearson_correlation_significance(pairs)
            mirrored = pearson_correlation_significance(flipped)
            assert mirrored.t_statistic == -original.t_statistic
            assert mirrored.p_value == original.p_value

    def test_uncorrelated_gives_p_one(self):
        """x = (-1, 0, 1), y = (1, -2, 1): r = 0 exactly, t = 0, p = 1."""
        result = pearson_correlation_significance([(-1, 1), (0, -2), (1, 1)])
        assert result.t_statistic == 0.0
        assert result.p_value == 1.0

    def test_p_value_clamped_over_sample_sizes(self, rng):
        sizes = np.concatenate([[3, 4, 5, 1000], rng.integers(3, 1001, size=30)])
        for n in sizes:
            rho = rng.uniform(-0.99, 0.99)
            x = rng.standard_normal(int(n))
            y = rho * x + np.sqrt(1.0 - rho ** 2) * rng.standard_normal(int(n))
            result = pearson_correlation_significance(PairedDesign.from_arrays(x, y))
            assert result is not None
            assert math.isfinite(result.t_statistic)
            assert 0.0 <= result.p_value <= 1.0

    def test_p_value_clamped_for_integer_answers(self, rng):
        """Integer answers on 1..100 and 0..100, as collected from participants."""
        for n in (3, 7, 50, 400):
            a1 = rng.integers(1, 101, size=n)
            a2 = rng.integers(0, 101, size=n)
            result = pearson_correlation_significance(PairedDesign.from_arrays(a1, a2))
            if result is None:
                continue
            assert 0.0 <= result.p_value <= 1.0

    def test_stronger_correlation_smaller_p(self):
        weak = pearson_correlation_significance([(1, 2), (2, 1), (3, 4), (4, 3), (5, 5)])
        strong = pearson_correlation_significance([(1, 1), (2, 2), (3, 4), (4, 3), (5, 5)])
        assert strong.p_value < weak.p_value

    def test_order_invariant(self, negative_pairs):
        reordered = list(reversed(negative_pairs))
        a = pearson_correlation_significance(negative_pairs)
        b = pearson_correlation_significance(reordered)
        assert a.t_statistic == pytest.approx(b.t_statistic, abs=STATISTIC.atol)
        assert a.p_value == pytest.approx(b.p_value, abs=P_VALUE.atol)
