"""
Tests for input validators.
"""

import numpy as np
import pytest

from pairstats.core.exceptions import DimensionError, ValidationError
from pairstats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_pair_columns,
)


class TestCheckArray:

    def test_int_list_becomes_float64(self):
        arr = check_array([1, 2, 3], "x")
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_empty_list(self):
        arr = check_array([], "x")
        assert arr.shape == (0,)
        assert arr.dtype == np.float64

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x: non-numeric dtype"):
            check_array(["a", "b"], "x")

    def test_bools_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "flags")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="pairs"):
            check_array([(1, 2), (3,)], "pairs")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "z")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0, 0.0]), "x")

    def test_nan_and_inf_counted(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 2 Inf"):
            check_finite(np.array([np.nan, np.inf, -np.inf, 1.0]), "x")


class TestShapeChecks:

    def test_check_1d(self):
        check_1d(np.zeros(3), "x")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")

    def test_pair_columns_ok(self):
        check_pair_columns(np.zeros((5, 2)), "pairs")
        check_pair_columns(np.zeros((0, 2)), "pairs")

    def test_pair_columns_wrong_width(self):
        with pytest.raises(DimensionError, match="expected 2 columns") as exc:
            check_pair_columns(np.zeros((5, 3)), "pairs")
        assert exc.value.shape == (5, 3)

    def test_pair_columns_wrong_ndim(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_pair_columns(np.zeros(4), "pairs")


class TestConsistentLength:

    def test_equal_lengths(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_unequal_lengths(self):
        with pytest.raises(DimensionError, match="x=3, y=4"):
            check_consistent_length(np.zeros(3), np.ones(4), names=("x", "y"))

    def test_names_must_match(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.ones(3), names=("x",))
