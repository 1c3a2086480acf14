"""
Descriptive statistics over a single numeric column.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from pairstats.core.validation import check_array, check_1d, check_finite


def mean(values: ArrayLike) -> float | None:
    """
    Arithmetic mean.

    Parameters
    ----------
    values : array-like
        1D sequence of real numbers.

    Returns
    -------
    float or None
        The mean, or None for an empty sequence or when the sum
        overflows.
    """
    arr = check_array(values, "values")
    check_1d(arr, "values")
    if arr.shape[0] == 0:
        return None
    check_finite(arr, "values")
    with np.errstate(over='ignore', invalid='ignore'):
        result = float(np.mean(arr))
    if not math.isfinite(result):
        return None
    return result
