"""
Pearson product-moment correlation.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pairstats.correlation.design import PairedDesign, PairsLike, ensure_design


@dataclass(frozen=True)
class CenteredSums:
    """Column means and the centered sums of squares and cross-products."""
    mean_x: float
    mean_y: float
    sxx: float
    syy: float
    sxy: float

    @property
    def finite(self) -> bool:
        """False when a mean or a sum overflowed."""
        return all(
            math.isfinite(v)
            for v in (self.mean_x, self.mean_y, self.sxx, self.syy, self.sxy)
        )


def _center(values: NDArray[np.floating[Any]]) -> tuple[float, NDArray[np.floating[Any]]]:
    """Return (mean, deviations); a constant column centers to exact zeros."""
    with np.errstate(over='ignore', invalid='ignore'):
        if np.ptp(values) == 0.0:
            return float(values[0]), np.zeros_like(values)
        m = float(np.mean(values))
        return m, values - m


def centered_sums(design: PairedDesign) -> CenteredSums:
    """
    Centered sums over a design with at least one pair.

    Overflow is not an error here: it shows up as inf/nan fields, and
    callers check `finite` before using them.
    """
    mean_x, dx = _center(design.x)
    mean_y, dy = _center(design.y)
    with np.errstate(over='ignore', invalid='ignore'):
        return CenteredSums(
            mean_x=mean_x,
            mean_y=mean_y,
            sxx=float(np.dot(dx, dx)),
            syy=float(np.dot(dy, dy)),
            sxy=float(np.dot(dx, dy)),
        )


def pearson_correlation(pairs: PairsLike | PairedDesign) -> float | None:
    """
    Pearson correlation coefficient of x and y.

    Parameters
    ----------
    pairs : iterable of pairs or PairedDesign

    Returns
    -------
    float or None
        r in [-1, 1], or None with fewer than 2 pairs, when either column
        has zero variance, or when the sums overflow.
    """
    design = ensure_design(pairs)
    if design.n < 2:
        return None

    sums = centered_sums(design)
    if not sums.finite:
        return None

    denominator = math.sqrt(sums.sxx) * math.sqrt(sums.syy)
    if denominator == 0.0 or not math.isfinite(denominator):
        return None

    r = sums.sxy / denominator
    if not math.isfinite(r):
        return None
    return min(1.0, max(-1.0, r))
