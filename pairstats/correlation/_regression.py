"""
Ordinary least-squares fit of y on x.
"""

from __future__ import annotations

import math

from pairstats.correlation._common import RegressionResult
from pairstats.correlation._pearson import centered_sums
from pairstats.correlation.design import PairedDesign, PairsLike, ensure_design


def simple_regression(pairs: PairsLike | PairedDesign) -> RegressionResult | None:
    """
    Least-squares line through the pairs.

    slope = Sxy / Sxx and intercept = mean(y) - slope * mean(x).

    Returns
    -------
    RegressionResult or None
        None with fewer than 2 pairs or when x has zero variance (the line
        would be vertical) or the fit overflows.
    """
    design = ensure_design(pairs)
    if design.n < 2:
        return None

    sums = centered_sums(design)
    # Syy plays no part in the fit, so only the other sums must be finite.
    needed = (sums.mean_x, sums.mean_y, sums.sxx, sums.sxy)
    if not all(math.isfinite(v) for v in needed) or sums.sxx == 0.0:
        return None

    slope = sums.sxy / sums.sxx
    intercept = sums.mean_y - slope * sums.mean_x
    if not (math.isfinite(slope) and math.isfinite(intercept)):
        return None
    return RegressionResult(slope=slope, intercept=intercept)
