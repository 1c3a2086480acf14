"""
Student's t distribution.
"""

from __future__ import annotations

import math

from pairstats.special._beta import regularized_incomplete_beta


def student_t_cdf(t: float, df: float) -> float:
    """
    Lower-tail CDF of Student's t distribution, P(T <= t).

    Uses P(|T| > |t|) = I_x(df/2, 1/2) with x = df / (df + t^2).

    Parameters
    ----------
    t : float
        Quantile.
    df : float
        Degrees of freedom.

    Returns
    -------
    float
        The CDF value, or NaN when df <= 0 or t is not finite.
    """
    if df <= 0 or not math.isfinite(t):
        return math.nan
    if t == 0:
        return 0.5

    x = df / (df + t * t)
    tail = regularized_incomplete_beta(x, df / 2.0, 0.5)
    if t > 0:
        return 1.0 - 0.5 * tail
    return 0.5 * tail
