"""
t-test for a Pearson correlation against H0: rho = 0.
"""

from __future__ import annotations

import math

from pairstats.correlation._common import SignificanceResult
from pairstats.correlation._pearson import pearson_correlation
from pairstats.correlation.design import PairedDesign, PairsLike, ensure_design
from pairstats.special import student_t_cdf

# |r| within this distance of 1 is treated as a perfect linear relationship
PERFECT_CORRELATION_TOL = 1e-12


def pearson_correlation_significance(
    pairs: PairsLike | PairedDesign,
) -> SignificanceResult | None:
    """
    t-statistic and two-tailed p-value of the Pearson correlation.

    With df = n - 2, t = r * sqrt(df / (1 - r^2)) and
    p = 2 * (1 - F(|t|; df)), clipped to [0, 1].

    A perfect linear relationship gives t = +/-inf (sign of r) and p = 0.

    Returns
    -------
    SignificanceResult or None
        None with fewer than 3 pairs, when the correlation is undefined,
        or when the t CDF is not finite.
    """
    design = ensure_design(pairs)
    if design.n < 3:
        return None

    r = pearson_correlation(design)
    if r is None:
        return None

    df = design.n - 2

    if abs(r) >= 1.0 - PERFECT_CORRELATION_TOL:
        return SignificanceResult(
            t_statistic=math.copysign(math.inf, r),
            p_value=0.0,
            df=df,
        )

    t_stat = r * math.sqrt(df / (1.0 - r * r))
    cdf = student_t_cdf(abs(t_stat), df)
    if not math.isfinite(cdf):
        return None

    p_value = min(1.0, max(0.0, 2.0 * (1.0 - cdf)))
    return SignificanceResult(t_statistic=t_stat, p_value=p_value, df=df)
