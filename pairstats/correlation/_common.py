"""
Common types for paired-sample statistics.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegressionResult:
    """Least-squares line y = slope * x + intercept."""
    slope: float
    intercept: float


@dataclass(frozen=True)
class SignificanceResult:
    """
    Significance of a Pearson correlation.

    Attributes
    ----------
    t_statistic : float
        r * sqrt(df / (1 - r^2)); +/-inf for a perfect linear relationship.
    p_value : float
        Two-tailed p-value in [0, 1].
    df : int
        Degrees of freedom, n - 2.
    """
    t_statistic: float
    p_value: float
    df: int


@dataclass(frozen=True)
class PairedAnalysisParams:
    """
    Parameter payload for a full paired-sample analysis.

    Every statistic is None when it is undefined for the sample.
    """
    n: int
    mean_x: float | None
    mean_y: float | None
    correlation: float | None
    significance: SignificanceResult | None
    regression: RegressionResult | None
    interpretation: str
