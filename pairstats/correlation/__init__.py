"""
Paired-sample correlation, regression and significance.

Public API:
    pearson_correlation(pairs)               - Pearson r, None if undefined
    simple_regression(pairs)                 - OLS slope/intercept, None if undefined
    pearson_correlation_significance(pairs)  - t-statistic and two-tailed p-value
    correlation_interpretation(r)            - Qualitative label for r
    strength_band(r)                         - Band name for |r|
    analyze(pairs)                           - All of the above in one Solution
    format_value(v), format_p_value(p)       - Report formatting
"""

from pairstats.correlation.design import SamplePair, PairedDesign
from pairstats.correlation._common import (
    RegressionResult,
    SignificanceResult,
    PairedAnalysisParams,
)
from pairstats.correlation._pearson import pearson_correlation
from pairstats.correlation._regression import simple_regression
from pairstats.correlation._significance import (
    pearson_correlation_significance,
    PERFECT_CORRELATION_TOL,
)
from pairstats.correlation._interpretation import (
    correlation_interpretation,
    strength_band,
    INSUFFICIENT_DATA_LABEL,
)
from pairstats.correlation._format import format_value, format_p_value
from pairstats.correlation.solution import PairedAnalysisSolution
from pairstats.correlation.solvers import analyze

__all__ = [
    "pearson_correlation",
    "simple_regression",
    "pearson_correlation_significance",
    "correlation_interpretation",
    "strength_band",
    "analyze",
    "format_value",
    "format_p_value",
    "SamplePair",
    "PairedDesign",
    "RegressionResult",
    "SignificanceResult",
    "PairedAnalysisParams",
    "PairedAnalysisSolution",
    "PERFECT_CORRELATION_TOL",
    "INSUFFICIENT_DATA_LABEL",
]
