"""
PairStats: inference for paired numeric samples.

Descriptive statistics, Pearson correlation, least-squares regression and
the significance of a correlation, with the special functions behind the
p-value (log-gamma, incomplete beta, Student's t CDF) implemented from
first principles and validated against SciPy.

Submodules:
    descriptive: Mean
    special: Log-gamma, incomplete beta, Student's t CDF
    correlation: Correlation, regression, significance, interpretation
"""

__version__ = "0.1.0"

from pairstats import descriptive
from pairstats import special
from pairstats import correlation

from pairstats.descriptive import mean
from pairstats.correlation import (
    SamplePair,
    pearson_correlation,
    simple_regression,
    pearson_correlation_significance,
    correlation_interpretation,
    analyze,
)

__all__ = [
    "__version__",
    "descriptive",
    "special",
    "correlation",
    "mean",
    "SamplePair",
    "pearson_correlation",
    "simple_regression",
    "pearson_correlation_significance",
    "correlation_interpretation",
    "analyze",
]
