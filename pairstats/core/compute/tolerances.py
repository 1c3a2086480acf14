"""
Tolerance tiers for numerical validation.

The special functions are approximations, so agreement with an external
reference (SciPy) is checked against these tiers rather than exact
equality. Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Test statistics built from exact centered sums
STATISTIC = ToleranceTier(
    rtol=0.0,
    atol=1e-12,
    name='statistic',
    description='t-statistic and correlation against the reference',
)

# Anything that passes through the continued fraction
P_VALUE = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='p_value',
    description='t CDF and two-tailed p-value against the reference',
)

# Broad parameter grids, where the 3e-7 Lentz stopping rule dominates
CDF_GRID = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='cdf_grid',
    description='t CDF and incomplete beta over wide (x, a, b) grids',
)

# Regression coefficients recovered from noise-free lines
REGRESSION = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='regression',
    description='slope and intercept of an exact linear relationship',
)

# Lanczos log-gamma, relative to the value
LOG_GAMMA = ToleranceTier(
    rtol=1e-11,
    atol=1e-12,
    name='log_gamma',
    description='Lanczos g=7 log-gamma against scipy.special.gammaln',
)

TIERS = {tier.name: tier for tier in (STATISTIC, P_VALUE, CDF_GRID, REGRESSION, LOG_GAMMA)}


def select_tolerance(quantity: str) -> ToleranceTier:
    """Select the tolerance tier for a named quantity."""
    try:
        return TIERS[quantity]
    except KeyError:
        raise KeyError(
            f"Unknown quantity {quantity!r}; expected one of {sorted(TIERS)}"
        ) from None
