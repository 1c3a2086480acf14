"""
Log-gamma via the Lanczos approximation.

Uses the g = 7 coefficient table (a leading constant plus eight terms),
accurate to roughly 15 significant digits for positive arguments.
"""

from __future__ import annotations

import math

LANCZOS_G = 7

LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

_HALF_LOG_2PI = 0.5 * math.log(2.0 * math.pi)


def log_gamma(z: float) -> float:
    """
    Natural logarithm of the gamma function.

    For z < 0.5 the reflection formula
    ln G(z) = ln(pi) - ln(sin(pi z)) - ln G(1 - z) is applied once; the
    reflected argument is always >= 0.5, so the recursion is one level deep.

    Parameters
    ----------
    z : float
        Argument. Every caller in this package passes a positive value.

    Returns
    -------
    float
    """
    if z < 0.5:
        return (
            math.log(math.pi)
            - math.log(abs(math.sin(math.pi * z)))
            - log_gamma(1.0 - z)
        )

    z -= 1.0
    series = LANCZOS_COEFFICIENTS[0]
    for i in range(1, len(LANCZOS_COEFFICIENTS)):
        series += LANCZOS_COEFFICIENTS[i] / (z + i)

    t = z + LANCZOS_G + 0.5
    return _HALF_LOG_2PI + (z + 0.5) * math.log(t) - t + math.log(series)
