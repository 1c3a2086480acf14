"""
Qualitative labels for correlation strength.
"""

from __future__ import annotations

import math

# Upper (exclusive) bounds on |r| for each band
STRENGTH_BANDS = (
    (0.2, "very weak"),
    (0.4, "weak"),
    (0.6, "moderate"),
    (0.8, "strong"),
)
STRONGEST_BAND = "very strong"

INSUFFICIENT_DATA_LABEL = "Not enough variance or data to compute correlation."


def strength_band(r: float | None) -> str | None:
    """Band name for |r| ('very weak' ... 'very strong'), or None if undefined."""
    if r is None or math.isnan(r):
        return None

    magnitude = abs(r)
    for upper, band in STRENGTH_BANDS:
        if magnitude < upper:
            return band
    return STRONGEST_BAND


def correlation_interpretation(r: float | None) -> str:
    """
    Human-readable description of a correlation coefficient.

    >>> correlation_interpretation(-0.45)
    'Moderate linear relationship.'
    >>> correlation_interpretation(None)
    'Not enough variance or data to compute correlation.'
    """
    band = strength_band(r)
    if band is None:
        return INSUFFICIENT_DATA_LABEL
    return f"{band.capitalize()} linear relationship."
