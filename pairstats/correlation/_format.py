"""
Text formatting for report output.
"""

from __future__ import annotations

import math

NOT_AVAILABLE = "N/A"
P_VALUE_FLOOR = 1e-4


def format_value(value: float | None, digits: int = 3) -> str:
    """Fixed-point text, or 'N/A' for an undefined value."""
    if value is None or math.isnan(value):
        return NOT_AVAILABLE
    return f"{value:.{digits}f}"


def format_p_value(p_value: float | None) -> str:
    """
    p-value to 4 decimals; tiny nonzero values print as '< 0.0001'.
    """
    if p_value is None or math.isnan(p_value):
        return NOT_AVAILABLE
    if 0.0 < p_value < P_VALUE_FLOOR:
        return "< 0.0001"
    return f"{p_value:.4f}"
