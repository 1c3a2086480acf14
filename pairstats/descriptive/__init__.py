"""
Descriptive statistics module.

Public API:
    mean(values)  - Arithmetic mean, None when empty
"""

from pairstats.descriptive.solvers import mean

__all__ = [
    "mean",
]
