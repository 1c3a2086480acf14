"""
Shared compute infrastructure for PairStats.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical validation
"""

from pairstats.core.compute.timing import Timer
from pairstats.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    "Timer",
    "ToleranceTier",
    "select_tolerance",
]
