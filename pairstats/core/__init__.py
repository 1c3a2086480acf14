"""
Core infrastructure for PairStats.

Shared abstractions used by the domain subpackages.

Key components:
    protocols: DataSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pairstats.core.protocols import DataSource, Backend
from pairstats.core.result import Result
from pairstats.core.exceptions import (
    PairStatsError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Protocols
    "DataSource",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PairStatsError",
    "ValidationError",
    "DimensionError",
]
