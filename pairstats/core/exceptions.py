"""
Exception hierarchy for PairStats.

All exceptions inherit from PairStatsError so callers can catch any
library-specific error with a single clause.

Exceptions are reserved for malformed input (wrong shape, non-numeric or
non-finite values). Degenerate data, such as too few pairs or a constant
column, is not an error: the affected statistic is returned as None.
"""


class PairStatsError(Exception):
    """Base exception for all PairStats errors."""
    pass


class ValidationError(PairStatsError):
    """
    Input validation failed.

    Raised when user-provided samples cannot be interpreted as finite
    numeric data.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when paired data is not shaped (n, 2), or when the x and y
    columns are supplied separately with different lengths.

    Attributes:
        shape: Offending shape, if known
    """

    def __init__(self, message: str, shape: tuple[int, ...] | None = None):
        super().__init__(message)
        self.shape = shape
