"""
Generic result container for PairStats computations.

Every backend wraps its parameter payload in a Result. The envelope keeps
the numbers separate from the bookkeeping (backend identity, timing,
diagnostics) so the payload types stay plain frozen dataclasses.

Design decisions:
    - Generic over parameter payload P
    - info dict for free-form metadata (sample size, degrees of freedom)
    - timing is optional
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (correlation, regression line, ...)
        info: Structured metadata such as {'n': 12, 'df': 10}
        timing: Section timings in seconds, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Explanations for every statistic that came out undefined

    Examples:
        >>> Result(
        ...     params=PairedAnalysisParams(n=2, correlation=1.0, ...),
        ...     info={'n': 2, 'df': None},
        ...     timing={'total_seconds': 1e-4},
        ...     backend_name='cpu_pairs',
        ...     warnings=('fewer than 3 pairs: significance undefined',),
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
