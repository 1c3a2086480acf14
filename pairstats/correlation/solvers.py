"""
Solver dispatch for paired-sample analysis.

analyze() is the one-call entry point; the individual statistics live in
their own modules and are re-exported from the package.
"""

from __future__ import annotations

from typing import Literal

from pairstats.core.exceptions import ValidationError
from pairstats.correlation.backends.cpu import CPUCorrelationBackend
from pairstats.correlation.design import PairedDesign, PairsLike, ensure_design
from pairstats.correlation.solution import PairedAnalysisSolution


BackendChoice = Literal['cpu', 'auto']


def _get_backend(backend: str = 'cpu'):
    """Select backend. Only the CPU reference backend exists."""
    if backend in ('cpu', 'auto'):
        return CPUCorrelationBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def analyze(
    pairs: PairsLike | PairedDesign,
    *,
    backend: BackendChoice = 'cpu',
) -> PairedAnalysisSolution:
    """
    Compute every paired statistic at once.

    Parameters
    ----------
    pairs : iterable of pairs, (n, 2) array, or PairedDesign
        The observations. Order is irrelevant to the statistics.
    backend : str
        'cpu' (default) or 'auto'.

    Returns
    -------
    PairedAnalysisSolution
        Means, correlation, significance, regression line and
        interpretation. Undefined statistics are None and explained in
        `warnings`.

    Examples
    --------
    >>> result = analyze([(1, 2), (2, 3), (3, 5), (4, 4), (5, 6), (6, 9)])
    >>> round(result.correlation, 4)
    0.9256
    """
    be = _get_backend(backend)
    design = ensure_design(pairs)
    result = be.solve(design)
    return PairedAnalysisSolution(_result=result, _design=design)
