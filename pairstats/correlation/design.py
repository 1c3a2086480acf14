"""
PairedDesign: data wrapper for paired-sample statistics.

Wraps an (n, 2) matrix of observations, x in column 0 and y in column 1.
Validation rejects malformed input; degenerate input (no pairs, a single
pair, a constant column) is accepted and yields undefined statistics.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pairstats.core.exceptions import ValidationError
from pairstats.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_pair_columns,
    check_consistent_length,
)


@dataclass(frozen=True)
class SamplePair:
    """One observation: two real-valued measurements."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y


PairsLike = Iterable[SamplePair | tuple[float, float]]


@dataclass(frozen=True)
class PairedDesign:
    """
    Design for paired-sample statistics.

    Immutable after construction. Row order is preserved, so row i of
    `data` is the i-th pair supplied by the caller.

    Construction:
        PairedDesign.from_pairs([(1, 2), (2, 3), SamplePair(3, 5)])
        PairedDesign.from_arrays(x, y)
        PairedDesign.from_array(data)      # (n, 2) array or 2-column frame
    """
    _data: NDArray[np.floating[Any]]
    _columns: tuple[str, str]

    @classmethod
    def from_pairs(cls, pairs: PairsLike) -> PairedDesign:
        """
        Build PairedDesign from an iterable of pairs.

        Parameters
        ----------
        pairs : iterable
            SamplePair instances or (x, y) sequences.
        """
        if isinstance(pairs, (str, bytes)):
            raise ValidationError("pairs: expected an iterable of (x, y) pairs, got a string")

        try:
            rows = [tuple(pair) for pair in pairs]
        except TypeError as e:
            raise ValidationError(f"pairs: expected an iterable of (x, y) pairs: {e}") from e
        if not rows:
            return cls._build(np.empty((0, 2), dtype=np.float64))

        data = check_array(rows, "pairs")
        return cls._build(data)

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> PairedDesign:
        """
        Build PairedDesign from two 1D columns of equal length.
        """
        x_arr = check_array(x, "x")
        y_arr = check_array(y, "y")
        check_1d(x_arr, "x")
        check_1d(y_arr, "y")
        check_consistent_length(x_arr, y_arr, names=("x", "y"))
        return cls._build(np.column_stack([x_arr, y_arr]))

    @classmethod
    def from_array(cls, data) -> PairedDesign:
        """
        Build PairedDesign from an (n, 2) array-like.

        Parameters
        ----------
        data : array-like
            numpy array, nested lists, or a pandas DataFrame with two
            columns. Column names of a frame are kept for reporting.
        """
        columns = ("x", "y")
        if hasattr(data, 'values'):
            if hasattr(data, 'columns') and len(data.columns) == 2:
                columns = tuple(str(c) for c in data.columns)
            data = data.values

        return cls._build(check_array(data, "data"), columns=columns)

    @classmethod
    def _build(
        cls,
        data: NDArray[np.floating[Any]],
        columns: tuple[str, str] = ("x", "y"),
    ) -> PairedDesign:
        """Internal builder with validation."""
        if data.size == 0 and data.ndim == 1:
            data = data.reshape(0, 2)
        check_pair_columns(data, "pairs")
        check_finite(data, "pairs")
        data = np.array(data, dtype=np.float64)
        data.setflags(write=False)
        return cls(_data=data, _columns=columns)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only (n, 2) matrix of pairs."""
        return self._data

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """First measurement of every pair."""
        return self._data[:, 0]

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Second measurement of every pair."""
        return self._data[:, 1]

    @property
    def n(self) -> int:
        """Number of pairs."""
        return self._data.shape[0]

    @property
    def columns(self) -> tuple[str, str]:
        return self._columns

    @property
    def pairs(self) -> tuple[SamplePair, ...]:
        """The observations as SamplePair values, in input order."""
        return tuple(SamplePair(float(x), float(y)) for x, y in self._data)

    # --- DataSource protocol ---

    @property
    def n_observations(self) -> int:
        return self.n

    @property
    def metadata(self) -> dict[str, Any]:
        return {'n': self.n, 'columns': self._columns}

    def supports(self, capability: str) -> bool:
        return capability == 'materialize'

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"PairedDesign(n={self.n}, columns={self._columns})"


def ensure_design(pairs: PairsLike | PairedDesign) -> PairedDesign:
    """Convert raw pairs to PairedDesign if needed."""
    if isinstance(pairs, PairedDesign):
        return pairs
    if isinstance(pairs, np.ndarray) or hasattr(pairs, 'columns'):
        return PairedDesign.from_array(pairs)
    return PairedDesign.from_pairs(pairs)
