"""
Core protocols for PairStats.

Structural interfaces (Protocol rather than ABC) shared by designs and
backends. They prescribe very little: enough for generic tooling to ask a
design how many observations it holds and to ask a backend for its name.
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # DataSource type


@runtime_checkable
class DataSource(Protocol):
    """
    Minimal protocol for a data container used in a computation.

    PairedDesign implements it; metadata and capabilities are free-form so
    future designs are not forced into the same structure.
    """

    @property
    def n_observations(self) -> int:
        """Number of statistical units (pairs)."""
        ...

    @property
    def metadata(self) -> dict[str, Any]:
        """Domain-specific metadata, e.g. {'n': 6, 'columns': ('x', 'y')}."""
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this data source supports a given capability.

        Unknown capabilities MUST return False, never raise.
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend turns a design into a Result envelope. Backends are stateless:
    everything they need comes from the design.
    """

    @property
    def name(self) -> str:
        """Backend identifier, '{device}_{domain}' (e.g. 'cpu_pairs')."""
        ...

    def solve(self, design: D) -> 'Result[P]':
        """Execute the computation and wrap the payload in a Result."""
        ...
