"""
Core protocols for pyorderstats.

These define structural interfaces that containers and backends must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so that any container exposing the right surface can be used.

Design Principles:
    - Minimal contracts: prescribe only what the algorithms read
    - Capability by presence: a type that has no numeric order simply
      does not implement SupportsQuantile
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

from numpy.typing import NDArray

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Sequence type


@runtime_checkable
class NullableSequence(Protocol):
    """
    Ordered collection of values, each slot possibly null.

    This is everything the quantile algorithms need from a container:
    its length and null count, whether it is flagged as sorted, direct
    access to a contiguous null-free buffer when one exists, and a full
    ascending sort with nulls placed first.
    """

    def __len__(self) -> int:
        ...

    @property
    def null_count(self) -> int:
        """Number of null slots."""
        ...

    @property
    def is_sorted_ascending(self) -> bool:
        """Whether the sequence is flagged as sorted ascending (nulls first)."""
        ...

    def contiguous_nonnull_buffer(self) -> NDArray[Any] | None:
        """
        The values as one contiguous buffer, or None.

        Returns None whenever the sequence holds nulls or its storage is
        not a single C-contiguous chunk.
        """
        ...

    def sorted_ascending_copy(self) -> 'NullableSequence':
        """New sequence sorted ascending, nulls first, NaN after all numbers."""
        ...

    def get_at(self, index: int) -> Any:
        """Value at a position, or None for a null slot."""
        ...


@runtime_checkable
class SupportsQuantile(Protocol):
    """
    Sequences whose element type has a numeric order.

    Boolean and string containers do not implement this protocol, and
    the quantile functions reject them with TypeError.
    """

    def quantile(self, quantile: float, method: str = 'linear') -> Any:
        ...

    def median(self) -> Any:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend knows how to take a sequence and a request and produce a
    parameter payload. Backends are stateless; everything they need comes
    in through solve().

    Type Parameters:
        D: The sequence type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_select', 'cpu_sort'
        """
        ...

    def solve(self, sequence: D, request: Any, *, consume: bool = False) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            sequence: Input sequence
            request: What to compute
            consume: Backend may reorder the sequence's own storage.
                Backends that never write to their input ignore it.

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
