"""
Generic result container for pyorderstats computations.

The Result class provides a standardized envelope that reduce-style entry
points use. This enables shared tooling for timing, diagnostics and
reproducibility while letting each computation define its own parameter
payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (path taken, indices, counts)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Versions of the software stack that produced a result."""
    from pyorderstats import __version__

    return {
        'pyorderstats_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for order-statistic computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (the quantile value, etc.)
        info: Structured metadata (path, indices, null count)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the software that produced the result

    Examples:
        >>> Result(
        ...     params=QuantileParams(value=3.0, quantile=0.5, ...),
        ...     info={'path': 'select', 'n': 5, 'null_count': 0},
        ...     timing={'total_seconds': 0.0001, 'select': 0.00005},
        ...     backend_name='cpu_select'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
