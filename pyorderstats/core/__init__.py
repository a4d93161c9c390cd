"""
Core infrastructure for pyorderstats.

This module provides shared abstractions and utilities used by the
domain modules.

Key components:
    protocols: NullableSequence, SupportsQuantile, Backend protocols
    sequence: Nullable containers (NumericArray, BooleanArray, StringArray)
    numeric: Per-dtype numeric representations
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
"""

from pyorderstats.core.protocols import NullableSequence, SupportsQuantile, Backend
from pyorderstats.core.result import Result
from pyorderstats.core.exceptions import (
    PyOrderStatsError,
    ValidationError,
    DimensionError,
    InvalidQuantileError,
)
from pyorderstats.core.numeric import NumericKind, kind_for_dtype
from pyorderstats.core.sequence import (
    NullableArray,
    NumericArray,
    BooleanArray,
    StringArray,
    from_values,
    from_chunks,
    from_pandas,
)

__all__ = [
    # Protocols
    "NullableSequence",
    "SupportsQuantile",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyOrderStatsError",
    "ValidationError",
    "DimensionError",
    "InvalidQuantileError",
    # Numeric representations
    "NumericKind",
    "kind_for_dtype",
    # Containers
    "NullableArray",
    "NumericArray",
    "BooleanArray",
    "StringArray",
    "from_values",
    "from_chunks",
    "from_pandas",
]
