"""
pyorderstats: quantiles and medians of nullable numeric sequences.

Six quantile methods (nearest, lower, higher, midpoint, linear,
equiprobable), computed by partial selection when the data allow it and
from a sorted copy otherwise.

Submodules:
    core: Containers, numeric representations, exceptions, result envelope
    quantile: quantile / median and their consuming and reduce variants
"""

__version__ = "0.1.0"

from pyorderstats.core.exceptions import (
    PyOrderStatsError,
    ValidationError,
    InvalidQuantileError,
)
from pyorderstats.core.sequence import (
    NumericArray,
    BooleanArray,
    StringArray,
    from_values,
    from_chunks,
    from_pandas,
)
from pyorderstats.quantile import (
    QuantileMethod,
    quantile,
    median,
    quantile_consuming,
    median_consuming,
    quantile_reduce,
    median_reduce,
)

__all__ = [
    "__version__",
    "PyOrderStatsError",
    "ValidationError",
    "InvalidQuantileError",
    "NumericArray",
    "BooleanArray",
    "StringArray",
    "from_values",
    "from_chunks",
    "from_pandas",
    "QuantileMethod",
    "quantile",
    "median",
    "quantile_consuming",
    "median_consuming",
    "quantile_reduce",
    "median_reduce",
]
