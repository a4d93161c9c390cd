"""
Quantile module.

Single quantiles and medians of nullable numeric sequences, with six
methods and two execution paths (partial selection and sorted copy).

Public API:
    quantile(seq, q, method)            - Quantile of the non-null values
    median(seq)                         - Linear quantile at 0.5
    quantile_consuming(seq, q, method)  - quantile() without the defensive copy
    median_consuming(seq)               - median() without the defensive copy
    quantile_reduce(seq, q, method)     - Quantile with path, timing, warnings
    median_reduce(seq)                  - Median with path, timing, warnings
"""

from pyorderstats.quantile._methods import QuantileMethod
from pyorderstats.quantile.design import QuantileRequest
from pyorderstats.quantile.solution import QuantileParams, QuantileSolution
from pyorderstats.quantile.solvers import (
    quantile,
    median,
    quantile_consuming,
    median_consuming,
    quantile_reduce,
    median_reduce,
)

__all__ = [
    "quantile",
    "median",
    "quantile_consuming",
    "median_consuming",
    "quantile_reduce",
    "median_reduce",
    "QuantileMethod",
    "QuantileRequest",
    "QuantileParams",
    "QuantileSolution",
]
