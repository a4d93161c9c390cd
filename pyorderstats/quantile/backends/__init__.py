"""
Quantile backends.

    select: partial selection on a contiguous null-free buffer
    sort:   sorted copy with nulls first, for everything else
"""

from pyorderstats.quantile.backends.select import SelectionBackend, quantile_select
from pyorderstats.quantile.backends.sort import SortBackend, quantile_sorted

__all__ = [
    "SelectionBackend",
    "SortBackend",
    "quantile_select",
    "quantile_sorted",
]
