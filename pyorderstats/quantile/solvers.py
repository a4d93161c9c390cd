"""
Solver dispatch for quantiles.

Each call picks one of two paths:

    select  the sequence exposes a contiguous null-free buffer and is not
            flagged sorted; the buffer (or a copy of it) is partitioned
            in place.
    sort    anything else; values are read from a sorted copy, or from
            the sequence itself when it is flagged sorted.

quantile() and median() borrow the sequence and never modify it. The
*_consuming variants take the sequence over: on the select path they
partition its buffer without copying, leaving the element order
unspecified afterwards.

quantile_reduce() and median_reduce() return a QuantileSolution carrying
the path taken, timing and warnings alongside the value.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyorderstats.core.protocols import Backend, SupportsQuantile
from pyorderstats.core.sequence import NumericArray
from pyorderstats.quantile._methods import QuantileMethod, DEFAULT_METHOD, MEDIAN_QUANTILE
from pyorderstats.quantile.design import QuantileRequest
from pyorderstats.quantile.solution import QuantileParams, QuantileSolution
from pyorderstats.quantile.backends.select import (
    SelectionBackend, exclusive_buffer, quantile_select,
)
from pyorderstats.quantile.backends.sort import SortBackend, quantile_sorted, sorted_view


def _check_supported(sequence: Any) -> None:
    if not isinstance(sequence, SupportsQuantile):
        raise TypeError(
            f"quantile: expected a numeric sequence, got {type(sequence).__name__}"
        )


def _selectable_buffer(sequence: NumericArray) -> NDArray[Any] | None:
    """Buffer for the select path, or None to take the sort path."""
    # sorting is free for sorted data, so skip quickselect
    if sequence.is_sorted_ascending:
        return None
    return sequence.contiguous_nonnull_buffer()


def _dispatch(
    sequence: NumericArray,
    request: QuantileRequest,
    consume: bool,
) -> np.floating[Any] | None:
    _check_supported(sequence)
    kind = sequence.kind
    buffer = _selectable_buffer(sequence)
    if buffer is not None:
        work = exclusive_buffer(buffer, consume)
        value, _, _ = quantile_select(work, request.quantile, request.method, kind)
    else:
        value, _, _ = quantile_sorted(sorted_view(sequence), request.quantile, request.method)
    return kind.narrow(value)


def quantile(
    sequence: NumericArray,
    quantile: float,
    method: QuantileMethod | str = DEFAULT_METHOD,
) -> np.floating[Any] | None:
    """
    Quantile of the non-null values of a numeric sequence.

    Parameters
    ----------
    sequence : NumericArray
        Integer or floating sequence, possibly with nulls.
    quantile : float
        Fraction in [0, 1].
    method : str or QuantileMethod
        'nearest', 'lower', 'higher', 'midpoint', 'linear' (default) or
        'equiprobable'.

    Returns
    -------
    numpy.float32 for float32 data, numpy.float64 otherwise. None when the
    sequence is empty or entirely null.

    Raises
    ------
    InvalidQuantileError
        If quantile is outside [0, 1].
    """
    request = QuantileRequest(quantile, method)
    return _dispatch(sequence, request, consume=False)


def median(sequence: NumericArray) -> np.floating[Any] | None:
    """Median: linear quantile at 0.5. Never raises for a numeric sequence."""
    return quantile(sequence, MEDIAN_QUANTILE, QuantileMethod.LINEAR)


def quantile_consuming(
    sequence: NumericArray,
    quantile: float,
    method: QuantileMethod | str = DEFAULT_METHOD,
) -> np.floating[Any] | None:
    """
    Like quantile(), without the defensive copy on the select path.

    The caller hands the sequence over. Its values are unchanged but
    their order is unspecified after the call. A read-only buffer is
    copied instead, with a RuntimeWarning.
    """
    request = QuantileRequest(quantile, method)
    return _dispatch(sequence, request, consume=True)


def median_consuming(sequence: NumericArray) -> np.floating[Any] | None:
    """Like median(), without the defensive copy on the select path."""
    return quantile_consuming(sequence, MEDIAN_QUANTILE, QuantileMethod.LINEAR)


def quantile_reduce(
    sequence: NumericArray,
    quantile: float,
    method: QuantileMethod | str = DEFAULT_METHOD,
    *,
    consume: bool = False,
) -> QuantileSolution:
    """
    Compute one quantile and return it with diagnostics.

    Parameters
    ----------
    sequence : NumericArray
    quantile : float
        Fraction in [0, 1].
    method : str or QuantileMethod
    consume : bool
        Partition the sequence's own buffer on the select path.

    Returns
    -------
    QuantileSolution with value, path, timing and warnings.
    """
    _check_supported(sequence)
    request = QuantileRequest(quantile, method)

    backend: Backend[NumericArray, QuantileParams]
    if _selectable_buffer(sequence) is not None:
        backend = SelectionBackend()
    else:
        backend = SortBackend()

    result = backend.solve(sequence, request, consume=consume)

    return QuantileSolution(_result=result)


def median_reduce(sequence: NumericArray, *, consume: bool = False) -> QuantileSolution:
    """Median with diagnostics."""
    return quantile_reduce(sequence, MEDIAN_QUANTILE, QuantileMethod.LINEAR, consume=consume)
