"""
Sort backend.

The correctness fallback: sequences with nulls, non-contiguous storage, or
a sorted flag. Reads order statistics straight out of an ascending sorted
copy, where nulls come first, so the non-null values occupy positions
[null_count, n - 1]. The caller's sequence is never modified.
"""

from __future__ import annotations

import numpy as np

from pyorderstats.core.compute.timing import Timer
from pyorderstats.core.result import Result
from pyorderstats.core.sequence import NumericArray
from pyorderstats.quantile._index import quantile_index
from pyorderstats.quantile._interpolate import interpolate
from pyorderstats.quantile._methods import QuantileMethod, INTERPOLATING_METHODS
from pyorderstats.quantile.backends.select import NAN_WARNING
from pyorderstats.quantile.design import QuantileRequest
from pyorderstats.quantile.solution import QuantileParams


def sorted_view(sequence: NumericArray) -> NumericArray:
    """
    The sequence itself if flagged sorted with its nulls in front, else
    a sorted copy.
    """
    if sequence.is_sorted_ascending and (
        sequence.null_count == 0 or sequence.get_at(0) is None
    ):
        return sequence
    return sequence.sorted_ascending_copy()


def quantile_sorted(
    sorted_seq: NumericArray,
    quantile: float,
    method: QuantileMethod,
) -> tuple[float | None, int | None, int | None]:
    """
    Quantile read from an ascending sorted sequence (nulls first).

    Returns
    -------
    (value, base, top)
        value is a float64, or None when every slot is null.
    """
    length = len(sorted_seq)
    null_count = sorted_seq.null_count
    if null_count == length:
        return None, None, None

    kind = sorted_seq.kind
    idx, float_idx, top_idx = quantile_index(quantile, length, null_count, method)
    lower = kind.to_float(sorted_seq.get_at(idx))

    if idx == top_idx or method not in INTERPOLATING_METHODS:
        return lower, idx, top_idx

    upper = kind.to_float(sorted_seq.get_at(idx + 1))
    return interpolate(method, lower, upper, idx, float_idx), idx, top_idx


class SortBackend:
    """Full sort, nulls first, then direct indexing."""

    @property
    def name(self) -> str:
        return 'cpu_sort'

    def solve(
        self,
        sequence: NumericArray,
        request: QuantileRequest,
        *,
        consume: bool = False,
    ) -> Result[QuantileParams]:
        """
        Compute one quantile on the sort path.

        consume is accepted for symmetry with SelectionBackend and has no
        effect: the sort path never writes to the sequence.
        """
        timer = Timer()
        timer.start()
        kind = sequence.kind
        warnings_list: list[str] = []

        with timer.section('sort'):
            sorted_seq = sorted_view(sequence)

        value, base, top = quantile_sorted(sorted_seq, request.quantile, request.method)

        n = len(sorted_seq)
        if kind.is_float and sorted_seq.null_count < n:
            # NaN sorts last
            last = sorted_seq.get_at(n - 1)
            if np.isnan(last):
                warnings_list.append(NAN_WARNING)

        timer.stop()

        params = QuantileParams(
            value=kind.narrow(value),
            quantile=request.quantile,
            method=request.method,
            dtype=kind.result_dtype.name,
        )

        return Result(
            params=params,
            info={
                'path': 'sort',
                'n': n,
                'null_count': sorted_seq.null_count,
                'base_index': base,
                'top_index': top,
                'interpolated': base is not None and base != top
                and request.method in INTERPOLATING_METHODS,
                'presorted': sorted_seq is sequence,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
