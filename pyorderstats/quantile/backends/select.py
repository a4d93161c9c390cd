"""
Partial-selection backend.

Works on a contiguous, null-free buffer and reorders it in place with
ndarray.partition instead of sorting it. numpy's partition orders NaN
after every number, which is the total order the sort path uses too, so
both paths agree bit for bit. The one exception is a tie between 0.0 and
-0.0: partition is not stable, so either zero may come back.
"""

from __future__ import annotations

from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray

from pyorderstats.core.compute.timing import Timer
from pyorderstats.core.exceptions import ValidationError
from pyorderstats.core.numeric import NumericKind
from pyorderstats.core.result import Result
from pyorderstats.core.sequence import NumericArray
from pyorderstats.quantile._index import quantile_index
from pyorderstats.quantile._interpolate import interpolate
from pyorderstats.quantile._methods import QuantileMethod, INTERPOLATING_METHODS
from pyorderstats.quantile.design import QuantileRequest
from pyorderstats.quantile.solution import QuantileParams

NAN_WARNING = "values contain NaN; NaN is ordered above every number"


def exclusive_buffer(buffer: NDArray[Any], consume: bool) -> NDArray[Any]:
    """
    A buffer the selection may reorder.

    With consume=True the caller's own buffer is returned when it is
    writable. Otherwise a private copy is made.
    """
    if consume:
        if buffer.flags.writeable:
            return buffer
        warnings.warn(
            "buffer is read-only; quantile_consuming falls back to a copy",
            RuntimeWarning,
            stacklevel=3,
        )
    return buffer.copy()


def quantile_select(
    buffer: NDArray[Any],
    quantile: float,
    method: QuantileMethod,
    kind: NumericKind,
) -> tuple[float | None, int | None, int | None]:
    """
    Quantile of a null-free buffer by partial selection.

    Parameters
    ----------
    buffer : NDArray
        Contiguous values, no nulls. Reordered in place.
    quantile : float
        Fraction in [0, 1], already validated.
    method : QuantileMethod
    kind : NumericKind
        Representation of the buffer's dtype.

    Returns
    -------
    (value, base, top)
        value is a float64, or None for an empty buffer. base and top are
        None when no index was computed (buffers of length 0 or 1).
    """
    n = buffer.shape[0]
    if n == 0:
        return None, None, None
    if n == 1:
        return kind.to_float(buffer[0]), None, None

    idx, float_idx, top_idx = quantile_index(quantile, n, 0, method)

    buffer.partition(idx)
    lower = kind.to_float(buffer[idx])
    if idx == top_idx or method not in INTERPOLATING_METHODS:
        return lower, idx, top_idx

    # everything right of idx is >= lower; its minimum is the next order statistic
    upper = kind.to_float(kind.total_min(buffer[idx + 1:]))
    return interpolate(method, lower, upper, idx, float_idx), idx, top_idx


class SelectionBackend:
    """Quickselect over a contiguous null-free buffer."""

    @property
    def name(self) -> str:
        return 'cpu_select'

    def solve(
        self,
        sequence: NumericArray,
        request: QuantileRequest,
        *,
        consume: bool = False,
    ) -> Result[QuantileParams]:
        """
        Compute one quantile on the selection path.

        Parameters
        ----------
        sequence : NumericArray
            Must expose a contiguous null-free buffer.
        request : QuantileRequest
        consume : bool
            Reorder the sequence's own buffer instead of a copy.
        """
        buffer = sequence.contiguous_nonnull_buffer()
        if buffer is None:
            raise ValidationError(
                f"sequence: selection needs a contiguous null-free buffer, got {sequence!r}"
            )

        timer = Timer()
        timer.start()
        kind = sequence.kind
        warnings_list: list[str] = []

        with timer.section('copy'):
            work = exclusive_buffer(buffer, consume)

        with timer.section('select'):
            value, base, top = quantile_select(work, request.quantile, request.method, kind)

        if kind.is_float and work.size and bool(np.isnan(work).any()):
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
                'path': 'select',
                'n': int(buffer.shape[0]),
                'null_count': 0,
                'base_index': base,
                'top_index': top,
                'interpolated': base is not None and base != top
                and request.method in INTERPOLATING_METHODS,
                'consumed': work is buffer,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
