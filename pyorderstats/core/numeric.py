"""
Numeric representations supported by order-statistic computations.

Each supported numpy dtype gets one NumericKind carrying the capability set
the quantile algorithms need:

    - conversion of a stored value to float64
    - a total order, in which NaN sorts above every number
    - the natural floating precision of a result (float32 for float32
      input, float64 for everything else)

Booleans, strings and object data have no NumericKind; containers holding
them do not offer quantile at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyorderstats.core.exceptions import ValidationError


@dataclass(frozen=True)
class NumericKind:
    """
    Capability set of one numeric representation.

    Attributes:
        name: dtype name ('int32', 'float64', ...)
        dtype: Storage dtype
        is_float: Whether values may be NaN
        result_dtype: Natural floating precision of quantile results
    """
    name: str
    dtype: np.dtype
    is_float: bool
    result_dtype: np.dtype

    def to_float(self, value: Any) -> float:
        """Convert one stored value to a Python float (float64)."""
        return float(value)

    def narrow(self, value: float | None) -> np.floating[Any] | None:
        """Narrow a float64 result to this representation's precision."""
        if value is None:
            return None
        return self.result_dtype.type(value)

    def sort(self, values: NDArray) -> NDArray:
        """
        Sorted copy of null-free values under the total order.

        numpy places NaN after every number, which is the total order
        used throughout.
        """
        return np.sort(values, kind='stable')

    def total_min(self, values: NDArray) -> Any:
        """
        Smallest element of a non-empty buffer under the total order.

        ndarray.min propagates NaN, so for floats the NaNs are dropped
        unless nothing else is left.
        """
        low = values.min()
        if self.is_float and np.isnan(low):
            numbers = values[~np.isnan(values)]
            if numbers.size:
                low = numbers.min()
        return low


def _kind(dtype: type) -> NumericKind:
    dt = np.dtype(dtype)
    is_float = np.issubdtype(dt, np.floating)
    result = np.dtype(np.float32) if dt == np.float32 else np.dtype(np.float64)
    return NumericKind(name=dt.name, dtype=dt, is_float=is_float, result_dtype=result)


NUMERIC_KINDS: dict[str, NumericKind] = {
    k.name: k for k in (
        _kind(np.int8), _kind(np.int16), _kind(np.int32), _kind(np.int64),
        _kind(np.uint8), _kind(np.uint16), _kind(np.uint32), _kind(np.uint64),
        _kind(np.float32), _kind(np.float64),
    )
}


def is_numeric_dtype(dtype: Any) -> bool:
    """Whether a dtype has a NumericKind."""
    try:
        return np.dtype(dtype).name in NUMERIC_KINDS
    except TypeError:
        return False


def kind_for_dtype(dtype: Any) -> NumericKind:
    """
    Look up the NumericKind for a dtype.

    Raises:
        ValidationError: If the dtype has no numeric representation
    """
    try:
        name = np.dtype(dtype).name
    except TypeError as e:
        raise ValidationError(f"dtype: not understood: {dtype!r}") from e

    if name not in NUMERIC_KINDS:
        supported = ", ".join(sorted(NUMERIC_KINDS))
        raise ValidationError(
            f"dtype: {name} has no numeric representation. Supported: {supported}"
        )
    return NUMERIC_KINDS[name]
