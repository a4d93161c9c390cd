"""
Nullable sequence containers.

A NullableArray is the "I have values, some of them missing" abstraction
the order-statistic algorithms read from. It stores one or more numpy
chunks, each with an optional boolean validity mask (True = value
present), plus a sorted-ascending flag.

Usage:
    from pyorderstats import from_values

    seq = from_values([3, None, 1, 2])
    seq.null_count               # 1
    seq.median()                 # 2.0

    seq = from_values(np.array([0.5, 0.1], dtype=np.float32))
    seq.quantile(0.25, 'nearest')  # np.float32(0.1)

Container classes are chosen from the dtype. NumericArray (integer and
floating widths) carries quantile/median; BooleanArray and StringArray do
not.

Ownership: building from a numpy array does not copy it. The consuming
quantile calls partition that array in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyorderstats.core.exceptions import ValidationError
from pyorderstats.core.capabilities import (
    CAPABILITY_CONTIGUOUS,
    CAPABILITY_NULL_FREE,
    CAPABILITY_SORTED_ASCENDING,
    CAPABILITY_QUANTILE,
)
from pyorderstats.core.numeric import NumericKind, is_numeric_dtype, kind_for_dtype
from pyorderstats.core.validation import check_array, check_1d, check_mask

if TYPE_CHECKING:
    import pandas as pd


@dataclass(eq=False)
class NullableArray:
    """
    Chunked 1D values with a validity mask per chunk.

    Construct via from_values(), from_chunks() or from_pandas(), not
    directly.
    """
    _chunks: tuple[NDArray[Any], ...]
    _validity: tuple[NDArray[np.bool_] | None, ...]
    _sorted_ascending: bool = False

    # === Collaborator interface ===

    def __len__(self) -> int:
        return sum(int(c.shape[0]) for c in self._chunks)

    @property
    def null_count(self) -> int:
        """Number of null slots."""
        return sum(int(v.size - np.count_nonzero(v)) for v in self._validity if v is not None)

    @property
    def is_sorted_ascending(self) -> bool:
        """Whether the sequence is flagged as sorted ascending (nulls first)."""
        return self._sorted_ascending

    def set_sorted_ascending(self, flag: bool = True) -> None:
        """
        Set the sorted flag.

        The flag is trusted, not verified. Setting it on unsorted data
        gives wrong order statistics.
        """
        self._sorted_ascending = bool(flag)

    def contiguous_nonnull_buffer(self) -> NDArray[Any] | None:
        """
        The values as one contiguous buffer, or None.

        The returned array is the stored chunk itself, not a copy.
        """
        if len(self._chunks) != 1 or self.null_count:
            return None
        chunk = self._chunks[0]
        if not chunk.flags.c_contiguous:
            return None
        return chunk

    def sorted_ascending_copy(self) -> NullableArray:
        """
        New sequence sorted ascending.

        Nulls come first, followed by the values in ascending order. For
        floating data NaN follows every number.
        """
        z = self.null_count
        values = self._sort_values(self.nonnull_values())
        if z:
            filler = np.zeros(z, dtype=values.dtype)
            values = np.concatenate([filler, values])
            validity = np.concatenate([
                np.zeros(z, dtype=np.bool_),
                np.ones(values.shape[0] - z, dtype=np.bool_),
            ])
        else:
            validity = None
        return type(self)(_chunks=(values,), _validity=(validity,), _sorted_ascending=True)

    def get_at(self, index: int) -> Any:
        """
        Value at a position, or None for a null slot.

        Raises:
            IndexError: If index is outside [0, len - 1]
        """
        n = len(self)
        if not 0 <= index < n:
            raise IndexError(f"index {index} out of range for sequence of length {n}")

        offset = index
        for chunk, valid in zip(self._chunks, self._validity):
            if offset < chunk.shape[0]:
                if valid is not None and not valid[offset]:
                    return None
                return chunk[offset]
            offset -= chunk.shape[0]
        raise IndexError(f"index {index} out of range for sequence of length {n}")

    # === Properties ===

    @property
    def dtype(self) -> np.dtype:
        """Storage dtype shared by all chunks."""
        return self._chunks[0].dtype

    @property
    def n_chunks(self) -> int:
        """Number of storage chunks."""
        return len(self._chunks)

    def supports(self, capability: str) -> bool:
        """
        Check if this sequence supports a capability.

        Args:
            capability: Use constants from pyorderstats.core.capabilities

        Returns:
            True if supported, False otherwise

        Note:
            Unknown capabilities return False, never raise.
        """
        if capability == CAPABILITY_CONTIGUOUS:
            return len(self._chunks) == 1 and bool(self._chunks[0].flags.c_contiguous)
        if capability == CAPABILITY_NULL_FREE:
            return self.null_count == 0
        if capability == CAPABILITY_SORTED_ASCENDING:
            return self._sorted_ascending
        if capability == CAPABILITY_QUANTILE:
            return hasattr(self, 'quantile')
        return False

    # === Data access ===

    def nonnull_values(self) -> NDArray[Any]:
        """Non-null values in current order, as a new array."""
        parts = [c if v is None else c[v] for c, v in zip(self._chunks, self._validity)]
        return np.concatenate(parts)

    def to_list(self) -> list[Any]:
        """Python list with None for null slots."""
        out: list[Any] = []
        for chunk, valid in zip(self._chunks, self._validity):
            items = chunk.tolist()
            if valid is None:
                out.extend(items)
            else:
                out.extend(x if ok else None for x, ok in zip(items, valid.tolist()))
        return out

    def _sort_values(self, values: NDArray[Any]) -> NDArray[Any]:
        return np.sort(values, kind='stable')

    def __repr__(self) -> str:
        parts = [f"n={len(self)}", f"dtype={self.dtype.name}"]
        if self.null_count:
            parts.append(f"nulls={self.null_count}")
        if len(self._chunks) > 1:
            parts.append(f"chunks={len(self._chunks)}")
        if self._sorted_ascending:
            parts.append("sorted")
        return f"{type(self).__name__}({', '.join(parts)})"


class NumericArray(NullableArray):
    """Integer or floating sequence. Supports quantile and median."""

    @property
    def kind(self) -> NumericKind:
        """Numeric representation of the stored values."""
        return kind_for_dtype(self.dtype)

    def _sort_values(self, values: NDArray[Any]) -> NDArray[Any]:
        return self.kind.sort(values)

    def quantile(self, quantile: float, method: str = 'linear') -> np.floating[Any] | None:
        """
        Quantile of the non-null values.

        Args:
            quantile: Fraction in [0, 1]
            method: 'nearest', 'lower', 'higher', 'midpoint', 'linear'
                or 'equiprobable'

        Returns:
            float32 for float32 data, float64 otherwise; None when the
            sequence is empty or entirely null

        Raises:
            InvalidQuantileError: If quantile is outside [0, 1]
        """
        from pyorderstats.quantile.solvers import quantile as _quantile
        return _quantile(self, quantile, method)

    def median(self) -> np.floating[Any] | None:
        """Median (linear quantile at 0.5) of the non-null values."""
        from pyorderstats.quantile.solvers import median as _median
        return _median(self)

    def quantile_consuming(self, quantile: float, method: str = 'linear') -> np.floating[Any] | None:
        """
        Like quantile(), but may reorder this sequence's buffer in place.

        After the call the element order is unspecified; the values
        themselves are unchanged.
        """
        from pyorderstats.quantile.solvers import quantile_consuming as _consuming
        return _consuming(self, quantile, method)

    def median_consuming(self) -> np.floating[Any] | None:
        """Like median(), but may reorder this sequence's buffer in place."""
        from pyorderstats.quantile.solvers import median_consuming as _consuming
        return _consuming(self)


class BooleanArray(NullableArray):
    """Boolean sequence. Has no numeric order, so no quantile."""
    pass


class StringArray(NullableArray):
    """String sequence. Has no numeric order, so no quantile."""
    pass


# === Factories ===


def _class_for_dtype(dtype: np.dtype) -> type[NullableArray]:
    if dtype == np.bool_:
        return BooleanArray
    if dtype.kind in ('U', 'S'):
        return StringArray
    if is_numeric_dtype(dtype):
        return NumericArray
    raise ValidationError(f"values: unsupported dtype {dtype}")


def _split_nulls(values: Any, dtype: Any) -> tuple[NDArray[Any], NDArray[np.bool_] | None]:
    """Turn a Python list with None entries into (values, validity)."""
    if not isinstance(values, (list, tuple)) or not any(v is None for v in values):
        arr = check_array(values, "values", dtype=dtype)
        check_1d(arr, "values")
        return arr, None

    validity = np.array([v is not None for v in values], dtype=np.bool_)
    present = [v for v in values if v is not None]
    if not present and dtype is None:
        dtype = np.float64
    arr = check_array(present, "values", dtype=dtype)
    check_1d(arr, "values")
    full = np.zeros(len(values), dtype=arr.dtype)
    full[validity] = arr
    return full, validity


def _merge_mask(
    validity: NDArray[np.bool_] | None,
    mask: ArrayLike | None,
    length: int,
) -> NDArray[np.bool_] | None:
    if mask is not None:
        mask = check_mask(mask, length, "mask")
        validity = mask if validity is None else validity & mask
    if validity is not None and validity.all():
        return None
    return validity


def from_values(
    values: ArrayLike,
    dtype: Any = None,
    *,
    mask: ArrayLike | None = None,
    sorted_ascending: bool = False,
) -> NullableArray:
    """
    Build a single-chunk sequence.

    Parameters
    ----------
    values : array-like
        1D values. None entries in a Python list become nulls. A numpy
        array is used as storage without copying.
    dtype : dtype, optional
        Storage dtype. Inferred by numpy if omitted.
    mask : array-like of bool, optional
        Validity mask, True where a value is present.
    sorted_ascending : bool
        Flag the sequence as already sorted ascending (nulls first).
        Trusted, not verified.

    Returns
    -------
    NumericArray, BooleanArray or StringArray depending on dtype.
    """
    arr, validity = _split_nulls(values, dtype)
    validity = _merge_mask(validity, mask, arr.shape[0])
    cls = _class_for_dtype(arr.dtype)
    return cls(_chunks=(arr,), _validity=(validity,), _sorted_ascending=bool(sorted_ascending))


def from_chunks(chunks: Iterable[ArrayLike], dtype: Any = None) -> NullableArray:
    """
    Build a multi-chunk sequence.

    Each chunk may be a numpy array or a Python list with None entries.
    Chunks are cast to a common dtype. A sequence with more than one
    chunk never exposes a contiguous buffer.
    """
    parts = [_split_nulls(c, dtype) for c in chunks]
    if not parts:
        raise ValidationError("chunks: need at least one chunk")

    common = np.result_type(*(arr.dtype for arr, _ in parts))
    arrays = tuple(arr if arr.dtype == common else arr.astype(common) for arr, _ in parts)
    validity = tuple(_merge_mask(v, None, a.shape[0]) for a, (_, v) in zip(arrays, parts))
    cls = _class_for_dtype(common)
    return cls(_chunks=arrays, _validity=validity)


def from_pandas(series: 'pd.Series') -> NullableArray:
    """
    Build a sequence from a pandas Series.

    Missing entries as reported by Series.isna() become nulls, so for
    plain float64 series NaN counts as missing. Nullable extension dtypes
    (Int64, Float32, boolean, ...) map to their numpy storage dtype.
    """
    missing = np.asarray(series.isna(), dtype=np.bool_)
    dtype = getattr(series.dtype, 'numpy_dtype', series.dtype)

    try:
        np_dtype = np.dtype(dtype)
    except TypeError:
        np_dtype = np.dtype(object)

    if np_dtype == np.bool_ or is_numeric_dtype(np_dtype):
        values = series.to_numpy(dtype=np_dtype, na_value=np_dtype.type(0))
        return from_values(values, mask=~missing)

    if np_dtype.kind not in ('O', 'U', 'S'):
        raise ValidationError(f"series: unsupported dtype {series.dtype}")

    items = [None if m else str(v) for v, m in zip(series.tolist(), missing.tolist())]
    if all(v is None for v in items):
        return from_values(items, dtype=np.str_)
    return from_values(items)
