"""
Tests for nullable sequence containers.

Validates:
    - Factory functions pick the class from the dtype
    - Null bookkeeping from None entries and explicit masks
    - contiguous_nonnull_buffer() exposure rules
    - sorted_ascending_copy() ordering (nulls first, NaN last)
    - get_at() across chunks and null slots
    - Capability checks, including absence of quantile on bool/str
"""

import math

import numpy as np
import pytest

from pyorderstats.core.capabilities import (
    CAPABILITY_CONTIGUOUS,
    CAPABILITY_NULL_FREE,
    CAPABILITY_QUANTILE,
    CAPABILITY_SORTED_ASCENDING,
)
from pyorderstats.core.exceptions import DimensionError, ValidationError
from pyorderstats.core.protocols import NullableSequence, SupportsQuantile
from pyorderstats.core.sequence import (
    BooleanArray,
    NumericArray,
    StringArray,
    from_chunks,
    from_pandas,
    from_values,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestFromValues:

    def test_int_list(self):
        seq = from_values([3, 1, 2])
        assert isinstance(seq, NumericArray)
        assert seq.dtype == np.int64
        assert len(seq) == 3
        assert seq.null_count == 0

    def test_none_becomes_null(self):
        seq = from_values([1.5, None, 2.5])
        assert seq.null_count == 1
        assert seq.to_list() == [1.5, None, 2.5]

    def test_explicit_dtype(self):
        seq = from_values([1, 2], dtype=np.float32)
        assert seq.dtype == np.float32
        assert seq.kind.result_dtype == np.float32

    def test_mask(self):
        seq = from_values(np.array([1, 2, 3]), mask=[True, False, True])
        assert seq.null_count == 1
        assert seq.to_list() == [1, None, 3]

    def test_mask_combined_with_none(self):
        seq = from_values([1, None, 3, 4], mask=np.array([True, True, False, True]))
        assert seq.null_count == 2
        assert seq.to_list() == [1, None, None, 4]

    def test_all_true_mask_has_no_nulls(self):
        arr = np.array([1.0, 2.0])
        seq = from_values(arr, mask=[True, True])
        assert seq.null_count == 0
        assert seq.contiguous_nonnull_buffer() is arr

    def test_all_none_defaults_to_float64(self):
        seq = from_values([None, None])
        assert isinstance(seq, NumericArray)
        assert seq.dtype == np.float64
        assert seq.null_count == len(seq) == 2

    def test_empty(self):
        seq = from_values([])
        assert len(seq) == 0
        assert seq.null_count == 0

    def test_sorted_flag(self):
        seq = from_values([1, 2, 3], sorted_ascending=True)
        assert seq.is_sorted_ascending
        assert seq.supports(CAPABILITY_SORTED_ASCENDING)

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            from_values(np.zeros((3, 2)))

    def test_mask_length_mismatch(self):
        with pytest.raises(DimensionError):
            from_values([1, 2, 3], mask=[True, False])

    def test_unsupported_dtype(self):
        with pytest.raises(ValidationError, match="unsupported dtype"):
            from_values(np.array([1.0], dtype=np.float16))

    def test_bool(self):
        seq = from_values([True, None, False])
        assert isinstance(seq, BooleanArray)
        assert seq.null_count == 1

    def test_strings(self):
        seq = from_values(["b", "a", None])
        assert isinstance(seq, StringArray)
        assert seq.null_count == 1


class TestFromChunks:

    def test_common_dtype(self):
        seq = from_chunks([[1, 2], np.array([3.5])])
        assert seq.dtype == np.float64
        assert seq.n_chunks == 2
        assert seq.to_list() == [1.0, 2.0, 3.5]

    def test_nulls_per_chunk(self):
        seq = from_chunks([[1, None], [None, 4, 5]])
        assert seq.null_count == 2
        assert len(seq) == 5

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="at least one chunk"):
            from_chunks([])

    def test_never_contiguous(self):
        seq = from_chunks([np.array([1.0, 2.0]), np.array([3.0])])
        assert seq.contiguous_nonnull_buffer() is None
        assert not seq.supports(CAPABILITY_CONTIGUOUS)


# ═══════════════════════════════════════════════════════════════════════
# Collaborator interface
# ═══════════════════════════════════════════════════════════════════════


class TestContiguousBuffer:

    def test_returns_storage_itself(self):
        arr = np.array([3.0, 1.0, 2.0])
        seq = from_values(arr)
        assert seq.contiguous_nonnull_buffer() is arr

    def test_none_with_nulls(self):
        assert from_values([1, None]).contiguous_nonnull_buffer() is None

    def test_none_for_strided_view(self):
        arr = np.arange(10.0)[::2]
        seq = from_values(arr)
        assert seq.null_count == 0
        assert seq.contiguous_nonnull_buffer() is None

    def test_empty_is_contiguous(self):
        buf = from_values(np.array([], dtype=np.int32)).contiguous_nonnull_buffer()
        assert buf is not None
        assert buf.size == 0


class TestSortedCopy:

    def test_nulls_first(self):
        seq = from_values([3, None, 1, None, 2])
        out = seq.sorted_ascending_copy()
        assert out.to_list() == [None, None, 1, 2, 3]
        assert out.is_sorted_ascending
        assert out.null_count == 2

    def test_nan_last(self):
        seq = from_values([2.0, math.nan, None, -1.0])
        out = seq.sorted_ascending_copy().to_list()
        assert out[:3] == [None, -1.0, 2.0]
        assert math.isnan(out[3])

    def test_original_unchanged(self):
        arr = np.array([3, 1, 2])
        seq = from_values(arr)
        seq.sorted_ascending_copy()
        np.testing.assert_array_equal(arr, [3, 1, 2])
        assert not seq.is_sorted_ascending

    def test_keeps_class_and_dtype(self):
        seq = from_values(np.array([3, 1], dtype=np.uint16))
        out = seq.sorted_ascending_copy()
        assert isinstance(out, NumericArray)
        assert out.dtype == np.uint16

    def test_multi_chunk(self):
        seq = from_chunks([[5, None], [1, 3]])
        assert seq.sorted_ascending_copy().to_list() == [None, 1, 3, 5]

    def test_strings(self):
        seq = from_values(["b", None, "a"])
        assert seq.sorted_ascending_copy().to_list() == [None, "a", "b"]


class TestGetAt:

    def test_value(self):
        seq = from_values([10, 20, 30])
        assert seq.get_at(1) == 20

    def test_null_slot(self):
        assert from_values([10, None]).get_at(1) is None

    def test_across_chunks(self):
        seq = from_chunks([[1, 2], [None, 4]])
        assert seq.get_at(1) == 2
        assert seq.get_at(2) is None
        assert seq.get_at(3) == 4

    @pytest.mark.parametrize("index", [-1, 3])
    def test_out_of_range(self, index):
        with pytest.raises(IndexError):
            from_values([1, 2, 3]).get_at(index)


class TestSupports:

    def test_null_free(self):
        assert from_values([1, 2]).supports(CAPABILITY_NULL_FREE)
        assert not from_values([1, None]).supports(CAPABILITY_NULL_FREE)

    def test_unknown_capability_false(self):
        assert from_values([1]).supports("gpu_native") is False

    def test_set_sorted(self):
        seq = from_values([1, 2])
        seq.set_sorted_ascending()
        assert seq.is_sorted_ascending
        seq.set_sorted_ascending(False)
        assert not seq.is_sorted_ascending


# ═══════════════════════════════════════════════════════════════════════
# Quantile capability by type
# ═══════════════════════════════════════════════════════════════════════


class TestQuantileCapability:

    @pytest.mark.parametrize("values", [[1, 2], [1.0, 2.0], np.array([1, 2], dtype=np.uint8)])
    def test_numeric_supports_quantile(self, values):
        seq = from_values(values)
        assert isinstance(seq, SupportsQuantile)
        assert seq.supports(CAPABILITY_QUANTILE)

    @pytest.mark.parametrize("values", [[True, False], ["a", "b"]])
    def test_non_numeric_has_no_quantile(self, values):
        seq = from_values(values)
        assert not isinstance(seq, SupportsQuantile)
        assert not hasattr(seq, "quantile")
        assert not hasattr(seq, "median")
        assert not seq.supports(CAPABILITY_QUANTILE)

    @pytest.mark.parametrize("values", [[True, False], ["a", "b"], [1, 2]])
    def test_all_are_nullable_sequences(self, values):
        assert isinstance(from_values(values), NullableSequence)


class TestRepr:

    def test_plain(self):
        assert repr(from_values([1, 2])) == "NumericArray(n=2, dtype=int64)"

    def test_nulls_chunks_sorted(self):
        seq = from_chunks([[1, None], [3]])
        seq.set_sorted_ascending()
        assert repr(seq) == "NumericArray(n=3, dtype=int64, nulls=1, chunks=2, sorted)"


# ═══════════════════════════════════════════════════════════════════════
# pandas interop
# ═══════════════════════════════════════════════════════════════════════


class TestFromPandas:

    @pytest.fixture
    def pd(self):
        return pytest.importorskip("pandas")

    def test_nullable_int(self, pd):
        seq = from_pandas(pd.Series([3, None, 1], dtype="Int64"))
        assert isinstance(seq, NumericArray)
        assert seq.dtype == np.int64
        assert seq.to_list() == [3, None, 1]

    def test_float_nan_is_missing(self, pd):
        seq = from_pandas(pd.Series([1.0, np.nan, 2.0]))
        assert seq.null_count == 1
        assert seq.dtype == np.float64

    def test_float32(self, pd):
        seq = from_pandas(pd.Series([1.0, 2.0], dtype=np.float32))
        assert seq.dtype == np.float32

    def test_boolean(self, pd):
        seq = from_pandas(pd.Series([True, None, False], dtype="boolean"))
        assert isinstance(seq, BooleanArray)
        assert seq.null_count == 1

    def test_strings(self, pd):
        seq = from_pandas(pd.Series(["x", None, "y"]))
        assert isinstance(seq, StringArray)
        assert seq.to_list() == ["x", None, "y"]

    def test_datetime_rejected(self, pd):
        with pytest.raises(ValidationError, match="unsupported dtype"):
            from_pandas(pd.Series(pd.to_datetime(["2024-01-01", "2024-01-02"])))
