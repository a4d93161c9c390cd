"""
Input validation utilities for pyorderstats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyorderstats.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidQuantileError,
)


def check_array(
    array: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Unlike numeric
    pipelines, integer, boolean and string dtypes are kept as they are:
    the container class is chosen from the dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target dtype, or None to let numpy infer it

    Returns:
        numpy.ndarray

    Raises:
        ValidationError: If input cannot be converted to an array
    """
    try:
        result = np.asarray(array, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    return result


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_mask(mask: ArrayLike, length: int, name: str) -> NDArray[np.bool_]:
    """
    Validate a validity mask (True = value present).

    Args:
        mask: Mask to validate
        length: Required length
        name: Parameter name for error messages

    Returns:
        1D boolean array

    Raises:
        ValidationError: If mask is not boolean
        DimensionError: If mask is not 1D or has the wrong length
    """
    result = np.asarray(mask)
    if result.dtype != np.bool_:
        raise ValidationError(f"{name}: expected boolean mask, got dtype {result.dtype}")
    check_1d(result, name)
    if result.shape[0] != length:
        raise DimensionError(
            f"{name}: length {result.shape[0]} does not match values length {length}"
        )
    return result


def check_quantile(quantile: float, name: str = "quantile") -> float:
    """
    Verify a quantile fraction lies in [0, 1].

    Args:
        quantile: Value to check
        name: Parameter name for error messages

    Returns:
        The quantile as a Python float

    Raises:
        InvalidQuantileError: If the value is not a real number in [0, 1]
    """
    try:
        q = float(quantile)
    except (TypeError, ValueError) as e:
        raise InvalidQuantileError(
            f"{name}: expected a number in [0, 1], got {quantile!r}", quantile=None
        ) from e

    if math.isnan(q) or not 0.0 <= q <= 1.0:
        raise InvalidQuantileError(
            f"{name}: should be between 0.0 and 1.0, got {q}", quantile=q
        )
    return q
