"""Blending of two neighbouring order statistics."""

from __future__ import annotations

from pyorderstats.quantile._methods import QuantileMethod


def linear_interpol(lower: float, upper: float, idx: int, float_idx: float) -> float:
    if lower == upper:
        # avoids cancellation when both neighbours are the same value
        return lower
    proportion = float_idx - idx
    return proportion * (upper - lower) + lower


def midpoint_interpol(lower: float, upper: float) -> float:
    if lower == upper:
        return lower
    return (lower + upper) / 2.0


def interpolate(
    method: QuantileMethod,
    lower: float,
    upper: float,
    idx: int,
    float_idx: float,
) -> float:
    """
    Combine the order statistics at idx and idx + 1.

    Only midpoint and linear blend; every other method returns lower.
    """
    if method is QuantileMethod.LINEAR:
        return linear_interpol(lower, upper, idx, float_idx)
    if method is QuantileMethod.MIDPOINT:
        return midpoint_interpol(lower, upper)
    return lower
