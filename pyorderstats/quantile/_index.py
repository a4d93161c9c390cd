"""
Order-statistic index for a quantile.

Both execution paths go through quantile_index(). The selection path calls
it with the buffer length and no nulls; the sort path calls it with the
full length and the null count, since nulls sort first and the non-null
order statistics occupy positions [null_count, length - 1].
"""

from __future__ import annotations

import math

from pyorderstats.quantile._methods import QuantileMethod


def _round_half_away(x: float) -> int:
    # x >= 0 here
    return int(math.floor(x + 0.5))


def quantile_index(
    quantile: float,
    length: int,
    null_count: int,
    method: QuantileMethod,
) -> tuple[int, float, int]:
    """
    Map a quantile to (base index, fractional index, top index).

    Parameters
    ----------
    quantile : float
        Fraction in [0, 1], already validated.
    length : int
        Total number of slots, nulls included.
    null_count : int
        Number of null slots; must be below length.
    method : QuantileMethod

    Returns
    -------
    (base, float_idx, top)
        base and top are positions in [0, length - 1]. When they differ,
        the result is an interpolation between the values at base and
        base + 1, weighted by float_idx - base.
    """
    nonnull_count = float(length - null_count)
    float_idx = (nonnull_count - 1.0) * quantile + null_count

    if method is QuantileMethod.NEAREST:
        idx = _round_half_away(float_idx)
        return idx, float_idx, idx

    if method is QuantileMethod.EQUIPROBABLE:
        idx = int(max(math.ceil(nonnull_count * quantile) - 1.0, 0.0)) + null_count
        return idx, float(idx), idx

    if method is QuantileMethod.HIGHER:
        base = math.ceil(float_idx)
    else:
        # lower, midpoint, linear
        base = int(float_idx)

    base = min(max(base, 0), length - 1)
    top = math.ceil(float_idx)
    return base, float_idx, top
