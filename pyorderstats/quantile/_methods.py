"""
Quantile methods.

How a quantile fraction picks, or blends, order statistics:

    nearest       the order statistic closest to (m-1)*q
    lower         the order statistic at floor((m-1)*q)
    higher        the order statistic at ceil((m-1)*q)
    midpoint      mean of the lower and higher order statistics
    linear        linear interpolation between them (numpy/R type 7)
    equiprobable  the order statistic at ceil(m*q) - 1 (inverse CDF)

where m is the number of non-null values.
"""

from __future__ import annotations

from enum import Enum

from pyorderstats.core.exceptions import ValidationError


class QuantileMethod(str, Enum):
    NEAREST = 'nearest'
    LOWER = 'lower'
    HIGHER = 'higher'
    MIDPOINT = 'midpoint'
    LINEAR = 'linear'
    EQUIPROBABLE = 'equiprobable'

    @classmethod
    def parse(cls, method: QuantileMethod | str) -> QuantileMethod:
        """
        Accept a QuantileMethod or its lowercase name.

        Raises:
            ValidationError: If the name is not a known method
        """
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).lower())
        except ValueError:
            valid = ", ".join(repr(m.value) for m in cls)
            raise ValidationError(
                f"Unknown quantile method: {method!r}. Must be one of {valid}."
            ) from None


# Methods that may blend two neighbouring order statistics
INTERPOLATING_METHODS = frozenset({QuantileMethod.MIDPOINT, QuantileMethod.LINEAR})

DEFAULT_METHOD = QuantileMethod.LINEAR

MEDIAN_QUANTILE = 0.5
