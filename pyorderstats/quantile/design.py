"""
QuantileRequest: what to compute.

Validation happens here, once, before either execution path runs. The
helpers downstream assume an in-range quantile and a parsed method.
"""

from __future__ import annotations

from dataclasses import dataclass

from pyorderstats.core.validation import check_quantile
from pyorderstats.quantile._methods import QuantileMethod, DEFAULT_METHOD


@dataclass(frozen=True)
class QuantileRequest:
    """
    Immutable (quantile, method) pair.

    Construction:
        QuantileRequest(0.9, 'nearest')

    Raises:
        InvalidQuantileError: If quantile is outside [0, 1]
        ValidationError: If method is not a known method name
    """
    quantile: float
    method: QuantileMethod = DEFAULT_METHOD

    def __post_init__(self):
        object.__setattr__(self, 'quantile', check_quantile(self.quantile))
        object.__setattr__(self, 'method', QuantileMethod.parse(self.method))

    def __repr__(self) -> str:
        return f"QuantileRequest(quantile={self.quantile}, method={self.method.value!r})"
