"""
Quantile solution types.

Contains the parameter payload and user-facing solution wrapper returned
by quantile_reduce() and median_reduce().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np

from pyorderstats.core.result import Result
from pyorderstats.quantile._methods import QuantileMethod


@dataclass(frozen=True)
class QuantileParams:
    """
    Parameter payload for a single quantile.

    value is None when the sequence is empty or entirely null.
    """
    value: np.floating[Any] | None
    quantile: float
    method: QuantileMethod
    dtype: str


@dataclass
class QuantileSolution:
    """
    User-facing quantile result.

    Wraps Result[QuantileParams] and provides convenient accessors.
    """
    _result: Result[QuantileParams]

    @property
    def value(self) -> np.floating[Any] | None:
        """The quantile, in the natural precision of the input."""
        return self._result.params.value

    @property
    def quantile(self) -> float:
        return self._result.params.quantile

    @property
    def method(self) -> QuantileMethod:
        return self._result.params.method

    @property
    def dtype(self) -> str:
        """Name of the result dtype ('float32' or 'float64')."""
        return self._result.params.dtype

    @property
    def is_null(self) -> bool:
        """True when there were no non-null values to select from."""
        return self._result.params.value is None

    @property
    def path(self) -> str:
        """'select' (partial selection) or 'sort' (sorted copy)."""
        return self._result.info['path']

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Short text report."""
        info = self._result.info
        value = "null" if self.is_null else f"{float(self.value):.6g}"
        lines = [
            f"Quantile ({self.method.value}, q={self.quantile:g})",
            f"  value:      {value} ({self.dtype})",
            f"  n:          {info['n']} ({info['null_count']} null)",
            f"  path:       {info['path']} [{self.backend_name}]",
        ]
        if info.get('base_index') is not None:
            span = f"{info['base_index']}"
            if info['interpolated']:
                span += f"..{info['base_index'] + 1}"
            lines.append(f"  positions:  {span}")
        for w in self.warnings:
            lines.append(f"  warning:    {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        value = "null" if self.is_null else f"{float(self.value):.6g}"
        return (
            f"QuantileSolution(q={self.quantile:g}, method={self.method.value}, "
            f"value={value}, path={self.path})"
        )
