"""
Tests for QuantileRequest and QuantileMethod parsing.
"""

from dataclasses import FrozenInstanceError

import pytest

from pyorderstats.core.exceptions import InvalidQuantileError, ValidationError
from pyorderstats.quantile._methods import (
    DEFAULT_METHOD,
    INTERPOLATING_METHODS,
    QuantileMethod,
)
from pyorderstats.quantile.design import QuantileRequest


class TestQuantileMethod:

    def test_exactly_six_methods(self):
        assert {m.value for m in QuantileMethod} == {
            'nearest', 'lower', 'higher', 'midpoint', 'linear', 'equiprobable',
        }

    def test_parse_string(self):
        assert QuantileMethod.parse('midpoint') is QuantileMethod.MIDPOINT

    def test_parse_enum_passthrough(self):
        assert QuantileMethod.parse(QuantileMethod.LOWER) is QuantileMethod.LOWER

    def test_parse_uppercase(self):
        assert QuantileMethod.parse('EQUIPROBABLE') is QuantileMethod.EQUIPROBABLE

    def test_parse_unknown(self):
        with pytest.raises(ValidationError, match="'linear'"):
            QuantileMethod.parse('weibull')

    def test_str_enum_compares_to_string(self):
        assert QuantileMethod.LINEAR == 'linear'

    def test_only_midpoint_and_linear_interpolate(self):
        assert INTERPOLATING_METHODS == {QuantileMethod.MIDPOINT, QuantileMethod.LINEAR}

    def test_default_is_linear(self):
        assert DEFAULT_METHOD is QuantileMethod.LINEAR


class TestQuantileRequest:

    def test_defaults(self):
        req = QuantileRequest(0.5)
        assert req.quantile == 0.5
        assert req.method is QuantileMethod.LINEAR

    def test_method_parsed(self):
        assert QuantileRequest(0.5, 'higher').method is QuantileMethod.HIGHER

    def test_quantile_coerced_to_float(self):
        req = QuantileRequest(1)
        assert isinstance(req.quantile, float)

    @pytest.mark.parametrize("q", [-0.1, 1.1])
    def test_invalid_quantile(self, q):
        with pytest.raises(InvalidQuantileError) as excinfo:
            QuantileRequest(q)
        assert excinfo.value.quantile == q

    def test_invalid_method(self):
        with pytest.raises(ValidationError):
            QuantileRequest(0.5, 'bogus')

    def test_frozen(self):
        req = QuantileRequest(0.5)
        with pytest.raises(FrozenInstanceError):
            req.quantile = 0.7

    def test_repr(self):
        assert repr(QuantileRequest(0.25, 'nearest')) == "QuantileRequest(quantile=0.25, method='nearest')"
