"""
Unit Test: Argument Coercion
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from toolhub.adapters.coercion import ArgumentCoercer
from toolhub.core.descriptor import ToolParameter
from toolhub.core.errors import ArgumentCoercionError


@dataclass
class Point:
    x: float
    y: float


@pytest.fixture
def coercer() -> ArgumentCoercer:
    return ArgumentCoercer()


def test_integer_from_text(coercer):
    assert coercer.coerce("42", ToolParameter("n", int)) == 42


def test_integer_truncates_floats(coercer):
    assert coercer.coerce(3.9, ToolParameter("n", int)) == 3


def test_integer_parse_failure_names_parameter(coercer):
    with pytest.raises(ArgumentCoercionError) as exc:
        coercer.coerce("forty", ToolParameter("count", int))
    assert exc.value.parameter == "count"
    assert "count" in str(exc.value)
    assert "forty" in str(exc.value)


def test_bool_is_not_a_number(coercer):
    with pytest.raises(ArgumentCoercionError):
        coercer.coerce(True, ToolParameter("n", int))


def test_float_widening_and_text(coercer):
    assert coercer.coerce(3, ToolParameter("x", float)) == 3.0
    assert isinstance(coercer.coerce(3, ToolParameter("x", float)), float)
    assert coercer.coerce("47.6062", ToolParameter("x", float)) == pytest.approx(47.6062)


@pytest.mark.parametrize("raw", ["true", "1", "TRUE", True, 1])
def test_boolean_true_literals(coercer, raw):
    assert coercer.coerce(raw, ToolParameter("flag", bool)) is True


@pytest.mark.parametrize("raw", ["false", "0", "False", False, 0])
def test_boolean_false_literals(coercer, raw):
    assert coercer.coerce(raw, ToolParameter("flag", bool)) is False


def test_boolean_rejects_other_text(coercer):
    with pytest.raises(ArgumentCoercionError):
        coercer.coerce("yes", ToolParameter("flag", bool))


def test_null_into_primitive_fails(coercer):
    with pytest.raises(ArgumentCoercionError):
        coercer.coerce(None, ToolParameter("n", int))


def test_null_into_nullable_passes(coercer):
    assert coercer.coerce(None, ToolParameter("n", Optional[int])) is None
    assert coercer.coerce(None, ToolParameter("payload", dict)) is None


def test_optional_coerces_inner_type(coercer):
    assert coercer.coerce("7", ToolParameter("n", Optional[int])) == 7


def test_string_target_renders_text(coercer):
    param = ToolParameter("s", str)
    assert coercer.coerce("abc", param) == "abc"
    assert coercer.coerce(12, param) == "12"
    assert coercer.coerce(True, param) == "true"


def test_structural_conversion(coercer):
    point = coercer.coerce({"x": 1, "y": "2.5"}, ToolParameter("p", Point))
    assert point == Point(x=1.0, y=2.5)
    assert coercer.coerce(["1", 2], ToolParameter("ids", list[int])) == [1, 2]


def test_structural_conversion_failure(coercer):
    with pytest.raises(ArgumentCoercionError) as exc:
        coercer.coerce("not a point", ToolParameter("p", Point))
    assert "'p'" in str(exc.value)
    assert "str" in str(exc.value)
    assert "Point" in str(exc.value)


def test_untyped_parameter_passes_through(coercer):
    value = {"nested": [1, 2]}
    assert coercer.coerce(value, ToolParameter("anything")) is value


def test_coerce_arguments_in_declared_order(coercer):
    params = (ToolParameter("a", int), ToolParameter("b", str), ToolParameter("c", float, default=1.5))
    assert coercer.coerce_arguments({"b": 5, "a": "1"}, params) == [1, "5", 1.5]


def test_missing_required_primitive_fails(coercer):
    with pytest.raises(ArgumentCoercionError):
        coercer.coerce_arguments({}, (ToolParameter("a", int),))
