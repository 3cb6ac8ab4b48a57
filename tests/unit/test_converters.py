"""
Unit Test: Schema Generation
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from toolhub.adapters.converters import SchemaGenerator, json_kind
from toolhub.core.descriptor import ToolDescriptor, ToolParameter, ToolTarget


@dataclass
class Point:
    x: float
    y: float


def calculate_mortgage(principal: int, rate: float, years: int, fixed: bool, lender: str) -> float:
    """Calculates monthly mortgage payment."""
    return 0.0


def ping() -> str:
    """Ping."""
    return "pong"


def test_schema_types():
    schema = SchemaGenerator().generate(ToolTarget.from_callable(calculate_mortgage).parameters)

    assert schema["type"] == "object"
    assert schema["properties"] == {
        "principal": {"type": "integer"},
        "rate": {"type": "number"},
        "years": {"type": "integer"},
        "fixed": {"type": "boolean"},
        "lender": {"type": "string"},
    }


def test_zero_parameters_yield_minimal_schema():
    desc = ToolDescriptor.from_callable(ping)
    assert SchemaGenerator().for_descriptor(desc) == {"type": "object", "properties": {}}


def test_generation_failure_falls_back_to_minimal_schema():
    broken = [ToolParameter(name="")]
    assert SchemaGenerator().generate(broken) == {"type": "object", "properties": {}}
    assert SchemaGenerator().generate(None) == {"type": "object", "properties": {}}


def test_descriptor_failure_falls_back_to_minimal_schema():
    target = ToolTarget(func=ping, parameters=(ToolParameter(name=""),))
    broken = ToolDescriptor(name="broken", description="Broken tool.", target=target)
    assert SchemaGenerator().for_descriptor(broken) == {"type": "object", "properties": {}}


def test_json_kind_mapping():
    assert json_kind(Optional[int]) == "integer"
    assert json_kind(Decimal) == "number"
    assert json_kind(Point) == "object"
    assert json_kind(list[int]) == "object"
    assert json_kind(dict[str, Any]) == "object"
    assert json_kind(Any) == "object"
