"""
Tool Converters (Schema Generation)
"""

import decimal
import inspect
from collections.abc import Sequence
from typing import Any, get_origin

from toolhub.core.descriptor import ToolDescriptor, ToolParameter, unwrap_optional
from toolhub.core.errors import SchemaGenerationError
from toolhub.infra.logging import get_logger

logger = get_logger(__name__)


def minimal_schema() -> dict[str, Any]:
    return {"type": "object", "properties": {}}


def json_kind(py_type: Any) -> str:
    """Map a Python annotation to a JSON Schema primitive kind."""
    py_type, _ = unwrap_optional(py_type)
    if get_origin(py_type) is not None or not isinstance(py_type, type):
        return "object"
    # bool is a subclass of int, test it first
    if issubclass(py_type, bool):
        return "boolean"
    if issubclass(py_type, int):
        return "integer"
    if issubclass(py_type, (float, decimal.Decimal)):
        return "number"
    if issubclass(py_type, str):
        return "string"
    return "object"


class SchemaGenerator:
    """
    Converts a callable's declared parameters into a JSON-schema-like
    input description. Never fails: any error yields the minimal schema.
    """

    def generate(self, parameters: Sequence[ToolParameter], tool: str | None = None) -> dict[str, Any]:
        try:
            return self._build(parameters)
        except Exception as e:
            logger.warning("schema_generation_failed", tool=tool, error=str(e))
            return minimal_schema()

    def for_descriptor(self, descriptor: ToolDescriptor) -> dict[str, Any]:
        return self.generate(descriptor.parameters, tool=descriptor.name)

    def _build(self, parameters: Sequence[ToolParameter]) -> dict[str, Any]:
        if parameters is None:
            raise SchemaGenerationError("parameter list is missing")

        properties = {}
        for param in parameters:
            if not param.name:
                raise SchemaGenerationError("parameter without a name")
            annotation = param.annotation
            if annotation is inspect.Parameter.empty:
                annotation = Any
            properties[param.name] = {"type": json_kind(annotation)}

        return {
            "type": "object",
            "properties": properties
        }
