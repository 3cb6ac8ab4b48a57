"""
Method Tool Callback

Wraps one ToolDescriptor behind the uniform ``invoke(json) -> str``
contract: parse the argument envelope, coerce each declared parameter,
run the callable, render the result as text.
"""

import json
from functools import cached_property
from typing import Any

from pydantic_core import PydanticSerializationError, to_json

from toolhub.adapters.coercion import ArgumentCoercer
from toolhub.adapters.converters import SchemaGenerator
from toolhub.core.descriptor import ToolDescriptor
from toolhub.core.errors import ArgumentEnvelopeError, ResultSerializationError, ToolInvocationError
from toolhub.infra.logging import get_logger
from toolhub.protocol.mcp import ToolCallback

logger = get_logger(__name__)


class MethodToolCallback(ToolCallback):
    """
    ToolCallback for a registered descriptor.
    The receiver of a bound method lives on the descriptor's target, not here.
    """

    def __init__(
        self,
        descriptor: ToolDescriptor,
        coercer: ArgumentCoercer | None = None,
        schema_generator: SchemaGenerator | None = None
    ):
        if descriptor is None:
            raise ValueError("descriptor must not be None")
        self.descriptor = descriptor
        self.coercer = coercer or ArgumentCoercer()
        self.schema_generator = schema_generator or SchemaGenerator()

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def description(self) -> str:
        return self.descriptor.description

    @cached_property
    def input_schema(self) -> dict[str, Any]:
        return self.schema_generator.for_descriptor(self.descriptor)

    @property
    def input_type_schema(self) -> str:
        """The input schema as JSON text."""
        return json.dumps(self.input_schema)

    def invoke(self, arguments: str | None = None) -> str:
        logger.debug("tool_call_start", tool=self.name, arguments=arguments)
        try:
            parsed = self._parse_arguments(arguments)
            values = self.coercer.coerce_arguments(parsed, self.descriptor.parameters)
            result = self._execute(values)
            response = self._render(result)
        except Exception as e:
            logger.error("tool_call_failed", tool=self.name, error=str(e), error_type=type(e).__name__)
            return f"Error: {e}"

        logger.debug("tool_call_end", tool=self.name, response_length=len(response))
        return response

    def _parse_arguments(self, arguments: str | None) -> dict[str, Any]:
        if arguments is None or not arguments.strip() or arguments.strip() == "{}":
            return {}
        try:
            parsed = json.loads(arguments)
        except json.JSONDecodeError as e:
            logger.warning("tool_arguments_malformed", tool=self.name, arguments=arguments)
            raise ArgumentEnvelopeError(f"Malformed JSON arguments: {e}") from e
        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ArgumentEnvelopeError(
                f"Arguments must be a JSON object, got {type(parsed).__name__}"
            )
        return parsed

    def _execute(self, values: list[Any]) -> Any:
        try:
            return self.descriptor.target.invoke(values)
        except Exception as e:
            raise ToolInvocationError(str(e) or type(e).__name__) from e

    def _render(self, result: Any) -> str:
        if result is None:
            return "null"
        if isinstance(result, str):
            return result
        try:
            return to_json(result).decode("utf-8")
        except PydanticSerializationError as e:
            raise ResultSerializationError(
                f"Cannot serialize result of tool '{self.name}': {e}"
            ) from e

    def __repr__(self) -> str:
        return f"MethodToolCallback(name={self.name!r})"
