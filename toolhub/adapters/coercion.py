"""
Argument Coercion

Maps loosely-typed JSON values onto the declared parameter types of a
tool callable. Intentionally permissive: numeric widening/narrowing,
numeric text, and liberal boolean literals are accepted.
"""

import inspect
import json
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any, get_origin

from pydantic import PydanticUserError, TypeAdapter

from toolhub.core.descriptor import ToolParameter, unwrap_optional
from toolhub.core.errors import ArgumentCoercionError

_TRUE_LITERALS = ("true", "1")
_FALSE_LITERALS = ("false", "0")


@lru_cache(maxsize=256)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ArgumentCoercer:
    """
    Converts raw argument values into the types a callable expects.
    """

    def coerce_arguments(
        self,
        arguments: Mapping[str, Any],
        parameters: Sequence[ToolParameter]
    ) -> list[Any]:
        """Coerce every declared parameter, in declared order."""
        values = []
        for param in parameters:
            if param.name not in arguments and param.has_default:
                values.append(param.default)
                continue
            values.append(self.coerce(arguments.get(param.name), param))
        return values

    def coerce(self, value: Any, param: ToolParameter) -> Any:
        name = param.name
        if value is None:
            if not param.nullable:
                raise ArgumentCoercionError(name, f"Cannot pass null to primitive parameter: {name}")
            return None

        target = param.annotation
        if target in (inspect.Parameter.empty, Any, object):
            return value
        target, _ = unwrap_optional(target)

        plain_class = get_origin(target) is None and isinstance(target, type)
        if plain_class and isinstance(value, target):
            # bool is an int, but never stands in for a number
            if not (isinstance(value, bool) and target is not bool):
                return value

        if target is str:
            return self._to_string(value)
        if target is int:
            return self._to_int(value, name)
        if target is float:
            return self._to_float(value, name)
        if target is bool:
            return self._to_bool(value, name)
        return self._to_structure(value, target, name)

    def _to_string(self, value: Any) -> str:
        return json.dumps(value, default=str)

    def _to_int(self, value: Any, name: str) -> int:
        try:
            if _is_number(value):
                return int(value)
            return int(str(value))
        except (ValueError, OverflowError):
            raise ArgumentCoercionError(name, f"Cannot convert parameter '{name}' to integer: {value}")

    def _to_float(self, value: Any, name: str) -> float:
        try:
            if _is_number(value):
                return float(value)
            return float(str(value))
        except (ValueError, OverflowError):
            raise ArgumentCoercionError(name, f"Cannot convert parameter '{name}' to float: {value}")

    def _to_bool(self, value: Any, name: str) -> bool:
        text = str(value).lower()
        if text in _TRUE_LITERALS:
            return True
        if text in _FALSE_LITERALS:
            return False
        raise ArgumentCoercionError(name, f"Cannot convert parameter '{name}' to boolean: {value}")

    def _to_structure(self, value: Any, target: Any, name: str) -> Any:
        """Round-trip through JSON text and validate as the target type."""
        try:
            payload = json.dumps(value)
            return _adapter(target).validate_json(payload)
        except (TypeError, ValueError, PydanticUserError) as e:
            raise ArgumentCoercionError(
                name,
                f"Cannot convert argument '{name}' from {type(value).__name__} to {_type_name(target)}"
            ) from e
