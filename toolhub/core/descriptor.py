"""
Tool Descriptor (Core Data Model)
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel, ConfigDict, Field, field_validator

from toolhub.infra.logging import get_logger

logger = get_logger(__name__)

PRIMITIVE_TYPES = (str, int, float, bool)
NoneType = type(None)


def unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """
    Strip ``None`` from a union annotation.
    Returns the remaining annotation and whether ``None`` was present.
    """
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = get_args(annotation)
        remaining = tuple(m for m in members if m is not NoneType)
        admits_none = len(remaining) != len(members)
        if len(remaining) == 1:
            return remaining[0], admits_none
        return Union[remaining], admits_none
    return annotation, annotation is NoneType


@dataclass(frozen=True)
class ToolParameter:
    """A declared parameter of a tool callable."""
    name: str
    annotation: Any = inspect.Parameter.empty
    default: Any = inspect.Parameter.empty
    kind: inspect._ParameterKind = inspect.Parameter.POSITIONAL_OR_KEYWORD

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty

    @property
    def nullable(self) -> bool:
        """Whether ``None`` may be passed for this parameter."""
        if self.annotation in (inspect.Parameter.empty, Any, object):
            return True
        inner, admits_none = unwrap_optional(self.annotation)
        if admits_none:
            return True
        return inner not in PRIMITIVE_TYPES


@dataclass(frozen=True, eq=False)
class ToolTarget:
    """
    The invocable capability behind a tool.
    Holds the plain function, its ordered parameters and, for methods,
    the receiver the function is bound to.
    """
    func: Callable[..., Any]
    parameters: tuple[ToolParameter, ...] = ()
    receiver: Any = None

    @classmethod
    def from_callable(cls, obj: Callable[..., Any]) -> ToolTarget:
        receiver = None
        func = obj
        if inspect.ismethod(obj):
            receiver = obj.__self__
            func = obj.__func__

        try:
            hints = get_type_hints(func)
        except (NameError, TypeError) as e:
            # Unresolvable forward references: fall back to raw annotations
            logger.warning("type_hints_unresolved", callable=getattr(func, "__qualname__", repr(func)), error=str(e))
            hints = {}

        params = list(inspect.signature(func).parameters.values())
        if receiver is not None and params:
            params = params[1:]

        parameters = []
        for param in params:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            parameters.append(ToolParameter(
                name=param.name,
                annotation=hints.get(param.name, param.annotation),
                default=param.default,
                kind=param.kind,
            ))

        return cls(func=func, parameters=tuple(parameters), receiver=receiver)

    @property
    def method_name(self) -> str:
        return getattr(self.func, "__name__", type(self.func).__name__)

    def invoke(self, values: Sequence[Any]) -> Any:
        """Call the function with one value per declared parameter."""
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        if self.receiver is not None:
            args.append(self.receiver)
        for param, value in zip(self.parameters, values):
            if param.kind is inspect.Parameter.KEYWORD_ONLY:
                kwargs[param.name] = value
            else:
                args.append(value)
        return self.func(*args, **kwargs)


class ToolDescriptor(BaseModel):
    """
    Immutable metadata for a registered tool.

    ``timeout_ms``, ``cacheable`` and ``cache_ttl_seconds`` are advisory
    hints for layers above the registry; nothing here enforces them.
    """
    name: str
    description: str
    category: str = "general"
    version: str = "1.0"
    tags: frozenset[str] = Field(default_factory=frozenset)
    enabled: bool = True
    priority: int = 0
    requires_auth: bool = False
    timeout_ms: int = Field(default=0, ge=0)
    cacheable: bool = False
    cache_ttl_seconds: int = Field(default=300, ge=0)
    target: ToolTarget

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("name", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            return frozenset([value])
        return value

    @classmethod
    def from_callable(
        cls,
        func: Callable[..., Any],
        name: str | None = None,
        description: str | None = None,
        **options: Any
    ) -> ToolDescriptor:
        """Build a descriptor by introspecting a function or bound method."""
        return cls(
            name=name or getattr(func, "__name__", ""),
            description=description or inspect.getdoc(func) or "",
            target=ToolTarget.from_callable(func),
            **options
        )

    @property
    def parameters(self) -> tuple[ToolParameter, ...]:
        return self.target.parameters

    def __repr__(self) -> str:
        return (
            f"ToolDescriptor(name={self.name!r}, category={self.category!r}, "
            f"version={self.version!r}, priority={self.priority}, enabled={self.enabled}, "
            f"method={self.target.method_name!r})"
        )
