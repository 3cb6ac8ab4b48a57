"""
Toolhub SDK: Tool Decorator & Scanner
"""

import inspect
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from toolhub.adapters.registry import ToolRegistry
from toolhub.callbacks.provider import ToolCallbackProvider
from toolhub.core.descriptor import ToolDescriptor
from toolhub.infra.logging import get_logger

logger = get_logger(__name__)

TOOL_MARKER = "__mcp_tool__"


class ToolOptions(BaseModel):
    """
    Options attached to a function by ``@mcp_tool``.
    Name and description fall back to the function name and docstring.
    """
    name: str | None = None
    description: str | None = None
    category: str = "general"
    version: str = "1.0"
    tags: tuple[str, ...] = ()
    enabled: bool = True
    priority: int = 0
    requires_auth: bool = False
    timeout_ms: int = Field(default=0, ge=0)
    cacheable: bool = False
    cache_ttl_seconds: int = Field(default=300, ge=0)

    def descriptor_for(self, func: Callable[..., Any]) -> ToolDescriptor:
        return ToolDescriptor.from_callable(
            func,
            **self.model_dump(exclude_none=True)
        )


def mcp_tool(
    description: str | None = None,
    *,
    name: str | None = None,
    category: str = "general",
    version: str = "1.0",
    tags: Iterable[str] = (),
    enabled: bool = True,
    priority: int = 0,
    requires_auth: bool = False,
    timeout_ms: int = 0,
    cacheable: bool = False,
    cache_ttl_seconds: int = 300
):
    """
    Mark a function or method as a tool. The function itself is returned
    unchanged; a ToolScanner turns the marker into a registration.

    Usage:
        class WeatherService:
            @mcp_tool("Get weather forecast", name="get_weather", category="weather")
            def forecast(self, latitude: float, longitude: float) -> str:
                ...
    """
    options = ToolOptions(
        name=name,
        description=description,
        category=category,
        version=version,
        tags=tuple(tags),
        enabled=enabled,
        priority=priority,
        requires_auth=requires_auth,
        timeout_ms=timeout_ms,
        cacheable=cacheable,
        cache_ttl_seconds=cache_ttl_seconds,
    )

    def deco(func):
        setattr(func, TOOL_MARKER, options)
        return func
    return deco


def tool_options(obj: Any) -> ToolOptions | None:
    if isinstance(obj, (staticmethod, classmethod)):
        obj = obj.__func__
    return getattr(obj, TOOL_MARKER, None)


class ToolScanner:
    """
    Discovers ``@mcp_tool`` callables on modules, classes or instances and
    feeds them to a registry, then refreshes the callback provider.
    """

    def __init__(self, registry: ToolRegistry, provider: ToolCallbackProvider | None = None):
        self.registry = registry
        self.provider = provider

    def discover(self, source: Any) -> list[ToolDescriptor]:
        """Build descriptors for every marked callable on ``source``."""
        descriptors = []
        for attr in dir(source):
            raw = inspect.getattr_static(source, attr, None)
            options = tool_options(raw)
            if options is None:
                continue
            if inspect.isclass(source) and inspect.isfunction(raw):
                # Instance methods need a receiver; scan an instance instead
                logger.debug("tool_scan_skipped_unbound", source=source.__name__, attribute=attr)
                continue

            member = getattr(source, attr)
            try:
                descriptors.append(options.descriptor_for(member))
            except ValidationError as e:
                logger.error(
                    "tool_scan_failed",
                    source=getattr(source, "__name__", type(source).__name__),
                    attribute=attr,
                    error=str(e),
                )
        return descriptors

    def scan(self, source: Any) -> list[ToolDescriptor]:
        """Register every marked callable on ``source``. Returns the ones that were stored."""
        registered = [d for d in self.discover(source) if self.registry.register(d)]
        if self.provider is not None:
            self.provider.refresh()
        return registered
