"""
Tool Callback Provider
"""

import json
import threading
from collections.abc import Callable

from toolhub.adapters.registry import ToolRegistry
from toolhub.callbacks.method import MethodToolCallback
from toolhub.core.descriptor import ToolDescriptor
from toolhub.infra.logging import get_logger
from toolhub.protocol.mcp import MCPToolCall, MCPToolDefinition, MCPToolResult

logger = get_logger(__name__)


class ToolCallbackProvider:
    """
    Caches one MethodToolCallback per enabled descriptor in a registry.

    The cache is built lazily on first access and rebuilt by ``refresh()``.
    It does not watch the registry: after removing or disabling a tool,
    call ``remove_callback`` or ``refresh``.
    """

    def __init__(
        self,
        registry: ToolRegistry,
        callback_factory: Callable[[ToolDescriptor], MethodToolCallback] = MethodToolCallback
    ):
        self.registry = registry
        self.callback_factory = callback_factory
        self._callbacks: dict[str, MethodToolCallback] = {}
        self._built = False
        self._lock = threading.RLock()

    def _ensure_built(self) -> None:
        if self._built or self.registry.count() == 0:
            return
        with self._lock:
            if not self._built:
                self._build()

    def _build(self) -> None:
        # Caller holds the lock
        for descriptor in self.registry.get_all():
            if descriptor.enabled:
                self._callbacks[descriptor.name] = self.callback_factory(descriptor)
        self._built = True
        if self._callbacks:
            logger.info("callbacks_built", count=len(self._callbacks))
        else:
            logger.warning("callbacks_built_empty")

    def get_callbacks(self) -> list[MethodToolCallback]:
        self._ensure_built()
        with self._lock:
            return list(self._callbacks.values())

    def get_callbacks_map(self) -> dict[str, MethodToolCallback]:
        self._ensure_built()
        with self._lock:
            return dict(self._callbacks)

    def get_callback(self, name: str) -> MethodToolCallback | None:
        self._ensure_built()
        with self._lock:
            return self._callbacks.get(name)

    def refresh(self) -> None:
        """Drop every cached callback and rebuild from the registry."""
        with self._lock:
            self._callbacks.clear()
            self._build()
            count = len(self._callbacks)
        logger.info("callbacks_refreshed", count=count)

    def add_callback(self, descriptor: ToolDescriptor) -> MethodToolCallback | None:
        if not descriptor.enabled:
            logger.debug("callback_skipped_disabled", tool=descriptor.name)
            return None
        callback = self.callback_factory(descriptor)
        with self._lock:
            self._callbacks[descriptor.name] = callback
        logger.debug("callback_added", tool=descriptor.name)
        return callback

    def remove_callback(self, name: str) -> bool:
        with self._lock:
            removed = self._callbacks.pop(name, None)
        if removed is not None:
            logger.debug("callback_removed", tool=name)
        return removed is not None

    def get_callback_count(self) -> int:
        self._ensure_built()
        with self._lock:
            return len(self._callbacks)

    def has_callback(self, name: str) -> bool:
        return self.get_callback(name) is not None

    def tool_definitions(self) -> list[MCPToolDefinition]:
        return [cb.tool_definition() for cb in self.get_callbacks()]

    def call(self, name: str, arguments: str | None = None) -> str:
        """
        Dispatch by name. The lookup is locked, the tool runs unlocked.
        """
        callback = self.get_callback(name)
        if callback is None:
            logger.warning("tool_not_found", tool=name)
            return f"Error: Unknown tool: {name}"
        return callback.invoke(arguments)

    def call_tool(self, request: MCPToolCall) -> MCPToolResult:
        text = self.call(request.name, json.dumps(request.arguments))
        return MCPToolResult.text(text, is_error=text.startswith("Error: "))
