"""
Toolhub SDK: Main Application
"""

import importlib
import threading
from collections.abc import Iterable
from typing import Any

from toolhub.adapters.registry import ToolRegistry
from toolhub.api.decorators import ToolScanner
from toolhub.callbacks.method import MethodToolCallback
from toolhub.callbacks.provider import ToolCallbackProvider
from toolhub.config.settings import ToolhubSettings
from toolhub.config.tool import ToolConfig, ToolFactory
from toolhub.core.descriptor import ToolDescriptor
from toolhub.infra.logging import get_logger
from toolhub.protocol.mcp import MCPToolCall, MCPToolDefinition, MCPToolResult

logger = get_logger(__name__)


class ToolhubApp:
    """
    The High-Level Application Object.
    Owns one registry and one callback provider and keeps them in step.

    Usage:
        app = ToolhubApp()
        app.scan(WeatherService())
        app.call("get_weather_forecast", '{"latitude": 47.6, "longitude": -122.3}')
    """

    def __init__(self, settings: ToolhubSettings | None = None):
        self.settings = settings or ToolhubSettings()
        self.registry = ToolRegistry()
        self.provider = ToolCallbackProvider(self.registry)
        self.scanner = ToolScanner(self.registry, self.provider)
        # Serializes registry writes with the matching cache update
        self._lock = threading.RLock()

        for module_path in self.settings.tool_modules:
            self.scan(importlib.import_module(module_path))

        if self.settings.tools:
            self.load_configs(self.settings.tools)

    def register(self, descriptor: ToolDescriptor) -> bool:
        """Register a descriptor and cache its callback if it won the name."""
        with self._lock:
            stored = self.registry.register(descriptor)
            if stored:
                self.provider.add_callback(descriptor)
        return stored

    def unregister(self, name: str) -> ToolDescriptor | None:
        with self._lock:
            removed = self.registry.unregister(name)
            self.provider.remove_callback(name)
        return removed

    def scan(self, *sources: Any) -> list[ToolDescriptor]:
        registered = []
        with self._lock:
            for source in sources:
                registered.extend(self.scanner.scan(source))
        return registered

    def load_configs(self, configs: Iterable[ToolConfig]) -> list[ToolDescriptor]:
        registered = []
        with self._lock:
            for config in configs:
                descriptor = ToolFactory.create_descriptor(config)
                if self.register(descriptor):
                    registered.append(descriptor)
        return registered

    def get_callback(self, name: str) -> MethodToolCallback | None:
        return self.provider.get_callback(name)

    def tool_definitions(self) -> list[MCPToolDefinition]:
        return self.provider.tool_definitions()

    def call(self, name: str, arguments: str | None = None) -> str:
        return self.provider.call(name, arguments)

    def call_tool(self, request: MCPToolCall) -> MCPToolResult:
        return self.provider.call_tool(request)
