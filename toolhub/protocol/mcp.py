"""
Model Context Protocol (MCP) Models for Toolhub
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# --- MCP Data Models ---

class MCPToolDefinition(BaseModel):
    """Definition of an MCP Tool."""
    name: str
    description: str
    input_schema: dict[str, Any] = Field(..., alias="inputSchema")

    model_config = ConfigDict(populate_by_name=True)

class MCPToolCall(BaseModel):
    """A request to call a tool."""
    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)

class MCPToolResult(BaseModel):
    """Result of a tool call."""
    content: list[dict[str, Any]] # Text content
    is_error: bool = Field(default=False, alias="isError")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def text(cls, text: str, is_error: bool = False) -> MCPToolResult:
        return cls(content=[{"type": "text", "text": text}], is_error=is_error)

# --- Callback Interface ---

class ToolCallback(ABC):
    """
    Uniform calling convention for a tool: JSON arguments in, text out.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def input_schema(self) -> dict[str, Any]:
        """JSON-schema-like description of the accepted arguments."""
        pass

    @abstractmethod
    def invoke(self, arguments: str | None = None) -> str:
        """
        Execute the tool.
        Never raises: failures come back as text starting with "Error: ".
        """
        pass

    def tool_definition(self) -> MCPToolDefinition:
        return MCPToolDefinition(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema
        )

    def __call__(self, arguments: str | None = None) -> str:
        return self.invoke(arguments)
