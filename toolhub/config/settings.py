"""
Toolhub Settings
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from toolhub.config.tool import ToolConfig


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class ToolhubSettings(BaseModel):
    """
    Application settings.
    Priority: explicit values > environment > defaults.
    """
    log_level: str = "INFO"
    log_json: bool = False
    tool_modules: list[str] = Field(default_factory=list, description="Modules scanned for @mcp_tool functions")
    tools: list[ToolConfig] = Field(default_factory=list)

    @classmethod
    def from_env(cls, **overrides) -> ToolhubSettings:
        modules = os.getenv("TOOLHUB_TOOL_MODULES", "")
        values = {
            "log_level": os.getenv("TOOLHUB_LOG_LEVEL", "INFO").upper(),
            "log_json": _env_flag("TOOLHUB_LOG_JSON"),
            "tool_modules": [m.strip() for m in modules.split(",") if m.strip()],
        }
        values.update(overrides)
        return cls(**values)
