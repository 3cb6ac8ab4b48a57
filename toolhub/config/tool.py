"""
Tool Configuration & Factory
"""

import importlib
import os

from pydantic import BaseModel, Field

from toolhub.core.descriptor import ToolDescriptor


class ToolConfig(BaseModel):
    """
    Static configuration for a Tool.
    """
    name: str
    description: str = ""
    python_path: str = Field(..., description="Dot-path to the python function e.g. 'my_pkg.tools.search'")
    category: str = "general"
    version: str = "1.0"
    tags: list[str] = Field(default_factory=list)
    enabled: bool = True
    priority: int = 0
    requires_auth: bool = False
    timeout_ms: int = Field(default=0, ge=0)
    cacheable: bool = False
    cache_ttl_seconds: int = Field(default=300, ge=0)
    env_vars: dict[str, str] = Field(default_factory=dict)

class ToolFactory:
    """
    Factory to turn ToolConfigs into ToolDescriptors.
    """

    @staticmethod
    def load_callable(python_path: str):
        module_name, _, func_name = python_path.rpartition(".")
        if not module_name:
            raise ValueError(f"Invalid tool path {python_path!r}: expected 'module.function'")
        try:
            mod = importlib.import_module(module_name)
            func = getattr(mod, func_name)
        except (ImportError, AttributeError) as e:
            raise ValueError(f"Could not load tool function {python_path}: {e}")
        if not callable(func):
            raise ValueError(f"Tool path {python_path} does not name a callable")
        return func

    @staticmethod
    def create_descriptor(config: ToolConfig) -> ToolDescriptor:
        # 1. Load function
        func = ToolFactory.load_callable(config.python_path)

        # 2. Apply Env Vars
        for k, v in config.env_vars.items():
            os.environ[k] = v

        # 3. Create Descriptor
        return ToolDescriptor.from_callable(
            func,
            **config.model_dump(exclude={"python_path", "env_vars", "description"}),
            description=config.description or None
        )
