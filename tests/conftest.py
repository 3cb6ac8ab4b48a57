"""
Pytest Configuration and Fixtures
"""

import sqlite3
from collections.abc import Callable, Generator
from typing import Any

import pytest

from toolhub.adapters.registry import ToolRegistry
from toolhub.api.main import ToolhubApp
from toolhub.callbacks.provider import ToolCallbackProvider
from toolhub.core.descriptor import ToolDescriptor


def echo(text: str) -> str:
    """Echo the text back."""
    return text


@pytest.fixture
def registry() -> ToolRegistry:
    """Returns an empty registry."""
    return ToolRegistry()

@pytest.fixture
def provider(registry: ToolRegistry) -> ToolCallbackProvider:
    return ToolCallbackProvider(registry)

@pytest.fixture
def app() -> ToolhubApp:
    """Returns a fresh ToolhubApp instance."""
    return ToolhubApp()

@pytest.fixture
def make_descriptor() -> Callable[..., ToolDescriptor]:
    """Factory for descriptors wrapping ``echo`` unless a func is given."""
    def factory(name: str = "echo", func: Callable[..., Any] = echo, **options: Any) -> ToolDescriptor:
        options.setdefault("description", f"{name} tool")
        return ToolDescriptor.from_callable(func, name=name, **options)
    return factory

@pytest.fixture
def sqlite_connection() -> Generator[sqlite3.Connection, None, None]:
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL)")
    conn.execute("CREATE TABLE orders (id INTEGER PRIMARY KEY, user_id INTEGER, total REAL)")
    conn.executemany("INSERT INTO users (id, name) VALUES (?, ?)", [(1, "ada"), (2, "linus")])
    conn.commit()
    yield conn
    conn.close()
