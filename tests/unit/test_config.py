"""
Unit Test: Settings & Static Tool Configuration
"""

import inspect
import os
import textwrap

import pytest

from toolhub.config.settings import ToolhubSettings
from toolhub.config.tool import ToolConfig, ToolFactory


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TOOLHUB_LOG_LEVEL", "debug")
    monkeypatch.setenv("TOOLHUB_LOG_JSON", "true")
    monkeypatch.setenv("TOOLHUB_TOOL_MODULES", "pkg.a, pkg.b,,")

    settings = ToolhubSettings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.log_json is True
    assert settings.tool_modules == ["pkg.a", "pkg.b"]


def test_explicit_settings_override_env(monkeypatch):
    monkeypatch.setenv("TOOLHUB_LOG_LEVEL", "debug")
    settings = ToolhubSettings.from_env(log_level="WARNING")
    assert settings.log_level == "WARNING"


def test_settings_defaults(monkeypatch):
    for key in ("TOOLHUB_LOG_LEVEL", "TOOLHUB_LOG_JSON", "TOOLHUB_TOOL_MODULES"):
        monkeypatch.delenv(key, raising=False)
    settings = ToolhubSettings.from_env()
    assert settings.log_level == "INFO"
    assert settings.log_json is False
    assert settings.tool_modules == []


def test_factory_builds_descriptor(monkeypatch):
    monkeypatch.setenv("TOOLHUB_TEST_FLAG", "off")
    config = ToolConfig(
        name="join_path",
        description="Join two path segments",
        python_path="os.path.join",
        category="file",
        tags=["path"],
        priority=2,
        env_vars={"TOOLHUB_TEST_FLAG": "on"},
    )
    descriptor = ToolFactory.create_descriptor(config)

    assert descriptor.name == "join_path"
    assert descriptor.description == "Join two path segments"
    assert descriptor.category == "file"
    assert descriptor.tags == frozenset({"path"})
    assert descriptor.priority == 2
    assert descriptor.target.func is os.path.join
    assert os.environ["TOOLHUB_TEST_FLAG"] == "on"


def test_factory_falls_back_to_docstring():
    config = ToolConfig(name="dedent", python_path="textwrap.dedent")
    descriptor = ToolFactory.create_descriptor(config)
    assert descriptor.description == inspect.getdoc(textwrap.dedent)
    assert [p.name for p in descriptor.parameters] == ["text"]


@pytest.mark.parametrize("path", ["nonexistent_pkg.func", "os.path.no_such_function", "nodots"])
def test_factory_rejects_bad_paths(path):
    with pytest.raises(ValueError):
        ToolFactory.create_descriptor(ToolConfig(name="bad", description="bad", python_path=path))
