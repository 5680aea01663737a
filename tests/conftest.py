"""Pytest configuration and shared fixtures."""

import copy
from typing import Any

import pytest

from mcp_config_schema.config.settings import (
    ENV_API_TOKEN_ENV_VAR,
    ENV_INSTANCE_ENV_VAR,
    ENV_SERVER_NAME_PREFIX,
    ENV_SERVER_PACKAGE,
    BuilderSettings,
)

OPENCODE_DESCRIPTOR: dict[str, Any] = {
    "id": "opencode",
    "name": "opencode",
    "displayName": "OpenCode",
    "description": "OpenCode terminal agent",
    "userConfigurable": True,
    "documentationUrl": "https://opencode.ai/docs/mcp-servers",
    "transports": ["stdio", "http"],
    "supportedPlatforms": ["darwin", "linux", "win32"],
    "configFormat": "json",
    "configPath": {
        "darwin": "$HOME/.config/opencode/opencode.json",
        "linux": "$HOME/.config/opencode/opencode.json",
        "win32": "%USERPROFILE%\\.config\\opencode\\opencode.json",
    },
    "configStructure": {
        "serversPropertyName": "mcp",
        "httpPropertyMapping": {
            "typeProperty": "type",
            "urlProperty": "url",
            "headersProperty": "headers",
        },
        "stdioPropertyMapping": {
            "typeProperty": "type",
            "commandProperty": "command",
            "envProperty": "environment",
        },
    },
    "supportedAuth": ["token", "oauth:dcr"],
}

CLAUDE_CODE_DESCRIPTOR: dict[str, Any] = {
    "id": "claude-code",
    "name": "claude-code",
    "displayName": "Claude Code",
    "description": "Test client",
    "userConfigurable": True,
    "transports": ["stdio", "http"],
    "supportedPlatforms": ["darwin", "linux"],
    "configFormat": "json",
    "configPath": {
        "darwin": "$HOME/.claude.json",
        "linux": "$HOME/.claude.json",
    },
    "configStructure": {
        "serversPropertyName": "mcpServers",
        "httpPropertyMapping": {
            "typeProperty": "type",
            "urlProperty": "url",
            "headersProperty": "headers",
        },
        "stdioPropertyMapping": {
            "typeProperty": "type",
            "commandProperty": "command",
            "argsProperty": "args",
            "envProperty": "env",
        },
    },
    "supportedAuth": ["token"],
}


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Keep builder settings independent of the caller's environment."""
    for key in (ENV_SERVER_PACKAGE, ENV_SERVER_NAME_PREFIX, ENV_INSTANCE_ENV_VAR, ENV_API_TOKEN_ENV_VAR):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def opencode_descriptor() -> dict[str, Any]:
    """Raw OpenCode client descriptor."""
    return copy.deepcopy(OPENCODE_DESCRIPTOR)


@pytest.fixture
def claude_code_descriptor() -> dict[str, Any]:
    """Raw descriptor for a client using the ``mcpServers`` layout."""
    return copy.deepcopy(CLAUDE_CODE_DESCRIPTOR)


@pytest.fixture
def settings() -> BuilderSettings:
    """Default builder settings."""
    return BuilderSettings()
