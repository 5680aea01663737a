"""Tests for the builder registry."""

import pytest

from mcp_config_schema.builders import (
    GenericConfigBuilder,
    OpenCodeConfigBuilder,
    create_builder,
    get_builder_class,
    register_builder,
    registered_builders,
)
from mcp_config_schema.builders import registry


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch):
    monkeypatch.setattr(registry, "_BUILDERS", dict(registry._BUILDERS))


def test_opencode_is_registered():
    assert registered_builders() == {"opencode": OpenCodeConfigBuilder}
    assert get_builder_class("opencode") is OpenCodeConfigBuilder


def test_unregistered_clients_use_generic_builder():
    assert get_builder_class("claude-code") is GenericConfigBuilder


def test_create_builder_from_raw_descriptor(opencode_descriptor, claude_code_descriptor, settings):
    assert isinstance(create_builder(opencode_descriptor, settings=settings), OpenCodeConfigBuilder)
    generic = create_builder(claude_code_descriptor, settings=settings)
    assert type(generic) is GenericConfigBuilder
    assert generic.root_key == "mcpServers"


def test_register_builder(claude_code_descriptor, settings):
    class CustomBuilder(GenericConfigBuilder):
        pass

    register_builder("claude-code", CustomBuilder)
    assert isinstance(create_builder(claude_code_descriptor, settings=settings), CustomBuilder)


def test_register_builder_rejects_unknown_client():
    with pytest.raises(KeyError):
        register_builder("not-a-client", GenericConfigBuilder)


def test_register_builder_rejects_non_builder():
    with pytest.raises(TypeError):
        register_builder("cursor", dict)
