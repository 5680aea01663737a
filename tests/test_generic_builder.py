"""Tests for the configStructure-driven generic builder."""

import pytest
import yaml

from mcp_config_schema.builders import GenericConfigBuilder
from mcp_config_schema.config import HttpServerConfig, StdioServerConfig
from mcp_config_schema.exceptions import BuilderPreconditionError, UnsupportedTransportError
from mcp_config_schema.config.server import ServerConnectionOptions


@pytest.fixture
def builder(claude_code_descriptor, settings):
    return GenericConfigBuilder(claude_code_descriptor, settings=settings)


def test_stdio_entry_uses_property_mapping(builder):
    options = StdioServerConfig(transport="stdio", instance="acme", api_token="test-token")
    assert builder.build_stdio_config(options) == {
        "mcpServers": {
            "glean_local": {
                "type": "stdio",
                "command": "npx",
                "args": ["-y", "@gleanwork/local-mcp-server"],
                "env": {"GLEAN_INSTANCE": "acme", "GLEAN_API_TOKEN": "test-token"},
            }
        }
    }


def test_http_entry_uses_property_mapping(builder):
    options = HttpServerConfig(transport="http", server_url="https://acme-be.glean.com/mcp/default")
    assert builder.build_http_config(options, include_root_object=False) == {
        "glean_default": {"type": "http", "url": "https://acme-be.glean.com/mcp/default"}
    }


def test_combined_command_when_no_args_property(claude_code_descriptor, settings):
    mapping = claude_code_descriptor["configStructure"]["stdioPropertyMapping"]
    del mapping["argsProperty"]
    del mapping["typeProperty"]
    builder = GenericConfigBuilder(claude_code_descriptor, settings=settings)

    entry = builder.build_stdio_config(StdioServerConfig(transport="stdio", instance="acme"))["mcpServers"]["glean_local"]
    assert entry["command"] == ["npx", "-y", "@gleanwork/local-mcp-server"]
    assert "type" not in entry

    with pytest.warns(DeprecationWarning):
        record = builder.get_normalized_servers_config({"mcpServers": {"glean_local": entry}})["glean_local"]
    assert record.command == "npx"
    assert record.args == ["-y", "@gleanwork/local-mcp-server"]


def test_stdio_requires_declared_transport(claude_code_descriptor, settings):
    claude_code_descriptor["transports"] = ["http"]
    builder = GenericConfigBuilder(claude_code_descriptor, settings=settings)

    with pytest.raises(UnsupportedTransportError, match="claude-code"):
        builder.build_stdio_config(StdioServerConfig(transport="stdio", instance="acme"))


def test_http_requires_property_mapping(claude_code_descriptor, settings):
    del claude_code_descriptor["configStructure"]["httpPropertyMapping"]
    builder = GenericConfigBuilder(claude_code_descriptor, settings=settings)

    with pytest.raises(UnsupportedTransportError):
        builder.build_http_config(HttpServerConfig(transport="http", server_url="https://glean.com/mcp/default"))


def test_http_requires_server_url(builder):
    with pytest.raises(BuilderPreconditionError):
        builder.build_http_config(ServerConnectionOptions(transport="http"))


def test_normalization_round_trip(builder):
    for options in (
        StdioServerConfig(transport="stdio", instance="acme"),
        HttpServerConfig(transport="http", server_url="https://glean.com/mcp/default", api_token="t"),
    ):
        with pytest.warns(DeprecationWarning):
            wrapped = builder.get_normalized_servers_config(builder.build_configuration(options))
        with pytest.warns(DeprecationWarning):
            bare = builder.get_normalized_servers_config(builder.build_configuration(options, False))
        assert wrapped == bare


def test_normalized_http_record(builder):
    config = builder.build_configuration(
        {"transport": "http", "serverUrl": "https://glean.com/mcp/default", "headers": {"X-Trace": "1"}}
    )
    with pytest.warns(DeprecationWarning):
        record = builder.get_normalized_servers_config(config)["glean_default"]
    assert record.type == "http"
    assert record.url == "https://glean.com/mcp/default"
    assert record.headers == {"X-Trace": "1"}


def test_to_string_yaml(claude_code_descriptor, settings):
    claude_code_descriptor["configFormat"] = "yaml"
    builder = GenericConfigBuilder(claude_code_descriptor, settings=settings)

    config = builder.build_configuration({"transport": "stdio", "instance": "acme"})
    assert yaml.safe_load(builder.to_string(config)) == config
