"""Server connection options and their schema."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from mcp_config_schema.config.validation import ParseResult, TransportSchema
from mcp_config_schema.constants import TRANSPORT_HTTP, TRANSPORT_STDIO, Transport


class ServerConnectionOptions(BaseModel):
    """Options describing how to connect a client to one MCP server.

    This is the type builders consume. Only ``transport`` is required here;
    the transport-specific requirements are enforced by the validated
    variants :class:`StdioServerConfig` and :class:`HttpServerConfig`.
    Input keys may use either the camelCase wire names or snake_case.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    transport: Transport
    server_name: str | None = None
    server_url: str | None = None
    url_variables: dict[str, str] | None = None
    headers: dict[str, str] | None = None
    instance: str | None = None
    api_token: str | None = None
    env: dict[str, str] | None = None


class StdioServerConfig(ServerConnectionOptions):
    """Validated options for a locally launched (stdio) server."""

    transport: Literal["stdio"]
    instance: str


class HttpServerConfig(ServerConnectionOptions):
    """Validated options for a remote (http) server.

    ``server_url`` is any string. Placeholder templates such as
    ``https://[instance]-be.example.com/mcp/[endpoint]`` are valid values.
    """

    transport: Literal["http"]
    server_url: str


class _TransportSelector(BaseModel):
    transport: Transport


ServerConfigSchema: TransportSchema[StdioServerConfig | HttpServerConfig] = TransportSchema(
    _TransportSelector,
    {TRANSPORT_STDIO: StdioServerConfig, TRANSPORT_HTTP: HttpServerConfig},
    name="ServerConfig",
)


def validate_server_config(data: Any) -> StdioServerConfig | HttpServerConfig:
    """Validate server connection options, raising on failure.

    Raises:
        SchemaValidationError: If ``data`` is not a valid server config
    """
    return ServerConfigSchema.parse(data)


def safe_validate_server_config(data: Any) -> ParseResult[StdioServerConfig | HttpServerConfig]:
    """Validate server connection options without raising."""
    return ServerConfigSchema.safe_parse(data)
