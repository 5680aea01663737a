"""Client descriptor schema.

A :class:`ClientDescriptor` is the static metadata describing one MCP client:
identity, supported transports and platforms, where its config file lives,
and the shape its config file expects.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, StrictBool, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from mcp_config_schema.config.auth import OAuthConfig
from mcp_config_schema.config.validation import ParseResult, Schema
from mcp_config_schema.constants import AuthMode, ClientId, ConfigFormat, Platform, Transport

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Require a well-formed absolute URL but keep the original string."""
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise ValueError(f"Invalid URL: '{value}'") from None
    return value


UrlString = Annotated[str, AfterValidator(_check_url)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HttpPropertyMapping(_CamelModel):
    """Property names used for a remote server entry."""

    type_property: str | None = None
    url_property: str
    headers_property: str | None = None


class StdioPropertyMapping(_CamelModel):
    """Property names used for a local server entry."""

    type_property: str | None = None
    command_property: str
    args_property: str | None = None
    env_property: str | None = None


class ConfigStructure(_CamelModel):
    """Shape of the client's config file."""

    servers_property_name: str
    http_property_mapping: HttpPropertyMapping | None = None
    stdio_property_mapping: StdioPropertyMapping | None = None


class ClientDescriptor(_CamelModel):
    """Static metadata for one MCP client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: ClientId
    name: str
    display_name: str
    description: str
    user_configurable: StrictBool
    documentation_url: UrlString | None = None
    transports: list[Transport] = Field(min_length=1)
    supported_platforms: list[Platform] = Field(min_length=1)
    config_format: ConfigFormat
    config_path: dict[Platform, str]
    config_structure: ConfigStructure
    local_config_notes: str | None = None
    remote_config_notes: str | None = None
    supported_auth: list[AuthMode]
    oauth: OAuthConfig | None = None

    def supports_transport(self, transport: str) -> bool:
        """Return True if the client accepts servers over ``transport``."""
        return transport in self.transports


ClientConfigSchema: Schema[ClientDescriptor] = Schema(ClientDescriptor, name="ClientConfig")


def validate_client_config(data: Any) -> ClientDescriptor:
    """Validate a client descriptor, raising on failure.

    Raises:
        SchemaValidationError: If ``data`` is not a valid client descriptor
    """
    return ClientConfigSchema.parse(data)


def safe_validate_client_config(data: Any) -> ParseResult[ClientDescriptor]:
    """Validate a client descriptor without raising."""
    return ClientConfigSchema.safe_parse(data)
