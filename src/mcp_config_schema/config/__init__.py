"""Schemas, validation and settings package."""

from mcp_config_schema.config.auth import (
    OAuthConfig,
    OAuthDcrConfig,
    OAuthDcrSchema,
    OAuthSchema,
    SupportedAuthSchema,
)
from mcp_config_schema.config.client import (
    ClientConfigSchema,
    ClientDescriptor,
    ConfigStructure,
    HttpPropertyMapping,
    StdioPropertyMapping,
    safe_validate_client_config,
    validate_client_config,
)
from mcp_config_schema.config.loader import load_client_descriptor, load_config_file, loads_config
from mcp_config_schema.config.server import (
    HttpServerConfig,
    ServerConfigSchema,
    ServerConnectionOptions,
    StdioServerConfig,
    safe_validate_server_config,
    validate_server_config,
)
from mcp_config_schema.config.settings import BuilderSettings, load_settings_from_env
from mcp_config_schema.config.validation import ParseResult, Schema, ValidationIssue

__all__ = [
    "BuilderSettings",
    "ClientConfigSchema",
    "ClientDescriptor",
    "ConfigStructure",
    "HttpPropertyMapping",
    "HttpServerConfig",
    "OAuthConfig",
    "OAuthDcrConfig",
    "OAuthDcrSchema",
    "OAuthSchema",
    "ParseResult",
    "Schema",
    "ServerConfigSchema",
    "ServerConnectionOptions",
    "StdioPropertyMapping",
    "StdioServerConfig",
    "SupportedAuthSchema",
    "ValidationIssue",
    "load_client_descriptor",
    "load_config_file",
    "load_settings_from_env",
    "loads_config",
    "safe_validate_client_config",
    "safe_validate_server_config",
    "validate_client_config",
    "validate_server_config",
]
