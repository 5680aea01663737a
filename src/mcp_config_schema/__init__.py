"""mcp-config-schema - validate MCP client descriptors and render per-client server configs."""

from mcp_config_schema.builders import (
    BaseConfigBuilder,
    GenericConfigBuilder,
    OpenCodeConfigBuilder,
    ServerRecord,
    create_builder,
)
from mcp_config_schema.config import (
    ClientDescriptor,
    OAuthDcrSchema,
    OAuthSchema,
    ServerConnectionOptions,
    SupportedAuthSchema,
    safe_validate_client_config,
    safe_validate_server_config,
    validate_client_config,
    validate_server_config,
)
from mcp_config_schema.exceptions import (
    BuilderPreconditionError,
    MCPConfigError,
    SchemaValidationError,
    UnsupportedTransportError,
)

__all__ = [
    "BaseConfigBuilder",
    "BuilderPreconditionError",
    "ClientDescriptor",
    "GenericConfigBuilder",
    "MCPConfigError",
    "OAuthDcrSchema",
    "OAuthSchema",
    "OpenCodeConfigBuilder",
    "SchemaValidationError",
    "ServerConnectionOptions",
    "ServerRecord",
    "SupportedAuthSchema",
    "UnsupportedTransportError",
    "create_builder",
    "safe_validate_client_config",
    "safe_validate_server_config",
    "validate_client_config",
    "validate_server_config",
]
__version__ = "0.1.0"
