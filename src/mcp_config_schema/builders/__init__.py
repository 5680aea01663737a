"""Per-client config builders."""

from mcp_config_schema.builders.base import BaseConfigBuilder, CommandBuilder
from mcp_config_schema.builders.generic import GenericConfigBuilder
from mcp_config_schema.builders.opencode import OpenCodeConfigBuilder
from mcp_config_schema.builders.records import ServerRecord
from mcp_config_schema.builders.registry import (
    create_builder,
    get_builder_class,
    register_builder,
    registered_builders,
)

__all__ = [
    "BaseConfigBuilder",
    "CommandBuilder",
    "GenericConfigBuilder",
    "OpenCodeConfigBuilder",
    "ServerRecord",
    "create_builder",
    "get_builder_class",
    "register_builder",
    "registered_builders",
]
