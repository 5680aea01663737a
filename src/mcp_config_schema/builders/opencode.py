"""Config builder for OpenCode."""

import logging
from collections.abc import Mapping
from typing import Any

from mcp_config_schema.builders.base import BaseConfigBuilder
from mcp_config_schema.builders.records import ServerRecord
from mcp_config_schema.config.server import ServerConnectionOptions
from mcp_config_schema.constants import (
    ERROR_HTTP_URL_REQUIRED,
    OPENCODE_ROOT_KEY,
    TRANSPORT_HTTP,
    TRANSPORT_STDIO,
)
from mcp_config_schema.exceptions import BuilderPreconditionError

logger = logging.getLogger(__name__)


class OpenCodeConfigBuilder(BaseConfigBuilder):
    """Config builder for OpenCode, which uses the ``{"mcp": {...}}`` format.

    Local servers are ``"local"`` entries with a combined command array;
    remote servers are ``"remote"`` entries with a resolved URL.
    """

    @property
    def root_key(self) -> str:
        return OPENCODE_ROOT_KEY

    def build_stdio_config(self, options: ServerConnectionOptions, include_root_object: bool = True) -> dict[str, Any]:
        server_name = self.build_server_name(TRANSPORT_STDIO, server_name=options.server_name)

        server_config: dict[str, Any] = {
            "type": "local",
            "command": self.stdio_command_vector(),
        }

        env = self.get_env_vars(options)
        if env:
            server_config["environment"] = env

        logger.debug(f"Built OpenCode local server '{server_name}' for {self.client_id}")
        return self._wrap(server_name, server_config, include_root_object)

    def build_http_config(self, options: ServerConnectionOptions, include_root_object: bool = True) -> dict[str, Any]:
        if not options.server_url:
            raise BuilderPreconditionError(ERROR_HTTP_URL_REQUIRED, client_id=self.client_id)

        resolved_url = self.substitute_url_variables(options.server_url, options.url_variables)
        server_name = self.build_server_name(
            TRANSPORT_HTTP,
            server_url=resolved_url,
            server_name=options.server_name,
        )

        self._ensure_transport_supported(TRANSPORT_HTTP)

        server_config: dict[str, Any] = {
            "type": "remote",
            "url": resolved_url,
        }

        headers = self.build_headers(options)
        if headers:
            server_config["headers"] = headers

        logger.debug(f"Built OpenCode remote server '{server_name}' for {self.client_id}")
        return self._wrap(server_name, server_config, include_root_object)

    def build_http_command(self, options: ServerConnectionOptions) -> str | None:
        return self._command_from_table(TRANSPORT_HTTP, options)

    def build_stdio_command(self, options: ServerConnectionOptions) -> str | None:
        return self._command_from_table(TRANSPORT_STDIO, options)

    def _normalize_entry(self, entry: Mapping[str, Any]) -> ServerRecord:
        command_vector = entry.get("command")
        if not isinstance(command_vector, list):
            command_vector = None

        return ServerRecord(
            type="stdio" if entry.get("type") == "local" else "http",
            command=command_vector[0] if command_vector else None,
            args=command_vector[1:] if command_vector is not None else None,
            env=entry.get("environment"),
            url=entry.get("url"),
            headers=entry.get("headers"),
        )
