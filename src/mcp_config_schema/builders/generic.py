"""Config builder driven by a client's ``configStructure`` mappings.

Most clients use a ``{"mcpServers": {...}}`` style file and differ only in
property names; this builder renders that family from the descriptor alone.
"""

import logging
from collections.abc import Mapping
from typing import Any

from mcp_config_schema.builders.base import BaseConfigBuilder
from mcp_config_schema.builders.records import ServerRecord
from mcp_config_schema.config.client import HttpPropertyMapping, StdioPropertyMapping
from mcp_config_schema.config.server import ServerConnectionOptions
from mcp_config_schema.constants import (
    ERROR_HTTP_URL_REQUIRED,
    ERROR_UNSUPPORTED_TRANSPORT,
    TRANSPORT_HTTP,
    TRANSPORT_STDIO,
)
from mcp_config_schema.exceptions import BuilderPreconditionError, UnsupportedTransportError

logger = logging.getLogger(__name__)


class GenericConfigBuilder(BaseConfigBuilder):
    """Config builder for clients described entirely by their property mappings."""

    @property
    def root_key(self) -> str:
        return self.config.config_structure.servers_property_name

    def _stdio_mapping(self) -> StdioPropertyMapping:
        self._ensure_transport_supported(TRANSPORT_STDIO)
        mapping = self.config.config_structure.stdio_property_mapping
        if mapping is None:
            raise UnsupportedTransportError(
                ERROR_UNSUPPORTED_TRANSPORT.format(client_id=self.client_id, transport="STDIO"),
                client_id=self.client_id,
                transport=TRANSPORT_STDIO,
            )
        return mapping

    def _http_mapping(self) -> HttpPropertyMapping:
        self._ensure_transport_supported(TRANSPORT_HTTP)
        mapping = self.config.config_structure.http_property_mapping
        if mapping is None:
            raise UnsupportedTransportError(
                ERROR_UNSUPPORTED_TRANSPORT.format(client_id=self.client_id, transport="HTTP"),
                client_id=self.client_id,
                transport=TRANSPORT_HTTP,
            )
        return mapping

    def build_stdio_config(self, options: ServerConnectionOptions, include_root_object: bool = True) -> dict[str, Any]:
        mapping = self._stdio_mapping()
        server_name = self.build_server_name(TRANSPORT_STDIO, server_name=options.server_name)
        command, *args = self.stdio_command_vector()

        server_config: dict[str, Any] = {}
        if mapping.type_property:
            server_config[mapping.type_property] = TRANSPORT_STDIO
        if mapping.args_property:
            server_config[mapping.command_property] = command
            server_config[mapping.args_property] = args
        else:
            server_config[mapping.command_property] = [command, *args]

        env = self.get_env_vars(options)
        if env and mapping.env_property:
            server_config[mapping.env_property] = env

        logger.debug(f"Built stdio server '{server_name}' for {self.client_id}")
        return self._wrap(server_name, server_config, include_root_object)

    def build_http_config(self, options: ServerConnectionOptions, include_root_object: bool = True) -> dict[str, Any]:
        if not options.server_url:
            raise BuilderPreconditionError(ERROR_HTTP_URL_REQUIRED, client_id=self.client_id)

        mapping = self._http_mapping()
        resolved_url = self.substitute_url_variables(options.server_url, options.url_variables)
        server_name = self.build_server_name(
            TRANSPORT_HTTP,
            server_url=resolved_url,
            server_name=options.server_name,
        )

        server_config: dict[str, Any] = {}
        if mapping.type_property:
            server_config[mapping.type_property] = TRANSPORT_HTTP
        server_config[mapping.url_property] = resolved_url

        headers = self.build_headers(options)
        if headers and mapping.headers_property:
            server_config[mapping.headers_property] = headers

        logger.debug(f"Built http server '{server_name}' for {self.client_id}")
        return self._wrap(server_name, server_config, include_root_object)

    def build_http_command(self, options: ServerConnectionOptions) -> str | None:
        return self._command_from_table(TRANSPORT_HTTP, options)

    def build_stdio_command(self, options: ServerConnectionOptions) -> str | None:
        return self._command_from_table(TRANSPORT_STDIO, options)

    def _normalize_entry(self, entry: Mapping[str, Any]) -> ServerRecord:
        structure = self.config.config_structure
        stdio = structure.stdio_property_mapping
        http = structure.http_property_mapping

        if stdio and stdio.command_property in entry:
            command = entry[stdio.command_property]
            if isinstance(command, list):
                command, args = (command[0] if command else None), command[1:]
            else:
                args = entry.get(stdio.args_property) if stdio.args_property else None
            return ServerRecord(
                type=TRANSPORT_STDIO,
                command=command,
                args=args,
                env=entry.get(stdio.env_property) if stdio.env_property else None,
            )

        return ServerRecord(
            type=TRANSPORT_HTTP,
            url=entry.get(http.url_property) if http else entry.get("url"),
            headers=entry.get(http.headers_property) if http and http.headers_property else None,
        )
