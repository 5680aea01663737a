"""Abstract config builder.

A config builder turns validated :class:`ServerConnectionOptions` into the
data structure one MCP client expects in its config file. There is one
builder class per client family; every variant implements the four
capabilities ``build_stdio_config``, ``build_http_config``,
``build_stdio_command`` and ``build_http_command``.

Builders are immutable after construction and may be shared freely.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import warnings
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

import yaml

from mcp_config_schema.builders.records import ServerRecord
from mcp_config_schema.builders.utils import derive_server_name, substitute_url_variables
from mcp_config_schema.config.client import ClientDescriptor, validate_client_config
from mcp_config_schema.config.server import ServerConnectionOptions, validate_server_config
from mcp_config_schema.config.settings import BuilderSettings, load_settings_from_env
from mcp_config_schema.constants import (
    CONFIG_FORMAT_JSON,
    CONFIG_FORMAT_YAML,
    ERROR_UNSUPPORTED_TRANSPORT,
    STDIO_LAUNCHER,
    STDIO_LAUNCHER_ARGS,
    SUPPORTED_PLATFORMS,
    SUPPORTED_TRANSPORTS,
    TRANSPORT_STDIO,
)
from mcp_config_schema.exceptions import (
    UnsupportedConfigFormatError,
    UnsupportedPlatformError,
    UnsupportedTransportError,
)

logger = logging.getLogger(__name__)

# Maps a transport to a function (client_id, options) -> shell command
CommandBuilder = Mapping[str, Callable[[str, ServerConnectionOptions], str]]


class BaseConfigBuilder(ABC):
    """Base class for per-client config builders.

    Args:
        descriptor: The client descriptor, validated or raw
        server_package: Package launched by stdio entries, overriding the settings
        command_builder: Optional table of per-transport command formatters
        settings: Builder settings; loaded from the environment when omitted
    """

    def __init__(
        self,
        descriptor: ClientDescriptor | Mapping[str, Any],
        *,
        server_package: str | None = None,
        command_builder: CommandBuilder | None = None,
        settings: BuilderSettings | None = None,
    ) -> None:
        if not isinstance(descriptor, ClientDescriptor):
            descriptor = validate_client_config(descriptor)
        # Private copy; later changes to the caller's descriptor are not seen
        self.config = descriptor.model_copy(deep=True)
        self.settings = settings or load_settings_from_env()
        self.server_package = server_package or self.settings.server_package

        if command_builder is not None:
            unknown = set(command_builder) - SUPPORTED_TRANSPORTS
            if unknown:
                raise ValueError(f"Unknown transports in command builder: {', '.join(sorted(unknown))}")
            command_builder = dict(command_builder)
        self.command_builder = command_builder

    @property
    def client_id(self) -> str:
        return self.config.id

    @property
    @abstractmethod
    def root_key(self) -> str:
        """Top-level key wrapping the servers collection in this client's config."""

    # =========================================================================
    # CAPABILITIES
    # =========================================================================

    @abstractmethod
    def build_stdio_config(self, options: ServerConnectionOptions, include_root_object: bool = True) -> dict[str, Any]:
        """Render a locally launched server entry."""

    @abstractmethod
    def build_http_config(self, options: ServerConnectionOptions, include_root_object: bool = True) -> dict[str, Any]:
        """Render a remote server entry."""

    @abstractmethod
    def build_stdio_command(self, options: ServerConnectionOptions) -> str | None:
        """Return a shell command registering a stdio server, or ``None``."""

    @abstractmethod
    def build_http_command(self, options: ServerConnectionOptions) -> str | None:
        """Return a shell command registering an http server, or ``None``."""

    @abstractmethod
    def _normalize_entry(self, entry: Mapping[str, Any]) -> ServerRecord:
        """Convert one rendered entry into a canonical record."""

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def build_configuration(
        self,
        options: ServerConnectionOptions | Mapping[str, Any],
        include_root_object: bool = True,
    ) -> dict[str, Any]:
        """Validate ``options`` if needed and render the entry for its transport.

        Raises:
            SchemaValidationError: If raw ``options`` are invalid
        """
        options = self._coerce_options(options)
        if options.transport == TRANSPORT_STDIO:
            return self.build_stdio_config(options, include_root_object)
        return self.build_http_config(options, include_root_object)

    def build_command(self, options: ServerConnectionOptions | Mapping[str, Any]) -> str | None:
        """Return the client's shell command for ``options``, or ``None``."""
        options = self._coerce_options(options)
        if options.transport == TRANSPORT_STDIO:
            return self.build_stdio_command(options)
        return self.build_http_command(options)

    @staticmethod
    def _coerce_options(options: ServerConnectionOptions | Mapping[str, Any]) -> ServerConnectionOptions:
        if isinstance(options, ServerConnectionOptions):
            return options
        return validate_server_config(options)

    # =========================================================================
    # SHARED HELPERS
    # =========================================================================

    def build_server_name(
        self,
        transport: str,
        server_url: str | None = None,
        server_name: str | None = None,
    ) -> str:
        """Return the stable key the server entry is stored under."""
        return derive_server_name(
            self.settings.server_name_prefix,
            transport,
            server_url=server_url,
            server_name=server_name,
        )

    def substitute_url_variables(self, url: str, variables: Mapping[str, str] | None = None) -> str:
        """Resolve ``[name]`` placeholders in ``url``."""
        return substitute_url_variables(url, variables)

    def stdio_command_vector(self) -> list[str]:
        """Return the launcher and arguments that start the server package."""
        return [STDIO_LAUNCHER, *STDIO_LAUNCHER_ARGS, self.server_package]

    def get_env_vars(self, options: ServerConnectionOptions) -> dict[str, str] | None:
        """Return the environment for a stdio server, or ``None`` if empty."""
        env: dict[str, str] = {}
        if options.instance:
            env[self.settings.instance_env_var] = options.instance
        if options.api_token:
            env[self.settings.api_token_env_var] = options.api_token
        if options.env:
            env.update(options.env)
        return env or None

    def build_headers(self, options: ServerConnectionOptions) -> dict[str, str] | None:
        """Return the headers for an http server, or ``None`` if empty."""
        headers: dict[str, str] = {}
        if options.api_token:
            headers["Authorization"] = f"Bearer {options.api_token}"
        if options.headers:
            headers.update(options.headers)
        return headers or None

    def _ensure_transport_supported(self, transport: str) -> None:
        """Raise if the client does not declare support for ``transport``."""
        if not self.config.supports_transport(transport):
            raise UnsupportedTransportError(
                ERROR_UNSUPPORTED_TRANSPORT.format(client_id=self.client_id, transport=transport.upper()),
                client_id=self.client_id,
                transport=transport,
            )

    def _command_from_table(self, transport: str, options: ServerConnectionOptions) -> str | None:
        """Return the override command for ``transport`` if one was supplied."""
        if self.command_builder and transport in self.command_builder:
            return self.command_builder[transport](self.client_id, options)
        return None

    def _wrap(self, server_name: str, entry: dict[str, Any], include_root_object: bool) -> dict[str, Any]:
        servers = {server_name: entry}
        if not include_root_object:
            return servers
        return {self.root_key: servers}

    # =========================================================================
    # OUTPUT AND NORMALIZATION
    # =========================================================================

    def to_string(self, config: Mapping[str, Any]) -> str:
        """Serialize a rendered config in the client's config format.

        Raises:
            UnsupportedConfigFormatError: For TOML clients
        """
        fmt = self.config.config_format
        if fmt == CONFIG_FORMAT_JSON:
            return json.dumps(config, indent=2)
        if fmt == CONFIG_FORMAT_YAML:
            return yaml.safe_dump(dict(config), sort_keys=False, default_flow_style=False)
        raise UnsupportedConfigFormatError(
            f"Cannot serialize {fmt.upper()} config for client {self.client_id}",
            client_id=self.client_id,
        )

    def get_config_path(self, platform: str | None = None) -> str:
        """Return the client's config file path for ``platform`` with ``~`` and variables expanded.

        Raises:
            UnsupportedPlatformError: If the client has no config path for the platform
        """
        platform = platform or sys.platform
        if platform not in SUPPORTED_PLATFORMS:
            raise UnsupportedPlatformError(f"Unknown platform '{platform}'", client_id=self.client_id)
        path = self.config.config_path.get(platform) if platform in self.config.supported_platforms else None
        if not path:
            raise UnsupportedPlatformError(
                f"Client {self.client_id} has no config path for platform '{platform}'",
                client_id=self.client_id,
            )
        return os.path.expandvars(os.path.expanduser(path))

    def unwrap_servers(self, config: Mapping[str, Any]) -> Mapping[str, Any]:
        """Return the servers collection from a wrapped or bare config."""
        if self.root_key in config and isinstance(config[self.root_key], Mapping):
            return config[self.root_key]
        return config

    def get_normalized_servers_config(self, config: Mapping[str, Any]) -> dict[str, ServerRecord]:
        """Map a rendered config back to canonical server records.

        Accepts the root-wrapped or the bare form. Entries that are not
        mappings are skipped.

        .. deprecated::
            Will be removed in the next major version. Use the output of
            :meth:`build_configuration` directly and pick the shape with
            ``include_root_object``.
        """
        warnings.warn(
            "get_normalized_servers_config() is deprecated and will be removed in the next major version; "
            "use build_configuration() output directly",
            DeprecationWarning,
            stacklevel=2,
        )
        normalized: dict[str, ServerRecord] = {}
        for name, entry in self.unwrap_servers(config).items():
            if isinstance(entry, Mapping):
                normalized[name] = self._normalize_entry(entry)
        return normalized

    def __repr__(self) -> str:
        return f"<{type(self).__name__} client={self.client_id}>"
