"""Constants for mcp-config-schema.

Closed enumerations used by the schemas and builders, plus default values
for builder settings.
"""

from typing import Literal, get_args

# Transport identifiers
TRANSPORT_STDIO = "stdio"
TRANSPORT_HTTP = "http"

Transport = Literal["stdio", "http"]
SUPPORTED_TRANSPORTS = frozenset(get_args(Transport))

# Platform identifiers (values of ``sys.platform``)
Platform = Literal["darwin", "linux", "win32"]
SUPPORTED_PLATFORMS = frozenset(get_args(Platform))

# Config file formats
CONFIG_FORMAT_JSON = "json"
CONFIG_FORMAT_YAML = "yaml"
CONFIG_FORMAT_TOML = "toml"

ConfigFormat = Literal["json", "yaml", "toml"]
SUPPORTED_CONFIG_FORMATS = frozenset(get_args(ConfigFormat))

# Authentication modes
AuthMode = Literal["token", "oauth:dcr"]

# Known client identifiers
CLIENT_OPENCODE = "opencode"

ClientId = Literal[
    "amp",
    "chatgpt",
    "claude-code",
    "claude-desktop",
    "claude-teams-enterprise",
    "codex",
    "cursor",
    "gemini",
    "goose",
    "jetbrains",
    "junie",
    "opencode",
    "vscode",
    "windsurf",
]
KNOWN_CLIENT_IDS = frozenset(get_args(ClientId))

# Builder defaults
DEFAULT_SERVER_PACKAGE = "@gleanwork/local-mcp-server"
DEFAULT_SERVER_NAME_PREFIX = "glean"
DEFAULT_INSTANCE_ENV_VAR = "GLEAN_INSTANCE"
DEFAULT_API_TOKEN_ENV_VAR = "GLEAN_API_TOKEN"
STDIO_LAUNCHER = "npx"
STDIO_LAUNCHER_ARGS = ("-y",)

# Root key used by OpenCode config files
OPENCODE_ROOT_KEY = "mcp"

# Error message constants
ERROR_HTTP_URL_REQUIRED = "HTTP transport requires a server URL"
ERROR_UNSUPPORTED_TRANSPORT = "Client {client_id} doesn't support {transport} server configuration"
