"""Builder settings loaded from environment variables."""

import logging
import os
from dataclasses import dataclass

from mcp_config_schema.constants import (
    DEFAULT_API_TOKEN_ENV_VAR,
    DEFAULT_INSTANCE_ENV_VAR,
    DEFAULT_SERVER_NAME_PREFIX,
    DEFAULT_SERVER_PACKAGE,
)

logger = logging.getLogger(__name__)

ENV_SERVER_PACKAGE = "MCP_CONFIG_SERVER_PACKAGE"
ENV_SERVER_NAME_PREFIX = "MCP_CONFIG_SERVER_NAME_PREFIX"
ENV_INSTANCE_ENV_VAR = "MCP_CONFIG_INSTANCE_ENV_VAR"
ENV_API_TOKEN_ENV_VAR = "MCP_CONFIG_API_TOKEN_ENV_VAR"


@dataclass(frozen=True)
class BuilderSettings:
    """Read-only settings shared by config builders.

    Attributes:
        server_package: Package launched by stdio entries (``npx -y <package>``)
        server_name_prefix: Prefix for derived server names
        instance_env_var: Environment variable that receives ``instance``
        api_token_env_var: Environment variable that receives ``apiToken``
    """

    server_package: str = DEFAULT_SERVER_PACKAGE
    server_name_prefix: str = DEFAULT_SERVER_NAME_PREFIX
    instance_env_var: str = DEFAULT_INSTANCE_ENV_VAR
    api_token_env_var: str = DEFAULT_API_TOKEN_ENV_VAR


def load_settings_from_env() -> BuilderSettings:
    """Load builder settings from environment variables.

    Blank values are ignored with a warning and the default is kept.

    Returns:
        BuilderSettings populated from the environment
    """

    def _get_env(key: str, default: str) -> str:
        value = os.getenv(key)
        if value is None:
            return default
        if not value.strip():
            logger.warning(f"Empty value for {key}. Using default value: {default}.")
            return default
        return value.strip()

    return BuilderSettings(
        server_package=_get_env(ENV_SERVER_PACKAGE, DEFAULT_SERVER_PACKAGE),
        server_name_prefix=_get_env(ENV_SERVER_NAME_PREFIX, DEFAULT_SERVER_NAME_PREFIX),
        instance_env_var=_get_env(ENV_INSTANCE_ENV_VAR, DEFAULT_INSTANCE_ENV_VAR),
        api_token_env_var=_get_env(ENV_API_TOKEN_ENV_VAR, DEFAULT_API_TOKEN_ENV_VAR),
    )
