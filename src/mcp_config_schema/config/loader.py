"""Load client descriptors and existing client config files."""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Union

import yaml

from mcp_config_schema.config.client import ClientDescriptor, validate_client_config
from mcp_config_schema.constants import (
    CONFIG_FORMAT_JSON,
    CONFIG_FORMAT_TOML,
    CONFIG_FORMAT_YAML,
    SUPPORTED_CONFIG_FORMATS,
)
from mcp_config_schema.exceptions import ConfigLoadError, UnsupportedConfigFormatError

logger = logging.getLogger(__name__)


def detect_format(path: Path) -> str:
    """Return the config format implied by the file suffix."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        return CONFIG_FORMAT_JSON
    if suffix in [".yaml", ".yml"]:
        return CONFIG_FORMAT_YAML
    if suffix == ".toml":
        return CONFIG_FORMAT_TOML
    raise UnsupportedConfigFormatError(f"Unsupported file format: {suffix} (expected .json, .yaml, .yml, or .toml)")


def loads_config(text: str, format: str) -> dict[str, Any]:
    """Parse the body of a config file.

    Args:
        text: File contents
        format: One of ``json``, ``yaml`` or ``toml``

    Returns:
        The parsed mapping. An empty document yields ``{}``.

    Raises:
        UnsupportedConfigFormatError: If ``format`` is unknown
        ConfigLoadError: If the text cannot be parsed or is not a mapping
    """
    fmt = format.lower()
    if fmt not in SUPPORTED_CONFIG_FORMATS:
        raise UnsupportedConfigFormatError(f"Unknown format: {format}")

    try:
        if fmt == CONFIG_FORMAT_JSON:
            data = json.loads(text) if text.strip() else {}
        elif fmt == CONFIG_FORMAT_YAML:
            data = yaml.safe_load(text)
        else:
            data = tomllib.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigLoadError(f"Error parsing {fmt.upper()} config: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping at the top level of the {fmt.upper()} config, got {type(data).__name__}")
    return data


def load_config_file(file_path: Union[str, Path], *, format: str = "auto") -> dict[str, Any]:
    """Read and parse a config file from disk."""
    path = Path(file_path)
    fmt = detect_format(path) if format == "auto" else format
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Error reading config file {path}: {e}") from e
    logger.debug(f"Loaded {fmt} config from {path}")
    return loads_config(text, fmt)


def load_client_descriptor(file_path: Union[str, Path], *, format: str = "auto") -> ClientDescriptor:
    """Load and validate a client descriptor from a JSON, YAML or TOML file.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed
        SchemaValidationError: If the contents are not a valid descriptor
    """
    return validate_client_config(load_config_file(file_path, format=format))
