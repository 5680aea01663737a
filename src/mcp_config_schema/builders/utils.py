"""Helpers shared by config builders."""

import logging
import re
from collections.abc import Mapping

from mcp_config_schema.constants import TRANSPORT_STDIO

logger = logging.getLogger(__name__)

_PLACEHOLDER_PATTERN = re.compile(r"\[([^\[\]]+)\]")
_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
# Scheme and authority, which may hold [placeholder] segments
_AUTHORITY_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://[^/?#]*")
_MCP_ENDPOINT_PATTERN = re.compile(r"/mcp/([^/?#]+)")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9_]+")


def slugify(value: str) -> str:
    """Lowercase ``value`` and collapse runs of other characters to ``_``."""
    return _NON_SLUG_CHARS.sub("_", value.lower()).strip("_")


def substitute_url_variables(url: str, variables: Mapping[str, str] | None = None) -> str:
    """Replace ``[name]`` placeholders in ``url`` with values from ``variables``.

    Placeholders without a value are left in place.
    """
    variables = variables or {}
    unresolved: list[str] = []

    def _replace(match: re.Match) -> str:
        key = match.group(1)
        if key in variables:
            return str(variables[key])
        unresolved.append(key)
        return match.group(0)

    resolved = _PLACEHOLDER_PATTERN.sub(_replace, url)
    if unresolved:
        logger.warning(f"Unresolved URL variables in '{url}': {', '.join(unresolved)}")
    return resolved


def derive_server_name(
    prefix: str,
    transport: str,
    server_url: str | None = None,
    server_name: str | None = None,
) -> str:
    """Return the key a server entry is stored under.

    The result depends only on the arguments:

    * an explicit ``server_name`` is slugified and prefixed with ``<prefix>_``
      unless it already starts with ``prefix``;
    * a stdio server without a name is ``<prefix>_local``;
    * an http server uses the path segment after ``/mcp/``, giving
      ``<prefix>_<segment>``. Without such a segment, or when it is still an
      unresolved ``[placeholder]``, the slugified host and path are used
      instead, so unrelated URLs get distinct names;
    * an http server without a URL is plain ``<prefix>``.
    """
    prefix = slugify(prefix)

    if server_name:
        name = slugify(server_name)
        if not name:
            return prefix
        if name == prefix or name.startswith(f"{prefix}_"):
            return name
        return f"{prefix}_{name}"

    if transport == TRANSPORT_STDIO:
        return f"{prefix}_local"

    if not server_url:
        return prefix

    match = _MCP_ENDPOINT_PATTERN.search(_AUTHORITY_PATTERN.sub("", server_url))
    if match and not _PLACEHOLDER_PATTERN.search(match.group(1)):
        segment = slugify(match.group(1))
        if segment:
            return f"{prefix}_{segment}"

    location = slugify(_SCHEME_PATTERN.sub("", server_url).split("?", 1)[0].split("#", 1)[0])
    return f"{prefix}_{location}" if location else prefix
