"""Simple registry mapping client ids to builder classes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mcp_config_schema.builders.base import BaseConfigBuilder
from mcp_config_schema.builders.generic import GenericConfigBuilder
from mcp_config_schema.builders.opencode import OpenCodeConfigBuilder
from mcp_config_schema.config.client import ClientDescriptor, validate_client_config
from mcp_config_schema.constants import CLIENT_OPENCODE, KNOWN_CLIENT_IDS

_BUILDERS: dict[str, type[BaseConfigBuilder]] = {
    CLIENT_OPENCODE: OpenCodeConfigBuilder,
}


def register_builder(client_id: str, builder_cls: type[BaseConfigBuilder]) -> None:
    """Register the builder class used for ``client_id``."""
    if client_id not in KNOWN_CLIENT_IDS:
        raise KeyError(f"Unknown client id '{client_id}'")
    if not (isinstance(builder_cls, type) and issubclass(builder_cls, BaseConfigBuilder)):
        raise TypeError(f"Builder for '{client_id}' must subclass BaseConfigBuilder")
    _BUILDERS[client_id] = builder_cls


def get_builder_class(client_id: str) -> type[BaseConfigBuilder]:
    """Return the builder class for ``client_id``, defaulting to the generic builder."""
    return _BUILDERS.get(client_id, GenericConfigBuilder)


def create_builder(descriptor: ClientDescriptor | Mapping[str, Any], **kwargs: Any) -> BaseConfigBuilder:
    """Create the builder for a client descriptor.

    Keyword arguments are passed to the builder constructor.
    """
    if not isinstance(descriptor, ClientDescriptor):
        descriptor = validate_client_config(descriptor)
    return get_builder_class(descriptor.id)(descriptor, **kwargs)


def registered_builders() -> dict[str, type[BaseConfigBuilder]]:
    """Return a copy of the explicit client id to builder mapping."""
    return dict(_BUILDERS)
