"""Authentication schemas for client descriptors."""

from pydantic import BaseModel, Field

from mcp_config_schema.config.validation import Schema
from mcp_config_schema.constants import AuthMode


class OAuthDcrConfig(BaseModel):
    """OAuth dynamic client registration support.

    ``redirect_uri_patterns`` are opaque strings and may contain ``*``
    wildcard segments, e.g. ``http://localhost:*/callback``.
    """

    redirect_uri_patterns: list[str] = Field(min_length=1)


class OAuthConfig(BaseModel):
    """OAuth support declared by a client. An empty object means OAuth without DCR."""

    dcr: OAuthDcrConfig | None = None


SupportedAuthSchema: Schema[str] = Schema(AuthMode, name="SupportedAuth")
OAuthDcrSchema: Schema[OAuthDcrConfig] = Schema(OAuthDcrConfig, name="OAuthDcr")
OAuthSchema: Schema[OAuthConfig] = Schema(OAuthConfig, name="OAuth")
