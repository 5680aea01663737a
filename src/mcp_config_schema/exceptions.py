"""Exception types for mcp-config-schema."""

from __future__ import annotations

from typing import Any


class MCPConfigError(Exception):
    """Base exception for all mcp-config-schema errors."""

    def __init__(
        self,
        message: str,
        client_id: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize MCPConfigError.

        Args:
            message: The error message
            client_id: Optional id of the client the error relates to
            details: Optional extra structured context
        """
        self.client_id = client_id
        self.details: dict[str, Any] = dict(details or {})
        super().__init__(message)


class SchemaValidationError(MCPConfigError, ValueError):
    """Input failed one or more schema constraints.

    Attributes:
        issues: Ordered list of :class:`ValidationIssue`, in schema declaration order
        schema: Name of the schema that rejected the input
    """

    def __init__(self, issues: list, schema: str = "input", *, details: dict[str, Any] | None = None) -> None:
        self.issues = list(issues)
        self.schema = schema
        super().__init__(self._format_message(schema, self.issues), details=details)

    @staticmethod
    def _format_message(schema: str, issues: list) -> str:
        lines = [f"Invalid {schema} ({len(issues)} issue{'s' if len(issues) != 1 else ''}):"]
        for issue in issues:
            location = ".".join(str(part) for part in issue.path) or "<root>"
            lines.append(f"  {location}: {issue.message}")
        return "\n".join(lines)


class BuilderPreconditionError(MCPConfigError, ValueError):
    """A builder was invoked without the data its transport requires."""


class UnsupportedTransportError(MCPConfigError):
    """A builder was asked to render a transport its client does not support."""

    def __init__(
        self,
        message: str,
        client_id: str | None = None,
        transport: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.transport = transport
        super().__init__(message, client_id, details=details)


class UnsupportedPlatformError(MCPConfigError):
    """The client has no configuration for the requested platform."""


class UnsupportedConfigFormatError(MCPConfigError):
    """The config format cannot be produced or parsed."""


class ConfigLoadError(MCPConfigError):
    """A configuration file could not be read or parsed."""
