"""Validation engine built on pydantic ``TypeAdapter``.

Every schema exposes two modes:

* ``parse`` (strict) returns the validated value or raises
  :class:`~mcp_config_schema.exceptions.SchemaValidationError`.
* ``safe_parse`` never raises for invalid input and returns a
  :class:`ParseResult` instead.

Issues are reported in schema declaration order, so ``issues[0]`` is the
first offending field.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from mcp_config_schema.exceptions import SchemaValidationError

T = TypeVar("T")


@dataclass
class ValidationIssue:
    """A single field-level validation failure.

    Attributes:
        path: Location of the offending field, using the wire (camelCase) names
        message: Human-readable description of the failure
        code: Machine-readable error type reported by pydantic
    """

    path: list[str | int]
    message: str
    code: str = "invalid"

    @classmethod
    def from_pydantic(cls, error: Mapping[str, Any]) -> "ValidationIssue":
        """Create an issue from one entry of ``ValidationError.errors()``."""
        return cls(
            path=list(error.get("loc", ())),
            message=error.get("msg", "Invalid value"),
            code=error.get("type", "invalid"),
        )


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a safe-mode validation.

    Exactly one of ``value`` (on success) or ``error`` (on failure) is set.
    """

    success: bool
    value: T | None = None
    error: SchemaValidationError | None = field(default=None)

    @property
    def issues(self) -> list[ValidationIssue]:
        """Return the issue list, empty on success."""
        return self.error.issues if self.error is not None else []


def issues_from_validation_error(exc: ValidationError) -> list[ValidationIssue]:
    """Convert a pydantic ``ValidationError`` into ordered issues."""
    return [ValidationIssue.from_pydantic(err) for err in exc.errors(include_url=False)]


class Schema(Generic[T]):
    """A named schema wrapping a pydantic ``TypeAdapter``."""

    def __init__(self, type_: Any, *, name: str | None = None) -> None:
        self._adapter: TypeAdapter = TypeAdapter(type_)
        self.name = name or getattr(type_, "__name__", repr(type_))

    def parse(self, data: Any) -> T:
        """Validate ``data`` and return the typed value.

        Raises:
            SchemaValidationError: If ``data`` violates the schema
        """
        try:
            return self._adapter.validate_python(data)
        except ValidationError as exc:
            raise SchemaValidationError(issues_from_validation_error(exc), schema=self.name) from exc

    def safe_parse(self, data: Any) -> ParseResult[T]:
        """Validate ``data`` without raising for schema violations."""
        try:
            value = self.parse(data)
        except SchemaValidationError as exc:
            return ParseResult(success=False, error=exc)
        return ParseResult(success=True, value=value)

    def json_schema(self) -> dict[str, Any]:
        """Return the JSON Schema for this schema's type."""
        return self._adapter.json_schema(by_alias=True)

    def __repr__(self) -> str:
        return f"<Schema {self.name}>"


class TransportSchema(Schema[T]):
    """Schema for a union selected by a discriminant field.

    The discriminant is validated first against ``selector``, so a missing or
    unknown value is reported at the discriminant's own path. The matching
    variant is validated next.
    """

    def __init__(
        self,
        selector: type,
        variants: Mapping[str, type],
        *,
        discriminator: str = "transport",
        name: str | None = None,
    ) -> None:
        self._selector = Schema(selector, name=name)
        self._variants = {key: Schema(model, name=name) for key, model in variants.items()}
        self.discriminator = discriminator
        self.name = name or selector.__name__

    def parse(self, data: Any) -> T:
        selected = self._selector.parse(data)
        key = getattr(selected, self.discriminator)
        return self._variants[key].parse(data)

    def json_schema(self) -> dict[str, Any]:
        return {"oneOf": [schema.json_schema() for schema in self._variants.values()]}
