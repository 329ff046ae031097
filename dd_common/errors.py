"""Error types shared by the selection engine, the loaders and the CLI."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _jsonable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {str(key): _jsonable(val) for key, val in context.items()}


class DDError(Exception):
    """Base for failures the CLI reports instead of crashing.

    ``context`` holds JSON-friendly values (paths and other objects become
    strings) so it can be logged or presented as-is.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ConfigurationError(DDError):
    """Selector wired up with missing or invalid options or records."""

    @classmethod
    def missing_field(cls, index: int, field: str) -> "ConfigurationError":
        return cls(
            f"Record at index {index}: field {field} not found",
            context={"index": index, "field": field},
        )


class DataLoadError(DDError):
    """A collection file is missing, unreadable or not a list."""

    @property
    def path(self) -> str | None:
        return self.context.get("path")


E = TypeVar("E", bound=DDError)


def wrap_error(
    error_cls: type[E],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> E:
    """Create a typed DDError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: DDError) -> dict[str, Any]:
    """Flatten a DDError for presenters and log records."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
