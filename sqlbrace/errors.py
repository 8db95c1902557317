"""Custom exception hierarchy for sqlbrace.

All public errors inherit from SqlBraceError so callers can catch the base
class for any sqlbrace-specific failure.
"""
from __future__ import annotations

from typing import Any


class SqlBraceError(Exception):
    """Base exception for all sqlbrace errors."""


class FormatError(SqlBraceError):
    """Raised when a query template is structurally broken.

    A template that raises ``FormatError`` will never build, so callers
    should treat it as non-retryable.

    Args:
        message: Human-readable description.
        position: Offset in the template where the problem was found.
        template: The template text being built.
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        template: str | None = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.template = template

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for logging or APIs."""
        return {
            "error": "FORMAT_ERROR",
            "message": str(self),
            "position": self.position,
        }


class ArgumentTypeError(SqlBraceError, TypeError):
    """Raised when an argument cannot be rendered by its placeholder.

    Examples are ``?a`` bound to a scalar, a nested container, a non-finite
    float, or the skip marker bound to a placeholder.

    Args:
        message: Human-readable description.
        specifier: The placeholder specifier, when known.
        value: The offending argument.
    """

    def __init__(
        self,
        message: str,
        specifier: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.specifier = specifier
        self.value = value


class ProfileConfigError(SqlBraceError):
    """Raised when a BuildProfile is misconfigured.

    Detected at :meth:`BuildProfileBuilder.build` time so the developer gets
    a clear message before any template is built.

    Args:
        message: Human-readable description.
        missing: Setting(s) that must be changed on the builder.
        reason: Why the setting is required.
    """

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.missing = missing or []
        self.reason = reason or ""


class DialectError(SqlBraceError):
    """Raised when no dialect is registered under the requested name.

    Args:
        message: Human-readable description.
        target: The requested dialect name.
    """

    def __init__(self, message: str, target: str | None = None) -> None:
        super().__init__(message)
        self.target = target
