"""Pydantic model for the BuildProfile that configures template rendering.

Create a profile through the builder and compose exactly the behaviour you
need::

    from sqlbrace import BuildProfile

    # MySQL rendering with embedded quotes escaped
    profile = BuildProfile.builder("mysql").strict_escaping().build()

    # SQLite rendering; "? " placeholders do not re-emit their space
    profile = BuildProfile.builder("sqlite").no_space_padding().build()

``BuildProfile()`` with no arguments is the default used by
:func:`sqlbrace.build_query`: MySQL quoting, no inner escaping, space
padding on.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from sqlbrace.errors import ProfileConfigError

#: Built-in dialect targets.
DialectTarget = Literal["mysql", "postgres", "sqlite"]


class BuildProfile(BaseModel):
    """Settings for one query builder.

    Attributes:
        target: Dialect used to render literals and identifiers.
        strict_escaping: Escape quote characters inside string literals and
            identifiers.  Off by default, in which case values are wrapped
            in quotes as-is and callers must not pass untrusted text.
        pad_space_specifier: Re-emit the space consumed by a top-level
            ``"? "`` placeholder.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str = "mysql"
    strict_escaping: bool = False
    pad_space_specifier: bool = True

    @classmethod
    def builder(cls, target: DialectTarget | str = "mysql") -> "BuildProfileBuilder":
        """Return a :class:`BuildProfileBuilder` for ``target``.

        Args:
            target: Registered dialect name (``'mysql'``, ``'postgres'``,
                ``'sqlite'``, or any custom registration).

        Returns:
            A fresh :class:`BuildProfileBuilder`.
        """
        return BuildProfileBuilder(target=target)


class BuildProfileBuilder:
    """Fluent builder for :class:`BuildProfile`.

    Always obtained via :meth:`BuildProfile.builder`.
    """

    def __init__(self, target: str) -> None:
        self._target = target
        self._strict_escaping: bool = False
        self._pad_space_specifier: bool = True

    def strict_escaping(self) -> "BuildProfileBuilder":
        """Escape embedded quotes (and backslashes, for MySQL)."""
        self._strict_escaping = True
        return self

    def no_space_padding(self) -> "BuildProfileBuilder":
        """Drop the space consumed by a top-level ``"? "`` placeholder."""
        self._pad_space_specifier = False
        return self

    def build(self) -> BuildProfile:
        """Validate the configuration and return the :class:`BuildProfile`.

        Raises:
            ProfileConfigError: When ``target`` names no registered dialect.
        """
        self._validate()
        return BuildProfile(
            target=self._target,
            strict_escaping=self._strict_escaping,
            pad_space_specifier=self._pad_space_specifier,
        )

    def _validate(self) -> None:
        from sqlbrace.compile.registry import DialectFactory

        if not self._target:
            raise ProfileConfigError(
                "No dialect target specified. Pass a target name to "
                "BuildProfile.builder(target=...).",
                missing=["target"],
                reason="Literals and identifiers are rendered by a dialect.",
            )

        if self._target not in DialectFactory.registered_targets():
            raise ProfileConfigError(
                f"Unknown dialect target: '{self._target}'. "
                f"Registered targets: {DialectFactory.registered_targets()}. "
                "Register a custom dialect with "
                "@DialectFactory.register(name) before building the profile.",
                missing=["target"],
                reason="Every profile must resolve to a registered dialect.",
            )
