"""Build context value object.

Packages the ``(profile, dialect, escaper, formatter)`` data clump shared by
the builder, the block evaluator and every specifier handler into a single
cohesive object.
"""
from __future__ import annotations

from dataclasses import dataclass

from sqlbrace.compile.base import SQLDialect
from sqlbrace.compile.escaper import ValueEscaper
from sqlbrace.compile.formatter import ArrayFormatter
from sqlbrace.compile.registry import DialectFactory
from sqlbrace.schema.profile import BuildProfile


@dataclass(frozen=True)
class BuildContext:
    """Immutable context shared by one builder.

    Attributes:
        profile: The settings the builder was created with.
        dialect: Dialect resolved from ``profile.target``.
        escaper: Scalar literal and identifier renderer.
        formatter: Container renderer.
    """

    profile: BuildProfile
    dialect: SQLDialect
    escaper: ValueEscaper
    formatter: ArrayFormatter

    @classmethod
    def from_profile(cls, profile: BuildProfile) -> BuildContext:
        """Resolve the dialect for ``profile`` and wire the renderers."""
        dialect = DialectFactory.create(profile.target)
        escaper = ValueEscaper(dialect, strict=profile.strict_escaping)
        return cls(
            profile=profile,
            dialect=dialect,
            escaper=escaper,
            formatter=ArrayFormatter(escaper),
        )
