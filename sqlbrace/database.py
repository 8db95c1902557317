"""Caller-facing facade pairing a builder with the skip marker.

sqlbrace never executes SQL.  Applications wrap their own connection in a
class that satisfies :class:`DatabaseInterface` (usually by holding a
:class:`Database`) and hand the finished string to their driver::

    db = Database(BuildProfile.builder("mysql").strict_escaping().build())

    sql = db.build_query(
        "SELECT name FROM users WHERE user_id = ?d{ AND block = ?d}",
        [1, db.skip()],
    )
    cursor.execute(sql)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from sqlbrace.compile.builder import QueryBuilder
from sqlbrace.schema.profile import BuildProfile
from sqlbrace.schema.values import SKIP, SkipValue


@runtime_checkable
class DatabaseInterface(Protocol):
    """The two operations every template-building database object offers."""

    def build_query(self, query: str, args: Sequence[Any] | None = ()) -> str: ...

    def skip(self) -> SkipValue: ...


class Database:
    """Builds queries for one dialect configuration.

    Args:
        profile: Rendering settings; defaults to ``BuildProfile()``.
    """

    def __init__(self, profile: BuildProfile | None = None) -> None:
        self._builder = QueryBuilder(profile)

    @property
    def dialect_name(self) -> str:
        return self._builder.context.dialect.dialect_name

    @property
    def profile(self) -> BuildProfile:
        return self._builder.profile

    def build_query(self, query: str, args: Sequence[Any] | None = ()) -> str:
        """Build ``query`` with ``args``; see :meth:`QueryBuilder.build`."""
        return self._builder.build(query, args)

    def skip(self) -> SkipValue:
        """Return the marker that, as the last argument, drops conditional blocks."""
        return SKIP
