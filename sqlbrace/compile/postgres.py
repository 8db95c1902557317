"""PostgreSQL dialect."""

from __future__ import annotations

from sqlbrace.compile.base import SQLDialect


class PostgresDialect(SQLDialect):
    """Renders literals for PostgreSQL.

    Booleans are rendered as ``TRUE`` / ``FALSE``; PostgreSQL does not cast
    integers to ``boolean`` implicitly.  With ``standard_conforming_strings``
    on (the default since 9.1) backslashes are literal, so only single
    quotes are doubled.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def quote_identifier(self, name: str, escape: bool = False) -> str:
        if escape:
            name = name.replace('"', '""')
        return f'"{name}"'

    def escape_string(self, text: str) -> str:
        return text.replace("'", "''")

    def bool_literal(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"
