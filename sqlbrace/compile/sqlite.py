"""SQLite dialect."""
from __future__ import annotations

from sqlbrace.compile.base import SQLDialect


class SQLiteDialect(SQLDialect):
    """Renders literals for SQLite.

    SQLite stores booleans as integers, so ``1`` / ``0`` is kept.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def quote_identifier(self, name: str, escape: bool = False) -> str:
        if escape:
            name = name.replace('"', '""')
        return f'"{name}"'

    def escape_string(self, text: str) -> str:
        return text.replace("'", "''")
