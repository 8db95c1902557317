"""MySQL dialect."""

from __future__ import annotations

from sqlbrace.compile.base import SQLDialect


class MySQLDialect(SQLDialect):
    """Renders literals for MySQL / MariaDB.

    Identifiers are quoted with backticks (`` ` ``) rather than double-quotes.

    Note: with the default ``NO_BACKSLASH_ESCAPES`` mode off, MySQL treats a
    backslash inside a string literal as an escape character, so strict
    escaping doubles backslashes as well as single quotes.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def quote_identifier(self, name: str, escape: bool = False) -> str:
        if escape:
            name = name.replace("`", "``")
        return f"`{name}`"

    def escape_string(self, text: str) -> str:
        return text.replace("\\", "\\\\").replace("'", "''")
