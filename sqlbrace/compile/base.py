"""Dialect abstraction: the SQLDialect ABC.

The Template Method pattern (GoF) is used:
- ``SQLDialect`` fixes how each literal kind is rendered and leaves the
  dialect-specific steps (quote characters, escaping, boolean text) to
  subclasses.
- ``MySQLDialect``, ``PostgresDialect`` and ``SQLiteDialect`` override those
  steps.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class SQLDialect(ABC):
    """Abstract base for dialect-specific literal rendering.

    Subclasses implement the quoting rules; the ``ValueEscaper`` uses this
    interface via the Strategy / Template Method patterns.
    """

    #: Text used for SQL NULL.
    null_literal: str = "NULL"

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (e.g. ``'mysql'``)."""

    @abstractmethod
    def quote_identifier(self, name: str, escape: bool = False) -> str:
        """Return a quoted SQL identifier.

        Args:
            name: Unquoted identifier (table or column name).
            escape: Double any embedded quote character.

        Returns:
            Quoted identifier.
        """

    @abstractmethod
    def escape_string(self, text: str) -> str:
        """Return ``text`` with embedded quote characters escaped.

        Args:
            text: The raw string contents.

        Returns:
            Text safe to place between single quotes.
        """

    def quote_string(self, text: str, escape: bool = False) -> str:
        """Return ``text`` as a single-quoted string literal.

        Args:
            text: The raw string contents.
            escape: Escape embedded quotes via :meth:`escape_string`.
                When ``False`` the text is wrapped as-is.
        """
        if escape:
            text = self.escape_string(text)
        return f"'{text}'"

    def bool_literal(self, value: bool) -> str:
        """Return the literal for a boolean; ``1`` / ``0`` unless overridden."""
        return "1" if value else "0"
