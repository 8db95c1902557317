"""sqlbrace – positional SQL templates with typed placeholders.

Fill in the blanks. Drop the braces.

Public API
----------
``build_query``
    Substitute positional arguments into a query template and return the
    finished SQL string.

``skip``
    The marker that, passed as the last argument, drops every ``{...}``
    block of the template.

``escape_value`` / ``escape_identifier`` / ``format_array`` / ``process_specifier``
    The individual renderers, for callers assembling SQL by hand.

Template grammar
----------------
``?d`` integer, ``?f`` float, ``?a`` list or ``name = value`` assignments,
``?#`` identifier(s), ``?`` + any other character a plain literal.
``{ ... }`` is a conditional block whose placeholders bind arguments from
the end of the list::

    import sqlbrace

    sqlbrace.build_query(
        "SELECT ?# FROM users WHERE user_id = ?d{ AND block = ?d}",
        [["name", "email"], 2, True],
    )
    # -> "SELECT `name`, `email` FROM users WHERE user_id = 2 AND block = 1"

Extensibility
-------------
New dialects can be registered via::

    from sqlbrace.compile.registry import DialectFactory

    @DialectFactory.register("mssql")
    class MSSQLDialect(SQLDialect):
        ...

After registration, ``BuildProfile.builder("mssql")`` picks it up.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlbrace.compile.base import SQLDialect
from sqlbrace.compile.block import ConditionalBlockEvaluator
from sqlbrace.compile.builder import QueryBuilder
from sqlbrace.compile.context import BuildContext
from sqlbrace.compile.dispatcher import SpecifierDispatcher
from sqlbrace.compile.escaper import ValueEscaper
from sqlbrace.compile.formatter import ArrayFormatter
from sqlbrace.compile.mysql import MySQLDialect
from sqlbrace.compile.postgres import PostgresDialect
from sqlbrace.compile.registry import DialectFactory, SpecifierRegistry
from sqlbrace.compile.sqlite import SQLiteDialect
from sqlbrace.database import Database, DatabaseInterface
from sqlbrace.errors import (
    ArgumentTypeError,
    DialectError,
    FormatError,
    ProfileConfigError,
    SqlBraceError,
)
from sqlbrace.schema.profile import BuildProfile, BuildProfileBuilder
from sqlbrace.schema.values import (
    SKIP,
    ArgValue,
    BoolValue,
    ContainerEntry,
    ContainerValue,
    FloatValue,
    IntValue,
    NullValue,
    SkipValue,
    TextValue,
    to_value,
)

# ---------------------------------------------------------------------------
# Register built-in dialects with DialectFactory
# ---------------------------------------------------------------------------

DialectFactory.register_class("mysql", MySQLDialect)
DialectFactory.register_class("postgres", PostgresDialect)
DialectFactory.register_class("sqlite", SQLiteDialect)

__all__ = [
    # Core pipeline
    "build_query",
    "skip",
    "escape_value",
    "escape_identifier",
    "format_array",
    "process_specifier",
    # Values
    "ArgValue",
    "BoolValue",
    "ContainerEntry",
    "ContainerValue",
    "FloatValue",
    "IntValue",
    "NullValue",
    "SkipValue",
    "TextValue",
    "to_value",
    # Configuration
    "BuildProfile",
    "BuildProfileBuilder",
    # Building
    "QueryBuilder",
    "BuildContext",
    "SpecifierDispatcher",
    "ConditionalBlockEvaluator",
    "ValueEscaper",
    "ArrayFormatter",
    "Database",
    "DatabaseInterface",
    # Dialects
    "SQLDialect",
    "DialectFactory",
    "SpecifierRegistry",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    # Errors
    "SqlBraceError",
    "FormatError",
    "ArgumentTypeError",
    "ProfileConfigError",
    "DialectError",
]


def build_query(
    template: str,
    args: Sequence[Any] | None = (),
    profile: BuildProfile | None = None,
) -> str:
    """Substitute ``args`` into ``template`` and return the SQL string.

    This is the main entry point::

        sql = sqlbrace.build_query(
            "UPDATE users SET ?a WHERE user_id = ?d",
            [{"name": "Jack", "email": None}, 1],
        )
        cursor.execute(sql)

    Args:
        template: Query text with placeholders and conditional blocks.
        args: Positional arguments (plain Python values or typed values).
        profile: Optional rendering settings; defaults to ``BuildProfile()``.

    Returns:
        The finished SQL string.

    Raises:
        FormatError: If the template is malformed.
        ArgumentTypeError: If an argument does not fit its placeholder.
    """
    return QueryBuilder(profile).build(template, args)


def skip() -> SkipValue:
    """Return the marker that, as the last argument, drops conditional blocks."""
    return SKIP


def escape_value(value: Any, profile: BuildProfile | None = None) -> str:
    """Render one scalar as an SQL literal."""
    return BuildContext.from_profile(profile or BuildProfile()).escaper.escape_value(value)


def escape_identifier(name: str, profile: BuildProfile | None = None) -> str:
    """Render ``name`` as a quoted identifier."""
    return BuildContext.from_profile(profile or BuildProfile()).escaper.escape_identifier(name)


def format_array(container: Any, profile: BuildProfile | None = None) -> str:
    """Render a list or mapping the way ``?a`` does."""
    return BuildContext.from_profile(profile or BuildProfile()).formatter.format_array(container)


def process_specifier(specifier: str, arg: Any, profile: BuildProfile | None = None) -> str:
    """Render ``arg`` the way placeholder ``?<specifier>`` does."""
    return QueryBuilder(profile).process_specifier(specifier, arg)
