"""Unit tests for DialectFactory and SpecifierRegistry."""

from __future__ import annotations

import pytest

import sqlbrace
from sqlbrace.compile.base import SQLDialect
from sqlbrace.compile.mysql import MySQLDialect
from sqlbrace.compile.registry import DialectFactory, SpecifierRegistry
from sqlbrace.errors import DialectError
from sqlbrace.schema.profile import BuildProfile


def test_builtin_dialects_are_registered():
    assert {"mysql", "postgres", "sqlite"} <= set(DialectFactory.registered_targets())
    assert isinstance(DialectFactory.create("mysql"), MySQLDialect)


def test_unknown_dialect_raises():
    with pytest.raises(DialectError) as exc_info:
        DialectFactory.create("nope")
    assert exc_info.value.target == "nope"


def test_custom_dialect_is_picked_up_by_profiles():
    @DialectFactory.register("bracketed")
    class BracketDialect(SQLDialect):
        @property
        def dialect_name(self) -> str:
            return "bracketed"

        def quote_identifier(self, name: str, escape: bool = False) -> str:
            if escape:
                name = name.replace("]", "]]")
            return f"[{name}]"

        def escape_string(self, text: str) -> str:
            return text.replace("'", "''")

    profile = BuildProfile.builder("bracketed").build()
    assert sqlbrace.build_query("SELECT ?# FROM t", ["id"], profile) == "SELECT [id] FROM t"


def test_builtin_specifiers_are_registered():
    assert SpecifierRegistry.registered_specifiers() == ["#", "a", "d", "f"]


def test_custom_specifier():
    @SpecifierRegistry.register("u")
    def _upper(specifier, arg, ctx):
        return ctx.escaper.escape_value(arg).upper()

    try:
        assert sqlbrace.build_query("SELECT ?u", ["abc"]) == "SELECT 'ABC'"
    finally:
        SpecifierRegistry.unregister("u")

    assert sqlbrace.build_query("SELECT ?u", ["abc"]) == "SELECT 'abc'"


def test_specifier_must_be_one_character():
    with pytest.raises(ValueError):
        SpecifierRegistry.register_handler("dd", lambda s, a, c: "")
