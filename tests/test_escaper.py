"""Unit tests for ValueEscaper and the dialects."""

from __future__ import annotations

import math

import pytest

import sqlbrace
from sqlbrace.compile.escaper import ValueEscaper, format_float
from sqlbrace.compile.mysql import MySQLDialect
from sqlbrace.compile.postgres import PostgresDialect
from sqlbrace.compile.sqlite import SQLiteDialect
from sqlbrace.errors import ArgumentTypeError


def _my(strict: bool = False) -> ValueEscaper:
    return ValueEscaper(MySQLDialect(), strict=strict)


def test_null_and_booleans():
    assert sqlbrace.escape_value(None) == "NULL"
    assert sqlbrace.escape_value(True) == "1"
    assert sqlbrace.escape_value(False) == "0"


def test_numbers_are_unquoted():
    assert _my().escape_value(42) == "42"
    assert _my().escape_value(-7) == "-7"
    assert _my().escape_value(2.5) == "2.5"


def test_integral_float_drops_fraction():
    assert _my().escape_value(2.0) == "2"
    assert format_float(-3.0) == "-3"


def test_integral_float_below_exponent_form():
    assert format_float(1e15) == "1000000000000000"
    assert format_float(1e16) == "1e+16"


def test_float_keeps_shortest_repr():
    assert format_float(0.1) == "0.1"
    assert format_float(1e20) == "1e+20"


@pytest.mark.parametrize("number", [math.inf, -math.inf, math.nan])
def test_non_finite_float_is_rejected(number):
    with pytest.raises(ArgumentTypeError):
        _my().escape_value(number)


def test_string_is_quoted_without_escaping_by_default():
    assert _my().escape_value("Jack") == "'Jack'"
    assert _my().escape_value("O'Brien") == "'O'Brien'"


def test_strict_mysql_escapes_quotes_and_backslashes():
    assert _my(strict=True).escape_value("O'Brien") == "'O''Brien'"
    assert _my(strict=True).escape_value("a\\b") == "'a\\\\b'"


def test_strict_postgres_leaves_backslashes():
    escaper = ValueEscaper(PostgresDialect(), strict=True)
    assert escaper.escape_value("a\\'b") == "'a\\''b'"


def test_postgres_booleans():
    escaper = ValueEscaper(PostgresDialect())
    assert escaper.escape_value(True) == "TRUE"
    assert escaper.escape_value(False) == "FALSE"


def test_sqlite_booleans_are_integers():
    assert ValueEscaper(SQLiteDialect()).escape_value(True) == "1"


def test_container_is_not_a_literal():
    with pytest.raises(ArgumentTypeError):
        _my().escape_value([1, 2])


def test_skip_is_not_a_literal():
    with pytest.raises(ArgumentTypeError):
        _my().escape_value(sqlbrace.skip())


def test_identifier_quoting_per_dialect():
    assert sqlbrace.escape_identifier("name") == "`name`"
    assert ValueEscaper(PostgresDialect()).escape_identifier("name") == '"name"'
    assert ValueEscaper(SQLiteDialect()).escape_identifier("name") == '"name"'


def test_identifier_is_not_escaped_by_default():
    assert _my().escape_identifier("a`b") == "`a`b`"


def test_strict_identifier_doubles_quote():
    assert _my(strict=True).escape_identifier("a`b") == "`a``b`"
    assert ValueEscaper(PostgresDialect(), strict=True).escape_identifier('a"b') == '"a""b"'


def test_escaping_is_repeatable():
    escaper = _my()
    assert escaper.escape_value("x") == escaper.escape_value("x")
