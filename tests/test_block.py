"""Unit tests for ConditionalBlockEvaluator."""

from __future__ import annotations

import pytest

from sqlbrace.compile.block import ConditionalBlockEvaluator
from sqlbrace.compile.builder import QueryBuilder
from sqlbrace.compile.dispatcher import SpecifierDispatcher
from sqlbrace.errors import FormatError
from sqlbrace.schema.values import to_values


def _evaluator(builder: QueryBuilder) -> ConditionalBlockEvaluator:
    return ConditionalBlockEvaluator(SpecifierDispatcher(builder.context))


def test_binds_from_the_tail(builder):
    ev = _evaluator(builder)
    assert ev.evaluate(" AND a = ?d", to_values([1, 2, 3])) == " AND a = 3"


def test_consumes_back_to_front(builder):
    ev = _evaluator(builder)
    result = ev.evaluate("?d, ?d, ?d", to_values([1, 2, 3]))
    assert result == "3, 2, 1"


def test_underflow_binds_null(builder):
    ev = _evaluator(builder)
    assert ev.evaluate("?d ?d", to_values([7])) == "7 NULL"
    assert ev.evaluate("x = ?d", ()) == "x = NULL"


def test_text_without_placeholders_is_copied(builder):
    ev = _evaluator(builder)
    assert ev.evaluate("ORDER BY id {desc}", ()) == "ORDER BY id {desc}"


def test_space_specifier_is_not_padded(builder):
    ev = _evaluator(builder)
    assert ev.evaluate("a = ? AND", to_values(["x"])) == "a = 'x'AND"


def test_trailing_question_mark_raises_with_position(builder):
    ev = _evaluator(builder)
    with pytest.raises(FormatError) as exc_info:
        ev.evaluate("id = ?", to_values([1]), offset=10)
    assert exc_info.value.position == 15
    assert "without specifier" in str(exc_info.value)
