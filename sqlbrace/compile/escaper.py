"""Scalar literal and identifier rendering.

``ValueEscaper`` turns one typed argument into SQL text:

=============  ======================================================
``NullValue``  ``NULL``
``BoolValue``  ``1`` / ``0`` (dialect may override, e.g. ``TRUE``)
``IntValue``   decimal text, unquoted
``FloatValue`` shortest round-trip text; integral values drop ``.0``
``TextValue``  single-quoted, inner quotes escaped only when strict
=============  ======================================================

Without strict escaping the text is wrapped as-is.  A value containing
``'`` then produces broken (or injectable) SQL; enable
:meth:`~sqlbrace.schema.profile.BuildProfileBuilder.strict_escaping`
whenever the text is not fully trusted.
"""

from __future__ import annotations

import math
from typing import Any

from sqlbrace.compile.base import SQLDialect
from sqlbrace.errors import ArgumentTypeError
from sqlbrace.schema.values import (
    BoolValue,
    ContainerValue,
    FloatValue,
    IntValue,
    NullValue,
    TextValue,
    to_value,
)

# Below this magnitude repr() of an integral float ends in ".0"; from here on
# it switches to exponent form.
_INTEGRAL_FLOAT_LIMIT = 1e16


def format_float(number: float) -> str:
    """Return the canonical SQL text for a finite float.

    Raises:
        ArgumentTypeError: For ``inf`` and ``nan``, which have no SQL literal.
    """
    if not math.isfinite(number):
        raise ArgumentTypeError(f"Cannot render non-finite float {number!r}.", value=number)
    if number.is_integer() and abs(number) < _INTEGRAL_FLOAT_LIMIT:
        return str(int(number))
    return repr(number)


class ValueEscaper:
    """Renders scalar values and identifiers for one dialect.

    Args:
        dialect: Dialect providing quote characters and escaping rules.
        strict: Escape embedded quotes in strings and identifiers.
    """

    def __init__(self, dialect: SQLDialect, strict: bool = False) -> None:
        self._dialect = dialect
        self._strict = strict

    @property
    def dialect(self) -> SQLDialect:
        return self._dialect

    def escape_value(self, value: Any) -> str:
        """Render a scalar as an SQL literal.

        Args:
            value: A typed scalar value, or a plain Python scalar.

        Raises:
            ArgumentTypeError: For containers, the skip marker, and
                non-finite floats.
        """
        value = to_value(value)
        if isinstance(value, NullValue):
            return self._dialect.null_literal
        if isinstance(value, BoolValue):
            return self._dialect.bool_literal(value.value)
        if isinstance(value, IntValue):
            return str(value.value)
        if isinstance(value, FloatValue):
            return format_float(value.value)
        if isinstance(value, TextValue):
            return self._dialect.quote_string(value.value, escape=self._strict)
        if isinstance(value, ContainerValue):
            raise ArgumentTypeError(
                "A container cannot be rendered as a single literal; use ?a.",
                value=value,
            )
        raise ArgumentTypeError(
            "The skip marker cannot be bound to a placeholder.",
            value=value,
        )

    def escape_identifier(self, name: str) -> str:
        """Render ``name`` as a quoted identifier (table or column name)."""
        return self._dialect.quote_identifier(name, escape=self._strict)
