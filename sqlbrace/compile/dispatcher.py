"""Placeholder specifier dispatch.

Each placeholder is ``?`` followed by one specifier character that selects
how its argument is rendered:

=====  ===============================================================
``d``  integer: ``NULL`` for null, otherwise cast and truncated
``f``  float: ``NULL`` for null, otherwise cast
``a``  container: value list or ``identifier = value`` assignments
``#``  identifier, or a comma-separated list of identifiers
other  plain literal, whatever the character is
=====  ===============================================================

The built-in handlers are registered with
:class:`~sqlbrace.compile.registry.SpecifierRegistry` when this module is
imported; custom specifiers can be added the same way.
"""

from __future__ import annotations

import math
import re
from typing import Any

from sqlbrace.compile.context import BuildContext
from sqlbrace.compile.escaper import format_float
from sqlbrace.compile.formatter import identifier_text
from sqlbrace.compile.registry import SpecifierRegistry
from sqlbrace.errors import ArgumentTypeError
from sqlbrace.schema.values import (
    BoolValue,
    ContainerValue,
    FloatValue,
    IntValue,
    NullValue,
    SkipValue,
    TextValue,
    to_value,
)

# Leading numeric part of a string, as used by the numeric casts: optional
# whitespace and sign, digits with an optional fraction, optional exponent.
_NUMERIC_PREFIX = re.compile(
    r"[ \t\n\r\v\f]*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
)
_INTEGER_TEXT = re.compile(r"[+-]?\d+")
# Longer digit runs exceed the default int() string conversion limit.
_MAX_INTEGER_DIGITS = 4300


def _numeric_prefix(text: str) -> str | None:
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return None
    return match.group(0).lstrip(" \t\n\r\v\f")


def cast_int(value: Any, specifier: str = "d") -> int:
    """Cast a non-null scalar to ``int``, truncating toward zero.

    Strings contribute their leading numeric part (``"3.9 apples"`` -> 3);
    a string with none casts to 0.

    Raises:
        ArgumentTypeError: For containers, non-finite floats, and text
            whose value overflows a float (e.g. ``"1e999999999"``).
    """
    if isinstance(value, BoolValue):
        return int(value.value)
    if isinstance(value, IntValue):
        return value.value
    if isinstance(value, FloatValue):
        if not value.is_finite:
            raise ArgumentTypeError(
                f"Cannot cast {value.value!r} to an integer.",
                specifier=specifier,
                value=value,
            )
        return int(value.value)
    if isinstance(value, TextValue):
        prefix = _numeric_prefix(value.value)
        if prefix is None:
            return 0
        if _INTEGER_TEXT.fullmatch(prefix) and len(prefix) <= _MAX_INTEGER_DIGITS:
            return int(prefix)
        # Fractions, exponents and oversized digit runs go through a float.
        number = float(prefix)
        if not math.isfinite(number):
            raise ArgumentTypeError(
                f"Cannot cast {value.value!r} to an integer: out of range.",
                specifier=specifier,
                value=value,
            )
        return int(number)
    raise ArgumentTypeError(
        f"?{specifier} expects a scalar, got {value.kind!r}.",
        specifier=specifier,
        value=value,
    )


def cast_float(value: Any, specifier: str = "f") -> float:
    """Cast a non-null scalar to ``float`` using the same string rules.

    Raises:
        ArgumentTypeError: For containers.
    """
    if isinstance(value, BoolValue):
        return float(value.value)
    if isinstance(value, IntValue):
        return float(value.value)
    if isinstance(value, FloatValue):
        return value.value
    if isinstance(value, TextValue):
        prefix = _numeric_prefix(value.value)
        return float(prefix) if prefix is not None else 0.0
    raise ArgumentTypeError(
        f"?{specifier} expects a scalar, got {value.kind!r}.",
        specifier=specifier,
        value=value,
    )


# ---------------------------------------------------------------------------
# Built-in handlers
# ---------------------------------------------------------------------------


@SpecifierRegistry.register("d")
def _integer_handler(specifier: str, arg: Any, ctx: BuildContext) -> str:
    if isinstance(arg, NullValue):
        return ctx.dialect.null_literal
    return str(cast_int(arg, specifier))


@SpecifierRegistry.register("f")
def _float_handler(specifier: str, arg: Any, ctx: BuildContext) -> str:
    if isinstance(arg, NullValue):
        return ctx.dialect.null_literal
    return format_float(cast_float(arg, specifier))


@SpecifierRegistry.register("a")
def _array_handler(specifier: str, arg: Any, ctx: BuildContext) -> str:
    return ctx.formatter.format_array(arg)


@SpecifierRegistry.register("#")
def _identifier_handler(specifier: str, arg: Any, ctx: BuildContext) -> str:
    if isinstance(arg, ContainerValue):
        return ctx.formatter.format_identifiers(arg)
    return ctx.escaper.escape_identifier(identifier_text(arg, specifier))


def _literal_handler(specifier: str, arg: Any, ctx: BuildContext) -> str:
    return ctx.escaper.escape_value(arg)


class SpecifierDispatcher:
    """Picks the rendering path for one placeholder.

    Args:
        ctx: Build context providing the dialect and renderers.
    """

    def __init__(self, ctx: BuildContext) -> None:
        self._ctx = ctx

    def process(self, specifier: str, arg: Any) -> str:
        """Render ``arg`` for the placeholder ``?<specifier>``.

        Args:
            specifier: The character following ``?``.
            arg: The bound argument, typed or plain.

        Returns:
            SQL text replacing the placeholder.

        Raises:
            ArgumentTypeError: If ``arg`` does not fit the specifier, or is
                the skip marker.
        """
        arg = to_value(arg)
        if isinstance(arg, SkipValue):
            raise ArgumentTypeError(
                f"The skip marker cannot be bound to placeholder ?{specifier}; "
                "pass skip() only as the last argument.",
                specifier=specifier,
                value=arg,
            )
        handler = SpecifierRegistry.get(specifier) or _literal_handler
        return handler(specifier, arg, self._ctx)
