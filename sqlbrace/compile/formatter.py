"""Container rendering for the ``?a`` and ``?#`` specifiers."""

from __future__ import annotations

from typing import Any

from sqlbrace.compile.escaper import ValueEscaper, format_float
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


def identifier_text(value: Any, specifier: str | None = "#") -> str:
    """Return the identifier name carried by a scalar value.

    Scalars are cast to text: null gives an empty name, booleans ``1`` or an
    empty name, numbers their literal text.

    Raises:
        ArgumentTypeError: For containers, the skip marker, and non-finite
            floats.
    """
    if isinstance(value, TextValue):
        return value.value
    if isinstance(value, NullValue):
        return ""
    if isinstance(value, BoolValue):
        return "1" if value.value else ""
    if isinstance(value, IntValue):
        return str(value.value)
    if isinstance(value, FloatValue):
        return format_float(value.value)
    raise ArgumentTypeError(
        f"Identifier names must be scalars, got {getattr(value, 'kind', value)!r}.",
        specifier=specifier,
        value=value,
    )


class ArrayFormatter:
    """Renders containers as value lists, assignment lists, or identifier lists.

    Args:
        escaper: Renderer used for every element.
    """

    def __init__(self, escaper: ValueEscaper) -> None:
        self._escaper = escaper

    def format_array(self, container: Any) -> str:
        """Render ``container`` as a comma-separated list.

        Integer-keyed entries render as bare literals and string-keyed
        entries as ``identifier = literal`` assignments, decided per entry::

            [1, "x"]             -> 1, 'x'
            {"a": 1, "b": "x"}   -> `a` = 1, `b` = 'x'

        Raises:
            ArgumentTypeError: If ``container`` is not a container.
        """
        container = self._require_container(container, "a")
        parts: list[str] = []
        for entry in container.entries:
            literal = self._escaper.escape_value(entry.value)
            if isinstance(entry.key, int):
                parts.append(literal)
            else:
                parts.append(f"{self._escaper.escape_identifier(entry.key)} = {literal}")
        return ", ".join(parts)

    def format_identifiers(self, container: Any) -> str:
        """Render each entry value of ``container`` as a quoted identifier.

        Keys are ignored.
        """
        container = self._require_container(container, "#")
        return ", ".join(
            self._escaper.escape_identifier(identifier_text(entry.value))
            for entry in container.entries
        )

    @staticmethod
    def _require_container(value: Any, specifier: str) -> ContainerValue:
        value = to_value(value)
        if not isinstance(value, ContainerValue):
            raise ArgumentTypeError(
                f"?{specifier} expects a list or mapping, got {value.kind!r}.",
                specifier=specifier,
                value=value,
            )
        return value
