"""Conditional block rendering.

A block is the text between ``{`` and ``}`` of a template.  Its placeholders
bind arguments from the *end* of the argument list, walking backwards, so a
template such as::

    SELECT name FROM users WHERE ?# IN (?a){ AND block = ?d}

binds ``?#`` and ``?a`` to the first two arguments and the block's ``?d`` to
the last one.  Blocks do not nest; a ``{`` inside a block is plain text.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlbrace.compile.dispatcher import SpecifierDispatcher
from sqlbrace.errors import FormatError
from sqlbrace.schema.values import NULL


class ConditionalBlockEvaluator:
    """Renders the inner text of one conditional block.

    Args:
        dispatcher: Dispatcher rendering each placeholder.
    """

    def __init__(self, dispatcher: SpecifierDispatcher) -> None:
        self._dispatcher = dispatcher

    def evaluate(self, block: str, args: Sequence[Any], offset: int = 0) -> str:
        """Render ``block`` against the tail of ``args``.

        Args:
            block: Text strictly between the braces.
            args: The full argument list of the query.
            offset: Position of ``block`` within the template, used in
                error positions.

        Returns:
            The rendered block.

        Raises:
            FormatError: If the block ends with a bare ``?``.
        """
        parts: list[str] = []
        length = len(block)
        arg_index = len(args) - 1
        i = 0

        while i < length:
            char = block[i]
            if char != "?":
                parts.append(char)
                i += 1
                continue

            if i + 1 >= length:
                raise FormatError(
                    "Invalid query format: ? without specifier.",
                    position=offset + i,
                    template=block,
                )
            specifier = block[i + 1]
            arg = args[arg_index] if arg_index >= 0 else NULL
            arg_index -= 1

            parts.append(self._dispatcher.process(specifier, arg))
            i += 2

        return "".join(parts)
