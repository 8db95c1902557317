"""Template → SQL text assembly.

``QueryBuilder`` is the top-level orchestrator.  It scans a template once,
left to right, and delegates every placeholder and conditional block to
focused collaborators:

QueryBuilder
  ├── SpecifierDispatcher        (dispatcher.py)
  │     ├── ValueEscaper         (escaper.py)
  │     └── ArrayFormatter       (formatter.py)
  └── ConditionalBlockEvaluator  (block.py)

Argument binding
----------------
Top-level placeholders bind arguments forwards, starting at index 0.
Placeholders inside ``{...}`` bind backwards from the last argument.  The
two walks are independent: the builder passes the full argument tuple to
the block evaluator and keeps its own index.

Skipping blocks
---------------
When the *last* argument is the skip marker (:func:`sqlbrace.skip`), every
conditional block in the template is dropped without binding anything::

    build_query("SELECT * FROM t {WHERE id = ?d}", [skip()])
    # -> "SELECT * FROM t "
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlbrace.compile.block import ConditionalBlockEvaluator
from sqlbrace.compile.context import BuildContext
from sqlbrace.compile.dispatcher import SpecifierDispatcher
from sqlbrace.errors import FormatError
from sqlbrace.schema.profile import BuildProfile
from sqlbrace.schema.values import NULL, is_skip, to_values

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Builds SQL text from a template and positional arguments.

    Builders hold no per-call state and can be shared between threads.

    Args:
        profile: Rendering settings; defaults to ``BuildProfile()``.
    """

    def __init__(self, profile: BuildProfile | None = None) -> None:
        self._ctx = BuildContext.from_profile(profile or BuildProfile())
        self._dispatcher = SpecifierDispatcher(self._ctx)
        self._blocks = ConditionalBlockEvaluator(self._dispatcher)

    @property
    def profile(self) -> BuildProfile:
        return self._ctx.profile

    @property
    def context(self) -> BuildContext:
        return self._ctx

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, template: str, args: Sequence[Any] | None = ()) -> str:
        """Substitute ``args`` into ``template``.

        Args:
            template: Query text with ``?x`` placeholders and ``{...}`` blocks.
            args: Positional arguments; plain Python values or typed values.

        Returns:
            The finished SQL string.

        Raises:
            FormatError: If a ``?`` ends the template or a ``{`` is never
                closed.
            ArgumentTypeError: If an argument does not fit its placeholder.
        """
        values = to_values(args)
        try:
            return self._build(template, values)
        except FormatError as exc:
            exc.template = template
            raise

    def process_specifier(self, specifier: str, arg: Any) -> str:
        """Render one argument as placeholder ``?<specifier>`` would."""
        return self._dispatcher.process(specifier, arg)

    # ------------------------------------------------------------------
    # Scanner
    # ------------------------------------------------------------------

    def _build(self, template: str, args: tuple[Any, ...]) -> str:
        parts: list[str] = []
        length = len(template)
        skip_blocks = bool(args) and is_skip(args[-1])
        arg_index = 0
        i = 0

        while i < length:
            char = template[i]

            if char == "{":
                close = template.find("}", i)
                if close == -1:
                    raise FormatError("Unmatched { in query.", position=i)
                if skip_blocks:
                    logger.debug("Skipping conditional block at %d..%d", i, close)
                else:
                    parts.append(self._blocks.evaluate(template[i + 1:close], args, offset=i + 1))
                i = close + 1

            elif char == "?":
                if i + 1 >= length:
                    raise FormatError("Invalid query format: ? without specifier.", position=i)
                specifier = template[i + 1]
                arg = args[arg_index] if arg_index < len(args) else NULL
                arg_index += 1

                parts.append(self._dispatcher.process(specifier, arg))
                if specifier == " " and self._ctx.profile.pad_space_specifier:
                    parts.append(" ")
                i += 2

            else:
                parts.append(char)
                i += 1

        return "".join(parts)
