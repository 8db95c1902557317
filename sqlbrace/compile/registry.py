"""Dialect and specifier registries.

These registries allow extension without modification of the builder.

``DialectFactory``
    Central registry for :class:`~sqlbrace.compile.base.SQLDialect`
    implementations.  Register a dialect once; profiles naming it as their
    ``target`` pick it up automatically.

``SpecifierRegistry``
    Per-specifier rendering handlers.  The
    :class:`~sqlbrace.compile.dispatcher.SpecifierDispatcher` queries this
    registry so new placeholder types can be added without touching it.

Usage::

    from sqlbrace.compile.registry import SpecifierRegistry

    @SpecifierRegistry.register("u")
    def _upper_text(specifier, arg, ctx):
        return ctx.escaper.escape_value(arg).upper()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

from sqlbrace.compile.base import SQLDialect
from sqlbrace.errors import DialectError

if TYPE_CHECKING:
    from sqlbrace.compile.context import BuildContext

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Dialect factory
# ---------------------------------------------------------------------------


class DialectFactory:
    """Registry mapping dialect target names to :class:`SQLDialect` classes.

    Example::

        @DialectFactory.register("mariadb")
        class MariaDBDialect(MySQLDialect):
            ...

        dialect = DialectFactory.create("mariadb")
    """

    _dialects: ClassVar[dict[str, type[SQLDialect]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SQLDialect]], type[SQLDialect]]:
        """Decorator that registers a dialect class under ``name``.

        Args:
            name: The dialect target name (e.g. ``"mysql"``).

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[SQLDialect]) -> type[SQLDialect]:
            cls._dialects[name] = dialect_cls
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, dialect_cls: type[SQLDialect]) -> None:
        """Register a dialect class without using the decorator form."""
        cls._dialects[name] = dialect_cls

    @classmethod
    def create(cls, name: str) -> SQLDialect:
        """Instantiate the dialect registered for ``name``.

        Raises:
            DialectError: If no dialect is registered for ``name``.
        """
        dialect_cls = cls._dialects.get(name)
        if dialect_cls is None:
            registered = sorted(cls._dialects)
            raise DialectError(
                f"Unsupported dialect target: '{name}'. Registered targets: {registered}.",
                target=name,
            )
        logger.debug("Creating %s dialect for target %r", dialect_cls.__name__, name)
        return dialect_cls()

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect target names."""
        return sorted(cls._dialects)


# ---------------------------------------------------------------------------
# Specifier registry
# ---------------------------------------------------------------------------

#: Type alias for a specifier rendering handler.
#: ``(specifier, arg_value, build_context) -> sql_text``
SpecifierHandler = Callable[[str, Any, "BuildContext"], str]


class SpecifierRegistry:
    """Registry mapping specifier characters to rendering handlers.

    Specifiers without a handler fall back to plain literal rendering.
    """

    _handlers: ClassVar[dict[str, SpecifierHandler]] = {}

    @classmethod
    def register(cls, specifier: str) -> Callable[[SpecifierHandler], SpecifierHandler]:
        """Decorator that registers a handler for a one-character ``specifier``."""
        cls._check(specifier)

        def decorator(handler: SpecifierHandler) -> SpecifierHandler:
            cls._handlers[specifier] = handler
            return handler

        return decorator

    @classmethod
    def register_handler(cls, specifier: str, handler: SpecifierHandler) -> None:
        """Register a handler without using the decorator form."""
        cls._check(specifier)
        cls._handlers[specifier] = handler

    @classmethod
    def unregister(cls, specifier: str) -> None:
        """Remove the handler for ``specifier``; unknown names are ignored."""
        cls._handlers.pop(specifier, None)

    @classmethod
    def get(cls, specifier: str) -> SpecifierHandler | None:
        """Return the handler for ``specifier``, or ``None`` if not registered."""
        return cls._handlers.get(specifier)

    @classmethod
    def registered_specifiers(cls) -> list[str]:
        """Return the sorted list of registered specifier characters."""
        return sorted(cls._handlers)

    @staticmethod
    def _check(specifier: str) -> None:
        if len(specifier) != 1:
            raise ValueError(f"A specifier is exactly one character, got {specifier!r}.")
