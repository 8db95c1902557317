"""Typed argument values for query templates.

Template arguments form a closed tagged union instead of being inspected by
runtime type name at render time.  Callers may pass plain Python values;
:func:`to_value` coerces them into the matching variant once, up front::

    from sqlbrace.schema.values import IntValue, to_value

    assert to_value(5) == IntValue(value=5)
    assert to_value({"name": "x"}).entries[0].key == "name"

The skip marker is a variant of its own (``SkipValue``) and is recognised
by its tag, so no string argument can ever be mistaken for it.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    Tag,
)

from sqlbrace.errors import ArgumentTypeError

_FROZEN = ConfigDict(extra="forbid", frozen=True)


# ---------------------------------------------------------------------------
# Scalar variants
# ---------------------------------------------------------------------------


class NullValue(BaseModel):
    """SQL ``NULL``."""

    model_config = _FROZEN

    kind: Literal["null"] = "null"


class BoolValue(BaseModel):
    """A boolean, rendered as ``1`` / ``0`` by most dialects."""

    model_config = _FROZEN

    kind: Literal["bool"] = "bool"
    value: StrictBool


class IntValue(BaseModel):
    model_config = _FROZEN

    kind: Literal["int"] = "int"
    value: StrictInt


class FloatValue(BaseModel):
    model_config = _FROZEN

    kind: Literal["float"] = "float"
    value: StrictFloat

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.value)


class TextValue(BaseModel):
    """A string literal."""

    model_config = _FROZEN

    kind: Literal["text"] = "text"
    value: StrictStr


class SkipValue(BaseModel):
    """Marker that suppresses the conditional block of a template.

    Only meaningful as the last element of an argument list.  Use
    :data:`SKIP` (or :func:`sqlbrace.skip`) rather than creating instances.
    """

    model_config = _FROZEN

    kind: Literal["skip"] = "skip"


def _value_discriminator(v: Any) -> str | None:
    """Return the tag for the Pydantic discriminated union."""
    if isinstance(v, dict):
        return v.get("kind")
    return getattr(v, "kind", None)


ScalarValue = Annotated[
    Union[
        Annotated[NullValue, Tag("null")],
        Annotated[BoolValue, Tag("bool")],
        Annotated[IntValue, Tag("int")],
        Annotated[FloatValue, Tag("float")],
        Annotated[TextValue, Tag("text")],
    ],
    Discriminator(_value_discriminator),
]


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------


class ContainerEntry(BaseModel):
    """One ``key => value`` pair of a container.

    Integer keys mark list positions; string keys are column names.
    """

    model_config = _FROZEN

    key: StrictInt | StrictStr
    value: ScalarValue


class ContainerValue(BaseModel):
    """An ordered collection of entries for the ``?a`` and ``?#`` specifiers."""

    model_config = _FROZEN

    kind: Literal["container"] = "container"
    entries: list[ContainerEntry] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def values(self) -> list[Any]:
        return [entry.value for entry in self.entries]


ArgValue = Annotated[
    Union[
        Annotated[NullValue, Tag("null")],
        Annotated[BoolValue, Tag("bool")],
        Annotated[IntValue, Tag("int")],
        Annotated[FloatValue, Tag("float")],
        Annotated[TextValue, Tag("text")],
        Annotated[ContainerValue, Tag("container")],
        Annotated[SkipValue, Tag("skip")],
    ],
    Discriminator(_value_discriminator),
]

_TYPED = (NullValue, BoolValue, IntValue, FloatValue, TextValue, ContainerValue, SkipValue)
_SCALARS = (NullValue, BoolValue, IntValue, FloatValue, TextValue)

#: Shared instances.
NULL = NullValue()
SKIP = SkipValue()


# ---------------------------------------------------------------------------
# Coercion from plain Python values
# ---------------------------------------------------------------------------


def _to_scalar(raw: Any) -> Any:
    if raw is None:
        return NULL
    if isinstance(raw, _SCALARS):
        return raw
    # bool is a subclass of int, so it must be checked first.
    if isinstance(raw, bool):
        return BoolValue(value=raw)
    if isinstance(raw, int):
        return IntValue(value=int(raw))
    if isinstance(raw, float):
        return FloatValue(value=float(raw))
    if isinstance(raw, str):
        return TextValue(value=str(raw))
    if isinstance(raw, (ContainerValue, Mapping, list, tuple)):
        raise ArgumentTypeError("Containers cannot be nested inside containers.", value=raw)
    raise ArgumentTypeError(
        f"Unsupported argument type: {type(raw).__name__}.",
        value=raw,
    )


def _to_key(key: Any) -> int | str:
    if isinstance(key, bool):
        return int(key)
    if isinstance(key, (int, str)):
        return key
    raise ArgumentTypeError(
        f"Container keys must be int or str, got {type(key).__name__}.",
        value=key,
    )


def to_value(raw: Any) -> Any:
    """Convert a plain Python value to a typed ``ArgValue``, or return as-is.

    Args:
        raw: ``None``, ``bool``, ``int``, ``float``, ``str``, a mapping, a
            list / tuple, or an already-typed value.

    Returns:
        The matching ``ArgValue`` variant.

    Raises:
        ArgumentTypeError: For unsupported types and nested containers.
    """
    if isinstance(raw, _TYPED):
        return raw
    if isinstance(raw, Mapping):
        return ContainerValue(
            entries=[
                ContainerEntry(key=_to_key(key), value=_to_scalar(item))
                for key, item in raw.items()
            ]
        )
    if isinstance(raw, (list, tuple)):
        return ContainerValue(
            entries=[
                ContainerEntry(key=index, value=_to_scalar(item))
                for index, item in enumerate(raw)
            ]
        )
    return _to_scalar(raw)


def to_values(args: Sequence[Any] | None) -> tuple[Any, ...]:
    """Coerce a whole argument list; ``None`` means no arguments."""
    if args is None:
        return ()
    if isinstance(args, (str, bytes)):
        raise ArgumentTypeError(
            "Arguments must be a sequence of values, not a single string.",
            value=args,
        )
    return tuple(to_value(arg) for arg in args)


def is_skip(value: Any) -> bool:
    """Return whether ``value`` is the skip marker."""
    return isinstance(value, SkipValue)
