"""sqlbrace schema models: typed argument values and BuildProfile."""
from sqlbrace.schema.profile import BuildProfile, BuildProfileBuilder
from sqlbrace.schema.values import (
    NULL,
    SKIP,
    ArgValue,
    BoolValue,
    ContainerEntry,
    ContainerValue,
    FloatValue,
    IntValue,
    NullValue,
    ScalarValue,
    SkipValue,
    TextValue,
    is_skip,
    to_value,
    to_values,
)

__all__ = [
    "BuildProfile",
    "BuildProfileBuilder",
    "NULL",
    "SKIP",
    "ArgValue",
    "ScalarValue",
    "BoolValue",
    "ContainerEntry",
    "ContainerValue",
    "FloatValue",
    "IntValue",
    "NullValue",
    "SkipValue",
    "TextValue",
    "is_skip",
    "to_value",
    "to_values",
]
