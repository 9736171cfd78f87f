"""Kind constructor exports."""

from .array_kind import array
from .kind_options import (
    MISSING,
    AnnotationOptions,
    ArrayOptions,
    BooleanOptions,
    ContainsRule,
    IntegerOptions,
    NullOptions,
    NumberOptions,
    NumericOptions,
    ObjectOptions,
    PropertyOptions,
    RequiredPropertyOptions,
    StringOptions,
    ValueOptions,
)
from .object_kind import object_
from .scalar_kinds import boolean, integer, null, number, string

__all__ = [
    "MISSING",
    "AnnotationOptions",
    "ArrayOptions",
    "BooleanOptions",
    "ContainsRule",
    "IntegerOptions",
    "NullOptions",
    "NumberOptions",
    "NumericOptions",
    "ObjectOptions",
    "PropertyOptions",
    "RequiredPropertyOptions",
    "StringOptions",
    "ValueOptions",
    "array",
    "boolean",
    "integer",
    "null",
    "number",
    "object_",
    "string",
]
