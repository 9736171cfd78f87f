"""Fluent builders for draft 2020-12 schema documents."""

import logging

from .document_model import DEFS_POINTER_PREFIX, SCHEMA_DIALECT, Schema
from .fragment_building import SchemaBuilder, SchemaFragmentError, merge_fragments
from .kind_construction import (
    MISSING,
    AnnotationOptions,
    ArrayOptions,
    BooleanOptions,
    ContainsRule,
    IntegerOptions,
    NullOptions,
    NumberOptions,
    ObjectOptions,
    PropertyOptions,
    RequiredPropertyOptions,
    StringOptions,
    array,
    boolean,
    integer,
    null,
    number,
    object_,
    string,
)
from .structuring import (
    all_of,
    always_invalid,
    always_valid,
    any_of,
    constant,
    definition,
    enumerator,
    if_then,
    if_then_else,
    not_,
    nullable,
    one_of,
    pattern_property,
    properties,
    property,
    ref,
    required_property,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFS_POINTER_PREFIX",
    "MISSING",
    "SCHEMA_DIALECT",
    "AnnotationOptions",
    "ArrayOptions",
    "BooleanOptions",
    "ContainsRule",
    "IntegerOptions",
    "NullOptions",
    "NumberOptions",
    "ObjectOptions",
    "PropertyOptions",
    "RequiredPropertyOptions",
    "Schema",
    "SchemaBuilder",
    "SchemaFragmentError",
    "StringOptions",
    "all_of",
    "always_invalid",
    "always_valid",
    "any_of",
    "array",
    "boolean",
    "constant",
    "definition",
    "enumerator",
    "if_then",
    "if_then_else",
    "integer",
    "merge_fragments",
    "not_",
    "null",
    "nullable",
    "number",
    "object_",
    "one_of",
    "pattern_property",
    "properties",
    "property",
    "ref",
    "required_property",
    "string",
]
