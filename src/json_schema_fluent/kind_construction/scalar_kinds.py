"""Constructors for the string, numeric, boolean and null kinds."""

from __future__ import annotations

from typing import Any

from json_schema_fluent.document_model.constants import NULL_TYPE, TYPE_KEYWORD
from json_schema_fluent.fragment_building.schema_builder import SchemaBuilder

from .kind_options import (
    BooleanOptions,
    IntegerOptions,
    NullOptions,
    NumberOptions,
    StringOptions,
    ValueOptions,
    resolve_options,
)


def string(options: StringOptions | None = None, /, **fields: Any) -> SchemaBuilder:
    """Return a builder for ``{"type": "string", ...options}``."""
    return _kind_builder("string", resolve_options(StringOptions, options, fields))


def integer(options: IntegerOptions | None = None, /, **fields: Any) -> SchemaBuilder:
    """Return a builder for ``{"type": "integer", ...options}``."""
    return _kind_builder("integer", resolve_options(IntegerOptions, options, fields))


def number(options: NumberOptions | None = None, /, **fields: Any) -> SchemaBuilder:
    """Return a builder for ``{"type": "number", ...options}``."""
    return _kind_builder("number", resolve_options(NumberOptions, options, fields))


def boolean(options: BooleanOptions | None = None, /, **fields: Any) -> SchemaBuilder:
    """Return a builder for ``{"type": "boolean", ...options}``."""
    return _kind_builder("boolean", resolve_options(BooleanOptions, options, fields))


def null(options: NullOptions | None = None, /, **fields: Any) -> SchemaBuilder:
    """Return a builder for ``{"type": "null", ...options}``."""
    return _kind_builder(NULL_TYPE, resolve_options(NullOptions, options, fields))


def _kind_builder(type_name: str, options: ValueOptions) -> SchemaBuilder:
    return SchemaBuilder({TYPE_KEYWORD: type_name, **options.keyword_fields()})
