"""Composition, conditional and value restriction fragments."""

from __future__ import annotations

import copy
from typing import Any

from json_schema_fluent.fragment_building.schema_builder import SchemaBuilder, read_fragment


def all_of(*schemas: SchemaBuilder) -> SchemaBuilder:
    return SchemaBuilder({"allOf": [read_fragment(schema) for schema in schemas]})


def any_of(*schemas: SchemaBuilder) -> SchemaBuilder:
    return SchemaBuilder({"anyOf": [read_fragment(schema) for schema in schemas]})


def one_of(*schemas: SchemaBuilder) -> SchemaBuilder:
    return SchemaBuilder({"oneOf": [read_fragment(schema) for schema in schemas]})


def not_(schema: SchemaBuilder) -> SchemaBuilder:
    return SchemaBuilder({"not": read_fragment(schema)})


def if_then(condition: SchemaBuilder, then: SchemaBuilder) -> SchemaBuilder:
    return SchemaBuilder({"if": read_fragment(condition), "then": read_fragment(then)})


def if_then_else(
    condition: SchemaBuilder, then: SchemaBuilder, otherwise: SchemaBuilder
) -> SchemaBuilder:
    return SchemaBuilder(
        {
            "if": read_fragment(condition),
            "then": read_fragment(then),
            "else": read_fragment(otherwise),
        }
    )


def constant(value: Any) -> SchemaBuilder:
    """Restrict the schema to exactly ``value``."""
    return SchemaBuilder({"const": copy.deepcopy(value)})


def enumerator(*values: Any) -> SchemaBuilder:
    """Restrict the schema to one of ``values``, in the given order."""
    return SchemaBuilder({"enum": copy.deepcopy(list(values))})


def always_valid() -> SchemaBuilder:
    return SchemaBuilder(True)


def always_invalid() -> SchemaBuilder:
    return SchemaBuilder(False)
