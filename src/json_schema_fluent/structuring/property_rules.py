"""Property fragments merged into object schemas."""

from __future__ import annotations

from typing import Any

from json_schema_fluent.fragment_building.fragment_merge import copy_fragment_value
from json_schema_fluent.fragment_building.schema_builder import SchemaBuilder, read_fragment
from json_schema_fluent.kind_construction.kind_options import (
    PropertyOptions,
    RequiredPropertyOptions,
    resolve_options,
)


def property(  # pylint: disable=redefined-builtin
    name: str,
    schema: SchemaBuilder,
    options: PropertyOptions | None = None,
    /,
    **fields: Any,
) -> SchemaBuilder:
    """Restrict one optional property, with optional dependency rules."""
    resolved = resolve_options(PropertyOptions, options, fields)
    fragment: dict[str, Any] = {"properties": {name: read_fragment(schema)}}
    if resolved.depends_on is not None:
        fragment["dependentRequired"] = {name: copy_fragment_value(resolved.depends_on)}
    if resolved.dependent_schema is not None:
        fragment["dependentSchemas"] = {name: read_fragment(resolved.dependent_schema)}
    return SchemaBuilder(fragment)


def required_property(
    name: str,
    schema: SchemaBuilder,
    options: RequiredPropertyOptions | None = None,
    /,
    **fields: Any,
) -> SchemaBuilder:
    """Restrict one property and add its name to the ``required`` list."""
    resolved = resolve_options(RequiredPropertyOptions, options, fields)
    fragment: dict[str, Any] = {
        "properties": {name: read_fragment(schema)},
        "required": [name],
    }
    if resolved.dependent_schema is not None:
        fragment["dependentSchemas"] = {name: read_fragment(resolved.dependent_schema)}
    return SchemaBuilder(fragment)


def pattern_property(pattern: str, schema: SchemaBuilder) -> SchemaBuilder:
    return SchemaBuilder({"patternProperties": {pattern: read_fragment(schema)}})


def properties(*property_fragments: SchemaBuilder) -> SchemaBuilder:
    """Merge property fragments into one fragment without a ``type``.

    Mostly used to build the value of a dependent schema.
    """
    schema = SchemaBuilder({})
    for property_fragment in property_fragments:
        schema.merge_from(property_fragment)
    return schema
