"""Object kind constructor."""

from __future__ import annotations

from typing import Any

from json_schema_fluent.document_model.constants import TYPE_KEYWORD
from json_schema_fluent.fragment_building.schema_builder import SchemaBuilder, read_fragment

from .kind_options import ObjectOptions, resolve_options


def object_(options: ObjectOptions | None = None, /, **fields: Any) -> SchemaBuilder:
    """Assemble an object schema from property, pattern and definition fragments.

    Plain options are copied first. Property fragments, pattern property
    fragments, the property name pattern, the additional properties rule and
    finally the definitions are merged in that order, so the ``required``
    list follows the order in which required properties were given.
    """
    resolved = resolve_options(ObjectOptions, options, fields)
    schema = SchemaBuilder({TYPE_KEYWORD: "object", **resolved.keyword_fields()})

    for property_fragment in resolved.properties:
        schema.merge_from(property_fragment)

    for pattern_fragment in resolved.pattern_properties:
        schema.merge_from(pattern_fragment)

    if resolved.property_names:
        schema.merge_from(SchemaBuilder({"propertyNames": {"pattern": resolved.property_names}}))

    if resolved.additional_properties is not None:
        schema.merge_from(
            SchemaBuilder(
                {"additionalProperties": read_fragment(resolved.additional_properties)}
            )
        )

    for definition_fragment in resolved.defs:
        schema.merge_from(definition_fragment)

    return schema
