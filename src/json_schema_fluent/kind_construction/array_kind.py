"""Array kind constructor."""

from __future__ import annotations

from typing import Any

from json_schema_fluent.document_model.constants import TYPE_KEYWORD
from json_schema_fluent.fragment_building.schema_builder import (
    SchemaBuilder,
    read_fragment,
    read_fragment_or_literal,
)

from .kind_options import ArrayOptions, ContainsRule, resolve_options


def array(options: ArrayOptions | None = None, /, **fields: Any) -> SchemaBuilder:
    """Assemble an array schema.

    ``items`` and ``unevaluated_items`` accept a builder or a boolean literal.
    ``False`` for ``items`` forbids anything beyond the prefix items.
    """
    resolved = resolve_options(ArrayOptions, options, fields)
    schema = SchemaBuilder({TYPE_KEYWORD: "array", **resolved.keyword_fields()})

    if resolved.items is not None:
        schema.merge_from(SchemaBuilder({"items": read_fragment_or_literal(resolved.items)}))

    for prefix_item in resolved.prefix_items:
        schema.merge_from(SchemaBuilder({"prefixItems": [read_fragment(prefix_item)]}))

    if resolved.unevaluated_items is not None:
        schema.merge_from(
            SchemaBuilder(
                {"unevaluatedItems": read_fragment_or_literal(resolved.unevaluated_items)}
            )
        )

    if resolved.contains is not None:
        schema.merge_from(SchemaBuilder(_contains_fragment(resolved.contains)))

    for definition_fragment in resolved.defs:
        schema.merge_from(definition_fragment)

    return schema


def _contains_fragment(rule: ContainsRule) -> dict[str, Any]:
    fragment: dict[str, Any] = {"contains": read_fragment(rule.schema)}
    if rule.min is not None:
        fragment["minContains"] = rule.min
    if rule.max is not None:
        fragment["maxContains"] = rule.max
    return fragment
