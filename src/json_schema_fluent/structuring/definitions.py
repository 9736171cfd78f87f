"""Named definitions, references and the nullability transform."""

from __future__ import annotations

import logging

from json_schema_fluent.document_model.constants import (
    DEFS_POINTER_PREFIX,
    NULL_TYPE,
    TYPE_KEYWORD,
)
from json_schema_fluent.fragment_building.schema_builder import SchemaBuilder, read_fragment

_LOGGER = logging.getLogger(__name__)


def definition(name: str, schema: SchemaBuilder) -> SchemaBuilder:
    """Register ``schema`` under ``$defs`` as ``name``.

    The fragment only reaches a document when passed through the ``defs``
    option of the object or array that is finally finalized.
    """
    return SchemaBuilder({"$defs": {name: read_fragment(schema)}})


def ref(name: str) -> SchemaBuilder:
    """Point at a named definition. The name is not checked."""
    return SchemaBuilder({"$ref": f"{DEFS_POINTER_PREFIX}{name}"})


def nullable(schema: SchemaBuilder) -> SchemaBuilder:
    """Widen the declared kind of ``schema`` to also admit null.

    Boolean fragments, fragments without a ``type`` and fragments whose
    ``type`` already admits null are returned unchanged. Composition keywords
    are not looked into.
    """
    fragment = read_fragment(schema)
    if isinstance(fragment, bool) or TYPE_KEYWORD not in fragment:
        _LOGGER.debug("Schema has no declared kind; returning it unchanged.")
        return schema

    declared = fragment[TYPE_KEYWORD]
    declared_kinds = list(declared) if isinstance(declared, (list, tuple)) else [declared]
    if NULL_TYPE in declared_kinds:
        _LOGGER.debug("Schema kind %r already admits null.", declared)
        return schema

    widened = dict(fragment)
    widened[TYPE_KEYWORD] = [*declared_kinds, NULL_TYPE]
    return SchemaBuilder(widened)
