"""Shared document model constants."""

from __future__ import annotations

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
DEFS_POINTER_PREFIX = "#/$defs/"

SCHEMA_KEYWORD = "$schema"
TYPE_KEYWORD = "type"
NULL_TYPE = "null"
