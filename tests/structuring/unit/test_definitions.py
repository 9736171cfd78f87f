"""Definition, reference and nullability tests."""

from __future__ import annotations

import logging

import pytest
from json_schema_fluent.fragment_building.schema_builder import SchemaBuilder
from json_schema_fluent.kind_construction import null, string
from json_schema_fluent.structuring import (
    all_of,
    always_valid,
    definition,
    nullable,
    ref,
)


def test_definition_registers_fragment_under_defs() -> None:
    assert definition("email", string(format="email")).read() == {
        "$defs": {"email": {"type": "string", "format": "email"}}
    }


def test_ref_does_not_check_registration() -> None:
    assert ref("email").read() == {"$ref": "#/$defs/email"}
    assert ref("never-defined").read() == {"$ref": "#/$defs/never-defined"}


def test_nullable_widens_single_kind() -> None:
    assert nullable(string(min_length=1)).read() == {
        "type": ["string", "null"],
        "minLength": 1,
    }


def test_nullable_widens_kind_list_and_keeps_key_position() -> None:
    widened = nullable(SchemaBuilder({"title": "Id", "type": ["string", "integer"]})).read()

    assert widened == {"title": "Id", "type": ["string", "integer", "null"]}
    assert isinstance(widened, dict)
    assert list(widened) == ["title", "type"]


def test_nullable_is_idempotent() -> None:
    once = nullable(string())
    twice = nullable(once)

    assert twice is once
    assert twice.read() == {"type": ["string", "null"]}


def test_nullable_leaves_null_kind_alone() -> None:
    schema = null()

    assert nullable(schema) is schema


def test_nullable_leaves_schemas_without_kind_alone(caplog: pytest.LogCaptureFixture) -> None:
    composed = all_of(string())

    with caplog.at_level(logging.DEBUG, logger="json_schema_fluent"):
        result = nullable(composed)

    assert result is composed
    assert result.read() == {"allOf": [{"type": "string"}]}
    assert "no declared kind" in caplog.text


def test_nullable_leaves_boolean_fragments_alone() -> None:
    literal = always_valid()

    assert nullable(literal) is literal


def test_nullable_does_not_change_its_argument() -> None:
    original = string()

    nullable(original)

    assert original.read() == {"type": "string"}
