"""Object kind constructor tests."""

from __future__ import annotations

import pytest
from json_schema_fluent.document_model.constants import SCHEMA_DIALECT
from json_schema_fluent.fragment_building.schema_builder import SchemaFragmentError
from json_schema_fluent.kind_construction import ObjectOptions, object_, string
from json_schema_fluent.structuring import (
    definition,
    pattern_property,
    properties,
    property,
    ref,
    required_property,
)


def test_plain_object_with_annotations() -> None:
    document = object_(
        title="Hello", description="This is a description", examples=[1, 2]
    ).finalize()

    assert document == {
        "$schema": SCHEMA_DIALECT,
        "type": "object",
        "title": "Hello",
        "description": "This is a description",
        "examples": [1, 2],
    }


def test_optional_properties_do_not_add_required() -> None:
    document = object_(properties=[property("name", string())]).finalize()

    assert document == {
        "$schema": SCHEMA_DIALECT,
        "type": "object",
        "properties": {"name": {"type": "string"}},
    }


def test_required_properties_are_listed_in_order() -> None:
    document = object_(
        properties=[
            required_property("name", string()),
            property("nickname", string()),
            required_property("email", string()),
        ]
    ).finalize()

    assert document == {
        "$schema": SCHEMA_DIALECT,
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "nickname": {"type": "string"},
            "email": {"type": "string"},
        },
        "required": ["name", "email"],
    }


def test_pattern_properties() -> None:
    document = object_(pattern_properties=[pattern_property("^[A-Za-z]$", string())]).read()

    assert document == {
        "type": "object",
        "patternProperties": {"^[A-Za-z]$": {"type": "string"}},
    }


def test_additional_properties_take_the_nested_fragment() -> None:
    assert object_(additional_properties=string()).read() == {
        "type": "object",
        "additionalProperties": {"type": "string"},
    }


def test_property_names_pattern() -> None:
    assert object_(property_names="^[A-Za-z_][A-Za-z0-9_]*$").read() == {
        "type": "object",
        "propertyNames": {"pattern": "^[A-Za-z_][A-Za-z0-9_]*$"},
    }


def test_empty_property_names_pattern_is_ignored() -> None:
    assert object_(property_names="").read() == {"type": "object"}


def test_property_count_bounds_and_unevaluated_properties() -> None:
    assert object_(ObjectOptions(min_properties=3, max_properties=10)).read() == {
        "type": "object",
        "minProperties": 3,
        "maxProperties": 10,
    }
    assert object_(unevaluated_properties=False).read() == {
        "type": "object",
        "unevaluatedProperties": False,
    }


def test_dependent_required_properties() -> None:
    document = object_(
        properties=[
            property("name", string()),
            property("email", string(format="email"), depends_on=["name"]),
        ]
    ).read()

    assert document == {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "email": {"type": "string", "format": "email"},
        },
        "dependentRequired": {"email": ["name"]},
    }


def test_dependent_schemas_on_optional_and_required_properties() -> None:
    billing = properties(required_property("billing", string()))
    expected_dependent = {
        "creditCard": {"properties": {"billing": {"type": "string"}}, "required": ["billing"]}
    }

    optional = object_(
        properties=[
            property("name", string()),
            property("creditCard", string(), dependent_schema=billing),
        ]
    ).read()
    required = object_(
        properties=[
            property("name", string()),
            required_property("creditCard", string(), dependent_schema=billing),
        ]
    ).read()

    assert optional == {
        "type": "object",
        "properties": {"name": {"type": "string"}, "creditCard": {"type": "string"}},
        "dependentSchemas": expected_dependent,
    }
    assert required == {
        "type": "object",
        "properties": {"name": {"type": "string"}, "creditCard": {"type": "string"}},
        "required": ["creditCard"],
        "dependentSchemas": expected_dependent,
    }


def test_definitions_are_hoisted_into_the_object() -> None:
    email = definition("email", string(format="email"))

    document = object_(
        properties=[property("email", ref("email")), property("friend", ref("email"))],
        defs=[email],
    ).finalize()

    assert document == {
        "$schema": SCHEMA_DIALECT,
        "type": "object",
        "properties": {
            "email": {"$ref": "#/$defs/email"},
            "friend": {"$ref": "#/$defs/email"},
        },
        "$defs": {"email": {"type": "string", "format": "email"}},
    }


def test_child_builders_are_not_changed_by_the_parent() -> None:
    child = property("name", string())

    object_(properties=[child, required_property("id", string())])

    assert child.read() == {"properties": {"name": {"type": "string"}}}


def test_additional_properties_must_be_a_builder() -> None:
    with pytest.raises(SchemaFragmentError):
        object_(additional_properties={"type": "string"})
