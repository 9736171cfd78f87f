"""Structuring, composition and reference exports."""

from .composition import (
    all_of,
    always_invalid,
    always_valid,
    any_of,
    constant,
    enumerator,
    if_then,
    if_then_else,
    not_,
    one_of,
)
from .definitions import definition, nullable, ref
from .property_rules import pattern_property, properties, property, required_property

__all__ = [
    "all_of",
    "always_invalid",
    "always_valid",
    "any_of",
    "constant",
    "definition",
    "enumerator",
    "if_then",
    "if_then_else",
    "not_",
    "nullable",
    "one_of",
    "pattern_property",
    "properties",
    "property",
    "ref",
    "required_property",
]
