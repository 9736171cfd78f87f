"""Option structs accepted by the kind constructors.

Every option defaults to unset, and unset options never reach the produced
fragment. ``None`` means unset, except for ``default`` and ``const`` where
``None`` is the JSON ``null`` value and :data:`MISSING` means unset.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from json_schema_fluent.document_model.schema_shapes import (
    ContentEncoding,
    MimeType,
    StringFormat,
)
from json_schema_fluent.fragment_building.fragment_merge import copy_fragment_value
from json_schema_fluent.fragment_building.schema_builder import SchemaBuilder


class _Missing(Enum):
    MISSING = "missing"


MISSING = _Missing.MISSING

_KEYWORD = "keyword"
_STRUCTURAL = "structural"

_OptionsT = TypeVar("_OptionsT")


def _keyword(name: str) -> Mapping[str, Any]:
    return {_KEYWORD: name}


def _structural(default: Any = None) -> Any:
    return field(default=default, metadata={_STRUCTURAL: True})


@dataclass(frozen=True, kw_only=True)
class AnnotationOptions:
    """Annotations shared by every schema kind."""

    id: str | None = field(default=None, metadata=_keyword("$id"))
    comment: str | None = field(default=None, metadata=_keyword("$comment"))
    anchor: str | None = field(default=None, metadata=_keyword("$anchor"))
    default: Any = MISSING
    title: str | None = None
    description: str | None = None
    examples: Sequence[Any] | None = None
    deprecated: bool | None = None
    read_only: bool | None = None
    write_only: bool | None = None

    def keyword_fields(self) -> dict[str, Any]:
        """Return the set, non-structural options keyed by schema keyword."""
        fragment: dict[str, Any] = {}
        for option in dataclasses.fields(self):
            if option.metadata.get(_STRUCTURAL):
                continue
            value = getattr(self, option.name)
            if value is MISSING:
                continue
            if value is None and option.default is not MISSING:
                continue
            fragment[_keyword_name(option)] = copy_fragment_value(value)
        return fragment


@dataclass(frozen=True, kw_only=True)
class ValueOptions(AnnotationOptions):
    """Annotations plus literal value restrictions."""

    enum: Sequence[Any] | None = None
    const: Any = MISSING


@dataclass(frozen=True, kw_only=True)
class StringOptions(ValueOptions):
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: StringFormat | None = None
    content_media_type: MimeType | None = None
    content_encoding: ContentEncoding | None = None


@dataclass(frozen=True, kw_only=True)
class NumericOptions(ValueOptions):
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: float | None = None
    exclusive_maximum: float | None = None
    multiple_of: float | None = None


@dataclass(frozen=True, kw_only=True)
class IntegerOptions(NumericOptions):
    pass


@dataclass(frozen=True, kw_only=True)
class NumberOptions(NumericOptions):
    pass


@dataclass(frozen=True, kw_only=True)
class BooleanOptions(ValueOptions):
    pass


@dataclass(frozen=True, kw_only=True)
class NullOptions(ValueOptions):
    pass


@dataclass(frozen=True, kw_only=True)
class ObjectOptions(AnnotationOptions):
    """Object keywords; the structural ones are merged in by ``object_``."""

    properties: Sequence[SchemaBuilder] = _structural(())
    pattern_properties: Sequence[SchemaBuilder] = _structural(())
    property_names: str | None = _structural()
    additional_properties: SchemaBuilder | None = _structural()
    min_properties: int | None = None
    max_properties: int | None = None
    unevaluated_properties: bool | None = None
    defs: Sequence[SchemaBuilder] = _structural(())


@dataclass(frozen=True)
class ContainsRule:
    """Containment sub-schema with optional occurrence bounds."""

    schema: SchemaBuilder
    min: int | None = None
    max: int | None = None


@dataclass(frozen=True, kw_only=True)
class ArrayOptions(AnnotationOptions):
    """Array keywords; the structural ones are merged in by ``array``."""

    items: SchemaBuilder | bool | None = _structural()
    prefix_items: Sequence[SchemaBuilder] = _structural(())
    unevaluated_items: SchemaBuilder | bool | None = _structural()
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool | None = None
    contains: ContainsRule | None = _structural()
    defs: Sequence[SchemaBuilder] = _structural(())


@dataclass(frozen=True, kw_only=True)
class RequiredPropertyOptions:
    dependent_schema: SchemaBuilder | None = None


@dataclass(frozen=True, kw_only=True)
class PropertyOptions(RequiredPropertyOptions):
    depends_on: Sequence[str] | None = None


def resolve_options(
    options_type: type[_OptionsT], options: _OptionsT | None, overrides: Mapping[str, Any]
) -> _OptionsT:
    """Combine a positional options instance with keyword overrides."""
    if options is None:
        return options_type(**overrides)
    if overrides:
        return dataclasses.replace(options, **overrides)
    return options


def _keyword_name(option: dataclasses.Field[Any]) -> str:
    explicit = option.metadata.get(_KEYWORD)
    if explicit:
        return explicit
    head, *rest = option.name.split("_")
    return head + "".join(part.capitalize() for part in rest)
