"""Static shapes of draft 2020-12 schema documents.

The shapes describe what a finished document may contain. Nothing at runtime
checks a fragment against them; builders simply produce mappings that fit.
"""

from __future__ import annotations

from typing import Any, Literal, Required, TypedDict, Union

TypeName = Literal["string", "number", "integer", "boolean", "object", "array", "null"]

StringFormat = Literal[
    "date-time",
    "time",
    "date",
    "duration",
    "email",
    "idn-email",
    "hostname",
    "idn-hostname",
    "ipv4",
    "ipv6",
    "uuid",
    "uri",
    "uri-reference",
    "iri",
    "iri-reference",
    "uri-template",
    "json-pointer",
    "relative-json-pointer",
    "regex",
]

MimeType = Literal[
    "application/json",
    "application/xml",
    "text/xml",
    "text/html",
    "text/plain",
    "application/octet-stream",
    "text/css",
    "text/csv",
    "text/javascript",
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "image/bmp",
    "image/apng",
    "image/svg+xml",
    "image/avif",
    "video/webm",
    "video/mp4",
    "video/ogg",
    "multipart/form-data",
]

ContentEncoding = Literal[
    "7bit", "8bit", "binary", "quoted-printable", "base16", "base32", "base64"
]

AnnotationSchema = TypedDict(
    "AnnotationSchema",
    {
        "$id": str,
        "$comment": str,
        "default": Any,
        "title": str,
        "description": str,
        "examples": list[Any],
        "deprecated": bool,
        "readOnly": bool,
        "writeOnly": bool,
    },
    total=False,
)

_CoreKeywords = TypedDict(
    "_CoreKeywords",
    {
        "$schema": str,
        "$ref": str,
        "$anchor": str,
        "$defs": dict[str, "Schema"],
        "enum": list[Any],
        "const": Any,
        "allOf": list["Schema"],
        "anyOf": list["Schema"],
        "oneOf": list["Schema"],
        "not": "Schema",
        "if": "Schema",
        "then": "Schema",
        "else": "Schema",
    },
    total=False,
)


class BaseSchema(AnnotationSchema, _CoreKeywords, total=False):
    """Keywords every schema kind may carry."""


class AnySchema(BaseSchema, total=False):
    """Schema without a fixed kind, e.g. a composition or a reference."""

    type: TypeName | list[TypeName]


class StringSchema(BaseSchema, total=False):
    type: Required[Literal["string"]]
    minLength: int
    maxLength: int
    pattern: str
    format: StringFormat
    contentMediaType: MimeType
    contentEncoding: ContentEncoding


class _NumericKeywords(TypedDict, total=False):
    minimum: float
    maximum: float
    exclusiveMinimum: float
    exclusiveMaximum: float
    multipleOf: float


class IntegerSchema(BaseSchema, _NumericKeywords, total=False):
    type: Required[Literal["integer"]]


class NumberSchema(BaseSchema, _NumericKeywords, total=False):
    type: Required[Literal["number"]]


class BooleanSchema(BaseSchema, total=False):
    type: Required[Literal["boolean"]]


class NullSchema(BaseSchema, total=False):
    type: Required[Literal["null"]]


class PropertyNamesRule(TypedDict):
    pattern: str


class PropertiesSchema(TypedDict, total=False):
    """Property keywords, also the shape of a dependent schema."""

    properties: dict[str, "Schema"]
    required: list[str]
    patternProperties: dict[str, "Schema"]
    additionalProperties: "Schema"
    unevaluatedProperties: bool
    propertyNames: PropertyNamesRule
    minProperties: int
    maxProperties: int


class ObjectSchema(BaseSchema, PropertiesSchema, total=False):
    type: Literal["object"]
    dependentRequired: dict[str, list[str]]
    dependentSchemas: dict[str, PropertiesSchema]


class ArraySchema(BaseSchema, total=False):
    type: Literal["array"]
    items: "Schema"
    prefixItems: list["Schema"]
    unevaluatedItems: "Schema"
    minItems: int
    maxItems: int
    uniqueItems: bool
    contains: "Schema"
    maxContains: int
    minContains: int


SchemaDocument = Union[
    StringSchema,
    NumberSchema,
    IntegerSchema,
    ObjectSchema,
    ArraySchema,
    BooleanSchema,
    NullSchema,
]

Schema = Union[bool, SchemaDocument, AnySchema]
