"""Document model exports."""

from .constants import DEFS_POINTER_PREFIX, NULL_TYPE, SCHEMA_DIALECT, SCHEMA_KEYWORD, TYPE_KEYWORD
from .schema_shapes import (
    AnnotationSchema,
    AnySchema,
    ArraySchema,
    BaseSchema,
    BooleanSchema,
    ContentEncoding,
    IntegerSchema,
    MimeType,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    PropertiesSchema,
    PropertyNamesRule,
    Schema,
    SchemaDocument,
    StringFormat,
    StringSchema,
    TypeName,
)

__all__ = [
    "DEFS_POINTER_PREFIX",
    "NULL_TYPE",
    "SCHEMA_DIALECT",
    "SCHEMA_KEYWORD",
    "TYPE_KEYWORD",
    "AnnotationSchema",
    "AnySchema",
    "ArraySchema",
    "BaseSchema",
    "BooleanSchema",
    "ContentEncoding",
    "IntegerSchema",
    "MimeType",
    "NullSchema",
    "NumberSchema",
    "ObjectSchema",
    "PropertiesSchema",
    "PropertyNamesRule",
    "Schema",
    "SchemaDocument",
    "StringFormat",
    "StringSchema",
    "TypeName",
]
