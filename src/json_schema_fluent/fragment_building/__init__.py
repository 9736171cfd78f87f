"""Fragment building exports."""

from .fragment_merge import Fragment, copy_fragment_value, merge_fragments
from .schema_builder import (
    SchemaBuilder,
    SchemaFragmentError,
    read_fragment,
    read_fragment_or_literal,
)

__all__ = [
    "Fragment",
    "copy_fragment_value",
    "SchemaBuilder",
    "SchemaFragmentError",
    "merge_fragments",
    "read_fragment",
    "read_fragment_or_literal",
]
