"""Schema builder: a mutable cell owning one schema fragment."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from json_schema_fluent.document_model.constants import SCHEMA_DIALECT, SCHEMA_KEYWORD

from .fragment_merge import Fragment, copy_fragment_value, merge_fragments

_LOGGER = logging.getLogger(__name__)


class SchemaFragmentError(Exception):
    """Raised when a value cannot serve as a schema fragment or builder."""


class SchemaBuilder:
    """Holds a partially built schema fragment and merges others into it."""

    __slots__ = ("_fragment",)

    def __init__(self, fragment: Fragment) -> None:
        if not isinstance(fragment, (bool, Mapping)):
            raise SchemaFragmentError(
                f"Schema fragment must be a boolean or a mapping, got {type(fragment).__name__}."
            )
        self._fragment: Fragment = copy_fragment_value(fragment)

    @classmethod
    def wrap(cls, fragment: Fragment) -> SchemaBuilder:
        """Return a builder owning ``fragment``."""
        return cls(fragment)

    def merge_from(self, other: SchemaBuilder) -> SchemaBuilder:
        """Deep-merge ``other``'s fragment into this builder and return self."""
        self._fragment = merge_fragments(self._fragment, read_fragment(other))
        return self

    def read(self) -> Fragment:
        """Return a copy of the current fragment without the dialect marker."""
        return copy.deepcopy(self._fragment)

    def finalize(self) -> Fragment:
        """Return the fragment as a top-level document.

        Boolean fragments come back unchanged. Mapping fragments get
        ``$schema`` as their first key, replacing any value already set.
        """
        if isinstance(self._fragment, bool):
            return self._fragment
        if SCHEMA_KEYWORD in self._fragment:
            _LOGGER.debug(
                "Replacing %s=%r with the draft 2020-12 dialect.",
                SCHEMA_KEYWORD,
                self._fragment[SCHEMA_KEYWORD],
            )
        document: dict[str, Any] = {SCHEMA_KEYWORD: SCHEMA_DIALECT}
        for key, value in self._fragment.items():
            if key != SCHEMA_KEYWORD:
                document[key] = copy.deepcopy(value)
        return document

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fragment!r})"


def read_fragment(value: Any) -> Fragment:
    """Return the fragment of a builder, failing fast on anything else."""
    if not isinstance(value, SchemaBuilder):
        raise SchemaFragmentError(f"Expected a SchemaBuilder, got {type(value).__name__}.")
    return value.read()


def read_fragment_or_literal(value: Any) -> Fragment:
    """Return a boolean literal unchanged or the fragment of a builder."""
    if isinstance(value, bool):
        return value
    return read_fragment(value)
