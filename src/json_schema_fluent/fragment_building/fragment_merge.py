"""Deep merge of schema fragments."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

Fragment = bool | Mapping[str, Any]


def merge_fragments(left: Fragment, right: Fragment) -> Fragment:
    """Return a new fragment combining ``right`` into ``left``.

    Sequences are concatenated left-then-right, nested mappings are merged
    key-wise and anything else is taken from ``right``. A boolean fragment on
    either side is replaced wholesale by ``right``. Neither argument is mutated.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return copy.deepcopy(right)
    return _merge_mappings(left, right)


def _merge_mappings(left: Mapping[str, Any], right: Mapping[str, Any]) -> dict[str, Any]:
    merged = {key: copy.deepcopy(value) for key, value in left.items()}
    for key, value in right.items():
        if key in merged:
            merged[key] = _merge_values(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _merge_values(left: Any, right: Any) -> Any:
    if _is_sequence(left) and _is_sequence(right):
        return [*left, *copy.deepcopy(list(right))]
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return _merge_mappings(left, right)
    return copy.deepcopy(right)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def copy_fragment_value(value: Any) -> Any:
    """Return a deep copy of ``value`` with every tuple turned into a list."""
    if isinstance(value, Mapping):
        return {key: copy_fragment_value(item) for key, item in value.items()}
    if _is_sequence(value):
        return [copy_fragment_value(item) for item in value]
    return copy.deepcopy(value)
