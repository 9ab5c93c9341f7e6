"""Layering of user configuration over the defaults."""

from collections.abc import Collection
from typing import Any

# Lists that extend the default instead of replacing it
ADDITIVE_KEYS = frozenset({"special_cases"})


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    additive_keys: Collection[str] = ADDITIVE_KEYS,
) -> dict[str, Any]:
    """Return ``base`` with ``update`` layered on top.

    Nested mappings merge key by key. Lists under an additive key keep the
    base entries first and append new ones once, in the order given; every
    other value replaces what was there.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value, additive_keys)
        elif (
            key in additive_keys
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            merged[key] = list(dict.fromkeys([*current, *value]))
        else:
            merged[key] = value
    return merged
