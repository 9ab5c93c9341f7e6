"""Helpers for building and normalizing category paths."""

from collections.abc import Sequence

CATEGORY_SEPARATOR = "/"
RUNTIMES_NODES_PREFIX = "Runtimes/Execution/Nodes/"
DEFAULT_STRIP_PREFIXES = (RUNTIMES_NODES_PREFIX,)


def join_category_path(parent: str, name: str) -> str:
    """Append a category name to a parent path (the empty path is the root)."""
    if not parent:
        return name
    return f"{parent}{CATEGORY_SEPARATOR}{name}"


def normalize_category_path(
    path: str, strip_prefixes: Sequence[str] = DEFAULT_STRIP_PREFIXES
) -> str:
    """Strip the first matching prefix from a category path.

    Prefixes are tried in order, so list the longer one first when two
    overlap. ``Runtimes/Execution/Nodes/Math`` becomes ``Math``.
    """
    for prefix in strip_prefixes:
        if prefix and path.startswith(prefix):
            return path[len(prefix) :]
    return path
