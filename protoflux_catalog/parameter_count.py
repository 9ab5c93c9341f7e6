"""Utility for reading the generic arity encoded in a full type name."""

import re

GENERIC_ARITY_RE = re.compile(r"`(\d+)")


def parameter_count(full_name: str) -> int:
    """Return the number after the first backtick, or 0 for non-generic types."""
    match = GENERIC_ARITY_RE.search(full_name)
    if match:
        return int(match.group(1))
    return 0
