"""Data model for a type reported by the host's type provider."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeDescriptor:
    """A discovered type, as listed in an assembly manifest."""

    full_name: str
    nice_name: str
    category: str | None = None  # slash path in the component library
    assembly: str = ""
