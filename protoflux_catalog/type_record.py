"""Data model for one entry of the emitted ProtoFlux catalog."""

from dataclasses import dataclass, field
from typing import Any

from protoflux_catalog.parameter_count import parameter_count
from protoflux_catalog.word_policy import CASCADE_POLICY, WordPolicy
from protoflux_catalog.word_splitter import words_of_nice_name


@dataclass(frozen=True)
class TypeRecord:
    """A catalogued node type.

    ``parameter_count`` and ``words_of_nice_name`` are derived on access from
    ``full_name`` and ``nice_name`` and are never stored.
    """

    full_name: str
    nice_name: str
    nice_category: str
    word_policy: WordPolicy = field(default=CASCADE_POLICY, repr=False, compare=False)

    @property
    def parameter_count(self) -> int:
        """Generic arity taken from the backtick suffix of the full name."""
        return parameter_count(self.full_name)

    @property
    def words_of_nice_name(self) -> list[str]:
        """Words of the nice name, generic markup excluded."""
        return words_of_nice_name(self.nice_name, self.word_policy)

    def to_dict(self) -> dict[str, Any]:
        """Render the record with the catalog's field names and order."""
        return {
            "FullName": self.full_name,
            "NiceName": self.nice_name,
            "NiceCategory": self.nice_category,
            "ParameterCount": self.parameter_count,
            "WordsOfNiceName": self.words_of_nice_name,
        }
