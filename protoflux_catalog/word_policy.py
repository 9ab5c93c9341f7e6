"""Rule tables that control how nice names are split into words."""

import re
from dataclasses import dataclass, replace

PLACEHOLDER_OPEN = "\ue000"
PLACEHOLDER_CLOSE = "\ue001"
PLACEHOLDER_PATTERN = rf"{PLACEHOLDER_OPEN}\d+{PLACEHOLDER_CLOSE}"

DEFAULT_SPECIAL_CASES = ("NaN", "OwO")


@dataclass(frozen=True)
class WordPolicy:
    """An ordered pattern cascade plus the literals that bypass it.

    Patterns are tried in order at every position of the name; the first one
    that matches consumes the text. Order is significant.
    """

    name: str
    patterns: tuple[str, ...]
    special_cases: tuple[str, ...] = DEFAULT_SPECIAL_CASES
    merge_uppercase_into_previous: bool = False

    def compile(self) -> re.Pattern[str]:
        """Join the patterns into a single alternation, keeping their order."""
        return re.compile("|".join(f"(?:{p})" for p in self.patterns))

    def with_special_cases(self, special_cases: list[str]) -> "WordPolicy":
        """Return a copy of the policy using a different literal table."""
        return replace(self, special_cases=tuple(special_cases))


CASCADE_POLICY = WordPolicy(
    name="cascade",
    patterns=(
        PLACEHOLDER_PATTERN,
        # bool as its own word, only before a suffix (Is_bool_1, bool2)
        r"(?<![A-Za-z0-9])bool(?=_|\d)",
        r"[A-Z][a-z]+",
        r"[A-Z]+(?![a-z])",
        r"\d+",
        r"_+",
        r"[A-Z]?[a-z]+",
        r"[A-Z]",
    ),
)

LEGACY_POLICY = WordPolicy(
    name="legacy",
    patterns=(
        PLACEHOLDER_PATTERN,
        r"[A-Z]?[a-z]+",
        r"[A-Z]+(?![a-z])",
        r"\d+",
        r"_+",
    ),
    merge_uppercase_into_previous=True,
)

WORD_POLICIES = {p.name: p for p in (CASCADE_POLICY, LEGACY_POLICY)}


def get_word_policy(name: str) -> WordPolicy:
    """Look up a built-in policy by name."""
    try:
        return WORD_POLICIES[name]
    except KeyError:
        known = ", ".join(sorted(WORD_POLICIES))
        msg = f"Unknown word policy: {name!r} (expected one of: {known})"
        raise ValueError(msg) from None
