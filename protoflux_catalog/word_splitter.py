"""Logic for splitting ProtoFlux nice names into words."""

import re

from protoflux_catalog.word_policy import (
    CASCADE_POLICY,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
    WordPolicy,
)


class WordSplitter:
    """Splits PascalCase, acronym and digit-mixed nice names into words."""

    def __init__(self, policy: WordPolicy = CASCADE_POLICY) -> None:
        """Initialize the splitter with a word policy."""
        self.policy = policy
        self.pattern = policy.compile()
        # Longest first, so a literal containing another one wins
        literals = {s for s in policy.special_cases if s}
        ordered = sorted(literals, key=lambda s: (-len(s), s))
        self.escape_re = (
            re.compile("|".join(re.escape(s) for s in ordered)) if ordered else None
        )
        self.placeholders = {
            self._placeholder(i): literal for i, literal in enumerate(ordered)
        }
        self.literal_index = {literal: i for i, literal in enumerate(ordered)}

    def split(self, nice_name: str) -> list[str]:
        """Split a nice name into an ordered list of words.

        Generic markup (everything from the first ``<``) is ignored. Special
        case literals such as ``NaN`` come back as single words.
        """
        clean_name = nice_name.split("<", 1)[0]
        clean_name = self._escape(clean_name)

        words = []
        for match in self.pattern.finditer(clean_name):
            word = match.group(0).replace("_", "")
            if not word:
                continue
            words.append(self.placeholders.get(word, word))

        if self.policy.merge_uppercase_into_previous:
            words = merge_uppercase_runs(words)
        return words

    def _escape(self, text: str) -> str:
        """Replace every special case literal with its placeholder."""
        if self.escape_re is None:
            return text
        return self.escape_re.sub(
            lambda m: self._placeholder(self.literal_index[m.group(0)]), text
        )

    @staticmethod
    def _placeholder(index: int) -> str:
        return f"{PLACEHOLDER_OPEN}{index}{PLACEHOLDER_CLOSE}"


def merge_uppercase_runs(words: list[str]) -> list[str]:
    """Glue every all-uppercase word onto the alphabetic word before it.

    ``["Value", "X"]`` becomes ``["ValueX"]``; digits never merge.
    """
    merged: list[str] = []
    for word in words:
        if merged and word.isupper() and word.isalpha() and merged[-1].isalpha():
            merged[-1] += word
        else:
            merged.append(word)
    return merged


def words_of_nice_name(nice_name: str, policy: WordPolicy = CASCADE_POLICY) -> list[str]:
    """Split a nice name with a cached splitter for the given policy."""
    splitter = _SPLITTERS.get(policy)
    if splitter is None:
        splitter = WordSplitter(policy)
        _SPLITTERS[policy] = splitter
    return splitter.split(nice_name)


_SPLITTERS: dict[WordPolicy, WordSplitter] = {}
