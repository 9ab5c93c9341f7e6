"""Compare how two word policies split the nice names of a catalog.

Usage:
    python scripts/compare_word_policies.py --file data/ProtoFluxTypes.json
    python scripts/compare_word_policies.py --name HTTPServer --name ValueX
"""

from __future__ import annotations

import argparse
import json
import pathlib
import sys

from protoflux_catalog.word_policy import WORD_POLICIES, get_word_policy
from protoflux_catalog.word_splitter import WordSplitter

RED = "\033[31m"
RESET = "\033[0m"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the policy comparison."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--file",
        type=pathlib.Path,
        help="Path to a ProtoFluxTypes.json catalog",
    )
    parser.add_argument(
        "--name",
        action="append",
        default=[],
        help="Nice name to compare (repeatable)",
    )
    parser.add_argument(
        "--left",
        default="cascade",
        choices=sorted(WORD_POLICIES),
        help="Reference policy (default: cascade)",
    )
    parser.add_argument(
        "--right",
        default="legacy",
        choices=sorted(WORD_POLICIES),
        help="Policy to compare against (default: legacy)",
    )
    return parser.parse_args(argv)


def load_nice_names(path: pathlib.Path) -> list[str]:
    """Load the NiceName of every record in a catalog file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"  (could not read {path}: {exc})")
        return []
    return [str(r["NiceName"]) for r in data if isinstance(r, dict) and "NiceName" in r]


def compare(
    names: list[str], left: WordSplitter, right: WordSplitter
) -> list[tuple[str, list[str], list[str]]]:
    """Return the names whose splits differ between the two splitters."""
    differences = []
    for name in names:
        left_words = left.split(name)
        right_words = right.split(name)
        if left_words != right_words:
            differences.append((name, left_words, right_words))
    return differences


def main(argv: list[str] | None = None) -> None:
    """Print every name the two policies split differently; exit 1 if any."""
    args = parse_args(argv)
    names = list(args.name)
    if args.file:
        names.extend(load_nice_names(args.file))

    if not names:
        print("  (no names to compare)")
        return

    left = WordSplitter(get_word_policy(args.left))
    right = WordSplitter(get_word_policy(args.right))
    differences = compare(sorted(set(names)), left, right)

    if differences:
        for name, left_words, right_words in differences:
            right_text = f"{RED}{args.right}={right_words}{RESET}"
            print(f"  - {name}: {args.left}={left_words} {right_text}")
        sys.exit(1)

    print(f"  (no differences; compared {len(set(names))} names)")


if __name__ == "__main__":
    main()
