"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from protoflux_catalog.category_path import RUNTIMES_NODES_PREFIX
from protoflux_catalog.deep_merge import deep_merge
from protoflux_catalog.word_policy import DEFAULT_SPECIAL_CASES

DEFAULT_CONFIG: dict[str, Any] = {
    "root_category": "ProtoFlux",
    "thresholds": {
        "max_parameters": 1,
    },
    "paths": {
        "strip_prefixes": [RUNTIMES_NODES_PREFIX],
    },
    "words": {
        "policy": "cascade",
        "special_cases": list(DEFAULT_SPECIAL_CASES),
    },
    "output": {
        "catalog_file": "ProtoFluxTypes.json",
        "outline_file": "ProtoFluxList.txt",
    },
    "dedupe_overloads": False,
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Raises ValueError when the file holds something other than a mapping or
    when a special case literal is not a non-empty string.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"{p}: configuration must be a mapping"
                raise ValueError(msg)
            _check_special_cases(user_config, p)
            config = deep_merge(config, user_config)
    return config


def _check_special_cases(user_config: dict[str, Any], path: Path) -> None:
    words = user_config.get("words")
    if not isinstance(words, dict) or "special_cases" not in words:
        return
    literals = words["special_cases"]
    if not isinstance(literals, list):
        msg = f"{path}: words.special_cases must be a list"
        raise ValueError(msg)
    for literal in literals:
        if not isinstance(literal, str) or not literal:
            # YAML 1.1 reads On, Off, Yes and No as booleans
            msg = (
                f"{path}: words.special_cases entry {literal!r} is not a "
                "non-empty string; quote it in the YAML file"
            )
            raise ValueError(msg)
