"""Orchestration logic for extracting the ProtoFlux type catalog."""

import argparse
import logging
from typing import Any

from protoflux_catalog.build_component_library import build_component_library
from protoflux_catalog.category_node import CategoryNode
from protoflux_catalog.category_walker import CategoryWalker
from protoflux_catalog.discover_types import discover_types
from protoflux_catalog.load_config import load_config
from protoflux_catalog.render_type_outline import render_type_outline
from protoflux_catalog.word_policy import WordPolicy, get_word_policy
from protoflux_catalog.write_catalog import write_catalog

logger = logging.getLogger(__name__)


def run_extraction(args: argparse.Namespace) -> int:
    """Execute the full extraction pipeline."""
    config = load_config(args.config)

    discovery = discover_types(args.input)
    print(f"Loaded {len(discovery.assemblies)} assemblies.")
    print(f"Loaded {len(discovery.types)} types.")

    library = build_component_library(discovery.types)
    protoflux_root = _protoflux_root(library, config["root_category"])

    walker = _build_walker(config)
    records = walker.walk(protoflux_root)
    print(f"Loaded {len(records)} ProtoFlux types.")

    out_dir = args.out_dir
    file_path = write_catalog(records, out_dir, config["output"]["catalog_file"])
    print(f"ProtoFlux data saved to {file_path}")

    if args.outline:
        outline_path = out_dir / config["output"]["outline_file"]
        outline_path.write_text(render_type_outline(protoflux_root), encoding="utf-8")
        print(f"ProtoFlux outline saved to {outline_path}")

    return 0


def _protoflux_root(library: CategoryNode, root_category: str) -> CategoryNode:
    """Return the visual-scripting subtree of the component library."""
    try:
        return library.get_subcategory(root_category)
    except KeyError:
        msg = f"No '{root_category}' category found in the component library"
        raise SystemExit(msg) from None


def _word_policy(config: dict[str, Any]) -> WordPolicy:
    """Resolve the configured word policy and its special-case table."""
    words = config["words"]
    policy = get_word_policy(words["policy"])
    return policy.with_special_cases(words["special_cases"])


def _build_walker(config: dict[str, Any]) -> CategoryWalker:
    """Create a walker from the merged configuration."""
    policy = _word_policy(config)
    logger.debug(
        "Using word policy %s with special cases %s",
        policy.name,
        ", ".join(policy.special_cases),
    )
    return CategoryWalker(
        max_parameters=config["thresholds"]["max_parameters"],
        strip_prefixes=config["paths"]["strip_prefixes"],
        dedupe_overloads=bool(config.get("dedupe_overloads")),
        word_policy=policy,
    )
