"""Extract the ProtoFlux node catalog from a dump of the component library.

The host dumps every loaded assembly as a YAML manifest (full name, nice name
and category of each type). This module assembles the component library from
those manifests, walks its ProtoFlux subtree and writes ProtoFluxTypes.json.
"""

import argparse
import logging
from pathlib import Path

from protoflux_catalog.run_extraction import run_extraction


def main(argv: list[str] | None = None) -> int:
    """Run the extraction process."""
    ap = argparse.ArgumentParser(
        description="Extract the ProtoFlux node type catalog as JSON.",
    )
    ap.add_argument(
        "out_dir",
        nargs="?",
        type=Path,
        default=Path("data"),
        help="Output directory for ProtoFluxTypes.json (default: data)",
    )
    ap.add_argument(
        "--input",
        type=Path,
        default=Path("assemblies"),
        help="Directory containing assembly manifests (default: assemblies)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--outline",
        action="store_true",
        help="Also write the category outline (ProtoFluxList.txt)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log skipped files and filtered types",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_extraction(args)


if __name__ == "__main__":
    raise SystemExit(main())
