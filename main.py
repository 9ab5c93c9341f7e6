"""Main orchestration script for extracting the ProtoFlux type catalog."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full catalog extraction pipeline."""
    parser = argparse.ArgumentParser(
        description="Extract the ProtoFlux type catalog from assembly manifests."
    )
    parser.add_argument(
        "out_dir",
        nargs="?",
        default="data",
        help="Output directory (default: data)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before extracting",
    )
    parser.add_argument(
        "--input",
        default="assemblies",
        help="Directory containing assembly manifests",
    )
    parser.add_argument(
        "--outline",
        action="store_true",
        help="Also write the ProtoFluxList.txt category outline",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"], cwd=root_dir)
        print("\nDevelopment checks passed. Proceeding with extraction.\n")

    # The module runs from the repository root; paths stay relative to the caller
    out_dir = Path(args.out_dir).resolve()
    cmd = [
        sys.executable,
        "-m",
        "protoflux_catalog.extract_protoflux_types",
        str(out_dir),
        "--input",
        str(Path(args.input).resolve()),
    ]
    if args.outline:
        cmd.append("--outline")
    if args.config:
        cmd.extend(["--config", str(Path(args.config).resolve())])

    print("--- Extracting ProtoFlux types ---")
    run_command(cmd, cwd=root_dir)

    print(f"\nSUCCESS: Catalog written to {out_dir}")


if __name__ == "__main__":
    main()
