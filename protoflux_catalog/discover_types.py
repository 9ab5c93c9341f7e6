"""Logic for discovering types from a directory of assembly manifests."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from protoflux_catalog.load_assembly_manifest import (
    InvalidManifestError,
    load_assembly_manifest,
)
from protoflux_catalog.type_descriptor import TypeDescriptor

logger = logging.getLogger(__name__)

MANIFEST_SUFFIXES = (".yml", ".yaml")
SYSTEM_PREFIX = "System"


@dataclass
class DiscoveryResult:
    """Assemblies that loaded and the types they provided, in load order."""

    assemblies: list[str] = field(default_factory=list)
    types: list[TypeDescriptor] = field(default_factory=list)


def discover_types(input_dir: Path) -> DiscoveryResult:
    """Load every non-system manifest under ``input_dir``.

    Files that are not manifests are skipped.
    """
    if not input_dir.is_dir():
        msg = f"Input directory not found: {input_dir}"
        raise SystemExit(msg)

    result = DiscoveryResult()
    for path in sorted(input_dir.iterdir()):
        if not path.is_file() or path.suffix.lower() not in MANIFEST_SUFFIXES:
            continue
        if path.name.startswith(SYSTEM_PREFIX):
            continue
        try:
            assembly, types = load_assembly_manifest(path)
        except InvalidManifestError as exc:
            logger.debug("Skipping %s: %s", path, exc)
            continue
        result.assemblies.append(assembly)
        result.types.extend(types)
    return result
