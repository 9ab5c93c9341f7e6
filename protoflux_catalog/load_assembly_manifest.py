"""Logic for loading a single assembly manifest YAML file."""

import logging
from pathlib import Path
from typing import Any

import yaml

from protoflux_catalog.type_descriptor import TypeDescriptor

logger = logging.getLogger(__name__)


class InvalidManifestError(ValueError):
    """Raised when a file is not an assembly manifest at all."""


def load_assembly_manifest(path: Path) -> tuple[str, list[TypeDescriptor]]:
    """Load an assembly manifest and return its name and loadable types.

    Entries lacking a full name or nice name are dropped and the rest of the
    manifest is kept. Raises InvalidManifestError when the file cannot be read
    as a manifest.
    """
    try:
        # BaseLoader keeps every scalar a string, so names like Off or 1.10 survive
        doc = yaml.load(path.read_text(encoding="utf-8"), Loader=yaml.BaseLoader)
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        msg = f"{path.name} is not valid YAML"
        raise InvalidManifestError(msg) from exc

    if not isinstance(doc, dict) or not isinstance(doc.get("types"), list):
        msg = f"{path.name} has no 'types' list"
        raise InvalidManifestError(msg)

    assembly = str(doc.get("assembly") or path.stem)
    types: list[TypeDescriptor] = []
    dropped = 0
    for entry in doc["types"]:
        descriptor = _descriptor_from_entry(entry, assembly)
        if descriptor is None:
            dropped += 1
            continue
        types.append(descriptor)

    if dropped:
        logger.warning(
            "Loaded %d of %d types from %s", len(types), len(types) + dropped, path
        )
    return assembly, types


def _descriptor_from_entry(entry: Any, assembly: str) -> TypeDescriptor | None:
    if not isinstance(entry, dict):
        return None
    full_name = entry.get("full_name")
    nice_name = entry.get("nice_name")
    if not isinstance(full_name, str) or not isinstance(nice_name, str):
        return None
    if not full_name or not nice_name:
        return None
    category = entry.get("category")
    return TypeDescriptor(
        full_name=full_name,
        nice_name=nice_name,
        category=category if isinstance(category, str) and category else None,
        assembly=assembly,
    )
