"""Logic for serializing the ProtoFlux catalog to disk."""

import json
from collections.abc import Iterable
from pathlib import Path

from protoflux_catalog.type_record import TypeRecord

CATALOG_FILE_NAME = "ProtoFluxTypes.json"


def write_catalog(
    records: Iterable[TypeRecord],
    out_dir: Path,
    file_name: str = CATALOG_FILE_NAME,
) -> Path:
    """Write the records as an indented JSON array and return the file path.

    The output directory is created when missing. Identical records always
    produce identical bytes.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    payload = [record.to_dict() for record in records]
    file_path = out_dir / file_name
    file_path.write_text(
        json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
    return file_path
