"""End-to-end tests for the extraction command."""

import json
from pathlib import Path

import pytest
import yaml

from protoflux_catalog.extract_protoflux_types import main

TYPES = [
    {
        "full_name": "ProtoFlux.Nodes.ValueAdd`1",
        "nice_name": "ValueAdd<T>",
        "category": "ProtoFlux/Runtimes/Execution/Nodes/Math",
    },
    {
        "full_name": "ProtoFlux.Nodes.Dual`2",
        "nice_name": "Dual<A,B>",
        "category": "ProtoFlux/Runtimes/Execution/Nodes/Math",
    },
    {
        "full_name": "ProtoFlux.Nodes.IsNaN",
        "nice_name": "IsNaN",
        "category": "ProtoFlux/Runtimes/Execution/Nodes/Math/Float",
    },
    {
        "full_name": "ProtoFlux.Nodes.Comment",
        "nice_name": "Comment",
        "category": "ProtoFlux",
    },
    {
        "full_name": "FrooxEngine.Slot",
        "nice_name": "Slot",
        "category": "Core",
    },
]


def _input_dir(tmp_path: Path) -> Path:
    input_dir = tmp_path / "assemblies"
    input_dir.mkdir()
    (input_dir / "ProtoFlux.Nodes.yml").write_text(
        yaml.dump({"assembly": "ProtoFlux.Nodes", "types": TYPES})
    )
    (input_dir / "Native.yml").write_text("types: [unclosed")
    return input_dir


def test_main_writes_catalog(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    """Verify the catalog contents and the printed summary."""
    out_dir = tmp_path / "data"
    code = main([str(out_dir), "--input", str(_input_dir(tmp_path))])
    assert code == 0

    data = json.loads((out_dir / "ProtoFluxTypes.json").read_text(encoding="utf-8"))
    assert [(r["FullName"], r["NiceCategory"]) for r in data] == [
        ("ProtoFlux.Nodes.IsNaN", "Math/Float"),
        ("ProtoFlux.Nodes.ValueAdd`1", "Math"),
        ("ProtoFlux.Nodes.Comment", "ProtoFlux"),
    ]
    assert data[0]["WordsOfNiceName"] == ["Is", "NaN"]

    out = capsys.readouterr().out
    assert "Loaded 1 assemblies." in out
    assert "Loaded 5 types." in out
    assert "Loaded 3 ProtoFlux types." in out
    assert not (out_dir / "ProtoFluxList.txt").exists()


def test_main_writes_outline(tmp_path: Path) -> None:
    """Verify that --outline writes the category outline."""
    out_dir = tmp_path / "data"
    main([str(out_dir), "--input", str(_input_dir(tmp_path)), "--outline"])
    outline = (out_dir / "ProtoFluxList.txt").read_text(encoding="utf-8")
    assert outline.splitlines()[0] == " Runtimes#Runtimes"
    assert " Comment#ProtoFlux.Nodes.Comment#ProtoFlux" in outline.splitlines()


def test_main_with_config(tmp_path: Path) -> None:
    """Verify that configuration changes the filter and word policy."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump(
            {
                "thresholds": {"max_parameters": 2},
                "words": {"policy": "legacy"},
                "output": {"catalog_file": "types.json"},
            }
        )
    )
    out_dir = tmp_path / "data"
    main(
        [
            str(out_dir),
            "--input",
            str(_input_dir(tmp_path)),
            "--config",
            str(config_file),
        ]
    )
    data = json.loads((out_dir / "types.json").read_text(encoding="utf-8"))
    assert "ProtoFlux.Nodes.Dual`2" in [r["FullName"] for r in data]


def test_main_missing_root_category(tmp_path: Path) -> None:
    """Verify that a library without ProtoFlux aborts the run."""
    input_dir = tmp_path / "assemblies"
    input_dir.mkdir()
    (input_dir / "Core.yml").write_text(
        yaml.dump({"assembly": "Core", "types": [TYPES[-1]]})
    )
    with pytest.raises(SystemExit):
        main([str(tmp_path / "data"), "--input", str(input_dir)])


def test_main_is_idempotent(tmp_path: Path) -> None:
    """Verify that two runs produce byte-identical catalogs."""
    input_dir = _input_dir(tmp_path)
    main([str(tmp_path / "a"), "--input", str(input_dir)])
    main([str(tmp_path / "b"), "--input", str(input_dir)])
    first = (tmp_path / "a" / "ProtoFluxTypes.json").read_bytes()
    second = (tmp_path / "b" / "ProtoFluxTypes.json").read_bytes()
    assert first == second
