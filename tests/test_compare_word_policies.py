"""Tests for the word policy comparison script."""

import json
from pathlib import Path

import pytest

from protoflux_catalog.word_policy import CASCADE_POLICY, LEGACY_POLICY
from protoflux_catalog.word_splitter import WordSplitter
from scripts.compare_word_policies import compare, load_nice_names, main


def test_compare_lists_differences() -> None:
    """Verify that only differing names are reported."""
    differences = compare(
        ["ValueX", "HTTPServer"],
        WordSplitter(CASCADE_POLICY),
        WordSplitter(LEGACY_POLICY),
    )
    assert differences == [("ValueX", ["Value", "X"], ["ValueX"])]


def test_load_nice_names(tmp_path: Path) -> None:
    """Verify that nice names are read from a catalog file."""
    path = tmp_path / "ProtoFluxTypes.json"
    path.write_text(json.dumps([{"NiceName": "ValueAdd<T>"}, {"FullName": "X"}]))
    assert load_nice_names(path) == ["ValueAdd<T>"]


def test_main_exit_codes(capsys: pytest.CaptureFixture) -> None:
    """Verify exit 1 on differences and a summary otherwise."""
    with pytest.raises(SystemExit) as exc:
        main(["--name", "ToUTC"])
    assert exc.value.code == 1

    main(["--name", "HTTPServer"])
    assert "no differences" in capsys.readouterr().out
