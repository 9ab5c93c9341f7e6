"""Tests for category path building and normalization."""

from protoflux_catalog.category_path import (
    DEFAULT_STRIP_PREFIXES,
    RUNTIMES_NODES_PREFIX,
    join_category_path,
    normalize_category_path,
)


def test_join_category_path() -> None:
    """Verify joining with the root's empty path."""
    assert join_category_path("", "Math") == "Math"
    assert join_category_path("Math", "Vectors") == "Math/Vectors"


def test_default_prefix() -> None:
    """Verify the default prefix is the runtime node prefix."""
    assert DEFAULT_STRIP_PREFIXES == (RUNTIMES_NODES_PREFIX,)
    assert RUNTIMES_NODES_PREFIX == "Runtimes/Execution/Nodes/"


def test_normalize_strips_runtime_nodes_prefix() -> None:
    """Verify that the whole runtime node prefix is removed."""
    assert normalize_category_path("Runtimes/Execution/Nodes/Math") == "Math"
    assert (
        normalize_category_path("Runtimes/Execution/Nodes/Math/Vectors")
        == "Math/Vectors"
    )


def test_normalize_leaves_other_paths() -> None:
    """Verify that paths without the prefix are untouched."""
    assert normalize_category_path("Runtimes/Execution/Actions") == (
        "Runtimes/Execution/Actions"
    )
    assert normalize_category_path("Runtimes/Execution/Nodes") == (
        "Runtimes/Execution/Nodes"
    )
    assert normalize_category_path("ProtoFlux") == "ProtoFlux"


def test_normalize_first_matching_prefix_wins() -> None:
    """Verify ordered prefixes, longest listed first."""
    prefixes = ["Runtimes/Execution/Nodes/", "Runtimes/Execution/"]
    assert normalize_category_path("Runtimes/Execution/Nodes/Math", prefixes) == "Math"
    assert (
        normalize_category_path("Runtimes/Execution/Actions", prefixes) == "Actions"
    )
    assert normalize_category_path("Flow", prefixes) == "Flow"
    assert normalize_category_path("Runtimes/Execution/Nodes/Math", []) == (
        "Runtimes/Execution/Nodes/Math"
    )
