"""Render the category tree as a '#'-depth text outline."""

from protoflux_catalog.category_node import CategoryNode
from protoflux_catalog.category_path import join_category_path

SEPARATOR = "#"


def render_type_outline(root: CategoryNode) -> str:
    """Render every category and type below ``root``, one per line.

    Category lines read ``## Name#Path`` and type lines
    ``### NiceName#FullName#Path``, with one marker per level. Types on the
    root itself come last, without markers. Nothing is filtered or normalized.
    """
    lines: list[str] = []
    for node in root.subcategories:
        _render_node(node, lines, 0, "")

    for element in root.elements:
        lines.append(_element_line(element.nice_name, element.full_name, 0, root.name))

    return "".join(f"{line}\n" for line in lines)


def _render_node(
    node: CategoryNode, lines: list[str], depth: int, parent_path: str
) -> None:
    current_path = join_category_path(parent_path, node.name)
    lines.append(f"{SEPARATOR * depth} {node.name}{SEPARATOR}{current_path}")

    for child in node.subcategories:
        _render_node(child, lines, depth + 1, current_path)

    for element in node.elements:
        lines.append(
            _element_line(element.nice_name, element.full_name, depth + 1, current_path)
        )


def _element_line(nice_name: str, full_name: str, markers: int, path: str) -> str:
    return f"{SEPARATOR * markers} {nice_name}{SEPARATOR}{full_name}{SEPARATOR}{path}"
