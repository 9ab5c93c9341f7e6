"""Data model for a node of the categorized component library."""

from dataclasses import dataclass, field

from protoflux_catalog.type_descriptor import TypeDescriptor


@dataclass
class CategoryNode:
    """A category with ordered subcategories and the types filed directly in it."""

    name: str
    subcategories: list["CategoryNode"] = field(default_factory=list)
    elements: list[TypeDescriptor] = field(default_factory=list)

    def find_child(self, name: str) -> "CategoryNode | None":
        """Return the direct subcategory with the given name, if any."""
        for child in self.subcategories:
            if child.name == name:
                return child
        return None

    def get_subcategory(self, path: str) -> "CategoryNode":
        """Walk a slash-delimited path below this node.

        Raises KeyError when any segment is missing.
        """
        node = self
        for part in _path_parts(path):
            child = node.find_child(part)
            if child is None:
                msg = f"No category {path!r} under {self.name!r}"
                raise KeyError(msg)
            node = child
        return node

    def get_or_create_subcategory(self, path: str) -> "CategoryNode":
        """Walk a slash-delimited path, appending missing nodes in order."""
        node = self
        for part in _path_parts(path):
            child = node.find_child(part)
            if child is None:
                child = CategoryNode(part)
                node.subcategories.append(child)
            node = child
        return node


def _path_parts(path: str) -> list[str]:
    return [p for p in path.split("/") if p]
