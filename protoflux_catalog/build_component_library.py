"""Logic for assembling the categorized component library."""

from collections.abc import Iterable

from protoflux_catalog.category_node import CategoryNode
from protoflux_catalog.type_descriptor import TypeDescriptor


def build_component_library(types: Iterable[TypeDescriptor]) -> CategoryNode:
    """File every categorized type under its category path.

    Categories keep the order in which they were first seen. Types without a
    category are not part of the library.
    """
    root = CategoryNode("")
    for descriptor in types:
        if not descriptor.category:
            continue
        root.get_or_create_subcategory(descriptor.category).elements.append(descriptor)
    return root
