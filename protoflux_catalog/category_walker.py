"""Logic for flattening the ProtoFlux category tree into catalog records."""

import logging
from collections.abc import Sequence

from protoflux_catalog.category_node import CategoryNode
from protoflux_catalog.category_path import (
    DEFAULT_STRIP_PREFIXES,
    join_category_path,
    normalize_category_path,
)
from protoflux_catalog.type_descriptor import TypeDescriptor
from protoflux_catalog.type_record import TypeRecord
from protoflux_catalog.word_policy import CASCADE_POLICY, WordPolicy

logger = logging.getLogger(__name__)

MAX_PARAMETERS = 1


class CategoryWalker:
    """Walks a category tree depth first and collects TypeRecords.

    Subcategories are always visited before a node's own elements, so the
    elements filed directly on the root come last.
    """

    def __init__(
        self,
        max_parameters: int = MAX_PARAMETERS,
        strip_prefixes: Sequence[str] = DEFAULT_STRIP_PREFIXES,
        *,
        dedupe_overloads: bool = False,
        word_policy: WordPolicy = CASCADE_POLICY,
    ) -> None:
        """Initialize the walker with its filter and normalization rules."""
        self.max_parameters = max_parameters
        self.strip_prefixes = tuple(strip_prefixes)
        self.dedupe_overloads = dedupe_overloads
        self.word_policy = word_policy

    def walk(self, root: CategoryNode) -> list[TypeRecord]:
        """Return the records for every type below ``root``."""
        records: list[TypeRecord] = []
        seen: set[tuple[str, str]] = set()

        for node in root.subcategories:
            self._walk_node(node, "", records, seen)

        # Types filed directly on the root are categorized under its own name
        for element in root.elements:
            self._add_record(element, root.name, records, seen)

        return records

    def _walk_node(
        self,
        node: CategoryNode,
        parent_path: str,
        records: list[TypeRecord],
        seen: set[tuple[str, str]],
    ) -> None:
        current_path = join_category_path(parent_path, node.name)

        for child in node.subcategories:
            self._walk_node(child, current_path, records, seen)

        for element in node.elements:
            self._add_record(element, current_path, records, seen)

    def _add_record(
        self,
        element: TypeDescriptor,
        category_path: str,
        records: list[TypeRecord],
        seen: set[tuple[str, str]],
    ) -> None:
        record = TypeRecord(
            full_name=element.full_name,
            nice_name=element.nice_name,
            nice_category=normalize_category_path(category_path, self.strip_prefixes),
            word_policy=self.word_policy,
        )

        if record.parameter_count > self.max_parameters:
            logger.debug(
                "Skipping %s: %d generic parameters",
                record.full_name,
                record.parameter_count,
            )
            return

        if self.dedupe_overloads:
            key = (record.nice_category, record.full_name)
            if key in seen:
                logger.debug("Skipping duplicate overload %s", record.full_name)
                return
            seen.add(key)

        records.append(record)
