"""Subtree size rollup.

Every record pushes its own size into its own total and into the total of
each ancestor on its parent chain. Once all records are processed, a node's
total is its own size plus the size of everything beneath it. Input order
does not matter and disjoint trees never touch each other's totals.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from collections.abc import Sequence

from file_forest.analysis.indexer import build_id_map
from file_forest.analysis.validators import ForestStructureError
from file_forest.analysis.validators import ensure_forest
from file_forest.config import DEFAULT_CONFIG
from file_forest.config import ForestConfig
from file_forest.models import FileRecord

logger = logging.getLogger(__name__)


def _propagate(
    record: FileRecord,
    by_id: Mapping[int, FileRecord],
    totals: dict[int, int],
    sentinel: int,
) -> None:
    """Add ``record.size`` to the record itself and to every ancestor."""
    totals[record.id] = totals.get(record.id, 0) + record.size

    # A valid chain has fewer ancestors than there are records
    max_steps = len(by_id) - 1
    steps = 0
    parent = record.parent
    while parent != sentinel:
        ancestor = by_id.get(parent)
        if ancestor is None:
            logger.warning(
                "Node %d references unknown parent %d; rollup stops there",
                record.id,
                parent,
            )
            return
        steps += 1
        if steps > max_steps:
            raise ForestStructureError(
                [f"Cycle detected in the ancestor chain of node {record.id}"]
            )
        totals[parent] = totals.get(parent, 0) + record.size
        parent = ancestor.parent


def aggregate_sizes(
    records: Sequence[FileRecord], config: ForestConfig | None = None
) -> dict[int, int]:
    """Compute own size plus all descendant sizes for every node.

    Returns:
        Mapping of node id to aggregate size.

    Raises:
        ForestStructureError: If validation is enabled and fails, or if the
            parent graph contains a cycle.
    """
    config = config or DEFAULT_CONFIG
    if config.validate_structure:
        ensure_forest(records, config.root_sentinel)

    by_id = build_id_map(records)
    totals: dict[int, int] = {}
    for record in by_id.values():
        _propagate(record, by_id, totals, config.root_sentinel)
    return totals


def largest_node(
    records: Sequence[FileRecord], config: ForestConfig | None = None
) -> tuple[int | None, int]:
    """Return ``(node_id, aggregate)`` for the heaviest node.

    Ties go to the smallest id. Empty input gives ``(None, 0)``.
    """
    totals = aggregate_sizes(records, config)
    if not totals:
        return None, 0
    node_id = min(totals, key=lambda n: (-totals[n], n))
    return node_id, totals[node_id]


def largest_file_size(
    records: Sequence[FileRecord], config: ForestConfig | None = None
) -> int:
    """Return the largest aggregate size of any node, or 0 for no records."""
    if not records:
        return 0
    totals = aggregate_sizes(records, config)
    largest = max(totals.values())
    logger.debug(
        "Largest aggregate %d across %d nodes", largest, len(totals)
    )
    return largest
