"""Lookup structures derived from a flat list of records."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field

from file_forest.models import ROOT_PARENT
from file_forest.models import FileRecord


@dataclass
class ForestIndex:
    """Id lookup plus parent -> children adjacency.

    A node id that is missing from ``children`` has no children.
    """

    by_id: dict[int, FileRecord] = field(default_factory=dict)
    children: dict[int, list[int]] = field(default_factory=dict)

    def has_children(self, node_id: int) -> bool:
        return node_id in self.children


def build_id_map(records: Iterable[FileRecord]) -> dict[int, FileRecord]:
    """Map each id to its record. Later duplicates replace earlier ones."""
    return {record.id: record for record in records}


def build_children_map(
    records: Iterable[FileRecord], sentinel: int = ROOT_PARENT
) -> dict[int, list[int]]:
    """Group child ids under their parent id, preserving input order."""
    children: dict[int, list[int]] = {}
    for record in records:
        if record.parent == sentinel:
            continue
        if record.parent in children:
            children[record.parent].append(record.id)
        else:
            children[record.parent] = [record.id]
    return children


def build_index(
    records: Sequence[FileRecord], sentinel: int = ROOT_PARENT
) -> ForestIndex:
    """Build both lookup maps for one collection."""
    return ForestIndex(
        by_id=build_id_map(records),
        children=build_children_map(records, sentinel),
    )
