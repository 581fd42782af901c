"""Structural checks for record collections."""

from __future__ import annotations

from collections.abc import Sequence

from file_forest.models import ROOT_PARENT
from file_forest.models import FileRecord


class ForestStructureError(ValueError):
    """Raised when records do not form a forest."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        summary = "; ".join(problems[:5])
        if len(problems) > 5:
            summary += f" (+{len(problems) - 5} more)"
        super().__init__(f"Invalid forest: {summary}")


def validate_forest(
    records: Sequence[FileRecord], sentinel: int = ROOT_PARENT
) -> list[str]:
    """Check records for duplicate ids, dangling parents and cycles.

    Returns:
        Human-readable problem descriptions; empty when the input is valid.
    """
    problems: list[str] = []
    parents: dict[int, int] = {}

    for record in records:
        if record.id in parents:
            problems.append(f"Duplicate id {record.id}")
            continue
        parents[record.id] = record.parent

    for node_id, parent in parents.items():
        if parent == sentinel:
            continue
        if parent == node_id:
            problems.append(f"Node {node_id} is its own parent")
        elif parent not in parents:
            problems.append(f"Node {node_id} has unknown parent {parent}")

    # Colour walk: unset = unvisited, 1 = on the current path, 2 = finished
    state: dict[int, int] = {}
    for start in parents:
        if state.get(start):
            continue
        path: list[int] = []
        node = start
        while node in parents and node != sentinel and not state.get(node):
            state[node] = 1
            path.append(node)
            node = parents[node]
        if state.get(node) == 1:
            cycle = path[path.index(node):]
            # Self-parenting is already reported above
            if len(cycle) > 1:
                members = " -> ".join(str(n) for n in cycle + [node])
                problems.append(f"Cycle detected: {members}")
        for visited in path:
            state[visited] = 2

    return problems


def ensure_forest(
    records: Sequence[FileRecord], sentinel: int = ROOT_PARENT
) -> None:
    """Raise ForestStructureError if ``validate_forest`` finds problems."""
    problems = validate_forest(records, sentinel)
    if problems:
        raise ForestStructureError(problems)
