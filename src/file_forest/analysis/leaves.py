"""Leaf detection."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from collections.abc import Sequence

from file_forest.analysis.indexer import build_children_map
from file_forest.analysis.validators import ensure_forest
from file_forest.config import DEFAULT_CONFIG
from file_forest.config import ForestConfig
from file_forest.models import FileRecord

logger = logging.getLogger(__name__)


def find_leaf_names(
    children: Mapping[int, Sequence[int]], records: Sequence[FileRecord]
) -> list[str]:
    """Names of records whose id never appears as a key in ``children``."""
    return [record.name for record in records if record.id not in children]


def leaf_files(
    records: Sequence[FileRecord], config: ForestConfig | None = None
) -> list[str]:
    """Return the names of all records that have no children.

    Names come back in input order.
    """
    config = config or DEFAULT_CONFIG
    if not records:
        return []
    if config.validate_structure:
        ensure_forest(records, config.root_sentinel)

    children = build_children_map(records, config.root_sentinel)
    leaves = find_leaf_names(children, records)
    logger.debug("Found %d leaves among %d records", len(leaves), len(records))
    return leaves
