"""Category frequency ranking."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from file_forest.analysis.validators import ensure_forest
from file_forest.config import DEFAULT_CONFIG
from file_forest.config import ForestConfig
from file_forest.models import FileRecord

logger = logging.getLogger(__name__)


def category_counts(records: Sequence[FileRecord]) -> dict[str, int]:
    """Count how many records carry each tag.

    A tag listed twice on the same record counts once. Keys keep the order
    in which tags were first seen.
    """
    counts: Counter[str] = Counter()
    for record in records:
        counts.update(dict.fromkeys(record.categories, 1))
    return dict(counts)


def _rank_key(item: tuple[str, int]) -> tuple[int, str]:
    tag, count = item
    return -count, tag.casefold()


def k_largest_categories(
    records: Sequence[FileRecord], k: int, config: ForestConfig | None = None
) -> list[str]:
    """Return the ``k`` tags that label the most records.

    Ties are broken by tag text compared case-insensitively; the original
    spelling is what gets returned. Asking for more tags than exist returns
    all of them.

    Raises:
        ValueError: If ``k`` is negative.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    config = config or DEFAULT_CONFIG
    if not records:
        return []
    if config.validate_structure:
        ensure_forest(records, config.root_sentinel)
    if k == 0:
        return []

    counts = category_counts(records)
    ranked = sorted(counts.items(), key=_rank_key)
    top = [tag for tag, _ in ranked[:k]]
    logger.debug("Top %d of %d categories: %s", k, len(counts), top)
    return top
