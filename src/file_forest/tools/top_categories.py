"""
Tool: top_categories

Rank the categories that tag the most files.
"""

from collections.abc import Sequence

import pydantic

from file_forest.analysis import formatters
from file_forest.analysis.categories import category_counts
from file_forest.analysis.categories import k_largest_categories
from file_forest.config import DEFAULT_CONFIG
from file_forest.config import ForestConfig
from file_forest.models import FileRecord


class TopCategoriesResult(pydantic.BaseModel):
    """Structured result for top_categories tool."""

    success: bool = pydantic.Field(description="Whether operation succeeded")
    message: str = pydantic.Field(description="Human-readable result message")
    data: dict | None = pydantic.Field(
        default=None,
        description="Requested k, ranked categories and per-category counts",
    )
    error: str | None = pydantic.Field(
        default=None,
        description="Error message if operation failed",
    )


async def top_categories(
    records: Sequence[FileRecord],
    k: int | None = None,
    config: ForestConfig | None = None,
) -> TopCategoriesResult:
    """
    Rank categories by the number of files they tag.

    Args:
        records: Flat forest listing
        k: How many categories to return (default: config.default_top_k)
        config: Optional query settings

    Returns:
        TopCategoriesResult: The top categories with their counts.
    """
    try:
        config = config or DEFAULT_CONFIG
        if k is None:
            k = config.default_top_k

        ranked = k_largest_categories(records, k, config)
        counts = category_counts(records)
        top_counts = {tag: counts[tag] for tag in ranked}
        return TopCategoriesResult(
            success=True,
            message=formatters.format_categories(ranked, top_counts),
            data={"k": k, "categories": ranked, "counts": top_counts},
        )
    except Exception as e:
        return TopCategoriesResult(
            success=False,
            message=f"Operation failed: {e}",
            error=str(e),
        )
