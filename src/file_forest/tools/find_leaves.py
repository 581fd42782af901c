"""
Tool: find_leaves

List the files in a forest that have no children.
"""

from collections.abc import Sequence

import pydantic

from file_forest.analysis import formatters
from file_forest.analysis.leaves import leaf_files
from file_forest.config import ForestConfig
from file_forest.models import FileRecord


class FindLeavesResult(pydantic.BaseModel):
    """Structured result for find_leaves tool."""

    success: bool = pydantic.Field(description="Whether operation succeeded")
    message: str = pydantic.Field(description="Human-readable result message")
    data: dict | None = pydantic.Field(
        default=None,
        description="Leaf names in input order and their count",
    )
    error: str | None = pydantic.Field(
        default=None,
        description="Error message if operation failed",
    )


async def find_leaves(
    records: Sequence[FileRecord], config: ForestConfig | None = None
) -> FindLeavesResult:
    """
    Find every record that is never used as another record's parent.

    Args:
        records: Flat forest listing
        config: Optional query settings

    Returns:
        FindLeavesResult: Leaf names and their count.
    """
    try:
        leaves = leaf_files(records, config)
        return FindLeavesResult(
            success=True,
            message=formatters.format_leaves(leaves),
            data={"leaves": leaves, "count": len(leaves)},
        )
    except Exception as e:
        return FindLeavesResult(
            success=False,
            message=f"Operation failed: {e}",
            error=str(e),
        )
