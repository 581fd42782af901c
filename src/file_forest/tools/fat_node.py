"""
Tool: fat_node

Find the node whose subtree holds the most bytes.
"""

from collections.abc import Sequence

import pydantic

from file_forest.analysis import formatters
from file_forest.analysis.aggregate import largest_node
from file_forest.analysis.indexer import build_id_map
from file_forest.config import ForestConfig
from file_forest.models import FileRecord


class FatNodeResult(pydantic.BaseModel):
    """Structured result for fat_node tool."""

    success: bool = pydantic.Field(description="Whether operation succeeded")
    message: str = pydantic.Field(description="Human-readable result message")
    data: dict | None = pydantic.Field(
        default=None,
        description="Node id, name, aggregate size in bytes and human-readable size",
    )
    error: str | None = pydantic.Field(
        default=None,
        description="Error message if operation failed",
    )


async def fat_node(
    records: Sequence[FileRecord], config: ForestConfig | None = None
) -> FatNodeResult:
    """
    Find the node with the largest size once descendants are rolled up.

    Args:
        records: Flat forest listing
        config: Optional query settings

    Returns:
        FatNodeResult: The heaviest node and its aggregate size.
    """
    try:
        node_id, size = largest_node(records, config)
        if node_id is None:
            return FatNodeResult(
                success=True,
                message=formatters.format_largest(None, 0),
                data={
                    "node_id": None,
                    "name": None,
                    "size_bytes": 0,
                    "size_human": formatters.human_size(0),
                },
            )

        name = build_id_map(records)[node_id].name
        return FatNodeResult(
            success=True,
            message=formatters.format_largest(name, size),
            data={
                "node_id": node_id,
                "name": name,
                "size_bytes": size,
                "size_human": formatters.human_size(size),
            },
        )
    except Exception as e:
        return FatNodeResult(
            success=False,
            message=f"Operation failed: {e}",
            error=str(e),
        )
