"""
Analysis Package - Structural queries over a forest of file records.

This package contains:
- indexer: id lookup and parent -> children adjacency
- leaves: leaf detection
- categories: category frequency ranking
- aggregate: subtree size rollup
- validators: structural checks (duplicates, dangling parents, cycles)
- formatters: human-readable summaries
"""

from file_forest.analysis.aggregate import aggregate_sizes
from file_forest.analysis.aggregate import largest_file_size
from file_forest.analysis.aggregate import largest_node
from file_forest.analysis.categories import category_counts
from file_forest.analysis.categories import k_largest_categories
from file_forest.analysis.indexer import ForestIndex
from file_forest.analysis.indexer import build_index
from file_forest.analysis.leaves import leaf_files
from file_forest.analysis.validators import ForestStructureError
from file_forest.analysis.validators import ensure_forest
from file_forest.analysis.validators import validate_forest

__all__ = [
    "ForestIndex",
    "ForestStructureError",
    "aggregate_sizes",
    "build_index",
    "category_counts",
    "ensure_forest",
    "k_largest_categories",
    "largest_file_size",
    "largest_node",
    "leaf_files",
    "validate_forest",
]
