"""Structural queries over a flat forest of file records."""

from file_forest.analysis import ForestIndex
from file_forest.analysis import ForestStructureError
from file_forest.analysis import aggregate_sizes
from file_forest.analysis import build_index
from file_forest.analysis import category_counts
from file_forest.analysis import k_largest_categories
from file_forest.analysis import largest_file_size
from file_forest.analysis import leaf_files
from file_forest.analysis import validate_forest
from file_forest.config import ForestConfig
from file_forest.config import configure_logging
from file_forest.config import load_config
from file_forest.models import ROOT_PARENT
from file_forest.models import FileRecord

__all__ = [
    "FileRecord",
    "ForestConfig",
    "ForestIndex",
    "ForestStructureError",
    "ROOT_PARENT",
    "aggregate_sizes",
    "build_index",
    "category_counts",
    "configure_logging",
    "k_largest_categories",
    "largest_file_size",
    "leaf_files",
    "load_config",
    "validate_forest",
]
