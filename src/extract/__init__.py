"""Extraction of class dependency tables from Python source."""

from extract.accumulator import DependencyAccumulator
from extract.python_classes import (
    extract_dependencies,
    extract_dependencies_from_paths,
)
from extract.sources import collect_dependency_table

__all__ = [
    "DependencyAccumulator",
    "collect_dependency_table",
    "extract_dependencies",
    "extract_dependencies_from_paths",
]
