"""Analyzer wrapper and derived analyses over dependency tables."""

from analysis.analyzer import (
    DependencyAnalyzer,
    InvalidDependencyDataError,
    is_valid_table,
)
from analysis.namespaces import extract_namespace, find_cross_namespace_cycles
from analysis.statistics import calculate_statistics

__all__ = [
    "DependencyAnalyzer",
    "InvalidDependencyDataError",
    "calculate_statistics",
    "extract_namespace",
    "find_cross_namespace_cycles",
    "is_valid_table",
]
