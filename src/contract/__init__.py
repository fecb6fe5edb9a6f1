"""Report models and dependency table loading for classdeps."""

from contract.models import (
    SCHEMA_VERSION,
    AnalysisError,
    AnalysisMetadata,
    AnalysisReport,
    CrossNamespaceCycle,
    DependencyStatistics,
    StructureSummary,
)
from contract.tables import TableLoadError, load_dependency_table

__all__ = [
    "SCHEMA_VERSION",
    "AnalysisError",
    "AnalysisMetadata",
    "AnalysisReport",
    "CrossNamespaceCycle",
    "DependencyStatistics",
    "StructureSummary",
    "TableLoadError",
    "load_dependency_table",
]
