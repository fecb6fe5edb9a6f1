"""Result models shared by the analyzer, renderers and the CLI."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from graph.structure import GraphStructure

# Schema version constant
SCHEMA_VERSION = 1

ErrorHandling = Literal["graceful", "strict"]
OutputFormat = Literal["console", "json", "dot", "csv", "html"]
Severity = Literal["high", "medium", "low"]


class StructureSummary(BaseModel):
    """Aggregate metrics of the dependency graph."""

    nodes: int = 0
    edges: int = 0
    components: int = 0
    has_cycles: bool = False
    strongly_connected_components: list[list[str]] = Field(default_factory=list)

    @classmethod
    def from_structure(cls, structure: GraphStructure) -> StructureSummary:
        return cls.model_validate(structure.to_dict())


class DependencyStatistics(BaseModel):
    """Usage counts of referenced constants."""

    total_classes: int = 0
    total_dependencies: int = 0
    most_used_dependency: str | None = None
    dependency_counts: dict[str, int] = Field(default_factory=dict)


class CrossNamespaceCycle(BaseModel):
    """A circular dependency whose classes live in more than one namespace."""

    cycle: list[str]
    namespaces: list[str]
    severity: Severity = "high"


class AnalysisError(BaseModel):
    """Failure captured by the analyzer in graceful mode."""

    type: str
    message: str


class AnalysisMetadata(BaseModel):
    """Context about the run that produced a report."""

    analyzer: str
    class_count: int
    analyzed_at: datetime
    error_handling: ErrorHandling


class AnalysisReport(BaseModel):
    """Everything one analyzer run produced.

    Sections that were not requested stay ``None``. When ``error`` is set,
    no section is populated.
    """

    schema_version: int = Field(default=SCHEMA_VERSION)
    cycles: list[list[str]] | None = None
    depth: dict[str, int] | None = None
    statistics: DependencyStatistics | None = None
    structure: StructureSummary | None = None
    cross_namespace_cycles: list[CrossNamespaceCycle] | None = None
    metadata: AnalysisMetadata | None = None
    error: AnalysisError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = [
    "SCHEMA_VERSION",
    "AnalysisError",
    "AnalysisMetadata",
    "AnalysisReport",
    "CrossNamespaceCycle",
    "DependencyStatistics",
    "ErrorHandling",
    "OutputFormat",
    "Severity",
    "StructureSummary",
]
