"""Validated entry point that runs the graph analyses over one table."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from analysis.namespaces import DEFAULT_SEPARATOR, find_cross_namespace_cycles
from analysis.statistics import calculate_statistics
from contract.models import (
    AnalysisError,
    AnalysisMetadata,
    AnalysisReport,
    ErrorHandling,
    StructureSummary,
)
from graph import analyze_structure, calculate_depth, find_cycles

logger = logging.getLogger(__name__)


class InvalidDependencyDataError(Exception):
    """Raised in strict mode when the dependency table is malformed."""


def is_valid_table(table: Any) -> bool:
    """Check the table maps string class names to lists of entries."""
    if not isinstance(table, Mapping):
        return False
    return all(
        isinstance(class_name, str) and isinstance(dependencies, list)
        for class_name, dependencies in table.items()
    )


class DependencyAnalyzer:
    """Run the graph analyses over a dependency table.

    In ``graceful`` mode, an invalid table or a failing analysis step yields a
    report carrying an ``AnalysisError`` instead of raising. In ``strict``
    mode both propagate to the caller.
    """

    def __init__(
        self,
        table: Any,
        *,
        error_handling: ErrorHandling = "graceful",
        include_metadata: bool = True,
        namespace_separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self.table = table
        self.error_handling = error_handling
        self.include_metadata = include_metadata
        self.namespace_separator = namespace_separator

    @property
    def strict(self) -> bool:
        return self.error_handling == "strict"

    def validate(self) -> bool:
        return is_valid_table(self.table)

    def metadata(self) -> AnalysisMetadata:
        class_count = len(self.table) if isinstance(self.table, Mapping) else 0
        return AnalysisMetadata(
            analyzer=type(self).__name__,
            class_count=class_count,
            analyzed_at=datetime.now(timezone.utc),
            error_handling=self.error_handling,
        )

    def analyze(
        self,
        *,
        circular: bool = True,
        depth: bool = True,
        statistics: bool = True,
        structure: bool = True,
        cross_namespace: bool = True,
    ) -> AnalysisReport:
        """Run the requested analyses and collect them into one report."""
        if not self.validate():
            msg = "Invalid dependency data provided to analyzer"
            if self.strict:
                raise InvalidDependencyDataError(msg)
            logger.warning("%s; returning error report", msg)
            return self._report(
                error=AnalysisError(type="ValidationError", message=msg)
            )

        logger.debug(
            "Analyzing %d classes (circular=%s depth=%s statistics=%s "
            "structure=%s cross_namespace=%s)",
            len(self.table),
            circular,
            depth,
            statistics,
            structure,
            cross_namespace,
        )

        sections: dict[str, Any] = {}
        try:
            if circular:
                sections["cycles"] = find_cycles(self.table)
            if depth:
                sections["depth"] = calculate_depth(self.table)
            if statistics:
                sections["statistics"] = calculate_statistics(self.table)
            if structure:
                sections["structure"] = StructureSummary.from_structure(
                    analyze_structure(self.table)
                )
            if cross_namespace:
                sections["cross_namespace_cycles"] = find_cross_namespace_cycles(
                    self.table, separator=self.namespace_separator
                )
        except Exception as exc:
            if self.strict:
                raise
            logger.warning("Dependency analysis failed: %s", exc)
            return self._report(
                error=AnalysisError(type=type(exc).__name__, message=str(exc))
            )

        return self._report(**sections)

    def _report(self, **fields: Any) -> AnalysisReport:
        if self.include_metadata:
            fields["metadata"] = self.metadata()
        return AnalysisReport(**fields)


__all__ = ["DependencyAnalyzer", "InvalidDependencyDataError", "is_valid_table"]
