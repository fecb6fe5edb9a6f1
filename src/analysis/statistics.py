"""Usage statistics for referenced constants."""

from __future__ import annotations

from typing import TYPE_CHECKING

from contract.models import DependencyStatistics
from graph.builder import iter_references

if TYPE_CHECKING:
    from graph.builder import DependencyTable


def count_dependencies(table: DependencyTable) -> dict[str, int]:
    """Count how many dependency entries name each constant, in first-seen order."""
    counts: dict[str, int] = {}
    for dependencies in table.values():
        for constant, _methods in iter_references(dependencies):
            counts[constant] = counts.get(constant, 0) + 1
    return counts


def calculate_statistics(table: DependencyTable) -> DependencyStatistics:
    counts = count_dependencies(table)

    most_used: str | None = None
    for constant, count in counts.items():
        if most_used is None or count > counts[most_used]:
            most_used = constant

    return DependencyStatistics(
        total_classes=len(table),
        total_dependencies=len(counts),
        most_used_dependency=most_used,
        dependency_counts=counts,
    )


__all__ = ["calculate_statistics", "count_dependencies"]
