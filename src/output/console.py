"""Plain-text report for terminals."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contract.models import (
        AnalysisReport,
        CrossNamespaceCycle,
        DependencyStatistics,
        StructureSummary,
    )


def _dependency_lines(graph: dict[str, list[str]]) -> list[str]:
    nodes: dict[str, None] = {}
    for node, neighbors in graph.items():
        nodes.setdefault(node)
        for neighbor in neighbors:
            nodes.setdefault(neighbor)

    if not nodes:
        return ["No dependencies found."]

    lines = [
        "Dependencies found:",
        "",
        f"Classes: {', '.join(nodes)}",
        "",
        "Dependencies:",
    ]
    for node, neighbors in graph.items():
        lines.extend(f"  {node} -> {neighbor}" for neighbor in neighbors)
    return lines


def _cycle_lines(cycles: list[list[str]]) -> list[str]:
    lines = ["Circular Dependencies:"]
    if not cycles:
        lines.append("  None detected")
    lines.extend(f"  {' -> '.join(cycle)}" for cycle in cycles)
    return lines


def _depth_lines(depth: dict[str, int]) -> list[str]:
    lines = ["Dependency Depth:"]
    if not depth:
        lines.append("  No classes")
    lines.extend(f"  {node}: {value}" for node, value in depth.items())
    return lines


def _statistics_lines(statistics: DependencyStatistics) -> list[str]:
    lines = [
        "Statistics:",
        f"  Total classes: {statistics.total_classes}",
        f"  Total dependencies: {statistics.total_dependencies}",
        f"  Most used dependency: {statistics.most_used_dependency or '-'}",
    ]
    if statistics.dependency_counts:
        lines.append("  Dependency counts:")
        lines.extend(
            f"    {constant}: {count}"
            for constant, count in statistics.dependency_counts.items()
        )
    return lines


def _structure_lines(structure: StructureSummary) -> list[str]:
    lines = [
        "Graph Structure:",
        f"  Nodes: {structure.nodes}",
        f"  Edges: {structure.edges}",
        f"  Weakly connected components: {structure.components}",
        f"  Has cycles: {'yes' if structure.has_cycles else 'no'}",
        "  Strongly connected components: "
        f"{len(structure.strongly_connected_components)}",
    ]
    lines.extend(
        f"    {{{', '.join(component)}}}"
        for component in structure.strongly_connected_components
    )
    return lines


def _cross_namespace_lines(cycles: list[CrossNamespaceCycle]) -> list[str]:
    lines = ["Cross-Namespace Cycles:"]
    if not cycles:
        lines.append("  None detected")
        return lines

    plural = "s" if len(cycles) > 1 else ""
    severity = cycles[0].severity.upper()
    lines.append(f"  {severity} SEVERITY ({len(cycles)} cycle{plural} detected)")
    for cycle_info in cycles:
        namespaces = ", ".join(ns or "(root)" for ns in cycle_info.namespaces)
        lines.append(f"    {' -> '.join(cycle_info.cycle)}")
        lines.append(f"    Namespaces: {namespaces}")
    return lines


def render_console(report: AnalysisReport, graph: dict[str, list[str]]) -> str:
    if report.error is not None:
        return f"Analysis failed ({report.error.type}): {report.error.message}"

    sections = [_dependency_lines(graph)]
    if report.cycles is not None:
        sections.append(_cycle_lines(report.cycles))
    if report.depth is not None:
        sections.append(_depth_lines(report.depth))
    if report.statistics is not None:
        sections.append(_statistics_lines(report.statistics))
    if report.structure is not None:
        sections.append(_structure_lines(report.structure))
    if report.cross_namespace_cycles is not None:
        sections.append(_cross_namespace_lines(report.cross_namespace_cycles))

    return "\n\n".join("\n".join(lines) for lines in sections)


__all__ = ["render_console"]
