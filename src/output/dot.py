"""Graphviz DOT rendering of the dependency graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contract.models import AnalysisReport


def _quote(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _cycle_edges(cycles: list[list[str]] | None) -> set[tuple[str, str]]:
    edges: set[tuple[str, str]] = set()
    for cycle in cycles or []:
        edges.update(zip(cycle, cycle[1:]))
    return edges


def render_dot(report: AnalysisReport, graph: dict[str, list[str]]) -> str:
    """Render ``graph`` as a digraph; edges on reported cycles are drawn red."""
    cycle_edges = _cycle_edges(report.cycles)
    referenced = {neighbor for neighbors in graph.values() for neighbor in neighbors}

    lines = ["digraph dependencies {"]
    for node, neighbors in graph.items():
        if not neighbors and node not in referenced:
            lines.append(f"  {_quote(node)};")
        for neighbor in neighbors:
            attributes = " [color=red]" if (node, neighbor) in cycle_edges else ""
            lines.append(f"  {_quote(node)} -> {_quote(neighbor)}{attributes};")
    lines.append("}")
    return "\n".join(lines)


__all__ = ["render_dot"]
