"""Standalone HTML page for viewing a report in a browser."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contract.models import AnalysisReport, DependencyStatistics

TITLE = "Dependencies Report"

_STYLE = """\
    body { font-family: Arial, sans-serif; margin: 20px; }
    h1 { color: #333; }
    h2 { color: #666; }
    .dependency { margin: 10px 0; }
    .class-name { font-weight: bold; color: #0066cc; }
    .dependency-list { margin-left: 20px; }
    .statistic { margin: 5px 0; }"""


def _class_block(class_name: str, neighbors: list[str]) -> list[str]:
    lines = [
        '<div class="dependency">',
        f'  <span class="class-name">{escape(class_name)}</span>',
    ]
    if not neighbors:
        lines.append('  <div class="dependency-list">No dependencies</div>')
    else:
        lines.append('  <div class="dependency-list">')
        lines.extend(
            f"    <div>&rarr; {escape(neighbor)}</div>" for neighbor in neighbors
        )
        lines.append("  </div>")
    lines.append("</div>")
    return lines


def _dependency_section(graph: dict[str, list[str]]) -> list[str]:
    if not graph:
        return ["<p>No dependencies found.</p>"]
    lines: list[str] = []
    for class_name, neighbors in graph.items():
        lines.extend(_class_block(class_name, neighbors))
    return lines


def _statistics_section(statistics: DependencyStatistics | None) -> list[str]:
    if statistics is None:
        return ["<p>No statistics available.</p>"]
    rows = (
        ("Total Classes", statistics.total_classes),
        ("Total Dependencies", statistics.total_dependencies),
        ("Most Used Dependency", statistics.most_used_dependency or "-"),
    )
    return [
        f'<div class="statistic"><strong>{label}:</strong> {escape(str(value))}</div>'
        for label, value in rows
    ]


def render_html(report: AnalysisReport, graph: dict[str, list[str]]) -> str:
    """Render the dependency list and statistics as one HTML document."""
    if report.error is not None:
        body = [
            f"<h1>{TITLE}</h1>",
            f"<p>Analysis failed ({escape(report.error.type)}): "
            f"{escape(report.error.message)}</p>",
        ]
    else:
        body = [
            f"<h1>{TITLE}</h1>",
            "<h2>Dependencies</h2>",
            *_dependency_section(graph),
            "<h2>Statistics</h2>",
            *_statistics_section(report.statistics),
        ]

    return "\n".join(
        [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '  <meta charset="utf-8">',
            f"  <title>{TITLE}</title>",
            "  <style>",
            _STYLE,
            "  </style>",
            "</head>",
            "<body>",
            *body,
            "</body>",
            "</html>",
        ]
    )


__all__ = ["render_html"]
