"""Report renderers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from analysis.analyzer import is_valid_table
from graph.builder import build_graph
from output.console import render_console
from output.csv_format import render_csv
from output.dot import render_dot
from output.html_format import render_html
from output.json_format import render_json

if TYPE_CHECKING:
    from contract.models import AnalysisReport, OutputFormat

FORMATS = ("console", "json", "dot", "csv", "html")


def render(report: AnalysisReport, table: object, fmt: OutputFormat) -> str:
    """Render an analysis report of ``table`` in the requested format."""
    if fmt not in FORMATS:
        msg = f"Unknown output format {fmt!r}; expected one of {', '.join(FORMATS)}"
        raise ValueError(msg)

    valid = is_valid_table(table)
    graph = build_graph(table) if valid else {}  # type: ignore[arg-type]

    if fmt == "console":
        return render_console(report, graph)
    if fmt == "json":
        return render_json(report, graph)
    if fmt == "dot":
        return render_dot(report, graph)
    if fmt == "html":
        return render_html(report, graph)
    return render_csv(table if valid else {})  # type: ignore[arg-type]


__all__ = ["FORMATS", "render"]
