"""CSV edge list for spreadsheets."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

from graph.builder import iter_references

if TYPE_CHECKING:
    from graph.builder import DependencyTable

CSV_HEADER = ("Source", "Target", "Methods")


def render_csv(table: DependencyTable) -> str:
    """One row per dependency entry, methods joined with ``;``."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for class_name, dependencies in table.items():
        for constant, methods in iter_references(dependencies):
            writer.writerow((class_name, constant, ";".join(map(str, methods))))
    return buffer.getvalue().rstrip("\n")


__all__ = ["CSV_HEADER", "render_csv"]
