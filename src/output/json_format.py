"""JSON report for programmatic consumers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson

if TYPE_CHECKING:
    from contract.models import AnalysisReport


def render_json(report: AnalysisReport, graph: dict[str, list[str]]) -> str:
    payload = {
        "dependencies": graph,
        **report.model_dump(mode="json", exclude_none=True),
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8")


__all__ = ["render_json"]
