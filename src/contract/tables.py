"""Loading dependency tables from JSON files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import orjson

if TYPE_CHECKING:
    from pathlib import Path


class TableLoadError(Exception):
    """Raised when a dependency table file cannot be read or decoded."""


def load_dependency_table(path: Path) -> dict[str, Any]:
    """Read a ``{class: [{constant: [methods]}]}`` table from a JSON file.

    Only the top-level shape is checked here; entry-level validation is the
    analyzer's job.
    """
    try:
        data = orjson.loads(path.read_bytes())
    except OSError as exc:
        msg = f"Cannot read dependency table {path}: {exc}"
        raise TableLoadError(msg) from exc
    except orjson.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise TableLoadError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Dependency table in {path} must be a JSON object"
        raise TableLoadError(msg)

    return data


__all__ = ["TableLoadError", "load_dependency_table"]
