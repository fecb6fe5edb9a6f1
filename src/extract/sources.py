"""Resolve a CLI path argument into a dependency table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contract.tables import load_dependency_table
from extract.python_classes import extract_dependencies_from_paths
from scan.files import find_python_files

if TYPE_CHECKING:
    from pathlib import Path

    from rules.config import ExplorerConfig


def collect_dependency_table(path: Path, config: ExplorerConfig) -> dict[str, Any]:
    """Build the dependency table for ``path``.

    A ``.json`` file is read as a ready-made table, a single file is parsed
    as Python source and a directory is scanned for Python files.
    """
    if path.is_dir():
        files = find_python_files(
            path,
            include_patterns=config.include,
            exclude_patterns=config.exclude,
            nested_gitignore=config.nested_gitignore,
        )
        return extract_dependencies_from_paths(files)

    if path.suffix.lower() == ".json":
        return load_dependency_table(path)

    return extract_dependencies_from_paths([path])


__all__ = ["collect_dependency_table"]
