"""AST-based extraction of class-to-class references from Python source."""

from __future__ import annotations

import ast
import logging
from typing import TYPE_CHECKING

from extract.accumulator import DependencyAccumulator

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

logger = logging.getLogger(__name__)

CONSTRUCTOR = "__init__"


def is_class_like(name: str) -> bool:
    """Return True for CapWords names; ALL_CAPS module constants are excluded.

    Examples:
        >>> is_class_like("Enemy")
        True
        >>> is_class_like("MAX_SIZE")
        False
        >>> is_class_like("player")
        False
    """
    if not name or not name[0].isupper():
        return False
    return not (len(name) > 1 and name.isupper())


def _dotted_name(node: ast.expr) -> str | None:
    """Render ``a.b.C`` style expressions; anything else yields None."""
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        prefix = _dotted_name(node.value)
        if prefix is None:
            return None
        return f"{prefix}.{node.attr}"
    return None


class _ClassReferenceVisitor(ast.NodeVisitor):
    """Record the constants each class body references and the methods used."""

    def __init__(self, accumulator: DependencyAccumulator) -> None:
        self._accumulator = accumulator
        self._scope: list[str] = []

    @property
    def _current_class(self) -> str | None:
        return ".".join(self._scope) if self._scope else None

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        self._scope.append(node.name)
        self._accumulator.register_class(".".join(self._scope))
        for statement in node.body:
            self.visit(statement)
        self._scope.pop()

    def visit_Call(self, node: ast.Call) -> None:
        current = self._current_class
        callee = _dotted_name(node.func)
        if (
            current is not None
            and callee is not None
            and is_class_like(callee.rpartition(".")[2])
        ):
            # Instantiation: the callee itself is the referenced class.
            self._accumulator.record(current, callee, CONSTRUCTOR)
            for argument in (*node.args, *node.keywords):
                self.visit(argument)
            return
        self.generic_visit(node)

    def visit_Attribute(self, node: ast.Attribute) -> None:
        current = self._current_class
        receiver = _dotted_name(node.value)
        if (
            current is not None
            and receiver is not None
            and is_class_like(receiver.rpartition(".")[2])
        ):
            self._accumulator.record(current, receiver, node.attr)
            return
        self.generic_visit(node)


def extract_dependencies(
    source: str, filename: str = "<unknown>"
) -> dict[str, list[dict[str, list[str]]]]:
    """Extract a dependency table from Python source text.

    Args:
        source: Python source code
        filename: Name used in syntax error reporting

    Returns:
        Mapping of class name (nested classes dot-qualified) to a list of
        ``{constant: [methods]}`` entries. Unparseable source yields ``{}``.
    """
    accumulator = DependencyAccumulator()
    extract_into(accumulator, source, filename)
    return accumulator.to_table()


def extract_into(
    accumulator: DependencyAccumulator, source: str, filename: str = "<unknown>"
) -> None:
    try:
        tree = ast.parse(source, filename)
    except (SyntaxError, ValueError) as exc:
        # Unparseable files contribute nothing, keeping scans deterministic.
        logger.debug("Skipping %s: %s", filename, exc)
        return
    _ClassReferenceVisitor(accumulator).visit(tree)


def extract_dependencies_from_paths(
    paths: Iterable[Path],
) -> dict[str, list[dict[str, list[str]]]]:
    """Extract and merge dependency tables from several Python files, in order."""
    accumulator = DependencyAccumulator()
    for path in paths:
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping %s: %s", path, exc)
            continue
        extract_into(accumulator, source, str(path))
    return accumulator.to_table()


__all__ = [
    "CONSTRUCTOR",
    "extract_dependencies",
    "extract_dependencies_from_paths",
    "extract_into",
    "is_class_like",
]
