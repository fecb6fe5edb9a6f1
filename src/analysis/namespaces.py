"""Detection of circular dependencies that cross namespace boundaries.

A cycle whose classes all live in one namespace is local coupling. A cycle
that spans namespaces ties separate parts of the code base together and is
reported with its own severity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from contract.models import CrossNamespaceCycle, Severity
from graph.cycles import find_cycles

if TYPE_CHECKING:
    from graph.builder import DependencyTable

DEFAULT_SEPARATOR = "."


def extract_namespace(class_name: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Return the namespace part of a qualified class name.

    Examples:
        >>> extract_namespace("app.models.User")
        'app.models'
        >>> extract_namespace("User")
        ''
        >>> extract_namespace("Billing::Invoice", "::")
        'Billing'
    """
    namespace, found, _name = class_name.rpartition(separator)
    return namespace if found else ""


def namespaces_in_cycle(
    cycle: list[str], separator: str = DEFAULT_SEPARATOR
) -> list[str]:
    """Return the distinct namespaces of a closed cycle, in first-seen order."""
    members = cycle[:-1] if len(cycle) > 1 and cycle[0] == cycle[-1] else cycle
    namespaces: dict[str, None] = {}
    for class_name in members:
        namespaces.setdefault(extract_namespace(class_name, separator))
    return list(namespaces)


def is_cross_namespace(cycle: list[str], separator: str = DEFAULT_SEPARATOR) -> bool:
    return len(namespaces_in_cycle(cycle, separator)) > 1


def find_cross_namespace_cycles(
    table: DependencyTable,
    *,
    separator: str = DEFAULT_SEPARATOR,
    severity: Severity = "high",
) -> list[CrossNamespaceCycle]:
    """Find cycles whose classes span more than one namespace."""
    return [
        CrossNamespaceCycle(
            cycle=cycle,
            namespaces=namespaces_in_cycle(cycle, separator),
            severity=severity,
        )
        for cycle in find_cycles(table)
        if is_cross_namespace(cycle, separator)
    ]


__all__ = [
    "DEFAULT_SEPARATOR",
    "extract_namespace",
    "find_cross_namespace_cycles",
    "is_cross_namespace",
    "namespaces_in_cycle",
]
