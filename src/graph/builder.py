"""Adjacency-list construction from class dependency tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

DependencyTable = Mapping[str, list[Any]]
Graph = dict[str, list[str]]


def iter_references(dependencies: Iterable[Any]) -> Iterator[tuple[str, list[str]]]:
    """Yield (constant, methods) pairs from a class's dependency entries.

    Entries that are not ``{name: [methods...]}`` mappings are skipped, as are
    mapping items whose key is not a string or whose value is not a list.
    """
    for entry in dependencies:
        if not isinstance(entry, Mapping):
            continue
        for constant, methods in entry.items():
            if isinstance(constant, str) and isinstance(methods, (list, tuple)):
                yield constant, list(methods)


def build_graph(table: DependencyTable) -> Graph:
    """Build a dependency graph from a class dependency table.

    Args:
        table: Mapping of class name to a list of ``{constant: [methods]}``
            entries

    Returns:
        Insertion-ordered adjacency list where keys are the table's class
        names and values are the distinct constants each class references,
        in order of first appearance
    """
    graph: Graph = {}

    for class_name, dependencies in table.items():
        neighbors = graph.setdefault(class_name, [])
        seen = set(neighbors)
        for constant, _methods in iter_references(dependencies):
            if constant not in seen:
                seen.add(constant)
                neighbors.append(constant)

    return graph


def build_reverse_graph(graph: Mapping[str, list[str]]) -> Graph:
    """Invert every edge of ``graph``.

    Each node present in ``graph`` (as a key or a neighbor) gets a key, mapped
    to the nodes that point at it in the order they were encountered.
    """
    reverse: Graph = {}
    seen: dict[str, set[str]] = {}

    for node, neighbors in graph.items():
        reverse.setdefault(node, [])
        seen.setdefault(node, set())
        for neighbor in neighbors:
            dependents = reverse.setdefault(neighbor, [])
            dependent_set = seen.setdefault(neighbor, set())
            if node not in dependent_set:
                dependent_set.add(node)
                dependents.append(node)

    return reverse


def materialize_nodes(graph: Mapping[str, list[str]]) -> Graph:
    """Return a copy of ``graph`` where every referenced node is also a key.

    Target-only nodes are inserted right after the first node that points at
    them, with an empty neighbor list.
    """
    adjacency: Graph = {}
    for node, neighbors in graph.items():
        adjacency.setdefault(node, [])
        adjacency[node].extend(neighbors)
        for neighbor in neighbors:
            adjacency.setdefault(neighbor, [])
    return adjacency


def collect_nodes(
    table: DependencyTable, *graphs: Mapping[str, list[str]]
) -> list[str]:
    """Return every node of the table and graphs in first-seen order."""
    nodes: dict[str, None] = dict.fromkeys(table)
    for graph in graphs:
        for node, neighbors in graph.items():
            nodes.setdefault(node)
            for neighbor in neighbors:
                nodes.setdefault(neighbor)
    return list(nodes)


__all__ = [
    "DependencyTable",
    "Graph",
    "build_graph",
    "build_reverse_graph",
    "collect_nodes",
    "iter_references",
    "materialize_nodes",
]
