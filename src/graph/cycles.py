"""Enumeration of circular dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graph.builder import build_graph
from graph.traversal import TraversalState

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from graph.builder import DependencyTable


def _walk(graph: Mapping[str, list[str]], root: str, state: TraversalState) -> None:
    """Explore everything reachable from ``root`` depth-first.

    Uses an explicit stack of neighbor iterators so deep dependency chains do
    not hit the interpreter's recursion limit. Visiting order matches the
    recursive formulation exactly.
    """
    state.mark_on_path(root)
    stack: list[tuple[str, Iterator[str]]] = [(root, iter(graph.get(root, ())))]

    while stack:
        node, neighbors = stack[-1]
        for neighbor in neighbors:
            if not state.visited(neighbor):
                state.mark_on_path(neighbor)
                stack.append((neighbor, iter(graph.get(neighbor, ()))))
                break
            if state.on_path(neighbor):
                state.record_cycle_closing_at(neighbor)
        else:
            stack.pop()
            state.unmark_from_path(node)


def find_cycles(table: DependencyTable) -> list[list[str]]:
    """Find circular dependencies between classes.

    Roots are taken in the table's insertion order, and neighbors in the
    order they were first referenced; this order decides which rotation of a
    cycle is reported.

    Args:
        table: Mapping of class name to a list of ``{constant: [methods]}``
            entries

    Returns:
        List of cycles, each a closed node sequence (first node repeated at
        the end), in discovery order and without duplicates
    """
    graph = build_graph(table)
    state = TraversalState()

    for node in graph:
        if not state.visited(node):
            _walk(graph, node, state)

    return state.cycles()


__all__ = ["find_cycles"]
