"""Structural metrics for dependency graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graph.builder import build_graph, build_reverse_graph, materialize_nodes

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from graph.builder import DependencyTable


@dataclass(frozen=True)
class GraphStructure:
    """Aggregate metrics of a dependency graph."""

    nodes: int = 0
    edges: int = 0
    components: int = 0
    has_cycles: bool = False
    strongly_connected_components: list[list[str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "nodes": self.nodes,
            "edges": self.edges,
            "components": self.components,
            "has_cycles": self.has_cycles,
            "strongly_connected_components": [
                list(component) for component in self.strongly_connected_components
            ],
        }


def has_cycle(adjacency: Mapping[str, list[str]]) -> bool:
    """Return True as soon as a DFS finds a back edge."""
    visited: set[str] = set()
    on_stack: set[str] = set()

    for root in adjacency:
        if root in visited:
            continue

        visited.add(root)
        on_stack.add(root)
        stack: list[tuple[str, Iterator[str]]] = [
            (root, iter(adjacency.get(root, ())))
        ]
        while stack:
            node, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor in on_stack:
                    return True
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_stack.add(neighbor)
                    stack.append((neighbor, iter(adjacency.get(neighbor, ()))))
                    break
            else:
                stack.pop()
                on_stack.discard(node)

    return False


def reachable_from(start: str, adjacency: Mapping[str, list[str]]) -> list[str]:
    """Return the nodes reachable from ``start`` (itself included) in DFS preorder."""
    seen: set[str] = set()
    order: list[str] = []
    stack = [start]

    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        order.append(node)
        stack.extend(reversed(adjacency.get(node, [])))

    return order


def strongly_connected_components(
    adjacency: Mapping[str, list[str]],
    reverse_adjacency: Mapping[str, list[str]],
) -> list[list[str]]:
    """Partition the graph into strongly connected components.

    A node's component is the set of nodes it can reach that can also reach
    it back. Components are emitted in key order of their first member, with
    members in forward DFS order.
    """
    assigned: set[str] = set()
    components: list[list[str]] = []

    for node in adjacency:
        if node in assigned:
            continue

        backward = set(reachable_from(node, reverse_adjacency))
        component = [
            member
            for member in reachable_from(node, adjacency)
            if member in backward
        ]
        assigned.update(component)
        components.append(component)

    return components


def count_weakly_connected_components(
    adjacency: Mapping[str, list[str]],
    reverse_adjacency: Mapping[str, list[str]],
) -> int:
    """Count connected groups when edge direction is ignored."""
    visited: set[str] = set()
    count = 0

    for root in adjacency:
        if root in visited:
            continue

        count += 1
        visited.add(root)
        stack = [root]
        while stack:
            node = stack.pop()
            neighbors = (*adjacency.get(node, ()), *reverse_adjacency.get(node, ()))
            for neighbor in neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

    return count


def analyze_structure(table: DependencyTable) -> GraphStructure:
    """Compute aggregate structure metrics for a dependency table.

    Args:
        table: Mapping of class name to a list of ``{constant: [methods]}``
            entries

    Returns:
        GraphStructure with node and edge counts, weakly connected component
        count, cycle presence and strongly connected components
    """
    adjacency = materialize_nodes(build_graph(table))
    if not adjacency:
        return GraphStructure()

    reverse_adjacency = build_reverse_graph(adjacency)

    return GraphStructure(
        nodes=len(adjacency),
        edges=sum(len(neighbors) for neighbors in adjacency.values()),
        components=count_weakly_connected_components(adjacency, reverse_adjacency),
        has_cycles=has_cycle(adjacency),
        strongly_connected_components=strongly_connected_components(
            adjacency, reverse_adjacency
        ),
    )


__all__ = [
    "GraphStructure",
    "analyze_structure",
    "count_weakly_connected_components",
    "has_cycle",
    "reachable_from",
    "strongly_connected_components",
]
