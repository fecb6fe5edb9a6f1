"""Dependency depth calculation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from graph.builder import build_graph, build_reverse_graph, collect_nodes

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from graph.builder import DependencyTable


@dataclass
class _Frame:
    """One node whose dependents are still being walked."""

    node: str
    dependents: Iterator[str]
    deepest: int = -1


class _DepthState:
    """Memoized depth lookups over a reverse dependency graph.

    ``in_progress`` holds the nodes whose depth is still being computed.
    Reaching one of them again means the walk went around a cycle; that
    branch contributes a depth of 0 instead of being followed.
    """

    def __init__(self, reverse_graph: Mapping[str, list[str]]) -> None:
        self.reverse_graph = reverse_graph
        self.memo: dict[str, int] = {}
        self.in_progress: set[str] = set()

    def _dependents(self, node: str) -> Iterator[str]:
        return iter(self.reverse_graph.get(node, ()))

    def depth_of(self, node: str) -> int:
        if node in self.memo:
            return self.memo[node]

        self.in_progress.add(node)
        frames = [_Frame(node, self._dependents(node))]

        while frames:
            frame = frames[-1]
            for dependent in frame.dependents:
                if dependent in self.memo:
                    frame.deepest = max(frame.deepest, self.memo[dependent])
                elif dependent in self.in_progress:
                    frame.deepest = max(frame.deepest, 0)
                else:
                    self.in_progress.add(dependent)
                    frames.append(_Frame(dependent, self._dependents(dependent)))
                    break
            else:
                frames.pop()
                self.in_progress.discard(frame.node)
                depth = frame.deepest + 1
                self.memo[frame.node] = depth
                if frames:
                    frames[-1].deepest = max(frames[-1].deepest, depth)

        return self.memo[node]


def calculate_depth(table: DependencyTable) -> dict[str, int]:
    """Calculate how deeply nested each class is in the dependency hierarchy.

    A class nobody depends on has depth 0; any other class sits one level
    below its deepest dependent. Classes that are only referenced, never
    defined in the table, still receive a depth.

    Args:
        table: Mapping of class name to a list of ``{constant: [methods]}``
            entries

    Returns:
        Mapping of every node to a non-negative depth
    """
    graph = build_graph(table)
    reverse_graph = build_reverse_graph(graph)
    state = _DepthState(reverse_graph)

    return {node: state.depth_of(node) for node in collect_nodes(table, graph)}


__all__ = ["calculate_depth"]
