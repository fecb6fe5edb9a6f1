"""Depth-first traversal state for cycle enumeration."""

from __future__ import annotations


class TraversalState:
    """Mutable state container for one cycle-enumeration run.

    Tracks every node visited so far, the nodes on the current DFS branch
    (both as a set and as an ordered path), and the cycles recorded along the
    way. A state object belongs to a single run and is never shared.
    """

    def __init__(self) -> None:
        self._visited: set[str] = set()
        self._on_path: set[str] = set()
        self._path: list[str] = []
        self._positions: dict[str, int] = {}
        self._cycles: list[list[str]] = []
        self._cycle_keys: set[tuple[str, ...]] = set()

    def mark_on_path(self, node: str) -> None:
        """Mark ``node`` visited and push it onto the current path."""
        self._visited.add(node)
        self._on_path.add(node)
        self._positions[node] = len(self._path)
        self._path.append(node)

    def unmark_from_path(self, node: str) -> None:
        """Pop ``node`` off the current path; it stays visited."""
        if not self._path or self._path[-1] != node:
            msg = f"Cannot unmark {node!r}: it is not at the top of the current path."
            raise RuntimeError(msg)
        self._path.pop()
        self._on_path.discard(node)
        del self._positions[node]

    def visited(self, node: str) -> bool:
        return node in self._visited

    def on_path(self, node: str) -> bool:
        return node in self._on_path

    @property
    def path(self) -> list[str]:
        return list(self._path)

    def record_cycle_closing_at(self, target: str) -> None:
        """Record the cycle formed by a back edge to ``target``.

        The cycle is the current path from ``target`` onwards, closed by
        repeating ``target``. Identical sequences are recorded once. Nothing
        happens when ``target`` is not on the current path.
        """
        start = self._positions.get(target)
        if start is None:
            return

        cycle = [*self._path[start:], target]
        key = tuple(cycle)
        if key in self._cycle_keys:
            return
        self._cycle_keys.add(key)
        self._cycles.append(cycle)

    def cycles(self) -> list[list[str]]:
        """Return recorded cycles in discovery order."""
        return [list(cycle) for cycle in self._cycles]


__all__ = ["TraversalState"]
