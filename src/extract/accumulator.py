"""Merging of per-class dependency records into a dependency table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from graph.builder import iter_references

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class DependencyAccumulator:
    """Collect ``class -> constant -> methods`` facts in first-seen order.

    Repeated references to the same constant from one class are merged:
    their method lists are unioned without duplicates.
    """

    def __init__(self) -> None:
        self._methods: dict[str, dict[str, list[str]]] = {}
        self._seen: dict[tuple[str, str], set[str]] = {}

    def register_class(self, class_name: str) -> None:
        self._methods.setdefault(class_name, {})

    def record(self, class_name: str, constant: str, method: str | None = None) -> None:
        constants = self._methods.setdefault(class_name, {})
        methods = constants.setdefault(constant, [])
        seen = self._seen.setdefault((class_name, constant), set())
        if method is not None and method not in seen:
            seen.add(method)
            methods.append(method)

    def merge(self, table: Mapping[str, Iterable[Any]]) -> None:
        """Fold another dependency table in, skipping malformed entries."""
        for class_name, dependencies in table.items():
            self.register_class(class_name)
            for constant, methods in iter_references(dependencies):
                self.record(class_name, constant)
                for method in methods:
                    if isinstance(method, str):
                        self.record(class_name, constant, method)

    def to_table(self) -> dict[str, list[dict[str, list[str]]]]:
        return {
            class_name: [
                {constant: list(methods)} for constant, methods in constants.items()
            ]
            for class_name, constants in self._methods.items()
        }


__all__ = ["DependencyAccumulator"]
