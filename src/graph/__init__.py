"""Dependency graph engine: graph building, cycles, depth and structure."""

from graph.builder import build_graph
from graph.cycles import find_cycles
from graph.depth import calculate_depth
from graph.structure import GraphStructure, analyze_structure
from graph.traversal import TraversalState

__all__ = [
    "GraphStructure",
    "TraversalState",
    "analyze_structure",
    "build_graph",
    "calculate_depth",
    "find_cycles",
]
