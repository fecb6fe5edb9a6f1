from __future__ import annotations

import pytest

from graph import calculate_depth
from graph.builder import build_graph, build_reverse_graph
from graph.depth import _DepthState


def test_calculate_depth_linear_chain() -> None:
    table = {
        "Player": [{"Weapon": ["damage"]}],
        "Weapon": [{"Material": ["hardness"]}],
        "Material": [{"Config": ["base"]}],
        "Config": [],
    }

    assert calculate_depth(table) == {
        "Player": 0,
        "Weapon": 1,
        "Material": 2,
        "Config": 3,
    }


def test_calculate_depth_empty_table() -> None:
    assert calculate_depth({}) == {}


def test_calculate_depth_standalone_class() -> None:
    assert calculate_depth({"Standalone": []}) == {"Standalone": 0}


def test_calculate_depth_includes_referenced_only_classes() -> None:
    depths = calculate_depth({"Controller": [{"Logger": ["info"]}]})

    assert depths == {"Controller": 0, "Logger": 1}


def test_calculate_depth_uses_deepest_dependent() -> None:
    table = {
        "App": [{"Service": ["run"]}, {"Repository": ["find"]}],
        "Service": [{"Repository": ["find"]}],
    }

    depths = calculate_depth(table)

    assert depths["App"] == 0
    assert depths["Service"] == 1
    assert depths["Repository"] == 2


def test_calculate_depth_mutual_cycle_terminates_with_cut_branch() -> None:
    table = {"A": [{"B": ["m"]}], "B": [{"A": ["m"]}]}

    assert calculate_depth(table) == {"A": 2, "B": 1}


@pytest.mark.parametrize(
    "table",
    [
        {"Node": [{"Node": ["next"]}]},
        {"A": [{"B": ["m"]}], "B": [{"C": ["m"]}], "C": [{"A": ["m"]}]},
        {
            "Root": [{"A": ["m"]}],
            "A": [{"B": ["m"]}],
            "B": [{"A": ["m"]}, {"Leaf": ["m"]}],
        },
    ],
)
def test_calculate_depth_cyclic_tables_give_non_negative_ints(
    table: dict[str, list[dict[str, list[str]]]],
) -> None:
    depths = calculate_depth(table)

    assert set(depths) >= set(table)
    assert all(isinstance(value, int) and value >= 0 for value in depths.values())


def test_calculate_depth_nodes_without_dependents_are_zero() -> None:
    table = {
        "A": [{"B": ["m"]}, {"C": ["m"]}],
        "D": [{"C": ["m"]}],
        "E": [],
    }
    reverse = build_reverse_graph(build_graph(table))

    depths = calculate_depth(table)

    for node, value in depths.items():
        if not reverse.get(node):
            assert value == 0


def test_calculate_depth_is_idempotent() -> None:
    table = {"A": [{"B": ["m"]}], "B": [{"A": ["m"]}], "C": [{"A": ["m"]}]}

    assert calculate_depth(table) == calculate_depth(table)


def test_calculate_depth_handles_chains_deeper_than_recursion_limit() -> None:
    length = 5000
    table = {f"N{i}": [{f"N{i + 1}": ["call"]}] for i in range(length - 1)}

    depths = calculate_depth(table)

    assert depths["N0"] == 0
    assert depths[f"N{length - 1}"] == length - 1


def test_depth_state_reuses_memoized_dependents_across_branches() -> None:
    table = {
        "Top": [{"Left": []}, {"Right": []}],
        "Left": [{"Base": []}],
        "Right": [{"Base": []}],
    }
    state = _DepthState(build_reverse_graph(build_graph(table)))

    assert state.depth_of("Base") == 2
    assert state.memo == {"Top": 0, "Left": 1, "Right": 1, "Base": 2}
    assert state.in_progress == set()
