from __future__ import annotations

from graph import build_graph, find_cycles

_Table = dict[str, list[dict[str, list[str]]]]


def _chain(length: int, *, close: bool = False) -> _Table:
    table: _Table = {
        f"N{i}": [{f"N{i + 1}": ["call"]}] for i in range(length - 1)
    }
    table[f"N{length - 1}"] = [{"N0": ["call"]}] if close else []
    return table


def test_find_cycles_mutual_reference() -> None:
    table = {
        "Player": [{"Enemy": ["take_damage"]}],
        "Enemy": [{"Player": ["take_damage"]}],
    }

    assert find_cycles(table) == [["Player", "Enemy", "Player"]]


def test_find_cycles_three_node_cycle() -> None:
    table = {
        "A": [{"B": ["m"]}],
        "B": [{"C": ["m"]}],
        "C": [{"A": ["m"]}],
    }

    cycles = find_cycles(table)

    assert len(cycles) == 1
    assert len(cycles[0]) == 4
    assert set(cycles[0]) == {"A", "B", "C"}
    assert cycles[0][0] == cycles[0][-1]


def test_find_cycles_empty_and_standalone_tables() -> None:
    assert find_cycles({}) == []
    assert find_cycles({"Standalone": []}) == []


def test_find_cycles_acyclic_graph() -> None:
    table = {
        "Player": [{"Weapon": ["damage"]}, {"Armor": ["defense"]}],
        "Weapon": [{"Material": ["hardness"]}],
        "Armor": [{"Material": ["hardness"]}],
    }

    assert find_cycles(table) == []


def test_find_cycles_self_loop() -> None:
    assert find_cycles({"Node": [{"Node": ["next"]}]}) == [["Node", "Node"]]


def test_find_cycles_rotation_follows_table_order() -> None:
    forward = {"A": [{"B": ["m"]}], "B": [{"A": ["m"]}]}
    backward = {"B": [{"A": ["m"]}], "A": [{"B": ["m"]}]}

    assert find_cycles(forward) == [["A", "B", "A"]]
    assert find_cycles(backward) == [["B", "A", "B"]]


def test_find_cycles_shared_nodes_uses_backtracking_order() -> None:
    table = {
        "A": [{"B": ["m"]}],
        "B": [{"C": ["m"]}, {"A": ["m"]}],
        "C": [{"B": ["m"]}],
    }

    assert find_cycles(table) == [["B", "C", "B"], ["A", "B", "A"]]


def test_find_cycles_fully_explored_nodes_are_not_reexplored() -> None:
    # D is reached from A first; the later root E only sees it as visited.
    table = {
        "A": [{"D": ["m"]}],
        "E": [{"D": ["m"]}],
        "D": [{"F": ["m"]}],
        "F": [],
    }

    assert find_cycles(table) == []


def test_find_cycles_every_consecutive_pair_is_an_edge() -> None:
    table = {
        "A": [{"B": ["m"]}, {"C": ["m"]}],
        "B": [{"C": ["m"]}, {"A": ["m"]}],
        "C": [{"A": ["m"]}, {"C": ["m"]}],
    }
    graph = build_graph(table)

    cycles = find_cycles(table)

    assert cycles
    for cycle in cycles:
        assert cycle[0] == cycle[-1]
        for source, target in zip(cycle, cycle[1:]):
            assert target in graph[source]
    assert len({tuple(cycle) for cycle in cycles}) == len(cycles)


def test_find_cycles_is_idempotent() -> None:
    table = {"A": [{"B": ["m"]}], "B": [{"A": ["m"]}, {"B": ["m"]}]}

    assert find_cycles(table) == find_cycles(table)


def test_find_cycles_handles_chains_deeper_than_recursion_limit() -> None:
    assert find_cycles(_chain(5000)) == []

    cycles = find_cycles(_chain(5000, close=True))
    assert len(cycles) == 1
    assert len(cycles[0]) == 5001
