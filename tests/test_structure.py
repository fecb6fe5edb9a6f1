from __future__ import annotations

from graph import analyze_structure, build_graph
from graph.structure import GraphStructure, has_cycle, reachable_from


def test_analyze_structure_empty_table() -> None:
    assert analyze_structure({}).to_dict() == {
        "nodes": 0,
        "edges": 0,
        "components": 0,
        "has_cycles": False,
        "strongly_connected_components": [],
    }


def test_analyze_structure_components_and_sccs() -> None:
    table = {
        "A": [{"B": ["m1"]}],
        "B": [{"A": ["m2"]}],
        "C": [{"D": ["m3"]}],
        "D": [],
    }

    structure = analyze_structure(table)

    assert structure.components == 2
    assert structure.has_cycles is True
    assert [set(scc) for scc in structure.strongly_connected_components] == [
        {"A", "B"},
        {"C"},
        {"D"},
    ]


def test_analyze_structure_three_node_cycle_has_cycles() -> None:
    table = {
        "A": [{"B": ["m"]}],
        "B": [{"C": ["m"]}],
        "C": [{"A": ["m"]}],
    }

    structure = analyze_structure(table)

    assert structure.has_cycles is True
    assert structure.nodes == 3
    assert structure.edges == 3
    assert structure.strongly_connected_components == [["A", "B", "C"]]


def test_analyze_structure_counts_referenced_only_nodes() -> None:
    table = {"Player": [{"Weapon": ["damage"]}, {"Logger": ["info"]}]}

    structure = analyze_structure(table)

    assert structure.nodes == 3
    assert structure.edges == 2
    assert structure.components == 1
    assert structure.has_cycles is False


def test_analyze_structure_acyclic_sccs_are_singletons() -> None:
    table = {
        "Player": [{"Weapon": ["damage"]}],
        "Weapon": [{"Material": ["hardness"]}],
        "Material": [{"Config": ["base"]}],
        "Config": [],
    }

    structure = analyze_structure(table)

    assert structure.strongly_connected_components == [
        ["Player"],
        ["Weapon"],
        ["Material"],
        ["Config"],
    ]


def test_analyze_structure_sccs_partition_nodes() -> None:
    table = {
        "A": [{"B": ["m"]}],
        "B": [{"C": ["m"]}, {"E": ["m"]}],
        "C": [{"A": ["m"]}],
        "E": [{"F": ["m"]}],
        "F": [{"E": ["m"]}, {"G": ["m"]}],
        "H": [],
    }

    structure = analyze_structure(table)
    members = [node for scc in structure.strongly_connected_components for node in scc]

    assert len(members) == len(set(members))
    assert set(members) == {"A", "B", "C", "E", "F", "G", "H"}
    assert len(members) == structure.nodes


def test_analyze_structure_edges_match_graph_neighbor_lists() -> None:
    table = {
        "A": [{"B": ["m"]}, {"C": ["m"]}, {"B": ["n"]}],
        "C": [{"B": ["m"]}],
    }
    graph = build_graph(table)

    structure = analyze_structure(table)

    assert structure.edges == sum(len(neighbors) for neighbors in graph.values())


def test_analyze_structure_weak_components_follow_incoming_edges() -> None:
    # B and C only meet through the shared target D.
    table = {"B": [{"D": ["m"]}], "C": [{"D": ["m"]}], "E": []}

    assert analyze_structure(table).components == 2


def test_analyze_structure_standalone_class() -> None:
    structure = analyze_structure({"Standalone": []})

    assert structure == GraphStructure(
        nodes=1,
        edges=0,
        components=1,
        has_cycles=False,
        strongly_connected_components=[["Standalone"]],
    )


def test_has_cycle_detects_self_loop() -> None:
    assert has_cycle({"A": ["A"]}) is True
    assert has_cycle({"A": ["B"], "B": []}) is False


def test_reachable_from_is_dfs_preorder() -> None:
    adjacency = {"A": ["B", "C"], "B": ["D"], "C": [], "D": []}

    assert reachable_from("A", adjacency) == ["A", "B", "D", "C"]


def test_analyze_structure_is_idempotent() -> None:
    table = {"A": [{"B": ["m"]}], "B": [{"A": ["m"]}], "C": []}

    assert analyze_structure(table) == analyze_structure(table)
