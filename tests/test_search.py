import math
from typing import get_type_hints

import pytest

from pathsearch import (
    FailureKind,
    MappingGraph,
    SearchConfig,
    TiePolicy,
    UnreachableTargetError,
    astar_search,
    find_path,
    manhattan_distance,
    search_parents,
    to_next_hop_map,
    to_sequence,
    zero_heuristic,
)
from pathsearch import search
from pathsearch.extractors import Extractor
from pathsearch.heuristics import Heuristic


def diamond() -> MappingGraph[str]:
    return MappingGraph.undirected(
        [("A", "B", 1), ("B", "D", 1), ("A", "C", 4), ("C", "D", 1)]
    )


def grid(width: int, height: int, blocked=frozenset()) -> MappingGraph[tuple[int, int]]:
    edges = []
    for x in range(width):
        for y in range(height):
            if (x, y) in blocked:
                continue
            for step in ((x + 1, y), (x, y + 1)):
                if step[0] < width and step[1] < height and step not in blocked:
                    edges.append(((x, y), step, 1.0))
    return MappingGraph.undirected(edges)


def test_diamond_prefers_cheaper_branch():
    outcome = astar_search(diamond(), "A", "D", zero_heuristic)
    assert outcome.ok
    path, cost = outcome.value
    assert path == ["A", "B", "D"]
    assert cost == 2


def test_diamond_next_hop_map():
    hops, cost = find_path(diamond(), "A", "D", zero_heuristic, to_next_hop_map)
    assert hops == {"A": "B", "B": "D"}
    assert cost == 2


@pytest.mark.parametrize("node", ["A", "B", "C", "D", "Z"])
def test_source_equals_target_is_trivial(node):
    def never_called(a, b):
        raise AssertionError("heuristic should not run")

    outcome = astar_search(diamond(), node, node, never_called)
    assert outcome.ok
    assert outcome.value == ([node], 0.0)
    assert outcome.expanded == 0

    hops, cost = find_path(diamond(), node, node, never_called, to_next_hop_map)
    assert hops == {node: node}
    assert cost == 0.0


def test_trivial_case_ignores_graph_contents():
    empty = MappingGraph({})
    assert find_path(empty, 7, 7, zero_heuristic) == ([7], 0.0)


def test_unreachable_target_is_tagged():
    graph = MappingGraph.undirected([("A", "B", 1), ("C", "D", 1)])
    outcome = astar_search(graph, "A", "D", zero_heuristic)
    assert not outcome.ok
    assert outcome.failure is FailureKind.UNREACHABLE_TARGET
    assert outcome.value is None
    assert isinstance(outcome.error, UnreachableTargetError)
    assert outcome.error.source == "A"
    assert outcome.error.target == "D"
    assert outcome.expanded == 2


def test_unreachable_target_raises_from_find_path():
    graph = MappingGraph({"A": {"B": 1.0}, "B": {}, "C": {"A": 1.0}})
    with pytest.raises(UnreachableTargetError):
        find_path(graph, "A", "C", zero_heuristic)


def test_directed_edges_are_respected():
    graph = MappingGraph({"A": {"B": 1.0}, "B": {"C": 1.0}, "C": {"A": 1.0}})
    assert find_path(graph, "A", "C", zero_heuristic) == (["A", "B", "C"], 2.0)
    assert find_path(graph, "C", "B", zero_heuristic) == (["C", "A", "B"], 2.0)


def test_grid_with_wall_uses_manhattan_heuristic():
    wall = frozenset({(2, 0), (2, 1), (2, 2), (2, 3)})
    graph = grid(5, 5, wall)
    path, cost = find_path(graph, (0, 0), (4, 0), manhattan_distance)
    assert path[0] == (0, 0) and path[-1] == (4, 0)
    assert not wall.intersection(path)
    assert cost == 12


def test_informed_heuristic_expands_fewer_nodes():
    graph = grid(15, 15)
    blind = astar_search(graph, (0, 0), (14, 0), zero_heuristic)
    informed = astar_search(graph, (0, 0), (14, 0), manhattan_distance)
    assert blind.value[1] == informed.value[1] == 14
    assert informed.expanded == 14
    assert informed.expanded < blind.expanded


def test_long_chain_does_not_recurse():
    length = 50_000
    graph = MappingGraph({i: {i + 1: 1.0} for i in range(length)})
    path, cost = find_path(graph, 0, length, zero_heuristic)
    assert len(path) == length + 1
    assert cost == length


def test_search_parents_returns_predecessors():
    parents = search_parents(diamond(), "A", "D", zero_heuristic)
    assert parents["D"] == "B"
    assert parents["B"] == "A"
    assert "A" not in parents


def test_search_parents_trivial_and_unreachable():
    assert search_parents(diamond(), "A", "A", zero_heuristic) == {}
    graph = MappingGraph.undirected([("A", "B", 1), ("C", "D", 1)])
    with pytest.raises(UnreachableTargetError):
        search_parents(graph, "A", "C", zero_heuristic)


def test_equal_cost_ties_follow_policy():
    # Both A->B->D and A->C->D cost 2; B is expanded before C.
    graph = MappingGraph(
        {"A": {"B": 1.0, "C": 1.0}, "B": {"D": 1.0}, "C": {"D": 1.0}, "D": {}}
    )
    last = find_path(graph, "A", "D", zero_heuristic)
    first = find_path(
        graph,
        "A",
        "D",
        zero_heuristic,
        config=SearchConfig(tie_policy=TiePolicy.FIRST_WINS),
    )
    assert last == (["A", "C", "D"], 2.0)
    assert first == (["A", "B", "D"], 2.0)


def test_tie_resolution_is_repeatable():
    graph = grid(6, 6)
    results = {tuple(find_path(graph, (0, 0), (5, 5), zero_heuristic)[0]) for _ in range(5)}
    assert len(results) == 1


def test_extractor_chosen_from_config():
    config = SearchConfig(extractor="next_hop")
    hops, cost = find_path(diamond(), "A", "D", zero_heuristic, config=config)
    assert hops == {"A": "B", "B": "D"}
    assert cost == 2


def test_explicit_extractor_overrides_config():
    config = SearchConfig(extractor="next_hop")
    path, _ = find_path(diamond(), "A", "D", zero_heuristic, to_sequence, config=config)
    assert path == ["A", "B", "D"]


def test_custom_extractor_receives_parents():
    seen = {}

    def capture(graph, parents, source, target):
        seen.update(parents)
        return len(parents)

    assert find_path(diamond(), "A", "D", zero_heuristic, capture) == len(seen)
    assert seen["D"] == "B"


def test_negative_weight_is_rejected():
    graph = MappingGraph({"A": {"B": -1.0}, "B": {}})
    with pytest.raises(ValueError, match="negative or NaN weight"):
        astar_search(graph, "A", "B", zero_heuristic)


def test_negative_weight_check_can_be_disabled():
    graph = MappingGraph({"A": {"B": -1.0}, "B": {}})
    config = SearchConfig(validate_weights=False)
    assert find_path(graph, "A", "B", zero_heuristic, config=config) == (["A", "B"], -1.0)


def test_negative_heuristic_is_rejected():
    with pytest.raises(ValueError, match="negative or NaN estimate"):
        astar_search(diamond(), "A", "D", lambda a, b: -1.0)


def test_unhashable_nodes_fail_fast():
    graph = MappingGraph({})
    with pytest.raises(TypeError):
        astar_search(graph, ["A"], ["B"], zero_heuristic)


def test_zero_weight_edges():
    graph = MappingGraph({"A": {"B": 0.0}, "B": {"C": 0.0}, "C": {}})
    path, cost = find_path(graph, "A", "C", zero_heuristic)
    assert path == ["A", "B", "C"]
    assert math.isclose(cost, 0.0)


def test_nan_weight_is_rejected():
    graph = MappingGraph({"A": {"B": math.nan}, "B": {}})
    with pytest.raises(ValueError, match="negative or NaN weight"):
        astar_search(graph, "A", "B", zero_heuristic)


def test_nan_heuristic_is_rejected():
    with pytest.raises(ValueError, match="negative or NaN estimate"):
        astar_search(diamond(), "A", "D", lambda a, b: math.nan)


def test_nan_weight_without_validation_still_terminates():
    graph = MappingGraph({"A": {"B": math.nan, "C": 1.0}, "B": {"D": 1.0}, "C": {"D": 1.0}, "D": {}})
    config = SearchConfig(validate_weights=False)
    outcome = astar_search(graph, "A", "D", zero_heuristic, config=config)
    assert outcome.ok
    path, _ = outcome.value
    assert path[0] == "A" and path[-1] == "D"


def test_stale_heap_entries_are_skipped():
    # C is first reached at cost 10 and then lowered to 2 via B.
    graph = MappingGraph(
        {"A": {"B": 1.0, "C": 10.0}, "B": {"C": 1.0}, "C": {"D": 1.0}, "D": {}}
    )
    outcome = astar_search(graph, "A", "D", zero_heuristic)
    assert outcome.unwrap() == (["A", "B", "C", "D"], 3.0)
    assert outcome.expanded == 3


@pytest.mark.parametrize("entry_point", ["astar_search", "find_path"])
def test_signatures_tie_extractor_result_to_return_type(entry_point):
    function = getattr(search, entry_point)
    hints = get_type_hints(function)
    assert hints["heuristic"] == Heuristic[search.N]
    assert hints["extractor"] == Extractor[search.N, search.R] | None
    expected = search.SearchOutcome[search.R] if entry_point == "astar_search" else search.R
    assert hints["return"] == expected
