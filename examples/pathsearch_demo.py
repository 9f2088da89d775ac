import logging

import networkx as nx

from pathsearch import (
    NetworkXGraph,
    SearchConfig,
    astar_search,
    hex_distance,
    to_next_hop_map,
)

width, height = 10, 10
start = (0, 0)
goal = (5, 2)  # keep within demo bounds

blocked = {(1, 0), (2, 1), (3, 1)}

_AXIAL_DIRS = ((1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1))


def build_grid() -> nx.Graph:
    grid = nx.Graph()
    for q in range(width):
        for r in range(height):
            if (q, r) in blocked:
                continue
            for dq, dr in _AXIAL_DIRS:
                n = (q + dq, r + dr)
                if 0 <= n[0] < width and 0 <= n[1] < height and n not in blocked:
                    grid.add_edge((q, r), n, weight=1.0)
    return grid


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")
    graph = NetworkXGraph(build_grid())
    config = SearchConfig(log_expansions=True)

    outcome = astar_search(graph, start, goal, hex_distance, config=config)
    path, total_cost = outcome.unwrap()
    print("path:", path)
    print("cost:", total_cost)
    print("expanded:", outcome.expanded)

    hops, _ = astar_search(graph, start, goal, hex_distance, to_next_hop_map).unwrap()
    print("next hops:", hops)
