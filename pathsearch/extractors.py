"""Strategies that turn a predecessor map into a caller-facing path.

Every extractor takes ``(graph, parents, source, target)`` and returns a
``(path, cost)`` pair. The cost is re-summed from the graph's edge weights
while walking the chain, so both shapes always agree on it.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Mapping, TypeVar

from .graphs import WeightedGraph
from .outcome import MalformedPathError

N = TypeVar("N", bound=Hashable)
R = TypeVar("R")

Extractor = Callable[[WeightedGraph[N], Mapping[N, N], N, N], R]


def _walk_back(
    graph: WeightedGraph[N], parents: Mapping[N, N], source: N, target: N
) -> tuple[list[N], float]:
    # A valid chain visits each parent entry at most once.
    remaining = len(parents)
    reversed_path = [target]
    cost = 0.0
    successor = target
    while successor != source:
        try:
            current = parents[successor]
        except KeyError:
            raise MalformedPathError(successor) from None
        if remaining == 0:
            raise MalformedPathError(
                successor, f"predecessor chain from {target!r} never reaches {source!r}"
            )
        remaining -= 1
        try:
            cost += graph.edge_weight(current, successor)
        except KeyError:
            raise MalformedPathError(
                successor, f"recorded predecessor {current!r} is not adjacent to {successor!r}"
            ) from None
        reversed_path.append(current)
        successor = current
    reversed_path.reverse()
    return reversed_path, cost


def to_sequence(
    graph: WeightedGraph[N], parents: Mapping[N, N], source: N, target: N
) -> tuple[list[N], float]:
    """Return the path as ``[source, ..., target]`` and its cost."""

    if source == target:
        return [source], 0.0
    return _walk_back(graph, parents, source, target)


def to_next_hop_map(
    graph: WeightedGraph[N], parents: Mapping[N, N], source: N, target: N
) -> tuple[dict[N, N], float]:
    """Return the path as ``{node: next node}`` and its cost.

    The path ``A -> B -> C`` becomes ``{A: B, B: C}``. When ``source`` equals
    ``target`` the map holds the single self-loop ``{source: source}``.
    """

    if source == target:
        return {source: source}, 0.0
    path, cost = _walk_back(graph, parents, source, target)
    return dict(zip(path, path[1:])), cost


EXTRACTORS: dict[str, Extractor[Any, Any]] = {
    "sequence": to_sequence,
    "next_hop": to_next_hop_map,
}

__all__ = ["EXTRACTORS", "Extractor", "to_next_hop_map", "to_sequence"]
