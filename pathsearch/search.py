"""A* search over any :class:`~pathsearch.graphs.WeightedGraph`."""

from __future__ import annotations

import heapq
import logging
from itertools import count
from typing import Hashable, TypeVar

from .config import DEFAULT_CONFIG, SearchConfig
from .extractors import EXTRACTORS, Extractor
from .graphs import WeightedGraph
from .heuristics import Heuristic
from .outcome import (
    MalformedPathError,
    SearchOutcome,
    UnreachableTargetError,
)

N = TypeVar("N", bound=Hashable)
R = TypeVar("R")

logger = logging.getLogger(__name__)


def astar_search(
    graph: WeightedGraph[N],
    source: N,
    target: N,
    heuristic: Heuristic[N],
    extractor: Extractor[N, R] | None = None,
    *,
    config: SearchConfig | None = None,
) -> SearchOutcome[R]:
    """Search for the cheapest path from ``source`` to ``target``.

    ``extractor`` turns the final predecessor map into the returned value;
    when omitted the one named by ``config.extractor`` is used. An unreachable
    target or a broken predecessor chain is reported through the outcome's
    ``failure`` tag instead of being raised.
    """

    config = config or DEFAULT_CONFIG
    if extractor is None:
        extractor = EXTRACTORS[config.extractor]

    if source == target:
        parents: dict[N, N] = {}
        expanded = 0
    else:
        found, expanded = _expand(graph, source, target, heuristic, config)
        if found is None:
            logger.debug(
                "open set exhausted after %d expansions: %r -> %r",
                expanded,
                source,
                target,
            )
            return SearchOutcome.failed(
                UnreachableTargetError(source, target), expanded=expanded
            )
        parents = found

    try:
        value = extractor(graph, parents, source, target)
    except MalformedPathError as exc:
        return SearchOutcome.failed(exc, expanded=expanded)
    return SearchOutcome.success(value, expanded=expanded)


def find_path(
    graph: WeightedGraph[N],
    source: N,
    target: N,
    heuristic: Heuristic[N],
    extractor: Extractor[N, R] | None = None,
    *,
    config: SearchConfig | None = None,
) -> R:
    """Like :func:`astar_search` but raise on failure instead of tagging it."""

    outcome: SearchOutcome[R] = astar_search(
        graph, source, target, heuristic, extractor, config=config
    )
    return outcome.unwrap()


def search_parents(
    graph: WeightedGraph[N],
    source: N,
    target: N,
    heuristic: Heuristic[N],
    *,
    config: SearchConfig | None = None,
) -> dict[N, N]:
    """Run the search and return the raw predecessor map.

    Raises :class:`~pathsearch.outcome.UnreachableTargetError` when no path
    exists.
    """

    if source == target:
        return {}
    parents, _ = _expand(graph, source, target, heuristic, config or DEFAULT_CONFIG)
    if parents is None:
        raise UnreachableTargetError(source, target)
    return parents


def _expand(
    graph: WeightedGraph[N],
    source: N,
    target: N,
    heuristic: Heuristic[N],
    config: SearchConfig,
) -> tuple[dict[N, N] | None, int]:
    validate = config.validate_weights
    accepts = config.tie_policy.accepts

    def estimate(node: N) -> float:
        value = float(heuristic(node, target))
        # Written so that NaN fails as well.
        if validate and not value >= 0:
            raise ValueError(
                f"heuristic returned a negative or NaN estimate {value} for {node!r}"
            )
        return value

    closed: set[N] = set()
    open_set: set[N] = {source}
    parents: dict[N, N] = {}
    g_score: dict[N, float] = {source: 0.0}
    f_score: dict[N, float] = {source: estimate(source)}

    # Heap entries are (f, discovery index, push id, node). Ties on f go to
    # the node discovered first. An entry is live only while its push id is
    # the latest one recorded for the node.
    discovery: dict[N, int] = {source: 0}
    push_ids = count()
    live: dict[N, int] = {source: next(push_ids)}
    heap: list[tuple[float, int, int, N]] = [(f_score[source], 0, live[source], source)]

    logger.debug("searching %r -> %r", source, target)
    expanded = 0
    while open_set:
        while heap:
            f, _, push_id, current = heapq.heappop(heap)
            if live.get(current) == push_id:
                break
        else:
            raise RuntimeError("open set has no live heap entry")

        if current == target:
            logger.debug("reached %r after %d expansions", target, expanded)
            return dict(parents), expanded

        open_set.discard(current)
        del f_score[current]
        del live[current]
        closed.add(current)
        expanded += 1
        if config.log_expansions:
            logger.debug("expanding %r (f=%.6g, g=%.6g)", current, f, g_score[current])

        current_g = g_score[current]
        for neighbor, weight in graph.neighbors(current):
            if neighbor in closed:
                continue
            weight = float(weight)
            if validate and not weight >= 0:
                raise ValueError(
                    f"edge {current!r} -> {neighbor!r} has negative or NaN weight {weight}"
                )
            open_set.add(neighbor)
            if neighbor not in discovery:
                discovery[neighbor] = len(discovery)

            tentative = current_g + weight
            known = g_score.get(neighbor)
            if known is not None and not accepts(tentative, known):
                continue
            parents[neighbor] = current
            g_score[neighbor] = tentative
            f = tentative + estimate(neighbor)
            previous_f = f_score.get(neighbor)
            f_score[neighbor] = f
            if previous_f is None or f != previous_f:
                push_id = next(push_ids)
                live[neighbor] = push_id
                heapq.heappush(heap, (f, discovery[neighbor], push_id, neighbor))

    return None, expanded


__all__ = ["astar_search", "find_path", "search_parents"]
