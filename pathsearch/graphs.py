"""Graph adapters consumed by the search core.

The core only needs two things from a graph: the weighted neighbours of a
node, and the weight of an edge between two nodes already known to be
adjacent. :class:`WeightedGraph` names that contract; the adapters below wrap
the two shapes callers usually hold.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    Protocol,
    TypeAlias,
    TypeVar,
    runtime_checkable,
)

import networkx as nx

N = TypeVar("N", bound=Hashable)

if TYPE_CHECKING:  # pragma: no cover - typing only
    AnyNetworkXGraph: TypeAlias = nx.Graph[Any]
else:  # pragma: no cover - runtime alias without subscripting
    AnyNetworkXGraph: TypeAlias = nx.Graph


@runtime_checkable
class WeightedGraph(Protocol[N]):
    """Read-only view of a graph with non-negative edge weights."""

    def neighbors(self, node: N) -> Iterable[tuple[N, float]]:
        """Yield ``(neighbor, weight)`` pairs for the outgoing edges of ``node``."""
        ...

    def edge_weight(self, node: N, neighbor: N) -> float:
        """Return the weight of the edge ``node -> neighbor``."""
        ...


class MappingGraph(Generic[N]):
    """Adjacency mapping of the form ``{node: {neighbor: weight}}``.

    Nodes that only appear as neighbours have no outgoing edges. Neighbour
    order follows the mapping's iteration order.
    """

    def __init__(self, adjacency: Mapping[N, Mapping[N, float]]) -> None:
        self._adjacency: dict[N, dict[N, float]] = {
            node: {neighbor: float(weight) for neighbor, weight in edges.items()}
            for node, edges in adjacency.items()
        }

    @classmethod
    def undirected(cls, edges: Iterable[tuple[N, N, float]]) -> MappingGraph[N]:
        """Build a symmetric graph from ``(a, b, weight)`` triples."""

        adjacency: dict[N, dict[N, float]] = {}
        for node_a, node_b, weight in edges:
            adjacency.setdefault(node_a, {})[node_b] = float(weight)
            adjacency.setdefault(node_b, {})[node_a] = float(weight)
        return cls(adjacency)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __iter__(self) -> Iterator[N]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def neighbors(self, node: N) -> Iterable[tuple[N, float]]:
        return self._adjacency.get(node, {}).items()

    def edge_weight(self, node: N, neighbor: N) -> float:
        try:
            return self._adjacency[node][neighbor]
        except KeyError:
            raise KeyError(f"no edge {node!r} -> {neighbor!r}") from None


class NetworkXGraph(Generic[N]):
    """Adapter exposing a :mod:`networkx` graph through :class:`WeightedGraph`.

    Edge weights come from the ``weight`` attribute, falling back to
    ``default_weight`` when an edge does not carry it. For multigraphs the
    cheapest parallel edge is used.
    """

    def __init__(
        self,
        graph: AnyNetworkXGraph,
        *,
        weight: str = "weight",
        default_weight: float = 1.0,
    ) -> None:
        self.graph = graph
        self.weight = weight
        self.default_weight = float(default_weight)

    def neighbors(self, node: N) -> Iterable[tuple[N, float]]:
        if node not in self.graph:
            return
        for neighbor, data in self.graph.adj[node].items():
            yield neighbor, self._resolve(data)

    def edge_weight(self, node: N, neighbor: N) -> float:
        if not self.graph.has_edge(node, neighbor):
            raise KeyError(f"no edge {node!r} -> {neighbor!r}")
        return self._resolve(self.graph.adj[node][neighbor])

    def _resolve(self, data: Mapping[Any, Any]) -> float:
        if self.graph.is_multigraph():
            return min(
                float(attrs.get(self.weight, self.default_weight))
                for attrs in data.values()
            )
        return float(data.get(self.weight, self.default_weight))


__all__ = ["MappingGraph", "NetworkXGraph", "WeightedGraph"]
