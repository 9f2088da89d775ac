"""A* shortest-path search with pluggable heuristics and path extractors."""

from .config import SearchConfig, TiePolicy
from .extractors import EXTRACTORS, to_next_hop_map, to_sequence
from .graphs import MappingGraph, NetworkXGraph, WeightedGraph
from .heuristics import (
    chebyshev_distance,
    euclidean_distance,
    from_positions,
    hex_distance,
    manhattan_distance,
    scaled,
    zero_heuristic,
)
from .outcome import (
    FailureKind,
    MalformedPathError,
    PathSearchError,
    SearchOutcome,
    UnreachableTargetError,
)
from .search import astar_search, find_path, search_parents

__version__ = "0.1.0"

__all__ = [
    "EXTRACTORS",
    "FailureKind",
    "MalformedPathError",
    "MappingGraph",
    "NetworkXGraph",
    "PathSearchError",
    "SearchConfig",
    "SearchOutcome",
    "TiePolicy",
    "UnreachableTargetError",
    "WeightedGraph",
    "astar_search",
    "chebyshev_distance",
    "euclidean_distance",
    "find_path",
    "from_positions",
    "hex_distance",
    "manhattan_distance",
    "scaled",
    "search_parents",
    "to_next_hop_map",
    "to_sequence",
    "zero_heuristic",
]
