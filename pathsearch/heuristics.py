from __future__ import annotations

import math
from typing import Callable, Hashable, Mapping, Sequence, TypeVar

N = TypeVar("N", bound=Hashable)

Heuristic = Callable[[N, N], float]
Point = Sequence[float]


def zero_heuristic(node: object, target: object) -> float:
    """Always zero; turns A* into Dijkstra's algorithm."""

    return 0.0


def manhattan_distance(a: Point, b: Point) -> float:
    return float(sum(abs(x - y) for x, y in zip(a, b, strict=True)))


def euclidean_distance(a: Point, b: Point) -> float:
    return math.dist(a, b)


def chebyshev_distance(a: Point, b: Point) -> float:
    return float(max((abs(x - y) for x, y in zip(a, b, strict=True)), default=0))


def hex_distance(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Step distance between two axial ``(q, r)`` hex coordinates."""

    aq, ar = a
    bq, br = b
    ax, ay, az = aq, -aq - ar, ar
    bx, by, bz = bq, -bq - br, br
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))


def scaled(heuristic: Heuristic[N], factor: float) -> Heuristic[N]:
    """Multiply ``heuristic`` by ``factor``.

    A factor at or below the cheapest edge weight per unit of distance keeps
    a distance heuristic admissible.
    """

    if factor < 0:
        raise ValueError("factor cannot be negative")

    def estimate(node: N, target: N) -> float:
        return heuristic(node, target) * factor

    return estimate


def from_positions(
    positions: Mapping[N, Point],
    metric: Callable[[Point, Point], float] = euclidean_distance,
    *,
    default: float = 0.0,
) -> Heuristic[N]:
    """Heuristic for graphs whose nodes carry coordinates in ``positions``.

    Nodes without a recorded position estimate ``default``.
    """

    def estimate(node: N, target: N) -> float:
        point_a = positions.get(node)
        point_b = positions.get(target)
        if point_a is None or point_b is None:
            return default
        return float(metric(point_a, point_b))

    return estimate


__all__ = [
    "Heuristic",
    "chebyshev_distance",
    "euclidean_distance",
    "from_positions",
    "hex_distance",
    "manhattan_distance",
    "scaled",
    "zero_heuristic",
]
