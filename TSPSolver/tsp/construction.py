"""
Initial tour constructors.

Both strategies take the shared instance and return a fresh TourCandidate.
Randomness only ever comes from the generator passed in by the caller.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

import numpy as np

from ..core.errors import TourConstructionError
from .instance import TSPInstance
from .tour import TourCandidate

TourConstructor = Callable[[TSPInstance, np.random.Generator], TourCandidate]


def random_tour(instance: TSPInstance, rng: np.random.Generator) -> TourCandidate:
    """Uniformly random permutation of all point indices."""
    order = rng.permutation(instance.dimension)
    return TourCandidate.from_order(order, instance.distance_matrix)


def greedy_tour(instance: TSPInstance, rng: Optional[np.random.Generator] = None, *, start: int = 0) -> TourCandidate:
    """
    Nearest-neighbour path from ``start``.

    At each step the closest unvisited index is appended; equal distances go
    to the lowest index. Visited status is tracked per index, so points that
    share coordinates are still visited separately. The result does not
    depend on ``rng``.

    Raises:
        TourConstructionError: if the path is not a permutation of all indices.
    """
    n = instance.dimension
    if n == 0:
        return TourCandidate((), 0.0)
    if not 0 <= start < n:
        raise ValueError(f"start index {start} out of range for {n} points")

    distances = instance.distance_matrix
    visited = np.zeros(n, dtype=bool)
    order = [start]
    visited[start] = True
    current = start
    for _ in range(n - 1):
        candidates = np.where(visited, np.inf, distances[current])
        # argmin returns the first minimum, i.e. the lowest index on ties
        nearest = int(np.argmin(candidates))
        if visited[nearest]:
            break
        order.append(nearest)
        visited[nearest] = True
        current = nearest

    _check_permutation(order, n)
    return TourCandidate.from_order(order, distances)


def _check_permutation(order, n: int) -> None:
    if len(order) != n or len(set(order)) != n:
        raise TourConstructionError(
            f"greedy construction visited {len(set(order))} of {n} points"
        )


CONSTRUCTORS: Dict[str, TourConstructor] = {
    "random": random_tour,
    "greedy": greedy_tour,
}


def get_constructor(name: str) -> TourConstructor:
    try:
        return CONSTRUCTORS[name]
    except KeyError:
        raise ValueError(f"Unknown initial tour strategy: {name!r}") from None
