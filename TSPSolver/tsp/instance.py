"""
Point model and the read-only problem instance shared by every run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .distance import build_distance_matrix


@dataclass(frozen=True)
class Point:
    """A city. Identity is the ``id``; coordinates may collide."""
    id: int
    x: float = field(compare=False)
    y: float = field(compare=False)

    def distance_to(self, other: "Point") -> float:
        return float(np.hypot(self.x - other.x, self.y - other.y))


class TSPInstance:
    """
    Points plus their precomputed distance matrix.

    Built once before any run starts and never mutated afterwards, so any
    number of concurrent runs may read it without locking. Tour indices are
    0-based positions in ``points``, not point ids.
    """

    def __init__(self, points: Sequence[Point], *, name: Optional[str] = None):
        self.points: Tuple[Point, ...] = tuple(points)
        self.name = name
        self.distance_matrix: np.ndarray = build_distance_matrix(
            [(p.x, p.y) for p in self.points]
        )
        self.ceiling = self._length_ceiling(self.distance_matrix)

    @classmethod
    def from_coords(cls, coords: Sequence[Sequence[float]], *, name: Optional[str] = None) -> "TSPInstance":
        """Build an instance from bare (x, y) pairs; ids are 1-based ordinals."""
        points = [Point(i + 1, float(x), float(y)) for i, (x, y) in enumerate(coords)]
        return cls(points, name=name)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def dimension(self) -> int:
        return len(self.points)

    @property
    def city_coords(self) -> List[Tuple[float, float]]:
        return [(p.x, p.y) for p in self.points]

    def distance(self, i: int, j: int) -> float:
        return float(self.distance_matrix[i, j])

    def get_problem_info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dimension": self.dimension,
            "problem_type": "permutation",
            "cities": self.city_coords,
        }

    @staticmethod
    def _length_ceiling(distances: np.ndarray) -> float:
        # No closed tour can exceed N times the longest edge
        if distances.size == 0:
            return 1.0
        upper = float(np.max(distances)) * distances.shape[0]
        return max(upper, 1.0)

    def __setstate__(self, state):
        # Unpickled arrays come back writeable
        state["distance_matrix"].setflags(write=False)
        self.__dict__.update(state)
