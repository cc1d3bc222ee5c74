"""
Tour candidate, 2-opt segment reversal and ranking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .distance import tour_length


@dataclass(frozen=True)
class TourCandidate:
    """
    A closed tour over point indices and its cached length.

    Frozen, so ``length`` is always the length of ``order``: a move builds a
    new candidate instead of editing this one.
    """
    order: Tuple[int, ...]
    length: float

    @classmethod
    def from_order(cls, order: Sequence[int], distance_matrix: np.ndarray) -> "TourCandidate":
        """Builds a candidate and computes its length from scratch."""
        order_tuple = tuple(int(i) for i in order)
        return cls(order_tuple, tour_length(order_tuple, distance_matrix))

    def copy(self) -> "TourCandidate":
        return TourCandidate(tuple(self.order), self.length)

    def __len__(self) -> int:
        return len(self.order)

    def __str__(self) -> str:
        return f"TourCandidate({list(self.order)}, Length: {self.length})"


def reverse_segment(order: Sequence[int], first: int, second: int) -> List[int]:
    """Return a copy of ``order`` with the inclusive segment between the two positions reversed.

    The positions may come in either order and may be equal.
    """
    new_order = list(order)
    lo, hi = (second, first) if first > second else (first, second)
    # [0 1 2 3 4 5 6 7 8 9], lo=2, hi=7 swaps (2,7), (3,6), (4,5)
    for k in range((hi - lo) // 2 + 1):
        new_order[lo + k], new_order[hi - k] = new_order[hi - k], new_order[lo + k]
    return new_order


def two_opt_move(candidate: TourCandidate, distance_matrix: np.ndarray, first: int, second: int) -> TourCandidate:
    """Apply a 2-opt move at the given positions, returning a new candidate.

    Only the two edges at the segment boundaries change, so the length is
    updated in constant time. A degenerate move returns a clone.
    """
    n = len(candidate.order)
    lo, hi = (second, first) if first > second else (first, second)
    if n < 2 or lo == hi:
        return candidate.copy()

    order = candidate.order
    new_order = tuple(reverse_segment(order, lo, hi))
    if lo == 0 and hi == n - 1:
        # Reversing the whole cycle leaves every edge in place
        return TourCandidate(new_order, candidate.length)

    before = order[lo - 1]  # order[-1] when lo == 0
    after = order[(hi + 1) % n]
    removed = distance_matrix[before, order[lo]] + distance_matrix[order[hi], after]
    added = distance_matrix[before, order[hi]] + distance_matrix[order[lo], after]
    return TourCandidate(new_order, float(candidate.length - removed + added))


def rank_tour(candidate: TourCandidate, ceiling: float) -> float:
    """Turn a tour length into a score where higher is better.

    ``ceiling`` must bound every tour length of the instance so the score
    stays non-negative.
    """
    return float(ceiling) - candidate.length
