"""
Euclidean distance matrix and closed-tour length.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def build_distance_matrix(coords: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    """Compute the full N x N Euclidean distance matrix.

    Args:
        coords: N (x, y) pairs, in the same order used for tour indices.

    Returns:
        A read-only float64 matrix, symmetric with a zero diagonal.
        N == 0 yields a (0, 0) matrix.
    """
    coords_array = np.asarray(coords, dtype=float)
    if coords_array.size == 0:
        return _freeze(np.zeros((0, 0), dtype=float))
    if coords_array.ndim != 2 or coords_array.shape[1] != 2:
        raise ValueError("coords must have shape (N, 2)")
    diff = coords_array[:, None, :] - coords_array[None, :, :]
    # hypot does not overflow on large finite coordinates
    dist = np.hypot(diff[..., 0], diff[..., 1])
    # Exact symmetry regardless of rounding in the subtraction above
    dist = np.minimum(dist, dist.T)
    np.fill_diagonal(dist, 0.0)
    return _freeze(dist)


def tour_length(order: Sequence[int], distance_matrix: np.ndarray) -> float:
    """Length of the closed tour visiting ``order`` and returning to its start."""
    n = len(order)
    if n == 0:
        return 0.0
    matrix = np.asarray(distance_matrix, dtype=float)
    idx = np.asarray(order, dtype=np.intp)
    return float(np.sum(matrix[idx, np.roll(idx, -1)]))


def _freeze(matrix: np.ndarray) -> np.ndarray:
    matrix.setflags(write=False)
    return matrix
