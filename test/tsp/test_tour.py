import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from TSPSolver.tsp.distance import build_distance_matrix, tour_length
from TSPSolver.tsp.tour import TourCandidate, rank_tour, reverse_segment, two_opt_move


@pytest.fixture
def matrix():
    rng = np.random.default_rng(3)
    return build_distance_matrix(rng.random((12, 2)) * 100.0)


def test_reverse_segment_example():
    assert reverse_segment([1, 0, 2, 4, 3], 0, 3) == [4, 2, 0, 1, 3]


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (2, 9, [0, 1, 9, 8, 7, 6, 5, 4, 3, 2]),
        (9, 2, [0, 1, 9, 8, 7, 6, 5, 4, 3, 2]),
        (2, 8, [0, 1, 8, 7, 6, 5, 4, 3, 2, 9]),
        (4, 4, list(range(10))),
    ],
)
def test_reverse_segment_positions(first, second, expected):
    assert reverse_segment(list(range(10)), first, second) == expected


def test_reverse_segment_does_not_touch_input():
    order = [3, 1, 2, 0]
    reverse_segment(order, 0, 3)
    assert order == [3, 1, 2, 0]


def test_from_order_caches_closed_length():
    matrix = np.array([
        [0.0, 3.9, 6.44],
        [3.9, 0.0, 4.7],
        [6.44, 4.7, 0.0],
    ])
    candidate = TourCandidate.from_order([1, 0, 2], matrix)
    assert candidate.order == (1, 0, 2)
    assert candidate.length == pytest.approx(15.04)


def test_candidate_is_frozen(matrix):
    candidate = TourCandidate.from_order(range(12), matrix)
    with pytest.raises(AttributeError):
        candidate.length = 0.0


def test_two_opt_move_matches_full_recompute(matrix):
    rng = np.random.default_rng(11)
    candidate = TourCandidate.from_order(rng.permutation(12), matrix)
    for _ in range(500):
        a, b = rng.integers(0, 12, size=2)
        moved = two_opt_move(candidate, matrix, int(a), int(b))
        assert sorted(moved.order) == list(range(12))
        assert moved.length == pytest.approx(tour_length(moved.order, matrix))
        candidate = moved


@pytest.mark.parametrize("a, b", [(0, 11), (0, 10), (1, 11), (5, 6)])
def test_two_opt_boundary_segments(matrix, a, b):
    candidate = TourCandidate.from_order(range(12), matrix)
    moved = two_opt_move(candidate, matrix, a, b)
    assert list(moved.order) == reverse_segment(candidate.order, a, b)
    assert moved.length == pytest.approx(tour_length(moved.order, matrix))


def test_degenerate_move_returns_equal_clone(matrix):
    candidate = TourCandidate.from_order(range(12), matrix)
    moved = two_opt_move(candidate, matrix, 4, 4)
    assert moved == candidate
    assert moved is not candidate


def test_two_opt_leaves_input_untouched(matrix):
    candidate = TourCandidate.from_order(range(12), matrix)
    two_opt_move(candidate, matrix, 2, 7)
    assert candidate.order == tuple(range(12))


def test_tiny_tours():
    single = TourCandidate.from_order([0], np.zeros((1, 1)))
    assert two_opt_move(single, np.zeros((1, 1)), 0, 0) == single
    pair_matrix = build_distance_matrix([(0, 0), (0, 1)])
    pair = TourCandidate.from_order([0, 1], pair_matrix)
    moved = two_opt_move(pair, pair_matrix, 0, 1)
    assert moved.order == (1, 0)
    assert moved.length == pytest.approx(2.0)


def test_rank_prefers_shorter_tours():
    short = TourCandidate((0, 1), 10.0)
    long = TourCandidate((1, 0), 20.0)
    assert rank_tour(short, 100.0) > rank_tour(long, 100.0)
    assert rank_tour(short, 100.0) == rank_tour(short, 100.0)
    assert rank_tour(long, 100.0) >= 0.0
