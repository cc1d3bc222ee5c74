import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from TSPSolver.core.errors import TourConstructionError
from TSPSolver.tsp import construction
from TSPSolver.tsp.construction import get_constructor, greedy_tour, random_tour
from TSPSolver.tsp.distance import tour_length
from TSPSolver.tsp.instance import TSPInstance


@pytest.fixture
def instance():
    rng = np.random.default_rng(42)
    return TSPInstance.from_coords(rng.random((30, 2)) * 100.0, name="random30")


@pytest.mark.parametrize("n", [1, 2, 5, 30])
def test_random_tour_is_permutation(n):
    inst = TSPInstance.from_coords([(i, i * i) for i in range(n)])
    tour = random_tour(inst, np.random.default_rng(n))
    assert sorted(tour.order) == list(range(n))
    assert tour.length == pytest.approx(tour_length(tour.order, inst.distance_matrix))


def test_random_tour_is_reproducible_per_seed(instance):
    a = random_tour(instance, np.random.default_rng(5))
    b = random_tour(instance, np.random.default_rng(5))
    c = random_tour(instance, np.random.default_rng(6))
    assert a == b
    assert a.order != c.order


def test_random_tour_start_varies(instance):
    rng = np.random.default_rng(0)
    starts = {random_tour(instance, rng).order[0] for _ in range(50)}
    assert len(starts) > 1


def test_greedy_follows_nearest_neighbour():
    # Points on a line, shuffled: nearest-neighbour from index 0 walks right then jumps back
    inst = TSPInstance.from_coords([(0, 0), (3, 0), (1, 0), (10, 0), (2, 0)])
    tour = greedy_tour(inst)
    assert tour.order == (0, 2, 4, 1, 3)
    assert tour.length == pytest.approx(20.0)


def test_greedy_breaks_ties_by_lowest_index():
    # Indices 1 and 2 are equally far from index 0
    inst = TSPInstance.from_coords([(0, 0), (0, 1), (1, 0), (0, -1)])
    tour = greedy_tour(inst)
    assert tour.order[1] == 1


def test_greedy_visits_duplicate_coordinates(instance):
    inst = TSPInstance.from_coords([(0, 0), (5, 5), (5, 5), (1, 1)])
    tour = greedy_tour(inst)
    assert sorted(tour.order) == [0, 1, 2, 3]


def test_greedy_is_deterministic(instance):
    assert greedy_tour(instance) == greedy_tour(instance, np.random.default_rng(99))


def test_greedy_is_permutation(instance):
    tour = greedy_tour(instance)
    assert sorted(tour.order) == list(range(instance.dimension))
    assert tour.order[0] == 0


def test_greedy_custom_start(instance):
    assert greedy_tour(instance, start=7).order[0] == 7
    with pytest.raises(ValueError):
        greedy_tour(instance, start=30)


def test_greedy_edge_cases():
    assert greedy_tour(TSPInstance([])).order == ()
    assert greedy_tour(TSPInstance.from_coords([(1, 1)])).order == (0,)


def test_greedy_fails_fast_when_tracking_breaks(instance, monkeypatch):
    # Force every pick to an already-visited index
    monkeypatch.setattr(construction.np, "argmin", lambda values: 0)
    with pytest.raises(TourConstructionError):
        greedy_tour(instance)


def test_constructor_lookup():
    assert get_constructor("random") is random_tour
    assert get_constructor("greedy") is greedy_tour
    with pytest.raises(ValueError):
        get_constructor("christofides")


def test_greedy_handles_large_coordinates():
    inst = TSPInstance.from_coords([(0.0, 0.0), (1e200, 0.0), (2e200, 0.0)])
    assert greedy_tour(inst).order == (0, 1, 2)
