import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from TSPSolver.core.errors import UnknownAlgorithm
from TSPSolver.core.problem import ProblemInterface
from TSPSolver.search import HillClimbing, RandomSearch, SimulatedAnnealing
from TSPSolver.search.registry import SolverFactory, get_algorithm, list_algorithms
from TSPSolver.tsp.adapter import TSPProblem
from TSPSolver.tsp.distance import tour_length
from TSPSolver.tsp.instance import TSPInstance


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def instance():
    rng = np.random.default_rng(2024)
    return TSPInstance.from_coords(rng.random((25, 2)) * 100.0, name="random25")


class CountingProblem(ProblemInterface[int]):
    """Integer toy problem: candidates are ints, rank prefers values near 50."""

    def __init__(self):
        self.generated = 0
        self.clones = 0

    def generate_candidate(self) -> int:
        self.generated += 1
        return 0

    def tweak_candidate(self, candidate: int) -> int:
        return candidate + 1

    def rank_candidate(self, candidate: int) -> float:
        return -abs(50 - candidate)

    def clone_candidate(self, candidate: int) -> int:
        self.clones += 1
        return candidate


# =============================================================================
# Driver behaviour
# =============================================================================

@pytest.mark.parametrize("cls", [HillClimbing, SimulatedAnnealing, RandomSearch])
def test_drivers_return_valid_tours(instance, cls):
    rng = np.random.default_rng(0)
    problem = TSPProblem(instance, rng=rng)
    solver = cls(problem, 10.0, max_iterations=200, rng=rng)
    best = solver.run()
    assert sorted(best.order) == list(range(25))
    assert best.length == pytest.approx(tour_length(best.order, instance.distance_matrix))
    assert solver.iteration == 200


def test_hill_climbing_never_gets_worse(instance):
    rng = np.random.default_rng(1)
    problem = TSPProblem(instance, rng=rng)
    solver = HillClimbing(problem, 10.0, max_iterations=0, rng=rng)
    start = solver.run()
    solver = HillClimbing(TSPProblem(instance, rng=np.random.default_rng(1)), 10.0, max_iterations=3000)
    improved = solver.run()
    assert improved.length <= start.length


def test_hill_climbing_climbs_toy_problem():
    solver = HillClimbing(CountingProblem(), 10.0, max_iterations=100)
    assert solver.run() == 50
    assert solver.best_rank == 0


def test_best_is_cloned_on_return():
    problem = CountingProblem()
    solver = HillClimbing(problem, 10.0, max_iterations=5)
    solver.run()
    clones_before = problem.clones
    solver.get_best_solution()
    assert problem.clones == clones_before + 1


def test_random_search_generates_every_step():
    problem = CountingProblem()
    solver = RandomSearch(problem, 10.0, max_iterations=7)
    solver.run()
    assert problem.generated == 8


def test_zero_budget_still_returns_initial_candidate(instance):
    solver = HillClimbing(TSPProblem(instance, seed=3), 0.0)
    best = solver.run()
    assert best is not None
    assert solver.iteration == 0


def test_time_budget_stops_search(instance):
    solver = HillClimbing(TSPProblem(instance, seed=4), 0.05)
    solver.run()
    assert solver.iteration > 0


def test_simulated_annealing_cools_to_floor(instance):
    sa = SimulatedAnnealing(
        TSPProblem(instance, seed=5), 10.0,
        initial_temperature=10.0, final_temperature=1.0, cooling_rate=0.5,
        moves_per_temp=1, max_iterations=50,
    )
    sa.run()
    assert sa.is_cooled()
    assert sa.temperature == pytest.approx(1.0)
    assert sa.get_state()["is_cooled"] is True


@pytest.mark.parametrize(
    "kwargs",
    [
        {"cooling_rate": 1.0},
        {"cooling_rate": 0.0},
        {"initial_temperature": 1.0, "final_temperature": 2.0},
        {"final_temperature": 0.0},
        {"moves_per_temp": 0},
    ],
)
def test_simulated_annealing_rejects_bad_parameters(instance, kwargs):
    with pytest.raises(ValueError):
        SimulatedAnnealing(TSPProblem(instance, seed=0), 1.0, **kwargs)


def test_negative_budget_rejected(instance):
    with pytest.raises(ValueError):
        HillClimbing(TSPProblem(instance, seed=0), -1.0)


# =============================================================================
# Registry
# =============================================================================

def test_registry_names():
    assert set(list_algorithms()) == {"hill-climbing", "simulated-annealing", "random-search"}
    assert get_algorithm("simulated-annealing").cls is SimulatedAnnealing


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithm) as info:
        get_algorithm("tabu-search")
    assert info.value.name == "tabu-search"


def test_factory_applies_defaults_and_overrides(instance):
    factory = SolverFactory(SimulatedAnnealing, {"initial_temperature": 50.0, "moves_per_temp": 3})
    solver = factory.build(TSPProblem(instance, seed=0), 1.0, {"moves_per_temp": 7})
    assert solver.initial_temperature == 50.0
    assert solver.moves_per_temp == 7
    assert solver.time_budget == 1.0
