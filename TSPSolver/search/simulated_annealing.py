import math

from ..core.problem import ProblemInterface
from ..core.search_algorithm import SearchAlgorithm


class SimulatedAnnealing(SearchAlgorithm):
    """
    Simulated Annealing (SA) search algorithm.

    Moves from the current candidate to a neighbouring one. Moves to better
    candidates are always accepted, while moves to worse candidates are
    accepted with a probability that decreases as the temperature cools,
    allowing the search to escape local optima.

    Args:
        problem (ProblemInterface): The problem adapter to search over.
        time_budget (float): Wall-clock seconds for the whole search.
        initial_temperature (float): The starting temperature.
        final_temperature (float): Floor the temperature never drops below.
        cooling_rate (float): The rate at which the temperature decreases (e.g., 0.995).
        moves_per_temp (int): Moves attempted before each cooling step.
        **kwargs: Passed to SearchAlgorithm (max_iterations, rng, logger).
    """
    name = "simulated-annealing"

    def __init__(self, problem: ProblemInterface, time_budget: float, *,
                 initial_temperature: float = 100.0, final_temperature: float = 1e-3,
                 cooling_rate: float = 0.995, moves_per_temp: int = 10, **kwargs):
        super().__init__(problem, time_budget, **kwargs)

        if not (0 < cooling_rate < 1):
            raise ValueError("Cooling rate must be between 0 and 1.")
        if initial_temperature <= final_temperature:
            raise ValueError("Initial temperature must be greater than final temperature.")
        if final_temperature <= 0:
            raise ValueError("Final temperature must be positive.")
        if moves_per_temp < 1:
            raise ValueError("Moves per temperature must be at least 1.")

        self.initial_temperature = initial_temperature
        self.final_temperature = final_temperature
        self.temperature = initial_temperature
        self.cooling_rate = cooling_rate
        self.moves_per_temp = moves_per_temp

    def initialize(self):
        super().initialize()
        self.temperature = self.initial_temperature

    def step(self):
        """
        One move at the current temperature; cools every ``moves_per_temp`` moves.
        """
        neighbor = self.problem.tweak_candidate(self.current)
        neighbor_rank = self.problem.rank_candidate(neighbor)

        # Rank is maximised, so a positive loss is a worse neighbour
        loss = self.current_rank - neighbor_rank
        if loss <= 0 or self.rng.random() < self._acceptance_probability(loss):
            self.current = neighbor
            self.current_rank = neighbor_rank
            self._update_best_solution(neighbor, neighbor_rank)

        if (self.iteration + 1) % self.moves_per_temp == 0:
            self._cool_down()

    def _acceptance_probability(self, loss: float) -> float:
        """
        Probability of accepting a worse candidate: e^(-loss / temperature).
        """
        if self.temperature > 0:
            return math.exp(-loss / self.temperature)
        return 0.0

    def _cool_down(self):
        self.temperature *= self.cooling_rate
        if self.temperature < self.final_temperature:
            self.temperature = self.final_temperature

    def is_cooled(self) -> bool:
        return self.temperature <= self.final_temperature

    def get_state(self) -> dict:
        state = super().get_state()
        state.update({
            "temperature": self.temperature,
            "is_cooled": self.is_cooled(),
        })
        return state
