import abc
import logging
import time
from typing import Generic, Optional, TypeVar

import numpy as np

from .problem import ProblemInterface

T = TypeVar("T")


class SearchAlgorithm(abc.ABC, Generic[T]):
    """
    Abstract base class for time-budgeted single-state search algorithms.
    """
    name: str = ""

    def __init__(
        self,
        problem: ProblemInterface[T],
        time_budget: float,
        *,
        max_iterations: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        logger: Optional[logging.Logger] = None,
        **kwargs,
    ):
        """
        Initializes the search algorithm.

        Args:
            problem: An object implementing ProblemInterface.
            time_budget: Wall-clock seconds the search may run for.
            max_iterations: Optional cap on the number of steps.
            rng: Generator used for acceptance decisions. Must not be shared
                with another concurrently running search.
            logger: Logger for progress messages.
            **kwargs: Algorithm-specific hyperparameters.
        """
        if time_budget < 0:
            raise ValueError("Time budget must be non-negative.")
        if max_iterations is not None and max_iterations < 0:
            raise ValueError("max_iterations must be non-negative.")
        self.problem = problem
        self.time_budget = float(time_budget)
        self.max_iterations = max_iterations
        self.rng = rng if rng is not None else np.random.default_rng()
        self.logger = logger or logging.getLogger(__name__)
        self.current: Optional[T] = None
        self.current_rank: float = float("-inf")
        self.best_solution: Optional[T] = None
        self.best_rank: float = float("-inf")
        self.iteration = 0
        self._config = kwargs

    def initialize(self):
        """
        Sets up the initial state from a freshly generated candidate.
        Called by run() before any step.
        """
        self.iteration = 0
        self.best_solution = None
        self.best_rank = float("-inf")
        self.current = self.problem.generate_candidate()
        self.current_rank = self.problem.rank_candidate(self.current)
        self._update_best_solution(self.current, self.current_rank)

    @abc.abstractmethod
    def step(self):
        """
        Performs a single iteration. Should update ``current`` and call
        ``_update_best_solution`` when a new candidate is accepted.
        """
        pass

    def run(self) -> T:
        """
        Runs the search until the time budget (or iteration cap) is spent.

        Returns:
            A clone of the best candidate found.
        """
        self.initialize()
        deadline = time.perf_counter() + self.time_budget
        while time.perf_counter() < deadline:
            if self.max_iterations is not None and self.iteration >= self.max_iterations:
                break
            self.step()
            self.iteration += 1
        self.logger.debug(
            f"{self.name or type(self).__name__} finished after {self.iteration} iterations, "
            f"best rank {self.best_rank:.6f}"
        )
        return self.get_best_solution()

    def _update_best_solution(self, candidate: T, rank: float):
        """Updates the overall best candidate found so far."""
        if self.best_solution is None or rank > self.best_rank:
            # Keep a private copy so later moves cannot alter it
            self.best_solution = self.problem.clone_candidate(candidate)
            self.best_rank = rank

    def get_best_solution(self) -> Optional[T]:
        """
        Returns a clone of the best candidate found so far, or None if the
        search has not been initialised.
        """
        if self.best_solution is None:
            return None
        return self.problem.clone_candidate(self.best_solution)

    def get_state(self) -> dict:
        """Returns the current state of the algorithm for logging or monitoring."""
        return {
            "iteration": self.iteration,
            "current_rank": self.current_rank,
            "best_rank": self.best_rank,
        }
