"""
TSP problem adapter exposing the generate/tweak/rank/clone capability set.
"""

from typing import Any, Dict, Optional, Union

import numpy as np

from ..core.problem import ProblemInterface
from .construction import TourConstructor, get_constructor
from .instance import TSPInstance
from .tour import TourCandidate, rank_tour, two_opt_move


class TSPProblem(ProblemInterface[TourCandidate]):
    """
    Adapter between one shared TSPInstance and a search driver.

    Each adapter owns its random generator; create one adapter per run and
    never share it between concurrently running searches.
    """

    def __init__(
        self,
        instance: TSPInstance,
        *,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        initial_tour: Union[str, TourConstructor] = "random",
    ):
        """
        Args:
            instance: The read-only problem instance.
            rng: Private generator. Built from ``seed`` when omitted.
            seed: Seed for the private generator when ``rng`` is omitted.
            initial_tour: Constructor name ("random" or "greedy") or a callable.
        """
        self.instance = instance
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._constructor = get_constructor(initial_tour) if isinstance(initial_tour, str) else initial_tour

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    def generate_candidate(self) -> TourCandidate:
        return self._constructor(self.instance, self._rng)

    def tweak_candidate(self, candidate: TourCandidate) -> TourCandidate:
        """2-opt move at two positions drawn uniformly with replacement."""
        n = len(candidate.order)
        if n < 2:
            return candidate.copy()
        first, second = self._rng.integers(0, n, size=2)
        return two_opt_move(candidate, self.instance.distance_matrix, int(first), int(second))

    def rank_candidate(self, candidate: TourCandidate) -> float:
        return rank_tour(candidate, self.instance.ceiling)

    def clone_candidate(self, candidate: TourCandidate) -> TourCandidate:
        return candidate.copy()

    def get_problem_info(self) -> Dict[str, Any]:
        return self.instance.get_problem_info()
