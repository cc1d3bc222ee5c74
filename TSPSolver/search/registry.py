"""
Registry mapping algorithm names to search driver factories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Type

from ..core.errors import UnknownAlgorithm
from ..core.problem import ProblemInterface
from ..core.search_algorithm import SearchAlgorithm
from .hill_climbing import HillClimbing
from .random_search import RandomSearch
from .simulated_annealing import SimulatedAnnealing


@dataclass
class SolverFactory:
    """Describes how to instantiate a search driver."""
    cls: Type[SearchAlgorithm]
    default_kwargs: Dict[str, Any] = field(default_factory=dict)

    def build(
        self,
        problem: ProblemInterface,
        time_budget: float,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> SearchAlgorithm:
        params: Dict[str, Any] = dict(self.default_kwargs)
        if overrides:
            params.update(overrides)
        return self.cls(problem, time_budget, **params)


_algorithm_registry: Dict[str, SolverFactory] = {
    HillClimbing.name: SolverFactory(HillClimbing),
    SimulatedAnnealing.name: SolverFactory(SimulatedAnnealing),
    RandomSearch.name: SolverFactory(RandomSearch),
}


def register_algorithm(name: str, factory: SolverFactory) -> None:
    """Register (or override) an algorithm."""
    _algorithm_registry[name] = factory


def get_algorithm(name: str) -> SolverFactory:
    factory = _algorithm_registry.get(name)
    if factory is None:
        raise UnknownAlgorithm(name)
    return factory


def list_algorithms() -> Dict[str, SolverFactory]:
    return dict(_algorithm_registry)
