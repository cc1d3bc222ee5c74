"""
Time-budgeted search drivers over the ProblemInterface capability set.
"""

from .hill_climbing import HillClimbing
from .random_search import RandomSearch
from .registry import SolverFactory, get_algorithm, list_algorithms, register_algorithm
from .simulated_annealing import SimulatedAnnealing

__all__ = [
    'HillClimbing', 'SimulatedAnnealing', 'RandomSearch',
    'SolverFactory', 'get_algorithm', 'list_algorithms', 'register_algorithm',
]
