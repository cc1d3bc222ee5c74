"""
TSP local-search solver.

A TSP problem adapter for generic time-budgeted search drivers (hill
climbing, simulated annealing, random search) plus a batch runner that
executes many independent searches, optionally in parallel, and reports
the best tour.
"""

from .core.config import RunConfig
from .runner.orchestrator import BatchReport, RunOutcome, run_batch, solve
from .search.registry import get_algorithm, list_algorithms
from .tsp.adapter import TSPProblem
from .tsp.instance import Point, TSPInstance
from .tsp.reader import parse_points, read_instance
from .tsp.tour import TourCandidate

__version__ = "0.1.0"
__all__ = [
    'RunConfig', 'BatchReport', 'RunOutcome', 'run_batch', 'solve',
    'get_algorithm', 'list_algorithms',
    'TSPProblem', 'Point', 'TSPInstance', 'TourCandidate',
    'parse_points', 'read_instance',
    '__version__',
]
