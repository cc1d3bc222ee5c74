"""
Problem-agnostic building blocks: the candidate capability interface, the
time-budgeted search base class, configuration, errors and logging.
"""

from .config import RunConfig
from .errors import (
    CoordLineTooShort,
    DuplicatePointId,
    InstanceNotFound,
    ParseError,
    RunFailure,
    TourConstructionError,
    TSPSolverError,
    UnknownAlgorithm,
    UnparsableCoord,
)
from .problem import ProblemInterface
from .search_algorithm import SearchAlgorithm
from .utils import setup_logging

__all__ = [
    'RunConfig', 'ProblemInterface', 'SearchAlgorithm', 'setup_logging',
    'TSPSolverError', 'InstanceNotFound', 'ParseError', 'CoordLineTooShort',
    'UnparsableCoord', 'DuplicatePointId', 'UnknownAlgorithm', 'RunFailure',
    'TourConstructionError',
]
