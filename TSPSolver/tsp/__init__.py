"""
TSP model: points, distance matrix, tours, constructors and the problem adapter.
"""

from .adapter import TSPProblem
from .construction import CONSTRUCTORS, get_constructor, greedy_tour, random_tour
from .distance import build_distance_matrix, tour_length
from .instance import Point, TSPInstance
from .reader import parse_instance, parse_points, read_instance
from .tour import TourCandidate, rank_tour, reverse_segment, two_opt_move

__all__ = [
    'Point', 'TSPInstance', 'TSPProblem', 'TourCandidate',
    'build_distance_matrix', 'tour_length',
    'random_tour', 'greedy_tour', 'CONSTRUCTORS', 'get_constructor',
    'reverse_segment', 'two_opt_move', 'rank_tour',
    'parse_points', 'parse_instance', 'read_instance',
]
