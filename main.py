#!/bin/python
"""
Unified entry point for solving TSP instances with time-budgeted metaheuristics.

Example:
    python main.py -f instances/dj38.tsp -a simulated-annealing -d 5 -r 8 -p
"""
import sys

from TSPSolver.cli import main

if __name__ == "__main__":
    sys.exit(main())
