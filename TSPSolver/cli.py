"""
Command-line entry point: solve one instance file with a batch of runs.

Exit codes: 0 when at least one run produced a tour, 1 when every run
failed, 2 when the instance could not be loaded.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from .core.config import EXECUTOR_CHOICES, INITIAL_TOUR_CHOICES, RunConfig
from .core.errors import InstanceNotFound, ParseError
from .core.utils import int_type, non_negative_float, setup_logging
from .runner.orchestrator import BatchReport, run_batch
from .search.registry import list_algorithms
from .tsp.reader import read_instance

EXIT_OK = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_INSTANCE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tsp-solver",
        description="Helps salesman find the shortest route!",
    )
    parser.add_argument(
        "--file", "-f",
        required=True,
        help="Problem instance file (coordinate lines or TSPLIB NODE_COORD_SECTION)",
    )
    parser.add_argument(
        "--duration", "-d",
        type=non_negative_float,
        default=None,
        help="Computation duration per run in seconds (default: 5)",
    )
    parser.add_argument(
        "--algorithm", "-a",
        default=None,
        help=f"Meta-heuristics algorithm, one of {sorted(list_algorithms())} (default: hill-climbing)",
    )
    parser.add_argument(
        "--runs", "-r",
        type=int_type(0, "runs"),
        default=None,
        help="Number of algorithm runs (default: 1)",
    )
    parser.add_argument(
        "--parallel", "-p",
        action="store_true",
        default=None,
        help="Run in parallel batches bounded by the worker count",
    )
    parser.add_argument(
        "--workers",
        type=int_type(1, "workers"),
        default=None,
        help="Concurrent workers per batch (default: CPU count)",
    )
    parser.add_argument(
        "--executor",
        choices=EXECUTOR_CHOICES,
        default=None,
        help="Worker kind for parallel mode (default: process)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Root random seed for reproducible batches",
    )
    parser.add_argument(
        "--init",
        dest="initial_tour",
        choices=INITIAL_TOUR_CHOICES,
        default=None,
        help="Initial tour strategy (default: random)",
    )
    parser.add_argument(
        "--max-iterations",
        type=int_type(0, "max-iterations"),
        default=None,
        help="Optional cap on search iterations per run",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with RunConfig fields; explicit flags override it",
    )
    parser.add_argument(
        "--plot",
        default=None,
        help="Save an image of the best tour to this path",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Also append logs to <log-dir>/solve_logs.log",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    base = RunConfig.from_json(args.config) if args.config else RunConfig()
    return base.with_overrides(
        algorithm=args.algorithm,
        time_budget=args.duration,
        run_count=args.runs,
        parallel=args.parallel,
        workers=args.workers,
        executor=args.executor,
        seed=args.seed,
        initial_tour=args.initial_tour,
        max_iterations=args.max_iterations,
    )


def print_report(report: BatchReport, out: Optional[TextIO] = None) -> None:
    out = out if out is not None else sys.stdout
    for outcome in report.outcomes:
        if outcome.ok:
            print(f"#{outcome.run_index + 1} score {outcome.length}", file=out)
        else:
            print(f"#{outcome.run_index + 1} could not solve problem, error: {outcome.error}", file=out)
    best = report.best
    if best is None:
        print("No successful run", file=out)
    else:
        print(f"Best score {best.length}", file=out)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = config_from_args(args)
    except (OSError, TypeError, ValueError) as exc:
        parser.error(str(exc))

    try:
        instance = read_instance(args.file)
    except (InstanceNotFound, ParseError) as exc:
        print(f"Could not load problem instance: {exc}", file=sys.stderr)
        return EXIT_BAD_INSTANCE

    logger = setup_logging("solve", instance.name or "tsp", log_dir=args.log_dir, level=args.log_level)
    report = run_batch(instance, config, logger=logger)
    print_report(report)

    best = report.best
    if best is None:
        return EXIT_NO_SOLUTION
    if args.plot:
        from .tsp.plotting import save_tour_plot

        path = save_tour_plot(instance, best.tour, args.plot)
        logger.info(f"Best tour plot saved to {path}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
