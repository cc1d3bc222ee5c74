"""
Batch runner: many independent searches over one shared instance.

Runs are isolated from each other. Each one gets its own random stream
spawned from a single SeedSequence, and any exception it raises becomes that
run's recorded failure instead of aborting the batch. In parallel mode runs
are grouped into batches no larger than the worker count; a batch must
finish completely before the next one is submitted.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Type

import numpy as np

from ..core.config import RunConfig
from ..core.errors import RunFailure, TSPSolverError
from ..search.registry import get_algorithm
from ..tsp.adapter import TSPProblem
from ..tsp.instance import TSPInstance
from ..tsp.tour import TourCandidate

_EXECUTORS: Dict[str, Type[Executor]] = {
    "process": ProcessPoolExecutor,
    "thread": ThreadPoolExecutor,
}


@dataclass
class RunOutcome:
    """Result of one run: a tour on success, an error otherwise."""
    run_index: int
    tour: Optional[TourCandidate] = None
    error: Optional[TSPSolverError] = None
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None and self.tour is not None

    @property
    def length(self) -> Optional[float]:
        return self.tour.length if self.tour is not None else None


@dataclass
class BatchReport:
    """All run outcomes in run order, plus aggregation helpers."""
    outcomes: List[RunOutcome] = field(default_factory=list)

    @property
    def successes(self) -> List[RunOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failures(self) -> List[RunOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def best(self) -> Optional[RunOutcome]:
        """Shortest successful run, or None when every run failed."""
        successes = self.successes
        if not successes:
            return None
        return min(successes, key=lambda o: o.tour.length)

    @property
    def best_length(self) -> Optional[float]:
        best = self.best
        return best.length if best is not None else None

    def __len__(self) -> int:
        return len(self.outcomes)


def partition_runs(run_count: int, workers: int) -> List[int]:
    """Split ``run_count`` runs into consecutive batch sizes of at most ``workers``.

    >>> partition_runs(10, 4)
    [4, 4, 2]
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if run_count < 0:
        raise ValueError(f"run_count must be non-negative, got {run_count}")
    full, remainder = divmod(run_count, workers)
    batches = [workers] * full
    if remainder:
        batches.append(remainder)
    return batches


def available_workers(config: RunConfig) -> int:
    return int(config.workers or os.cpu_count() or 1)


def spawn_seeds(seed: Optional[int], count: int) -> List[np.random.SeedSequence]:
    """Independent per-run seed sequences derived from one root seed."""
    return np.random.SeedSequence(seed).spawn(count)


def execute_run(
    instance: TSPInstance,
    config: RunConfig,
    seed: Any = None,
    *,
    solver_kwargs: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> TourCandidate:
    """
    Perform a single search and return its best tour.

    Raises:
        UnknownAlgorithm: ``config.algorithm`` is not registered.
    """
    factory = get_algorithm(config.algorithm)
    rng = np.random.default_rng(seed)
    problem = TSPProblem(instance, rng=rng, initial_tour=config.initial_tour)
    overrides: Dict[str, Any] = dict(solver_kwargs or {})
    overrides.setdefault("rng", rng)
    overrides.setdefault("max_iterations", config.max_iterations)
    if logger is not None:
        overrides.setdefault("logger", logger)
    solver = factory.build(problem, config.time_budget, overrides)
    return solver.run()


def _guarded_run(
    instance: TSPInstance,
    config: RunConfig,
    run_index: int,
    seed: Any,
    solver_kwargs: Optional[Dict[str, Any]],
    logger: Optional[logging.Logger],
) -> RunOutcome:
    log = logger or logging.getLogger(__name__)
    started = time.perf_counter()
    try:
        tour = execute_run(instance, config, seed, solver_kwargs=solver_kwargs, logger=logger)
    except TSPSolverError as exc:
        log.error(f"Run #{run_index + 1} failed: {exc}")
        return RunOutcome(run_index, error=exc, elapsed=time.perf_counter() - started)
    except Exception as exc:
        log.exception(f"Run #{run_index + 1} crashed")
        failure = RunFailure(f"{type(exc).__name__}: {exc}")
        return RunOutcome(run_index, error=failure, elapsed=time.perf_counter() - started)
    elapsed = time.perf_counter() - started
    log.info(f"Run #{run_index + 1} finished: length={tour.length:.4f}, elapsed={elapsed:.2f}s")
    return RunOutcome(run_index, tour=tour, elapsed=elapsed)


def run_batch(
    instance: TSPInstance,
    config: RunConfig,
    *,
    solver_kwargs: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> BatchReport:
    """
    Execute ``config.run_count`` independent searches and collect every outcome.

    Args:
        instance: Shared, read-only problem instance.
        config: Batch settings (algorithm, budget, run count, parallelism, seed).
        solver_kwargs: Extra keyword arguments for the search driver,
            e.g. simulated annealing temperatures.
        logger: Logger for batch and run messages.

    Returns:
        A BatchReport whose outcomes are in run order.
    """
    log = logger or logging.getLogger(__name__)
    seeds = spawn_seeds(config.seed, config.run_count)
    mode = "parallel" if config.parallel else "sequential"
    log.info(
        f"Starting {config.run_count} {mode} run(s) of {config.algorithm} on "
        f"{instance.name or 'instance'} ({instance.dimension} points), "
        f"budget {config.time_budget}s per run"
    )

    if config.parallel:
        outcomes = _run_parallel(instance, config, seeds, solver_kwargs, logger, log)
    else:
        outcomes = [
            _guarded_run(instance, config, idx, seed, solver_kwargs, logger)
            for idx, seed in enumerate(seeds)
        ]

    report = BatchReport(outcomes)
    if report.best is None:
        log.warning(f"No successful run out of {len(report)}")
    else:
        log.info(
            f"Batch finished: {len(report.successes)} succeeded, {len(report.failures)} failed, "
            f"best length {report.best_length:.4f}"
        )
    return report


def _run_parallel(
    instance: TSPInstance,
    config: RunConfig,
    seeds: Sequence[np.random.SeedSequence],
    solver_kwargs: Optional[Dict[str, Any]],
    logger: Optional[logging.Logger],
    log: logging.Logger,
) -> List[RunOutcome]:
    workers = available_workers(config)
    executor_cls = _EXECUTORS[config.executor]
    batches = partition_runs(len(seeds), workers)
    log.debug(f"Using {workers} worker(s) ({config.executor}), batches {batches}")

    outcomes: List[RunOutcome] = []
    next_index = 0
    for batch_no, size in enumerate(batches, 1):
        indices = range(next_index, next_index + size)
        next_index += size
        # A fresh pool per batch; leaving the block joins every worker
        futures: Dict[int, Future] = {}
        submit_errors: Dict[int, BaseException] = {}
        with executor_cls(max_workers=size) as pool:
            for idx in indices:
                try:
                    futures[idx] = pool.submit(
                        _guarded_run, instance, config, idx, seeds[idx], solver_kwargs, logger
                    )
                except Exception as exc:
                    # A sibling already broke the pool
                    submit_errors[idx] = exc
        for idx in indices:
            try:
                if idx in submit_errors:
                    raise submit_errors[idx]
                outcomes.append(futures[idx].result())
            except Exception as exc:
                # Worker died or the task could not be shipped to it
                log.error(f"Run #{idx + 1} lost its worker: {type(exc).__name__}: {exc}")
                outcomes.append(RunOutcome(idx, error=RunFailure(f"{type(exc).__name__}: {exc}")))
        log.debug(f"Batch {batch_no}/{len(batches)} done")
    return outcomes


def solve(
    instance: TSPInstance,
    algorithm: str,
    run_count: int,
    time_budget: float,
    parallel: bool = False,
    **options: Any,
) -> BatchReport:
    """Convenience wrapper building a RunConfig from keyword arguments."""
    logger = options.pop("logger", None)
    solver_kwargs = options.pop("solver_kwargs", None)
    config = RunConfig(
        algorithm=algorithm,
        run_count=run_count,
        time_budget=time_budget,
        parallel=parallel,
        **options,
    )
    return run_batch(instance, config, solver_kwargs=solver_kwargs, logger=logger)
