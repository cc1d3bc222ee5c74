"""Multi-run orchestration and result aggregation."""

from .orchestrator import (
    BatchReport,
    RunOutcome,
    available_workers,
    execute_run,
    partition_runs,
    run_batch,
    solve,
    spawn_seeds,
)

__all__ = [
    'BatchReport', 'RunOutcome', 'available_workers', 'execute_run',
    'partition_runs', 'run_batch', 'solve', 'spawn_seeds',
]
