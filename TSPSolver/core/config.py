"""
Batch configuration shared by the CLI and the runner.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Literal, Optional

ExecutorKind = Literal["process", "thread"]

INITIAL_TOUR_CHOICES = ("random", "greedy")
EXECUTOR_CHOICES = ("process", "thread")

# Accepted JSON value types per field; None is allowed where the field is Optional
_FIELD_TYPES = {
    "algorithm": (str,),
    "time_budget": (int, float),
    "run_count": (int,),
    "parallel": (bool,),
    "workers": (int,),
    "executor": (str,),
    "seed": (int,),
    "initial_tour": (str,),
    "max_iterations": (int,),
}
_OPTIONAL_FIELDS = {"workers", "seed", "max_iterations"}


@dataclass(frozen=True)
class RunConfig:
    """Settings for one batch of independent searches."""
    algorithm: str = "hill-climbing"
    time_budget: float = 5.0
    run_count: int = 1
    parallel: bool = False
    workers: Optional[int] = None
    executor: ExecutorKind = "process"
    seed: Optional[int] = None
    initial_tour: str = "random"
    max_iterations: Optional[int] = None

    def __post_init__(self) -> None:
        if self.time_budget < 0:
            raise ValueError(f"time_budget must be non-negative, got {self.time_budget}")
        if self.run_count < 0:
            raise ValueError(f"run_count must be non-negative, got {self.run_count}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.executor not in EXECUTOR_CHOICES:
            raise ValueError(f"Unsupported executor: {self.executor}")
        if self.initial_tour not in INITIAL_TOUR_CHOICES:
            raise ValueError(f"Unsupported initial tour strategy: {self.initial_tour}")
        if self.max_iterations is not None and self.max_iterations < 0:
            raise ValueError(f"max_iterations must be non-negative, got {self.max_iterations}")
        # The algorithm name is resolved per run so a typo fails each run, not the batch.

    def with_overrides(self, **overrides: Any) -> "RunConfig":
        """Return a copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def to_json_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RunConfig":
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a JSON object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        for key, value in data.items():
            if value is None and key in _OPTIONAL_FIELDS:
                continue
            expected = _FIELD_TYPES[key]
            # bool is an int subclass but never a valid number here
            if not isinstance(value, expected) or (isinstance(value, bool) and bool not in expected):
                raise ValueError(f"Config key {key!r} has invalid value {value!r}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str | Path) -> "RunConfig":
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))
