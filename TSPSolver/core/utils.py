"""
Shared utilities for CLI parsing and logging configuration.
"""

from typing import Callable, Optional, Union
from pathlib import Path
import argparse
import logging
import time


def parse_positive_int(spec: str, *, min_value: int, label: str) -> int:
    """Parse an integer that must be at least ``min_value``."""
    raw = (spec or "").strip()
    if not raw:
        raise ValueError(f"{label} cannot be empty")
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{label} must be an integer: {spec!r}") from exc
    if value < min_value:
        raise ValueError(f"{label} must be >= {min_value}, got {value}")
    return value


def int_type(min_value: int, label: str) -> Callable[[str], int]:
    def _parser(text: str) -> int:
        try:
            return parse_positive_int(text, min_value=min_value, label=label)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc))
    return _parser


def non_negative_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative number, got {text!r}")
    return value


def setup_logging(
    log_type: str,
    problem_name: str,
    log_dir: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO,
    session_id: Optional[int] = None,
) -> logging.Logger:
    """Sets up a logger for a solve session.

    Log records go to stderr and, when ``log_dir`` is given, are appended to
    ``<log_dir>/<log_type>_logs.log``.
    """
    # Package-level logger so module loggers under TSPSolver.* propagate to it
    logger = logging.getLogger("TSPSolver")
    logger.setLevel(level)

    # Prevent adding multiple handlers if the logger already exists
    if not logger.handlers:
        session_id = int(time.time()) if session_id is None else int(session_id)
        formatter = logging.Formatter(
            f"%(asctime)s - %(levelname)s - [Session: {session_id}]-[Problem: {problem_name}] - %(message)s"
        )

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if log_dir is not None:
            log_dir_path = Path(log_dir)
            log_dir_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir_path / f"{log_type}_logs.log", mode="a")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
