"""
Error taxonomy shared by the reader, the search layer and the batch runner.

Every exception keeps its constructor arguments in ``args`` so instances
survive pickling across worker processes.
"""

from __future__ import annotations


class TSPSolverError(Exception):
    """Base class for all solver errors."""


class InstanceNotFound(TSPSolverError):
    def __init__(self, path: str, reason: str = ""):
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        if self.reason:
            return f"Problem instance not found: {self.path} ({self.reason})"
        return f"Problem instance not found: {self.path}"


class ParseError(TSPSolverError):
    """Malformed point data. ``line_no`` is 1-based."""

    def __init__(self, line_no: int, line: str):
        super().__init__(line_no, line)
        self.line_no = line_no
        self.line = line

    def _describe(self) -> str:
        return "malformed line"

    def __str__(self) -> str:
        return f"line {self.line_no}: {self._describe()}: {self.line!r}"


class CoordLineTooShort(ParseError):
    def _describe(self) -> str:
        return "line too short"


class UnparsableCoord(ParseError):
    def _describe(self) -> str:
        return "node coord must be numerical"


class DuplicatePointId(ParseError):
    def _describe(self) -> str:
        return "duplicate point id"


class UnknownAlgorithm(TSPSolverError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown algorithm: {self.name!r}"


class RunFailure(TSPSolverError):
    """Catch-all for an unexpected fault inside a single run."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return self.reason


class TourConstructionError(TSPSolverError):
    """Raised when a constructor produces something that is not a permutation."""
