"""
Problem-file reader.

Two layouts are accepted:

- plain coordinate lines, either ``x y`` (ids are assigned 1, 2, ...) or
  ``id x y``;
- TSPLIB files, where only the lines between ``NODE_COORD_SECTION`` and
  ``EOF`` are read and the ``NAME`` header names the instance.

A single bad line fails the whole load, since a partial point set would
describe a different problem.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from ..core.errors import (
    CoordLineTooShort,
    DuplicatePointId,
    InstanceNotFound,
    UnparsableCoord,
)
from .instance import Point, TSPInstance

_SECTION_START = "NODE_COORD_SECTION"
_SECTION_END = "EOF"


def parse_points(text: str) -> List[Point]:
    """Parse point lines into Points.

    Raises:
        CoordLineTooShort: a non-blank line has fewer than 2 tokens.
        UnparsableCoord: a token is not a finite number (or the id not an integer).
        DuplicatePointId: the same id appears twice.
    """
    points: List[Point] = []
    seen_ids = set()
    for line_no, line in _coord_lines(text):
        point = _parse_line(line_no, line, default_id=len(points) + 1)
        if point.id in seen_ids:
            raise DuplicatePointId(line_no, line)
        seen_ids.add(point.id)
        points.append(point)
    return points


def parse_instance(text: str, *, name: Optional[str] = None) -> TSPInstance:
    return TSPInstance(parse_points(text), name=name or _header_name(text))


def read_instance(path: str | Path) -> TSPInstance:
    """Read and parse an instance file.

    Raises:
        InstanceNotFound: the file is missing or unreadable.
        ParseError: see parse_points.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise InstanceNotFound(str(p), exc.strerror or type(exc).__name__) from exc
    except UnicodeDecodeError as exc:
        raise InstanceNotFound(str(p), "not valid UTF-8") from exc
    return parse_instance(text, name=_header_name(text) or p.stem)


def _coord_lines(text: str) -> Iterator[Tuple[int, str]]:
    lines = text.splitlines()
    start = 0
    tsplib = any(line.strip().upper() == _SECTION_START for line in lines)
    if tsplib:
        start = next(i for i, line in enumerate(lines) if line.strip().upper() == _SECTION_START) + 1
    for idx in range(start, len(lines)):
        line = lines[idx].strip()
        if tsplib and line.upper() == _SECTION_END:
            break
        if not line:
            continue
        yield idx + 1, line


def _parse_line(line_no: int, line: str, *, default_id: int) -> Point:
    tokens = line.split()
    if len(tokens) < 2:
        raise CoordLineTooShort(line_no, line)
    values = []
    for token in tokens[:3]:
        try:
            value = float(token)
        except ValueError:
            raise UnparsableCoord(line_no, line) from None
        if not math.isfinite(value):
            raise UnparsableCoord(line_no, line)
        values.append(value)

    if len(values) == 2:
        return Point(default_id, values[0], values[1])
    if not values[0].is_integer():
        raise UnparsableCoord(line_no, line)
    return Point(int(values[0]), values[1], values[2])


def _header_name(text: str) -> Optional[str]:
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.upper() == _SECTION_START:
            return None
        key, sep, value = stripped.partition(":")
        if sep and key.strip().upper() == "NAME":
            return value.strip() or None
    return None
