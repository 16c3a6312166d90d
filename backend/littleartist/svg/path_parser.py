"""Path command interpreter for the M, L, C, Q, Z subset (absolute only).

Consumes the token tuple from the tokenizer with an explicit cursor and emits
a VectorPath. Never raises: an incomplete argument group is skipped and an
unsupported command stops interpretation, returning the operations emitted so
far.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from littleartist.models.geometry import (
    ORIGIN,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathOperation,
    Point,
    QuadCurveTo,
    VectorPath,
)
from littleartist.svg.tokenizer import parse_number, tokenize

logger = logging.getLogger(__name__)

# Coordinate pairs consumed per repetition of each command.
_POINTS_PER_GROUP: dict[str, int] = {"M": 1, "L": 1, "C": 3, "Q": 2, "Z": 0}


def _read_points(tokens: Sequence[str], idx: int, count: int) -> tuple[list[Point], int] | None:
    """Read `count` coordinate pairs starting at `idx`.

    Returns (points, next_idx), or None without consuming anything if the
    group is incomplete.
    """
    end = idx + 2 * count
    if end > len(tokens):
        return None
    values: list[float] = []
    for token in tokens[idx:end]:
        v = parse_number(token)
        if v is None:
            return None
        values.append(v)
    points = [(values[i], values[i + 1]) for i in range(0, len(values), 2)]
    return points, end


def parse_path(data: str | Sequence[str]) -> VectorPath:
    """Interpret path data (raw string or pre-built token sequence) into a VectorPath."""
    tokens = tokenize(data) if isinstance(data, str) else tuple(data)

    ops: list[PathOperation] = []
    current: Point = ORIGIN
    start: Point = ORIGIN
    moved = False
    idx = 0

    while idx < len(tokens):
        cmd = tokens[idx]
        group = _POINTS_PER_GROUP.get(cmd)
        if group is None:
            logger.debug("Path data truncated at token %r (index %d)", cmd, idx)
            break
        idx += 1

        if cmd == "Z":
            if moved:
                ops.append(ClosePath())
                current = start
            continue

        first = True
        while True:
            read = _read_points(tokens, idx, group)
            if read is None:
                # Drop the partial group and resume at the next command letter
                while idx < len(tokens) and not tokens[idx].isalpha():
                    idx += 1
                break
            points, idx = read

            if cmd == "M" and first:
                current = start = points[0]
                moved = True
                ops.append(MoveTo(current))
            elif not moved:
                # Drawing before the first move: the path has no start point yet
                pass
            elif cmd in ("M", "L"):
                # Extra pairs after M are implicit line-tos
                current = points[0]
                ops.append(LineTo(current))
            elif cmd == "C":
                c1, c2, current = points
                ops.append(CubicCurveTo(current, c1, c2))
            else:
                c, current = points
                ops.append(QuadCurveTo(current, c))
            first = False

    return VectorPath(tuple(ops))
