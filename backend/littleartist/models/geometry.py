"""Vector path model — the output of the template markup parser.

A VectorPath is an immutable, ordered tuple of path operations with all
coordinates absolute in the 400×400 logical canvas.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

Point = tuple[float, float]

ORIGIN: Point = (0.0, 0.0)


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CubicCurveTo:
    point: Point
    control1: Point
    control2: Point


@dataclass(frozen=True)
class QuadCurveTo:
    point: Point
    control: Point


@dataclass(frozen=True)
class ClosePath:
    pass


PathOperation = MoveTo | LineTo | CubicCurveTo | QuadCurveTo | ClosePath


@dataclass(frozen=True)
class VectorPath:
    """Ordered path operations. No implicit close, no style."""

    operations: tuple[PathOperation, ...] = ()

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self) -> Iterator[PathOperation]:
        return iter(self.operations)

    @property
    def is_empty(self) -> bool:
        return not self.operations

    @classmethod
    def concat(cls, paths: Iterable[VectorPath]) -> VectorPath:
        """Append the operations of every path, in order, into one compound path."""
        ops: list[PathOperation] = []
        for p in paths:
            ops.extend(p.operations)
        return cls(tuple(ops))


@dataclass(frozen=True)
class GeometryElement:
    """One recognised markup tag: its path plus the stroke width to draw it with."""

    path: VectorPath = field(default_factory=VectorPath)
    stroke_width: float = 3.0
    # Source tag name (circle, rect, ...)
    tag: str = "path"
