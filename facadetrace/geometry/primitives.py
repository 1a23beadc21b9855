"""Plain 2D value types shared by the geometry modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    """Pixel-space coordinate (y grows downwards)."""
    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    """One traced facade edge with calibrated length (m) and compass angle (deg)."""
    start_point: Point
    end_point: Point
    length: float
    angle: float
    color: str | None = None


@dataclass(frozen=True)
class LineCoords:
    """Flat segment record consumed by the polygon area routine."""
    start_x: float
    start_y: float
    end_x: float
    end_y: float

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "LineCoords":
        return cls(start.x, start.y, end.x, end.y)


class LineType(str, Enum):
    """Classification of a segment relative to the pixel axes."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class DrawingDirection(str, Enum):
    """Trace direction of a closed polygon in y-down pixel space."""
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"
