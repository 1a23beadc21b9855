"""Distance helpers in pixel space with calibration scaling."""

from __future__ import annotations

import math

from facadetrace.geometry.primitives import Point


def calculate_length(p1: Point, p2: Point, meters_per_pixel: float) -> float:
    """Euclidean distance between two pixel points, scaled to meters."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y) * meters_per_pixel


def midpoint(p1: Point, p2: Point) -> Point:
    return Point((p1.x + p2.x) / 2.0, (p1.y + p2.y) / 2.0)
