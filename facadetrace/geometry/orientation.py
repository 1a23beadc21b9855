"""
Facade Orientation Inference

Derives the compass bearing a traced facade faces (0 = North, 90 = East,
180 = South, 270 = West) from its direction and the zone polygon it bounds.
Axis-aligned segments probe which side the interior lies on; diagonal
segments use the perpendicular vector corrected for the trace direction.
"""

from __future__ import annotations

import math
from typing import Sequence

from loguru import logger

from facadetrace.geometry.angles import round_angle
from facadetrace.geometry.contract import ORIENTATION_TOLERANCE, TEST_POINT_OFFSET_PX
from facadetrace.geometry.measure import midpoint
from facadetrace.geometry.polygon import get_drawing_direction, is_point_in_polygon
from facadetrace.geometry.primitives import DrawingDirection, LineType, Point


def get_line_type(dx: float, dy: float, tolerance: float = ORIENTATION_TOLERANCE) -> LineType:
    """
    Classify a segment by the ratio of its extents.

    Horizontal if |dx| > |dy| * tolerance, vertical if |dy| > |dx| * tolerance,
    diagonal otherwise. Both comparisons are strict, so with tolerance 1 a
    segment with |dx| == |dy| is diagonal.
    """
    if abs(dx) > abs(dy) * tolerance:
        return LineType.HORIZONTAL
    if abs(dy) > abs(dx) * tolerance:
        return LineType.VERTICAL
    return LineType.DIAGONAL


def get_diagonal_direction(start: Point, end: Point) -> str | None:
    """Screen direction of an exactly diagonal segment (|dx| == |dy|), else None."""
    dx = end.x - start.x
    dy = end.y - start.y
    if abs(dx) != abs(dy):
        return None
    if (dx > 0 and dy < 0) or (dx < 0 and dy > 0):
        return "top-right to bottom-left"
    return "top-left to bottom-right"


def _axis_aligned_orientation(
    mid: Point,
    line_type: LineType,
    polygon: Sequence[Point],
    test_point_offset: float,
) -> float:
    # Horizontal: interior just below the midpoint means the wall faces North
    if line_type is LineType.HORIZONTAL:
        probe = Point(mid.x, mid.y + test_point_offset)
        return 0.0 if is_point_in_polygon(probe, polygon) else 180.0
    # Vertical: interior just right of the midpoint means the wall faces West
    probe = Point(mid.x + test_point_offset, mid.y)
    return 270.0 if is_point_in_polygon(probe, polygon) else 90.0


def _diagonal_orientation(dx: float, dy: float, length: float, polygon: Sequence[Point]) -> float:
    perp_dx = -dy / length
    perp_dy = dx / length
    direction = get_drawing_direction(polygon)
    angle_offset = 90.0 if direction is DrawingDirection.CLOCKWISE else -90.0

    angle = math.degrees(math.atan2(perp_dy, perp_dx))
    angle = math.fmod(angle + 360.0 - angle_offset, 360.0)
    while angle < 0.0:
        angle += 360.0
    while angle >= 360.0:
        angle -= 360.0
    return angle


def determine_orientation(
    start: Point,
    end: Point,
    polygon: Sequence[Point],
    round_angle_to: float | None = None,
    *,
    tolerance: float = ORIENTATION_TOLERANCE,
    test_point_offset: float = TEST_POINT_OFFSET_PX,
) -> float:
    """
    Compass bearing (degrees) the facade ``start -> end`` of ``polygon`` faces.

    Args:
        start: Segment start in pixel space.
        end: Segment end in pixel space.
        polygon: The closed zone outline the segment belongs to.
        round_angle_to: Rounding quantum in degrees; falsy disables rounding.
        tolerance: Axis classification ratio, see ``get_line_type``.
        test_point_offset: Pixel offset of the containment probe.

    Returns:
        Angle in [0, 360) before rounding (rounding may yield 360). Zero-length
        segments are a caller error; they log a warning and return NaN.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    length = math.hypot(dx, dy)
    if length == 0.0:
        logger.warning("Zero-length segment at ({}, {}) has no orientation", start.x, start.y)
        return math.nan

    line_type = get_line_type(dx, dy, tolerance)
    if line_type is LineType.DIAGONAL:
        angle = _diagonal_orientation(dx, dy, length, polygon)
    else:
        angle = _axis_aligned_orientation(midpoint(start, end), line_type, polygon, test_point_offset)

    return round_angle(angle, round_angle_to)
