"""Turn a finished trace (ordered clicked points) into measured facade segments."""

from __future__ import annotations

from typing import List, Sequence

from loguru import logger

from facadetrace.drawing.calibration import require_scale_factor
from facadetrace.geometry.measure import calculate_length
from facadetrace.geometry.orientation import determine_orientation
from facadetrace.geometry.polygon import calculate_polygon_area_from_lines
from facadetrace.geometry.primitives import LineCoords, Point, Segment
from facadetrace.settings import DrawingSettings


def calculate_segments(
    points: Sequence[Point],
    meters_per_pixel: float,
    round_angle_to: float | None = None,
    *,
    color: str | None = None,
    settings: DrawingSettings | None = None,
) -> List[Segment]:
    """
    Build one segment per consecutive pair of drawn points.

    The full point list is the polygon used for orientation. Pairs that
    coincide in pixel space are skipped before orientation is inferred, and
    segments whose rounded length is not positive are dropped.

    Args:
        points: Clicked points in drawing order.
        meters_per_pixel: Calibration factor, finite and positive.
        round_angle_to: Angle quantum in degrees. None uses
            ``settings.round_angle_to``; 0 disables rounding.
        color: Optional display colour copied onto each segment.
        settings: Drawing tolerances (uses defaults if None)

    Returns:
        Segments in drawing order.

    Raises:
        CalibrationError: If ``meters_per_pixel`` is not a finite positive number.
    """
    meters_per_pixel = require_scale_factor(meters_per_pixel)
    if settings is None:
        settings = DrawingSettings()
    if round_angle_to is None:
        round_angle_to = settings.round_angle_to
    if len(points) < 2:
        return []

    segments: List[Segment] = []
    for start, end in zip(points, points[1:]):
        if start.x == end.x and start.y == end.y:
            continue
        length = round(calculate_length(start, end, meters_per_pixel), settings.length_decimals)
        if not length > 0:
            continue
        angle = determine_orientation(
            start,
            end,
            points,
            round_angle_to,
            tolerance=settings.orientation_tolerance,
            test_point_offset=settings.test_point_offset_px,
        )
        segments.append(Segment(start_point=start, end_point=end, length=length, angle=angle, color=color))
    return segments


def segments_to_lines(segments: Sequence[Segment]) -> List[LineCoords]:
    """Close the loop over segment start points: segment i runs to the start of segment i + 1."""
    lines: List[LineCoords] = []
    count = len(segments)
    for index, segment in enumerate(segments):
        nxt = segments[(index + 1) % count]
        lines.append(LineCoords.from_points(segment.start_point, nxt.start_point))
    return lines


def zone_area(segments: Sequence[Segment], meters_per_pixel: float) -> float:
    """Floor area (m^2) enclosed by a zone's segments; zones under 3 segments have none."""
    if len(segments) < 3:
        logger.warning("Zone area not computed: {} segment(s), at least 3 required", len(segments))
        return 0.0
    area_px = calculate_polygon_area_from_lines(segments_to_lines(segments))
    return area_px * meters_per_pixel * meters_per_pixel
