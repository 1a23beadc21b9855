"""Tests for building segments from a trace and computing zone area."""

import math

import pytest

from facadetrace.drawing.segments import calculate_segments, segments_to_lines, zone_area
from facadetrace.exceptions import CalibrationError
from facadetrace.geometry.primitives import LineCoords, Point, Segment
from facadetrace.settings import DrawingSettings


def test_calculate_segments_square(square_cw) -> None:
    points = square_cw + [square_cw[0]]
    segments = calculate_segments(points, 0.1, 90, color="#378566")

    assert len(segments) == 4
    assert [s.length for s in segments] == [1.0, 1.0, 1.0, 1.0]
    assert [s.angle for s in segments] == [0.0, 90.0, 180.0, 270.0]
    assert all(s.color == "#378566" for s in segments)
    assert segments[0].start_point == Point(0, 0)
    assert segments[-1].end_point == Point(0, 0)


def test_calculate_segments_needs_two_points() -> None:
    assert calculate_segments([], 0.1) == []
    assert calculate_segments([Point(1, 1)], 0.1) == []


def test_calculate_segments_skips_repeated_points(log_messages) -> None:
    points = [Point(0, 0), Point(10, 0), Point(10, 0), Point(10, 10)]
    segments = calculate_segments(points, 1.0, 90)
    assert len(segments) == 2
    assert all(not math.isnan(s.angle) for s in segments)
    assert not any("Zero-length" in msg for msg in log_messages)


def test_calculate_segments_drops_lengths_that_round_to_zero() -> None:
    points = [Point(0, 0), Point(0.2, 0), Point(100, 0)]
    segments = calculate_segments(points, 0.1, 90)
    assert len(segments) == 1
    assert segments[0].length == 10.0


def test_calculate_segments_honours_settings() -> None:
    settings = DrawingSettings(length_decimals=3, orientation_tolerance=1.0)
    segments = calculate_segments([Point(0, 0), Point(3, 4)], 0.01234, None, settings=settings)
    assert segments[0].length == round(5 * 0.01234, 3)


def test_segments_to_lines_closes_loop(square_cw) -> None:
    segments = calculate_segments(square_cw, 1.0, 90)
    lines = segments_to_lines(segments)
    # the open trace has 3 segments; the loop closes back onto the first start point
    assert lines[-1] == LineCoords(10, 10, 0, 0)
    assert len(lines) == 3


def test_zone_area_end_to_end(square_cw) -> None:
    segments = calculate_segments(square_cw + [square_cw[0]], 0.1, 90)
    assert [s.length for s in segments] == [1.0] * 4
    assert math.isclose(zone_area(segments, 0.1), 1.0)


def test_zone_area_requires_three_segments(log_messages) -> None:
    segments = [
        Segment(Point(0, 0), Point(10, 0), 1.0, 0.0),
        Segment(Point(10, 0), Point(10, 10), 1.0, 90.0),
    ]
    assert zone_area(segments, 0.1) == 0.0
    assert any("at least 3" in msg for msg in log_messages)


def test_calculate_segments_takes_rounding_from_settings() -> None:
    # Top edge rises 3 px over 100 px, which is diagonal under the default tolerance
    points = [Point(0, 0), Point(100, 3), Point(100, 50), Point(0, 50), Point(0, 0)]
    rounded = calculate_segments(points, 0.1, settings=DrawingSettings(round_angle_to=90))
    assert [s.angle for s in rounded] == [0.0, 90.0, 180.0, 270.0]

    unrounded = calculate_segments(points, 0.1, 0, settings=DrawingSettings(round_angle_to=90))
    assert math.isclose(unrounded[0].angle, math.degrees(math.atan2(3, 100)))
    assert [s.angle for s in unrounded[1:]] == [90.0, 180.0, 270.0]


def test_calculate_segments_diagonal_rounding_from_settings() -> None:
    points = [Point(0, 0), Point(100, 30), Point(100, 100), Point(0, 100), Point(0, 0)]
    exact = calculate_segments(points, 0.1, 0)
    assert not exact[0].angle.is_integer()

    rounded = calculate_segments(points, 0.1, settings=DrawingSettings(round_angle_to=45))
    assert rounded[0].angle % 45 == 0
    assert rounded[1:] == exact[1:]


@pytest.mark.parametrize("factor", [0, -0.1, math.nan, math.inf, None])
def test_calculate_segments_rejects_bad_scale(square_cw, factor) -> None:
    with pytest.raises(CalibrationError):
        calculate_segments(square_cw, factor, 90)
