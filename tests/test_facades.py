"""Tests for facade bearing adjustment, compass sectors and naming."""

import math

import pytest

from facadetrace.drawing.facades import (
    CompassDirection,
    adjust_angle,
    compass_direction,
    facade_area,
    facade_name,
)


def test_adjust_angle_wraps() -> None:
    assert adjust_angle(270.0, 135.0) == 45.0
    assert adjust_angle(0.0, 0.0) == 0.0


@pytest.mark.parametrize("bad", [math.nan, None, "N/A"])
def test_adjust_angle_invalid(bad) -> None:
    assert math.isnan(adjust_angle(bad, 10.0))


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, CompassDirection.NORTH),
        (9.9, CompassDirection.NORTH),
        (350.0, CompassDirection.NORTH),
        (360.0, CompassDirection.NORTH),
        (10.0, CompassDirection.NORTH_EAST),
        (90.0, CompassDirection.EAST),
        (100.0, CompassDirection.SOUTH_EAST),
        (180.0, CompassDirection.SOUTH),
        (225.0, CompassDirection.SOUTH_WEST),
        (270.0, CompassDirection.WEST),
        (349.9, CompassDirection.NORTH_WEST),
    ],
)
def test_compass_direction_bins(angle: float, expected: CompassDirection) -> None:
    assert compass_direction(angle) is expected


@pytest.mark.parametrize("angle", [-1.0, 360.5, math.nan])
def test_compass_direction_out_of_range(angle: float, log_messages) -> None:
    assert compass_direction(angle) is None
    assert log_messages


def test_facade_name() -> None:
    assert facade_name(3, 180.0) == "3 S"
    assert facade_name(4, math.nan) == "Facade 4"


def test_facade_area() -> None:
    assert math.isclose(facade_area(4.0, 2.7), 10.8)
