"""Facade labelling: north adjustment, compass sectors, names and wall areas."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from loguru import logger

from facadetrace.geometry.angles import is_number, normalize_angle


class CompassDirection(str, Enum):
    NORTH = "N"
    NORTH_EAST = "NE"
    EAST = "E"
    SOUTH_EAST = "SE"
    SOUTH = "S"
    SOUTH_WEST = "SW"
    WEST = "W"
    NORTH_WEST = "NW"


# (lower bound inclusive, upper bound exclusive, direction); North wraps around 0
_SECTORS: tuple[tuple[float, float, CompassDirection], ...] = (
    (10.0, 80.0, CompassDirection.NORTH_EAST),
    (80.0, 100.0, CompassDirection.EAST),
    (100.0, 170.0, CompassDirection.SOUTH_EAST),
    (170.0, 190.0, CompassDirection.SOUTH),
    (190.0, 260.0, CompassDirection.SOUTH_WEST),
    (260.0, 280.0, CompassDirection.WEST),
    (280.0, 350.0, CompassDirection.NORTH_WEST),
)


def adjust_angle(angle: Any, adjustment: float) -> float:
    """Rotate a facade bearing by the plan's north adjustment, normalised to [0, 360).

    Returns NaN for an invalid ``angle`` (e.g. a facade with no orientation).
    """
    if not is_number(angle) or math.isnan(angle):
        return math.nan
    return normalize_angle(angle + adjustment)


def compass_direction(angle: float) -> CompassDirection | None:
    """Compass sector of a bearing in [0, 360]; None (with a warning) for anything else."""
    if 350.0 <= angle <= 360.0 or 0.0 <= angle < 10.0:
        return CompassDirection.NORTH
    for low, high, direction in _SECTORS:
        if low <= angle < high:
            return direction
    logger.warning("Invalid angle for compass direction: {}", angle)
    return None


def facade_name(number: int, angle: float) -> str:
    direction = compass_direction(angle)
    if direction is None:
        return f"Facade {number}"
    return f"{number} {direction.value}"


def facade_area(length_m: float, roof_height_m: float) -> float:
    """Wall area of a facade: plan length times roof height."""
    return length_m * roof_height_m
