"""Snapping of pointer positions onto already drawn points."""

from __future__ import annotations

import math
from typing import Iterable

from facadetrace.geometry.contract import SNAP_DISTANCE_PX
from facadetrace.geometry.primitives import Point


def find_nearest_point(
    position: Point,
    candidates: Iterable[Point],
    snap_distance: float = SNAP_DISTANCE_PX,
) -> Point | None:
    """
    Return the first candidate within ``snap_distance`` pixels of ``position``.

    This is first-match, not nearest-match: when several candidates are in
    range the order of ``candidates`` decides. Returns None when nothing is in
    range.
    """
    for point in candidates:
        if math.hypot(position.x - point.x, position.y - point.y) <= snap_distance:
            return point
    return None
