"""
Polygon predicates and area

Point-in-polygon by winding number, trace direction by signed area, and the
area of a zone rebuilt from an unordered bag of boundary lines.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence

from facadetrace.geometry.primitives import DrawingDirection, LineCoords, Point


def is_left(p1: Point, p2: Point, point: Point) -> float:
    """Cross product sign: > 0 if ``point`` is left of p1 -> p2, < 0 if right, 0 if on the line."""
    return (p2.x - p1.x) * (point.y - p1.y) - (point.x - p1.x) * (p2.y - p1.y)


def is_point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """
    Nonzero winding number containment test.

    The polygon is treated as closed (last vertex connects back to the first).
    Self-intersecting or degenerate input is handled exactly as the winding
    number algorithm handles it. Points on the boundary are not special-cased:
    upward edges count the lower endpoint and downward edges the upper one,
    whatever that yields.
    """
    winding_number = 0
    n = len(polygon)
    for i in range(n):
        p1 = polygon[i]
        p2 = polygon[(i + 1) % n]
        if p1.y <= point.y:
            if p2.y > point.y and is_left(p1, p2, point) > 0:
                winding_number += 1
        else:
            if p2.y <= point.y and is_left(p1, p2, point) < 0:
                winding_number -= 1
    return winding_number != 0


def get_drawing_direction(points: Sequence[Point]) -> DrawingDirection:
    """
    Trace direction of a closed point sequence.

    Uses the signed sum of (x_{i+1} - x_i) * (y_{i+1} + y_i); in y-down pixel
    space a negative sum is clockwise on screen. A zero sum (degenerate input)
    reports counterclockwise.
    """
    total = 0.0
    n = len(points)
    for i in range(n):
        current = points[i]
        nxt = points[(i + 1) % n]
        total += (nxt.x - current.x) * (nxt.y + current.y)
    return DrawingDirection.CLOCKWISE if total < 0 else DrawingDirection.COUNTERCLOCKWISE


def extract_vertices(lines: Iterable[LineCoords]) -> List[Point]:
    """
    Unique line endpoints in first-seen order.

    Deduplication is by exact coordinate equality; nearly equal floats coming
    from independent segments stay separate vertices.
    """
    seen: dict[tuple[float, float], Point] = {}
    for line in lines:
        for key in ((line.start_x, line.start_y), (line.end_x, line.end_y)):
            if key not in seen:
                seen[key] = Point(float(key[0]), float(key[1]))
    return list(seen.values())


def order_vertices(vertices: Sequence[Point]) -> List[Point]:
    """
    Sort vertices by their angle around the centroid (ascending atan2).

    Recovers a traversal order only for polygons that are star-shaped with
    respect to their vertex centroid; other concave shapes come back in a
    self-intersecting order.
    """
    if not vertices:
        return []
    cx = sum(v.x for v in vertices) / len(vertices)
    cy = sum(v.y for v in vertices) / len(vertices)
    return sorted(vertices, key=lambda v: math.atan2(v.y - cy, v.x - cx))


def shoelace_area(vertices: Sequence[Point]) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    n = len(vertices)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += vertices[i].x * vertices[j].y
        area -= vertices[j].x * vertices[i].y
    return abs(area) / 2.0


def calculate_polygon_area_from_lines(lines: Iterable[LineCoords]) -> float:
    """
    Area (px^2) of the polygon bounded by ``lines``, given in any order.

    Vertices are deduplicated, ordered around their centroid and fed to the
    shoelace formula. The result is only correct for star-shaped polygons;
    anything else silently yields the area of the reordered outline.
    """
    return shoelace_area(order_vertices(extract_vertices(lines)))
