"""Pure geometry core: angles, polygon predicates, orientation, length, snapping."""

from .primitives import Point, Segment, LineCoords, LineType, DrawingDirection
from .angles import normalize_angle, round_angle
from .measure import calculate_length, midpoint
from .polygon import (
    is_left, is_point_in_polygon, get_drawing_direction,
    extract_vertices, order_vertices, shoelace_area,
    calculate_polygon_area_from_lines,
)
from .orientation import get_line_type, get_diagonal_direction, determine_orientation
from .snap import find_nearest_point
