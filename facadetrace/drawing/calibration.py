"""
Scale Calibration

Establishes the meters-per-pixel factor from a reference line of known length
and rescales values measured under a previous factor.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any, List, Sequence

from loguru import logger

from facadetrace.exceptions import CalibrationError
from facadetrace.geometry.angles import is_number
from facadetrace.geometry.contract import LENGTH_DECIMALS
from facadetrace.geometry.primitives import Point, Segment
from facadetrace.settings import DrawingSettings


def _is_positive(value: Any) -> bool:
    return is_number(value) and math.isfinite(value) and value > 0.0


def require_scale_factor(meters_per_pixel: Any) -> float:
    """Return ``meters_per_pixel`` as a float, or raise if it is not a finite positive number."""
    if not _is_positive(meters_per_pixel):
        raise CalibrationError(
            "Scale factor must be a finite positive number",
            {"meters_per_pixel": str(meters_per_pixel)},
        )
    return float(meters_per_pixel)


def calibrate_meters_per_pixel(
    start: Point,
    end: Point,
    known_length_m: float,
    *,
    min_length_px: float | None = None,
    settings: DrawingSettings | None = None,
) -> float:
    """Meters per pixel given a reference line ``start -> end`` that is ``known_length_m`` long.

    ``min_length_px`` defaults to ``settings.min_calibration_length_px``.

    Raises:
        CalibrationError: If the known length is not a positive number or the
            line is shorter than the minimum length.
    """
    if min_length_px is None:
        min_length_px = (settings or DrawingSettings()).min_calibration_length_px
    if not _is_positive(known_length_m):
        raise CalibrationError(
            "Known measurement must be a positive length",
            {"known_length_m": str(known_length_m)},
        )
    pixel_length = math.hypot(end.x - start.x, end.y - start.y)
    if pixel_length < min_length_px:
        raise CalibrationError(
            f"Calibration line too short: {pixel_length:.2f}px < {min_length_px:.2f}px",
            {"pixel_length": f"{pixel_length:.4f}"},
        )
    meters_per_pixel = known_length_m / pixel_length
    logger.debug("Calibrated scale: {:.0f} mm/px", meters_per_pixel * 1000.0)
    return meters_per_pixel


def _scale_ratio(old_factor: float, new_factor: float) -> float:
    if not (_is_positive(old_factor) and _is_positive(new_factor)):
        raise CalibrationError(
            "Scale factors must be strictly positive",
            {"old_factor": str(old_factor), "new_factor": str(new_factor)},
        )
    return new_factor / old_factor


def rescale_length(value: float, old_factor: float, new_factor: float) -> float:
    return value * _scale_ratio(old_factor, new_factor)


def rescale_area(value: float, old_factor: float, new_factor: float) -> float:
    """Areas scale with the square of the factor ratio."""
    ratio = _scale_ratio(old_factor, new_factor)
    return value * ratio * ratio


def recalibrate_segments(
    segments: Sequence[Segment],
    old_factor: float,
    new_factor: float,
    *,
    decimals: int = LENGTH_DECIMALS,
) -> List[Segment]:
    """Copies of ``segments`` with lengths re-expressed under ``new_factor``."""
    ratio = _scale_ratio(old_factor, new_factor)
    return [replace(segment, length=round(segment.length * ratio, decimals)) for segment in segments]
