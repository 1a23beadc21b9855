"""Angle normalisation and rounding helpers (degrees)."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from loguru import logger


def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def normalize_angle(angle: Any) -> float:
    """Map ``angle`` into ``[0, 360)``.

    Non-numeric, NaN or infinite input does not raise: a warning is logged and
    ``math.nan`` is returned, so callers must check with ``math.isnan`` before
    formatting the result.
    """
    if not is_number(angle) or not math.isfinite(angle):
        logger.warning("Invalid angle: {!r}", angle)
        return math.nan
    angle = math.fmod(float(angle), 360.0)
    while angle < 0.0:
        angle += 360.0
    while angle >= 360.0:
        angle -= 360.0
    return angle


def round_angle(angle: float, step: float | None) -> float:
    """Round ``angle`` to the nearest multiple of ``step``.

    Halves round up (45 with step 90 gives 90). A falsy ``step`` means no
    rounding was requested and returns ``angle`` untouched. The result is not
    clamped into ``[0, 360)`` and NaN passes through unchanged. A non-finite
    step, or a quotient that overflows, gives NaN instead of raising.
    """
    if not step or not math.isfinite(angle):
        return angle
    if not math.isfinite(step):
        return math.nan
    quotient = angle / step + 0.5
    if not math.isfinite(quotient):
        return math.nan
    return float(math.floor(quotient) * step)
