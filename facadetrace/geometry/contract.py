"""
Drawing Geometry Contract

Single source of truth for the thresholds, tolerances and defaults used by the
geometry and drawing modules. Callers pass these explicitly (or through
``facadetrace.settings.DrawingSettings``); nothing reads them as hidden state.
"""

from __future__ import annotations

# Pixel-space values end with _PX; metric values end with _M

# Snapping
SNAP_DISTANCE_PX = 5.0  # px radius for snapping to an existing point

# Orientation inference
TEST_POINT_OFFSET_PX = 1.0  # px offset of the point-in-polygon probe
ORIENTATION_TOLERANCE = 35.0  # |dx|/|dy| ratio for nearly horizontal/vertical lines

# Angle rounding
DEFAULT_ROUND_ANGLE_TO = 90.0  # degrees
ROUND_ANGLE_CHOICES: tuple[float, ...] = (1.0, 5.0, 10.0, 45.0, 90.0)

# Lengths
LENGTH_DECIMALS = 1  # decimals kept on segment lengths (m)

# Calibration
MIN_CALIBRATION_LENGTH_PX = 5.0  # px
DEFAULT_METERS_PER_PIXEL = 0.15  # m/px

# Zones / facades
DEFAULT_ROOF_HEIGHT_M = 2.7  # m
HORIZON_SECTOR_COUNT = 4
HORIZON_SECTOR_MAX_DEG = 90  # degrees above the horizon
