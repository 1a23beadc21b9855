"""Custom exception hierarchy for facadetrace."""

from __future__ import annotations


class FacadeTraceError(Exception):
    """Base exception for all facadetrace-specific errors."""
    
    def __init__(self, message: str, details: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(FacadeTraceError):
    """Raised when configuration is invalid or missing."""
    pass


class GeometryError(FacadeTraceError):
    """Raised when a geometry operation cannot produce a meaningful result."""
    pass


class CalibrationError(GeometryError):
    """Raised when a calibration line or scale factor is unusable."""
    pass


class ZoneError(FacadeTraceError):
    """Base class for zone bookkeeping errors."""
    pass


class ZoneNotFoundError(ZoneError):
    """Raised when a zone or facade is not found."""
    pass
