from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from facadetrace.exceptions import ConfigurationError
from facadetrace.geometry import contract

# Load .env file from project root
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


class DrawingSettings(BaseModel):
    """Interactive drawing tolerances handed to the geometry functions."""

    snap_distance_px: float = Field(contract.SNAP_DISTANCE_PX, gt=0.0)
    test_point_offset_px: float = Field(contract.TEST_POINT_OFFSET_PX, gt=0.0)
    orientation_tolerance: float = Field(contract.ORIENTATION_TOLERANCE, ge=1.0)
    round_angle_to: float | None = contract.DEFAULT_ROUND_ANGLE_TO
    length_decimals: int = Field(contract.LENGTH_DECIMALS, ge=0, le=6)
    min_calibration_length_px: float = Field(contract.MIN_CALIBRATION_LENGTH_PX, gt=0.0)

    @field_validator("round_angle_to", mode="before")
    @classmethod
    def _check_round_to(cls, value: Any) -> float | None:
        if value is None or value == 0:
            return None
        try:
            number = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError("round_angle_to must be numeric") from exc
        if number not in contract.ROUND_ANGLE_CHOICES:
            raise ValueError(
                f"round_angle_to must be one of {contract.ROUND_ANGLE_CHOICES}, got {number}"
            )
        return number


class ZoneDefaults(BaseModel):
    meters_per_pixel: float = Field(contract.DEFAULT_METERS_PER_PIXEL, gt=0.0)
    roof_height_m: float = Field(contract.DEFAULT_ROOF_HEIGHT_M, gt=0.0)
    angle_adjustment_deg: float = Field(0.0, ge=0.0, le=360.0)


class LoggingSettings(BaseModel):
    level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_format: bool = False
    log_file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


class Settings(BaseModel):
    drawing: DrawingSettings = Field(default_factory=DrawingSettings)
    zone: ZoneDefaults = Field(default_factory=ZoneDefaults)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def default(cls) -> "Settings":
        """Settings with every value taken from the geometry contract."""
        return cls()

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from YAML configuration file.
        
        Args:
            path: Optional path to configuration file. If not provided, uses
                FACADETRACE_CONFIG environment variable or defaults to config/default.yaml.
        
        Returns:
            Settings instance with loaded configuration.
        
        Raises:
            FileNotFoundError: If configuration file does not exist.
            ConfigurationError: If configuration is invalid.
        """
        config_path = path or Path(os.getenv("FACADETRACE_CONFIG", "config/default.yaml"))
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        with config_path.open("r", encoding="utf-8") as fp:
            try:
                payload = yaml.safe_load(fp) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(
                    f"Invalid configuration: {exc}", {"path": str(config_path)}
                ) from exc
        if not isinstance(payload, dict):
            raise ConfigurationError(
                "Invalid configuration: top level must be a mapping", {"path": str(config_path)}
            )
        try:
            return cls(**payload)
        except Exception as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}", {"path": str(config_path)}) from exc


__all__ = [
    "Settings",
    "DrawingSettings",
    "ZoneDefaults",
    "LoggingSettings",
]
