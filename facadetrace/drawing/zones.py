"""Zone bookkeeping: completed traces, their facades and shared walls between zones."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from facadetrace.drawing.calibration import require_scale_factor
from facadetrace.drawing.facades import adjust_angle, facade_area, facade_name
from facadetrace.drawing.segments import zone_area
from facadetrace.exceptions import ZoneNotFoundError
from facadetrace.geometry.contract import HORIZON_SECTOR_COUNT, HORIZON_SECTOR_MAX_DEG
from facadetrace.geometry.primitives import Point, Segment
from facadetrace.geometry.snap import find_nearest_point
from facadetrace.settings import DrawingSettings, ZoneDefaults


class Facade(BaseModel):
    """One exterior wall of a zone, numbered across the whole plan."""
    model_config = ConfigDict(extra="forbid")

    number: int = Field(..., ge=1, description="Plan-wide facade number")
    start_point: Point
    end_point: Point
    length: float = Field(..., ge=0.0, description="Plan length in meters")
    angle: float = Field(..., description="Compass bearing in degrees, NaN if unknown")
    color: Optional[str] = None
    horizon_sectors: List[int] = Field(
        default_factory=lambda: [0] * HORIZON_SECTOR_COUNT,
        description="Horizon shading elevation per sector in degrees",
    )
    heat_storage: Optional[str] = Field(None, description="Heat storage classification label")

    @field_validator("horizon_sectors", mode="before")
    @classmethod
    def _clamp_sectors(cls, value: Any) -> List[int]:
        if value is None:
            return [0] * HORIZON_SECTOR_COUNT
        values = list(value)
        if len(values) != HORIZON_SECTOR_COUNT:
            raise ValueError(f"horizon_sectors needs exactly {HORIZON_SECTOR_COUNT} values")
        return [min(max(int(v), 0), HORIZON_SECTOR_MAX_DEG) for v in values]

    @classmethod
    def from_segment(cls, segment: Segment, number: int) -> "Facade":
        return cls(
            number=number,
            start_point=segment.start_point,
            end_point=segment.end_point,
            length=segment.length,
            angle=segment.angle,
            color=segment.color,
        )

    def to_segment(self) -> Segment:
        return Segment(
            start_point=self.start_point,
            end_point=self.end_point,
            length=self.length,
            angle=self.angle,
            color=self.color,
        )

    def wall_area(self, roof_height: float) -> float:
        return facade_area(self.length, roof_height)

    def name(self, angle_adjustment: float = 0.0) -> str:
        return facade_name(self.number, adjust_angle(self.angle, angle_adjustment))


class ZoneConnection(BaseModel):
    """A wall traced by two zones; it is interior, so neither zone keeps it as a facade."""
    segment: Segment
    zone_id_1: int
    zone_id_2: int


class Zone(BaseModel):
    """Completed zone polygon with its facades."""
    id: int
    name: str
    facades: List[Facade] = Field(default_factory=list)
    connections: List[ZoneConnection] = Field(default_factory=list)
    area: float = Field(..., ge=0.0, description="Floor area in square meters")
    roof_height: float = Field(..., gt=0.0, description="Roof height in meters")
    angle_adjustment: float = Field(0.0, description="Plan rotation from north in degrees")


def segments_match(a: Segment, b: Segment) -> bool:
    """Same endpoints, in either direction."""
    return (a.start_point == b.start_point and a.end_point == b.end_point) or (
        a.start_point == b.end_point and a.end_point == b.start_point
    )


class ZoneRegistry:
    """In-memory list of completed zones with plan-wide facade numbering."""
    
    def __init__(self, defaults: ZoneDefaults | None = None, drawing: DrawingSettings | None = None):
        self.defaults = defaults or ZoneDefaults()
        self.drawing = drawing or DrawingSettings()
        self.zones: List[Zone] = []
        self.connections: List[ZoneConnection] = []
        self.zone_counter = 0
    
    def _find_matching_facade(self, segment: Segment) -> Optional[Tuple[Zone, int]]:
        for zone in self.zones:
            for index, facade in enumerate(zone.facades):
                if segments_match(facade.to_segment(), segment):
                    return zone, index
        return None
    
    def _renumber(self) -> int:
        """Renumber every facade 1..N in zone order; returns the next free number."""
        number = 1
        for zone in self.zones:
            for facade in zone.facades:
                facade.number = number
                number += 1
        return number
    
    def add_zone(
        self,
        segments: Sequence[Segment],
        meters_per_pixel: float | None = None,
        roof_height: float | None = None,
        angle_adjustment: float | None = None,
    ) -> Zone:
        """
        Register a finished trace as a new zone.

        Segments that retrace a facade of an earlier zone become connections:
        the earlier zone loses that facade and the new zone does not gain it.
        The new zone's area still includes the connection segments.

        Raises:
            CalibrationError: If the scale factor is not a finite positive number.
        """
        mpp = require_scale_factor(
            self.defaults.meters_per_pixel if meters_per_pixel is None else meters_per_pixel
        )
        height = self.defaults.roof_height_m if roof_height is None else roof_height
        adjustment = self.defaults.angle_adjustment_deg if angle_adjustment is None else angle_adjustment

        zone_id = self.zone_counter
        self.zone_counter += 1

        new_segments: List[Segment] = []
        connection_segments: List[Segment] = []
        connections: List[ZoneConnection] = []
        for segment in segments:
            match = self._find_matching_facade(segment)
            if match is None:
                new_segments.append(segment)
                continue
            other, index = match
            connection_segments.append(segment)
            connections.append(ZoneConnection(segment=segment, zone_id_1=other.id, zone_id_2=zone_id))
            del other.facades[index]
            logger.bind(zone_id=zone_id).debug("Segment shared between zone {} and zone {}", other.id, zone_id)

        number = self._renumber()
        facades = [Facade.from_segment(segment, number + offset) for offset, segment in enumerate(new_segments)]

        zone = Zone(
            id=zone_id,
            name=f"Zone {len(self.zones) + 1}",
            facades=facades,
            connections=connections,
            area=zone_area(new_segments + connection_segments, mpp),
            roof_height=height,
            angle_adjustment=adjustment,
        )
        self.zones.append(zone)
        self.connections.extend(connections)
        logger.bind(zone_id=zone_id).debug(
            "Added {} with {} facade(s), {} connection(s), area {:.2f} m2",
            zone.name, len(facades), len(connections), zone.area,
        )
        return zone
    
    def get_zone(self, zone_id: int) -> Zone:
        for zone in self.zones:
            if zone.id == zone_id:
                return zone
        raise ZoneNotFoundError("Zone not found", {"zone_id": str(zone_id)})
    
    def update_facade(self, zone_id: int, index: int, **changes: Any) -> Facade:
        """Validate ``changes`` against the facade model and replace facade ``index`` of a zone."""
        zone = self.get_zone(zone_id)
        if not 0 <= index < len(zone.facades):
            raise ZoneNotFoundError(
                "Facade not found", {"zone_id": str(zone_id), "index": str(index)}
            )
        current = zone.facades[index]
        updated = Facade.model_validate({**current.model_dump(), **changes})
        zone.facades[index] = updated
        return updated
    
    def all_facades(self) -> List[Facade]:
        return [facade for zone in self.zones for facade in zone.facades]
    
    def total_area(self) -> float:
        return sum(zone.area for zone in self.zones)
    
    def snap_candidates(self, current_points: Sequence[Point] = ()) -> List[Point]:
        """
        Points a new click may snap to, in priority order.

        Facade endpoints of completed zones come first, then the points of the
        trace in progress. Walls that became connections are no longer facades
        and are not offered.
        """
        candidates: List[Point] = []
        for zone in self.zones:
            for facade in zone.facades:
                candidates.append(facade.start_point)
                candidates.append(facade.end_point)
        candidates.extend(current_points)
        return candidates
    
    def snap(self, position: Point, current_points: Sequence[Point] = ()) -> Point:
        """Snap ``position`` to the first candidate within ``drawing.snap_distance_px``, else keep it."""
        nearest = find_nearest_point(
            position, self.snap_candidates(current_points), self.drawing.snap_distance_px
        )
        return position if nearest is None else nearest
