"""
Geographic value objects shared by tile factories and their consumers.
"""

from typing import Tuple
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CRS(str, Enum):
    """Coordinate Reference Systems understood by the request builders."""
    EPSG_4326 = "EPSG:4326"


class Format(str, Enum):
    """Supported output formats."""
    GEOTIFF = "image/tiff"


class Sector(BaseModel):
    """
    Rectangular geographic region bounded by latitude and longitude, in degrees.

    Sectors may be degenerate (min equal to max) but never inverted.
    """
    min_latitude: float = Field(..., ge=-90, le=90, description="Southern edge")
    max_latitude: float = Field(..., ge=-90, le=90, description="Northern edge")
    min_longitude: float = Field(..., ge=-180, le=180, description="Western edge")
    max_longitude: float = Field(..., ge=-180, le=180, description="Eastern edge")

    model_config = ConfigDict(frozen=True)

    @field_validator("min_latitude", "max_latitude", "min_longitude", "max_longitude")
    @classmethod
    def as_float(cls, value: float) -> float:
        return float(value)

    @model_validator(mode='after')
    def validate_coordinates(self):
        """Validate that min coordinates do not exceed max coordinates."""
        if self.min_latitude > self.max_latitude:
            raise ValueError('min_latitude must not exceed max_latitude')
        if self.min_longitude > self.max_longitude:
            raise ValueError('min_longitude must not exceed max_longitude')
        return self

    @classmethod
    def from_degrees(
        cls,
        latitude: float,
        longitude: float,
        delta_latitude: float,
        delta_longitude: float,
    ) -> "Sector":
        """Create a Sector from its south-west corner and its extent."""
        return cls(
            min_latitude=latitude,
            max_latitude=latitude + delta_latitude,
            min_longitude=longitude,
            max_longitude=longitude + delta_longitude,
        )

    @property
    def delta_latitude(self) -> float:
        return self.max_latitude - self.min_latitude

    @property
    def delta_longitude(self) -> float:
        return self.max_longitude - self.min_longitude

    def intersects(self, other: "Sector") -> bool:
        """Check if this sector overlaps another with a non-empty interior."""
        return (
            self.min_latitude < other.max_latitude
            and self.max_latitude > other.min_latitude
            and self.min_longitude < other.max_longitude
            and self.max_longitude > other.min_longitude
        )

    def to_bbox(self) -> Tuple[float, float, float, float]:
        """Return ``(min_lon, min_lat, max_lon, max_lat)``."""
        return (self.min_longitude, self.min_latitude, self.max_longitude, self.max_latitude)


class Level(BaseModel):
    """One resolution level of a tile pyramid."""
    level_number: int = Field(default=0, ge=0, description="Position in the pyramid, 0 is coarsest")
    tile_delta: float = Field(default=90.0, gt=0, description="Tile edge length in degrees")
    tile_width: int = Field(..., ge=1, description="Tile width in pixels")
    tile_height: int = Field(..., ge=1, description="Tile height in pixels")

    model_config = ConfigDict(frozen=True)


class TileAddress(BaseModel):
    """Position of a tile within a pyramid."""
    level: Level
    row: int
    column: int

    model_config = ConfigDict(frozen=True)
