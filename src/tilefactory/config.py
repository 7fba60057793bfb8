"""Configuration helpers for constructing tile factories."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .errors import ConfigurationError, InvalidArgumentError
from .ogc.wcs import Wcs100TileFactory
from .types import Level


class WCS100Config(BaseModel):
    """Serializable configuration describing a WCS 1.0.0 tile factory."""

    service_address: str = Field(
        ..., min_length=1, description="WCS endpoint, optionally with a query string"
    )
    coverage: str = Field(..., min_length=1, description="Coverage name to request")
    tile_width: int = Field(default=512, ge=1, description="Default tile width in pixels")
    tile_height: int = Field(default=512, ge=1, description="Default tile height in pixels")
    tile_delta: float = Field(
        default=36.0, gt=0, description="Tile edge in degrees at the coarsest level"
    )

    @classmethod
    def from_url(cls, url: str, coverage: str, **kwargs: Any) -> "WCS100Config":
        """Convenience constructor mirroring high-level usage patterns."""

        return cls(service_address=url, coverage=coverage, **kwargs)

    def build_factory(self) -> Wcs100TileFactory:
        """Construct a ``Wcs100TileFactory`` from this configuration."""

        try:
            return Wcs100TileFactory(self.service_address, self.coverage)
        except InvalidArgumentError as exc:
            raise ConfigurationError(
                f"Invalid WCS configuration for {self.service_address!r}", cause=exc
            ) from exc

    def default_level(self, level_number: int = 0) -> Level:
        """The pyramid level ``level_number`` implied by the configured tile size and delta."""

        return Level(
            level_number=level_number,
            tile_delta=self.tile_delta / (2 ** level_number),
            tile_width=self.tile_width,
            tile_height=self.tile_height,
        )
