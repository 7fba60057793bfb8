"""
Tiles, the tile factory contract and tile assembly for pyramid levels.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field

from .errors import ErrorReason, invalid_argument
from .image import ImageSource
from .types import Level, Sector, TileAddress

logger = logging.getLogger(__name__)

__all__ = [
    "Tile",
    "ImageTile",
    "TileFactory",
    "assemble_tiles",
    "compute_row",
    "compute_column",
    "compute_last_row",
    "compute_last_column",
]


class Tile(BaseModel):
    """A geographic cell at a given row and column of a pyramid level."""

    sector: Sector = Field(..., description="Geographic extent of the tile")
    level: Level = Field(..., description="Pyramid level the tile belongs to")
    row: int = Field(..., description="Row index, counted from latitude -90")
    column: int = Field(..., description="Column index, counted from longitude -180")

    @property
    def address(self) -> TileAddress:
        return TileAddress(level=self.level, row=self.row, column=self.column)


class ImageTile(Tile):
    """A tile whose content is an image resolved later by a loading subsystem."""

    image_source: Optional[ImageSource] = Field(None, description="Deferred image reference")


class TileFactory(ABC):
    """Abstract base class for objects that create the tiles of a pyramid."""

    @abstractmethod
    def create_tile(self, sector: Sector, level: Level, row: int, column: int) -> Tile:
        """Create the tile covering ``sector`` at ``level``, ``row`` and ``column``."""


# ----------------------------------------------------------------------
# Row and column arithmetic for the global grid
# ----------------------------------------------------------------------

def compute_row(tile_delta: float, latitude: float) -> int:
    """Row containing ``latitude``; latitude 90 maps to the last row."""
    row = int(math.floor((latitude + 90) / tile_delta))
    if latitude == 90:
        row -= 1
    return max(row, 0)


def compute_column(tile_delta: float, longitude: float) -> int:
    """Column containing ``longitude``; longitude 180 maps to the last column."""
    column = int(math.floor((longitude + 180) / tile_delta))
    if longitude == 180:
        column -= 1
    return max(column, 0)


def compute_last_row(tile_delta: float, max_latitude: float) -> int:
    """Last row overlapping a region whose northern edge is ``max_latitude``."""
    row = int(math.ceil((max_latitude + 90) / tile_delta)) - 1
    return max(row, 0)


def compute_last_column(tile_delta: float, max_longitude: float) -> int:
    """Last column overlapping a region whose eastern edge is ``max_longitude``."""
    column = int(math.ceil((max_longitude + 180) / tile_delta)) - 1
    return max(column, 0)


def assemble_tiles(level: Level, sector: Sector, factory: TileFactory) -> List[Tile]:
    """
    Create every tile of ``level`` that intersects ``sector``.

    Tiles are laid out on a global grid anchored at latitude -90 and longitude
    -180 with an edge of ``level.tile_delta`` degrees, and are returned row by
    row from south to north, west to east within a row.

    Args:
        level: Pyramid level to assemble
        sector: Region of interest
        factory: Factory used to create each tile

    Returns:
        List of tiles created by ``factory``

    Raises:
        InvalidArgumentError: If an argument is missing or the tile delta is not positive
    """
    if level is None:
        raise invalid_argument("tiles", "assemble_tiles", ErrorReason.MISSING_LEVEL)
    if sector is None:
        raise invalid_argument("tiles", "assemble_tiles", ErrorReason.MISSING_CELL)
    if factory is None:
        raise invalid_argument("tiles", "assemble_tiles", ErrorReason.MISSING_TILE_FACTORY)

    delta = level.tile_delta
    if not delta > 0:
        raise invalid_argument("tiles", "assemble_tiles", ErrorReason.INVALID_TILE_DELTA)

    first_row = compute_row(delta, sector.min_latitude)
    last_row = compute_last_row(delta, sector.max_latitude)
    first_col = compute_column(delta, sector.min_longitude)
    last_col = compute_last_column(delta, sector.max_longitude)

    tiles: List[Tile] = []
    for row in range(first_row, last_row + 1):
        min_lat = -90 + row * delta
        max_lat = min(90.0, min_lat + delta)
        for col in range(first_col, last_col + 1):
            min_lon = -180 + col * delta
            max_lon = min(180.0, min_lon + delta)
            tile_sector = Sector(
                min_latitude=min_lat,
                max_latitude=max_lat,
                min_longitude=min_lon,
                max_longitude=max_lon,
            )
            tiles.append(factory.create_tile(tile_sector, level, row, col))

    logger.debug(
        "Assembled %d tiles for level %d (rows %d-%d, columns %d-%d)",
        len(tiles), level.level_number, first_row, last_row, first_col, last_col,
    )
    return tiles
