"""tilefactory - tile factories that build OGC request URLs for tile pyramids."""

from ._version import __version__

from .config import WCS100Config
from .errors import (
    ConfigurationError,
    ErrorReason,
    InvalidArgumentError,
    TileFactoryError,
    ValidationError,
)
from .image import ImageSource
from .ogc.wcs import Wcs100TileFactory
from .tiles import ImageTile, Tile, TileFactory, assemble_tiles
from .types import CRS, Format, Level, Sector, TileAddress

__all__ = [
    "__version__",
    "WCS100Config",
    "ConfigurationError",
    "ErrorReason",
    "InvalidArgumentError",
    "TileFactoryError",
    "ValidationError",
    "ImageSource",
    "Wcs100TileFactory",
    "ImageTile",
    "Tile",
    "TileFactory",
    "assemble_tiles",
    "CRS",
    "Format",
    "Level",
    "Sector",
    "TileAddress",
]
