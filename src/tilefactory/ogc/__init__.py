"""
OGC (Open Geospatial Consortium) specific implementations.

This module contains OGC-specific tile factories.
"""

from .wcs import Wcs100TileFactory

__all__ = [
    "Wcs100TileFactory",
]
