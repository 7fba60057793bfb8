"""WCS (Web Coverage Service) 1.0.0 GetCoverage tile factory."""

from __future__ import annotations

import logging
from typing import Optional

from ..errors import ErrorReason, invalid_argument
from ..image import ImageSource
from ..tiles import ImageTile, TileFactory
from ..types import CRS, Format, Level, Sector

logger = logging.getLogger(__name__)

__all__ = ["Wcs100TileFactory"]


class Wcs100TileFactory(TileFactory):
    """
    Factory for tiles backed by WCS 1.0.0 GetCoverage requests.

    The generated URLs request ``image/tiff`` coverages in ``EPSG:4326``. The
    service address may already carry a query string; the GetCoverage
    parameters are appended to it.

    Values are inserted into the query string as-is, without percent-encoding,
    so that existing servers keep receiving byte-identical requests. Coverage
    names containing ``&``, ``=`` or spaces produce malformed URLs.
    """

    version = "1.0.0"
    crs = CRS.EPSG_4326
    output_format = Format.GEOTIFF

    def __init__(self, service_address: str, coverage: str) -> None:
        if not service_address:
            raise invalid_argument(
                "Wcs100TileFactory", "constructor", ErrorReason.MISSING_SERVICE_ADDRESS
            )
        if not coverage:
            raise invalid_argument("Wcs100TileFactory", "constructor", ErrorReason.MISSING_COVERAGE)

        self._service_address = service_address
        self._coverage = coverage

    def __repr__(self) -> str:
        return f"Wcs100TileFactory(service_address={self._service_address!r}, coverage={self._coverage!r})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def service_address(self) -> str:
        """The WCS service address used to build GetCoverage URLs."""
        return self._service_address

    @service_address.setter
    def service_address(self, service_address: str) -> None:
        if not service_address:
            raise invalid_argument(
                "Wcs100TileFactory", "set_service_address", ErrorReason.MISSING_SERVICE_ADDRESS
            )
        self._service_address = service_address

    @property
    def coverage(self) -> str:
        """The coverage name used to build GetCoverage URLs."""
        return self._coverage

    @coverage.setter
    def coverage(self, coverage: str) -> None:
        if not coverage:
            raise invalid_argument("Wcs100TileFactory", "set_coverage", ErrorReason.MISSING_COVERAGE)
        self._coverage = coverage

    # ------------------------------------------------------------------
    # TileFactory overrides
    # ------------------------------------------------------------------
    def create_tile(self, sector: Optional[Sector], level: Optional[Level], row: int, column: int) -> ImageTile:
        if sector is None:
            raise invalid_argument("Wcs100TileFactory", "create_tile", ErrorReason.MISSING_CELL)
        if level is None:
            raise invalid_argument("Wcs100TileFactory", "create_tile", ErrorReason.MISSING_LEVEL)

        url = self.url_for_tile(sector, level.tile_width, level.tile_height)
        return ImageTile(
            sector=sector,
            level=level,
            row=row,
            column=column,
            image_source=ImageSource.from_url(url),
        )

    # ------------------------------------------------------------------
    # URL construction
    # ------------------------------------------------------------------
    def url_for_tile(self, sector: Optional[Sector], width: int, height: int) -> str:
        """
        Build the GetCoverage URL for ``sector`` at ``width`` x ``height`` pixels.

        Args:
            sector: Geographic extent to request
            width: Output width in pixels, at least 1
            height: Output height in pixels, at least 1

        Returns:
            The service address followed by the GetCoverage query parameters

        Raises:
            InvalidArgumentError: If the sector is missing or a dimension is below 1
        """
        if sector is None:
            raise invalid_argument("Wcs100TileFactory", "url_for_tile", ErrorReason.MISSING_CELL)
        if width < 1 or height < 1:
            raise invalid_argument("Wcs100TileFactory", "url_for_tile", ErrorReason.INVALID_WIDTH_OR_HEIGHT)

        address = self._service_address
        parts = [address]

        index = address.find("?")
        if index < 0:
            parts.append("?")
        elif index != len(address) - 1:
            # an address already ending in "&" is ready for the next parameter
            if address.rfind("&") != len(address) - 1:
                parts.append("&")

        if "SERVICE=WCS" not in address.upper():
            parts.append("SERVICE=WCS")

        parts.append(f"&VERSION={self.version}")
        parts.append("&REQUEST=GetCoverage")
        parts.append(f"&COVERAGE={self._coverage}")
        parts.append(f"&CRS={self.crs.value}")
        parts.append("&BBOX=" + ",".join(str(value) for value in sector.to_bbox()))
        parts.append(f"&WIDTH={width}")
        parts.append(f"&HEIGHT={height}")
        parts.append(f"&FORMAT={self.output_format.value}")

        url = "".join(parts)
        logger.debug("WCS GetCoverage URL: %s", url)
        return url
