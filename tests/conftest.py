"""
Shared test configuration, fixtures, and markers for tilefactory tests.
"""

import pytest

from tilefactory.ogc.wcs import Wcs100TileFactory
from tilefactory.types import Level, Sector


def pytest_configure(config):
    """Configure test markers."""
    config.addinivalue_line("markers", "property: marks property-based tests")
    config.addinivalue_line("markers", "unit: marks unit tests (fast, pure logic)")


@pytest.fixture
def sector():
    """The 20 by 40 degree sector used by most URL tests."""
    return Sector(min_latitude=-20, max_latitude=20, min_longitude=-10, max_longitude=10)


@pytest.fixture
def level():
    return Level(level_number=0, tile_delta=90, tile_width=256, tile_height=256)


@pytest.fixture
def factory():
    return Wcs100TileFactory("http://host?", "elev")
