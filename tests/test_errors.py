"""Tests for the exception hierarchy and diagnostic messages."""

import pytest

from tilefactory.errors import (
    ErrorReason,
    InvalidArgumentError,
    TileFactoryError,
    ValidationError,
    make_message,
)


def test_make_message_for_reason_code():
    message = make_message("Wcs100TileFactory", "url_for_tile", ErrorReason.INVALID_WIDTH_OR_HEIGHT)

    assert message == "Wcs100TileFactory.url_for_tile: The width or the height is invalid"


def test_make_message_accepts_code_string():
    assert make_message("A", "b", "missingCoverage") == "A.b: The coverage name is missing"


def test_make_message_free_text():
    assert make_message("A", "b", "something odd") == "A.b: something odd"


def test_invalid_argument_error_hierarchy():
    error = InvalidArgumentError("Wcs100TileFactory", "create_tile", ErrorReason.MISSING_LEVEL)

    assert isinstance(error, ValidationError)
    assert isinstance(error, TileFactoryError)
    assert isinstance(error, ValueError)
    assert error.reason == "missingLevel"
    assert str(error) == "Wcs100TileFactory.create_tile: The level is missing"


def test_invalid_argument_error_catchable_as_value_error():
    with pytest.raises(ValueError, match="missing"):
        raise InvalidArgumentError("A", "b", ErrorReason.MISSING_CELL)
