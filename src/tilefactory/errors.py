"""Custom exception hierarchy for the tile factory package."""

import logging
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)


class ErrorReason(str, Enum):
    """Reason codes attached to argument validation failures."""
    MISSING_SERVICE_ADDRESS = "missingServiceAddress"
    MISSING_COVERAGE = "missingCoverage"
    MISSING_CELL = "missingCell"
    MISSING_LEVEL = "missingLevel"
    INVALID_WIDTH_OR_HEIGHT = "invalidWidthOrHeight"
    MISSING_URL = "missingUrl"
    MISSING_TILE_FACTORY = "missingTileFactory"
    INVALID_TILE_DELTA = "invalidTileDelta"


_DESCRIPTIONS = {
    ErrorReason.MISSING_SERVICE_ADDRESS: "The service address is missing",
    ErrorReason.MISSING_COVERAGE: "The coverage name is missing",
    ErrorReason.MISSING_CELL: "The sector is missing",
    ErrorReason.MISSING_LEVEL: "The level is missing",
    ErrorReason.INVALID_WIDTH_OR_HEIGHT: "The width or the height is invalid",
    ErrorReason.MISSING_URL: "The URL is missing",
    ErrorReason.MISSING_TILE_FACTORY: "The tile factory is missing",
    ErrorReason.INVALID_TILE_DELTA: "The tile delta is invalid",
}


def make_message(component: str, operation: str, reason: Union[ErrorReason, str]) -> str:
    """
    Format a diagnostic message for a failed operation.

    Args:
        component: Name of the class or module reporting the failure
        operation: Name of the method that failed
        reason: Reason code, or free text for reasons without a code

    Returns:
        Message of the form ``"<component>.<operation>: <description>"``
    """
    try:
        description = _DESCRIPTIONS[ErrorReason(reason)]
    except ValueError:
        description = str(reason)
    return f"{component}.{operation}: {description}"


class TileFactoryError(Exception):
    """Base exception for the tile factory package."""
    
    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class ValidationError(TileFactoryError):
    """Data validation errors."""
    pass


class ConfigurationError(TileFactoryError):
    """Configuration and setup errors."""
    pass


class InvalidArgumentError(ValidationError, ValueError):
    """An operation was called with a missing or out-of-range argument."""

    def __init__(self, component: str, operation: str, reason: ErrorReason):
        super().__init__(make_message(component, operation, reason))
        self.component = component
        self.operation = operation
        self.reason = ErrorReason(reason)


def invalid_argument(component: str, operation: str, reason: ErrorReason) -> InvalidArgumentError:
    """Build an ``InvalidArgumentError`` and log it at error level."""
    error = InvalidArgumentError(component, operation, reason)
    logger.error(str(error))
    return error
