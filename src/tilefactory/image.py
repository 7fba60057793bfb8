"""
Deferred image references.
"""

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorReason, invalid_argument

class ImageSource(BaseModel):
    """
    Opaque handle to a URL-backed image.

    The URL is never resolved here; a separate loading subsystem turns it into
    pixel data when the image is needed.
    """
    url: str = Field(..., min_length=1, description="Location of the image")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_url(cls, url: str) -> "ImageSource":
        """Create an image source that defers to ``url``."""
        if not url:
            raise invalid_argument("ImageSource", "from_url", ErrorReason.MISSING_URL)
        return cls(url=url)

    def __str__(self) -> str:
        return self.url
