"""Error taxonomy shared by the lister, the image sources and the controller."""

from __future__ import annotations

from http import HTTPStatus
from pathlib import Path


class GalleryError(Exception):
    """Base class for every error raised by the gallery package."""


class ImageListingError(GalleryError):
    """A listing request failed; carries the HTTP status and public message."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    public_message: str = "Failed to read directory"


class InvalidCategory(ImageListingError):
    """The requested category is not one of home/exterior/interior."""

    status_code = HTTPStatus.BAD_REQUEST
    public_message = "Invalid type"

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid image category: {value!r}")
        self.value = value


class DirectoryNotFound(ImageListingError):
    """The category directory does not exist under the public root."""

    status_code = HTTPStatus.NOT_FOUND
    public_message = "Directory not found"

    def __init__(self, category: str, path: Path) -> None:
        super().__init__(f"Image directory for '{category}' not found: {path}")
        self.category = category
        self.path = path


class ReadFailure(ImageListingError):
    """The category directory exists but could not be enumerated."""

    def __init__(self, category: str, path: Path) -> None:
        super().__init__(f"Failed to read image directory for '{category}': {path}")
        self.category = category
        self.path = path


class ImageSourceError(GalleryError):
    """A remote listing call failed (non-2xx response or transport error)."""

    def __init__(self, category: str, status: int | None, message: str) -> None:
        super().__init__(f"Listing '{category}' failed ({status}): {message}")
        self.category = category
        self.status = status
        self.message = message


class ControllerNotReady(GalleryError):
    """Raised when a page interaction arrives before the initial listing settled."""
