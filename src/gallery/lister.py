"""Enumerate the servable images of a category directory.

Every call re-reads the directory; there is no caching layer. Callers that
want one should wrap `ImageLister.list` explicitly.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePosixPath

from .categories import Category
from .errors import DirectoryNotFound, ReadFailure

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
IMAGES_URL_PREFIX = "/images"


def is_image_file(filename: str) -> bool:
    """True when the extension (case-insensitive) is on the allow-list."""
    return os.path.splitext(filename)[1].lower() in IMAGE_EXTENSIONS


def image_ref(category: Category, filename: str) -> str:
    """Return the root-relative public path for a file of a category."""
    return f"{IMAGES_URL_PREFIX}/{category.value}/{filename}"


class ImageLister:
    """Read-through listing of `<public_root>/images/<category>`."""

    def __init__(self, public_root: str | Path) -> None:
        self.public_root = Path(public_root)

    @property
    def images_root(self) -> Path:
        return self.public_root / "images"

    def directory_for(self, category: Category) -> Path:
        """Return the fixed directory holding a category's images."""
        return self.images_root / category.value

    def list(self, category: Category | str | None) -> list[str]:
        """Return the ImageRefs of a category in filesystem enumeration order.

        Raises:
            InvalidCategory: `category` is not home, exterior or interior.
            DirectoryNotFound: the category directory does not exist.
            ReadFailure: any other I/O error while enumerating.
        """
        resolved = Category.parse(category)
        directory = self.directory_for(resolved)
        try:
            present = directory.exists()
        except OSError as exc:
            logger.error("Error checking directory %s: %s", directory, exc)
            raise ReadFailure(resolved.value, directory) from exc
        if not present:
            raise DirectoryNotFound(resolved.value, directory)

        try:
            with os.scandir(directory) as entries:
                filenames = [
                    entry.name
                    for entry in entries
                    if is_image_file(entry.name) and entry.is_file()
                ]
        except OSError as exc:
            logger.error("Error reading directory %s: %s", directory, exc)
            raise ReadFailure(resolved.value, directory) from exc

        logger.debug("Listed %d images in %s", len(filenames), directory)
        return [image_ref(resolved, name) for name in filenames]

    def resolve(self, ref: str) -> Path:
        """Map an ImageRef back to its file under the public root."""
        relative = PurePosixPath(ref.lstrip("/"))
        if not ref.startswith(IMAGES_URL_PREFIX + "/") or ".." in relative.parts:
            raise ValueError(f"Not an image reference: {ref!r}")
        return self.public_root.joinpath(*relative.parts)


def list_images(category: Category | str | None, public_root: str | Path) -> list[str]:
    """Shortcut for `ImageLister(public_root).list(category)`."""
    return ImageLister(public_root).list(category)
