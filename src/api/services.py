"""Dependencies wiring settings and the image lister into the routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query, Request

from ..gallery.lister import ImageLister
from ..gallery.settings import GallerySettings

ImageTypeQuery = Annotated[
    str | None,
    Query(
        alias="type",
        description="Image category: home, exterior or interior.",
    ),
]


def get_settings(request: Request) -> GallerySettings:
    """Return the settings the application was created with."""
    return request.app.state.settings


def get_image_lister(
    settings: Annotated[GallerySettings, Depends(get_settings)],
) -> ImageLister:
    """Lister bound to the configured public root."""
    return ImageLister(settings.public_root)
