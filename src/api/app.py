"""Application factory for the Horizon gallery REST API."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from ..gallery.errors import ImageListingError
from ..gallery.lister import IMAGES_URL_PREFIX, ImageLister
from ..gallery.settings import GallerySettings, load_settings
from .routes import api_router

logger = logging.getLogger(__name__)


async def _listing_error_handler(
    request: Request, exc: ImageListingError
) -> JSONResponse:
    """Render listing failures as `{"error": ...}` with their own status."""
    logger.info("%s -> %d", exc, exc.status_code)
    return JSONResponse(
        status_code=int(exc.status_code),
        content={"error": exc.public_message},
    )


def create_app(settings: GallerySettings | None = None) -> FastAPI:
    """Return a configured FastAPI application instance."""
    settings = settings or load_settings()
    app = FastAPI(
        title="Horizon Gallery API",
        version="0.1.0",
        description="Lists the carousel and gallery images of the landing page.",
    )
    app.state.settings = settings
    app.add_exception_handler(ImageListingError, _listing_error_handler)
    app.include_router(api_router)

    images_root = ImageLister(settings.public_root).images_root
    if images_root.is_dir():
        app.mount(
            IMAGES_URL_PREFIX,
            StaticFiles(directory=images_root),
            name="images",
        )
    else:
        logger.warning("Image root %s missing, static images not served", images_root)
    return app


app = create_app()
