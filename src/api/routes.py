"""API route definitions."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from ..gallery.categories import Category
from ..gallery.lister import ImageLister
from .schemas import ErrorResponse, HealthResponse, ImagesResponse
from .services import ImageTypeQuery, get_image_lister

api_router = APIRouter(
    prefix="/api",
    tags=["images"],
)


@api_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Simple readiness probe.",
)
async def health() -> HealthResponse:
    """Return a tiny heartbeat payload for uptime trackers."""
    return HealthResponse(
        status="ok",
        categories=[category.value for category in Category],
    )


@api_router.get(
    "/images",
    response_model=ImagesResponse,
    summary="List the images of one category.",
    responses={
        400: {"model": ErrorResponse, "description": "Unknown or missing type."},
        404: {"model": ErrorResponse, "description": "Category directory missing."},
        500: {"model": ErrorResponse, "description": "Directory could not be read."},
    },
)
async def list_images(
    lister: Annotated[ImageLister, Depends(get_image_lister)],
    image_type: ImageTypeQuery = None,
) -> ImagesResponse:
    """Re-read the category directory and return its image paths."""
    images = await run_in_threadpool(lister.list, image_type)
    return ImagesResponse(images=images)
