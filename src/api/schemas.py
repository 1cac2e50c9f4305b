"""Shared Pydantic schemas for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ImagesResponse(BaseModel):
    """Payload returned by /images."""

    images: list[str] = Field(
        ...,
        description="Root-relative paths such as /images/home/facade.jpg.",
    )


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx listing response."""

    error: str


class HealthResponse(BaseModel):
    """Basic heartbeat response."""

    status: str
    categories: list[str]
