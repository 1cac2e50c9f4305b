"""Where the landing page gets its image listings from."""

from __future__ import annotations

import asyncio
from typing import Protocol

import httpx

from .categories import Category
from .errors import ImageSourceError
from .lister import ImageLister


class ImageSource(Protocol):
    """Contract for fetching the ImageRefs of one category."""

    async def fetch(self, category: Category) -> list[str]:
        """Return the category's images or raise on failure."""
        ...


class LocalImageSource(ImageSource):
    """Call the lister in-process, off the event loop."""

    def __init__(self, lister: ImageLister) -> None:
        self.lister = lister

    async def fetch(self, category: Category) -> list[str]:
        return await asyncio.to_thread(self.lister.list, category)


class HttpImageSource(ImageSource):
    """Query a running listing endpoint (`GET /api/images?type=...`)."""

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch(self, category: Category) -> list[str]:
        try:
            response = await self._client.get(
                f"{self.base_url}/api/images",
                params={"type": category.value},
            )
        except httpx.HTTPError as exc:
            raise ImageSourceError(category.value, None, str(exc)) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        if response.is_error:
            message = str(payload.get("error") or response.reason_phrase)
            raise ImageSourceError(category.value, response.status_code, message)
        images = payload.get("images") or []
        if not isinstance(images, list):
            raise ImageSourceError(
                category.value, response.status_code, "Malformed images payload"
            )
        return [str(ref) for ref in images]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
