"""State of one landing-page view: hero carousel plus filterable gallery.

The controller runs on a single asyncio event loop. It moves from LOADING to
READY once the three startup listings have settled, then reacts to filter
selections, sentinel visibility, the rotation timer and carousel gestures.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from enum import Enum
from types import TracebackType

from .carousel import CarouselState, DragGesture
from .categories import PAGE_CATEGORIES, Category, GalleryFilter
from .errors import ControllerNotReady
from .pagination import GalleryState, append_batch, compose_source, first_page
from .settings import GallerySettings
from .signals import Unsubscribe, VisibilitySignal
from .sources import ImageSource

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class PagePhase(str, Enum):
    LOADING = "loading"
    READY = "ready"


class GalleryPageController:
    """Drives carousel rotation, gallery filtering and incremental loading."""

    def __init__(
        self,
        source: ImageSource,
        settings: GallerySettings | None = None,
        sentinel: VisibilitySignal | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.source = source
        self.settings = settings or GallerySettings()
        self.sentinel = sentinel
        self._sleep = sleep

        self.phase = PagePhase.LOADING
        self.gallery = GalleryState()
        self.carousel = CarouselState()
        self.exterior_images: list[str] = []
        self.interior_images: list[str] = []
        self.loading_more = False
        self.menu_open = False

        self._drag = DragGesture(threshold=self.settings.drag_threshold)
        self._activated = False
        self.closed = False
        self._rotation_task: asyncio.Task[None] | None = None
        self._pending_loads: set[asyncio.Task[int]] = set()
        self._unsubscribe: Unsubscribe | None = None

    @property
    def is_ready(self) -> bool:
        return self.phase is PagePhase.READY and not self.closed

    @property
    def rotation_armed(self) -> bool:
        return self._rotation_task is not None and not self._rotation_task.done()

    # Lifecycle

    async def activate(self) -> None:
        """Fetch all categories concurrently, then switch to READY.

        Runs once; later calls return immediately. A failing category is
        logged and treated as empty so the page still renders.
        """
        if self._activated:
            return
        self._activated = True

        results = await asyncio.gather(
            *(self.source.fetch(category) for category in PAGE_CATEGORIES),
            return_exceptions=True,
        )
        if self.closed:
            return
        listings: dict[Category, list[str]] = {}
        for category, result in zip(PAGE_CATEGORIES, results, strict=True):
            if isinstance(result, asyncio.CancelledError):
                raise result
            if isinstance(result, BaseException):
                logger.warning(
                    "Failed to fetch %s images, showing none: %s",
                    category.value,
                    result,
                )
                listings[category] = []
            else:
                listings[category] = list(result)

        self.exterior_images = listings[Category.EXTERIOR]
        self.interior_images = listings[Category.INTERIOR]
        self.gallery = first_page(
            self.current_source(GalleryFilter.ALL),
            GalleryFilter.ALL,
            self.settings.initial_page_size,
        )
        self.phase = PagePhase.READY
        self.set_carousel_images(listings[Category.HOME])
        if self.sentinel is not None:
            self._unsubscribe = self.sentinel.subscribe(self.on_sentinel_visible)

        logger.info(
            "Gallery ready: %d carousel, %d exterior, %d interior images",
            len(self.carousel.images),
            len(self.exterior_images),
            len(self.interior_images),
        )

    async def deactivate(self) -> None:
        """Disarm the rotation timer and the sentinel, drop pending loads.

        Loads already past their guard finish without touching the gallery.
        """
        self.closed = True
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

        tasks: list[asyncio.Task] = list(self._pending_loads)
        if self._rotation_task is not None:
            tasks.append(self._rotation_task)
            self._rotation_task = None
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._pending_loads.clear()
        logger.debug("Gallery page deactivated")

    async def __aenter__(self) -> GalleryPageController:
        await self.activate()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.deactivate()

    def _require_ready(self) -> None:
        if not self.is_ready:
            raise ControllerNotReady("The gallery page is still loading.")

    # Gallery

    def current_source(self, active_filter: GalleryFilter | None = None) -> list[str]:
        """Images behind `active_filter` (defaults to the active one)."""
        return compose_source(
            active_filter or self.gallery.active_filter,
            self.exterior_images,
            self.interior_images,
        )

    def select_filter(self, active_filter: GalleryFilter | str) -> GalleryState:
        """Switch the grid to another filter and reset it to the first page."""
        self._require_ready()
        chosen = GalleryFilter.parse(active_filter)
        self.gallery = first_page(
            self.current_source(chosen),
            chosen,
            self.settings.initial_page_size,
        )
        self.menu_open = False
        return self.gallery

    async def load_more(self) -> int:
        """Append the next batch after the throttle delay.

        Returns the number of appended images; 0 when another load is in
        flight, nothing is left, or the page is not ready.
        """
        if not self.is_ready or self.loading_more or not self.gallery.has_more:
            return 0

        self.loading_more = True
        try:
            await self._sleep(self.settings.load_more_delay)
            if self.closed:
                return 0
            appended = append_batch(
                self.gallery,
                self.current_source(),
                self.settings.batch_size,
            )
            if self.gallery.has_more:
                logger.debug("Appended %d gallery images", appended)
            else:
                logger.debug(
                    "Gallery source '%s' exhausted at %d images",
                    self.gallery.active_filter.value,
                    self.gallery.visible_count,
                )
            return appended
        finally:
            self.loading_more = False

    def on_sentinel_visible(self) -> asyncio.Task[int] | None:
        """Sentinel callback: schedule `load_more` unless it would be a no-op."""
        if not self.is_ready or self.loading_more or not self.gallery.has_more:
            return None
        task = asyncio.get_running_loop().create_task(self.load_more())
        self._pending_loads.add(task)
        task.add_done_callback(self._pending_loads.discard)
        return task

    def toggle_menu(self) -> bool:
        self.menu_open = not self.menu_open
        return self.menu_open

    # Carousel

    def set_carousel_images(self, images: Sequence[str]) -> None:
        """Replace the carousel slides and re-arm the rotation timer."""
        self.carousel.replace_images(list(images))
        self._arm_rotation()

    def _arm_rotation(self) -> None:
        if self._rotation_task is not None:
            self._rotation_task.cancel()
            self._rotation_task = None
        if not self.carousel.images:
            return
        self._rotation_task = asyncio.get_running_loop().create_task(self._rotate())
        logger.debug(
            "Carousel rotation armed every %.1fs over %d slides",
            self.settings.rotation_interval,
            len(self.carousel.images),
        )

    async def _rotate(self) -> None:
        while True:
            await self._sleep(self.settings.rotation_interval)
            self.tick()

    def tick(self) -> int:
        """Advance the carousel by one slide (timer step)."""
        return self.carousel.advance()

    def go_to_slide(self, index: int) -> int:
        self._require_ready()
        return self.carousel.go_to(index)

    def next_slide(self) -> int:
        self._require_ready()
        return self.carousel.advance()

    def previous_slide(self) -> int:
        self._require_ready()
        return self.carousel.retreat()

    def begin_drag(self, x: float) -> None:
        self._drag.begin(x)

    def end_drag(self, x: float) -> int:
        """Finish a drag and return the resulting slide index."""
        direction = self._drag.end(x)
        if direction > 0:
            return self.carousel.advance()
        if direction < 0:
            return self.carousel.retreat()
        return self.carousel.current_index
