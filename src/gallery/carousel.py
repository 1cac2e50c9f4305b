"""Carousel index arithmetic and drag-gesture recognition."""

from __future__ import annotations

from dataclasses import dataclass, field

DRAG_THRESHOLD = 50.0


@dataclass
class CarouselState:
    """Slides of the hero carousel and the one currently shown."""

    images: list[str] = field(default_factory=list)
    current_index: int = 0

    @property
    def current_image(self) -> str | None:
        if 0 <= self.current_index < len(self.images):
            return self.images[self.current_index]
        return None

    def advance(self) -> int:
        """Move one slide forward, wrapping to the first; no-op when empty."""
        if self.images:
            self.current_index = (self.current_index + 1) % len(self.images)
        return self.current_index

    def retreat(self) -> int:
        """Move one slide back, wrapping to the last; no-op when empty."""
        if self.images:
            self.current_index = (self.current_index - 1) % len(self.images)
        return self.current_index

    def go_to(self, index: int) -> int:
        if not 0 <= index < len(self.images):
            raise IndexError(f"Slide {index} out of range (0..{len(self.images) - 1})")
        self.current_index = index
        return self.current_index

    def replace_images(self, images: list[str]) -> None:
        self.images = list(images)
        if self.current_index >= len(self.images):
            self.current_index = 0


@dataclass
class DragGesture:
    """Horizontal pointer drag over the carousel.

    `end` returns +1 for a leftward drag (next slide), -1 for a rightward
    drag (previous slide) and 0 when the displacement stays within the
    threshold or no drag was started.
    """

    threshold: float = DRAG_THRESHOLD
    start_x: float | None = None

    @property
    def active(self) -> bool:
        return self.start_x is not None

    def begin(self, x: float) -> None:
        self.start_x = x

    def end(self, x: float) -> int:
        if self.start_x is None:
            return 0
        diff = self.start_x - x
        self.start_x = None
        if abs(diff) <= self.threshold:
            return 0
        return 1 if diff > 0 else -1
