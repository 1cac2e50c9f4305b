"""Category-filtered, incrementally grown gallery listing.

The displayed list is always a prefix of the active source: the first page
holds `page_size` items and each batch appends the next `batch_size` items
starting exactly at `len(displayed)`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .categories import GalleryFilter

INITIAL_PAGE_SIZE = 8
BATCH_SIZE = 6


@dataclass
class GalleryState:
    """Ephemeral grid state of one page view."""

    active_filter: GalleryFilter = GalleryFilter.ALL
    displayed: list[str] = field(default_factory=list)
    has_more: bool = False

    @property
    def visible_count(self) -> int:
        return len(self.displayed)


def compose_source(
    active_filter: GalleryFilter,
    exterior: Sequence[str],
    interior: Sequence[str],
) -> list[str]:
    """Return the images behind a filter; `all` is exterior followed by interior."""
    if active_filter is GalleryFilter.EXTERIOR:
        return list(exterior)
    if active_filter is GalleryFilter.INTERIOR:
        return list(interior)
    return [*exterior, *interior]


def first_page(
    source: Sequence[str],
    active_filter: GalleryFilter = GalleryFilter.ALL,
    page_size: int = INITIAL_PAGE_SIZE,
) -> GalleryState:
    """Build a fresh state showing the first `page_size` items of `source`."""
    displayed = list(source[:page_size])
    return GalleryState(
        active_filter=active_filter,
        displayed=displayed,
        has_more=len(displayed) < len(source),
    )


def next_batch(
    state: GalleryState,
    source: Sequence[str],
    batch_size: int = BATCH_SIZE,
) -> list[str]:
    """Return the slice that would follow the currently displayed items."""
    start = len(state.displayed)
    return list(source[start : start + batch_size])


def append_batch(
    state: GalleryState,
    source: Sequence[str],
    batch_size: int = BATCH_SIZE,
) -> int:
    """Append the next batch in place and return how many items were added."""
    batch = next_batch(state, source, batch_size)
    state.displayed.extend(batch)
    state.has_more = bool(batch) and len(state.displayed) < len(source)
    return len(batch)
