"""Closed sets of image categories and gallery filters."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidCategory


class Category(str, Enum):
    """Image groupings that map 1:1 onto directories under the public root."""

    HOME = "home"
    EXTERIOR = "exterior"
    INTERIOR = "interior"

    @classmethod
    def parse(cls, value: Category | str | None) -> Category:
        """Return the matching category or raise `InvalidCategory`."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidCategory(value) from None


class GalleryFilter(str, Enum):
    """Menu entries of the gallery grid."""

    ALL = "all"
    EXTERIOR = "exterior"
    INTERIOR = "interior"

    @classmethod
    def parse(cls, value: GalleryFilter | str) -> GalleryFilter:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown gallery filter '{value}'.") from None


# Fetched together when the landing page activates.
PAGE_CATEGORIES: tuple[Category, ...] = (
    Category.HOME,
    Category.EXTERIOR,
    Category.INTERIOR,
)
