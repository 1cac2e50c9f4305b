"""Tests for category and filter parsing."""

import pytest
from src.gallery.categories import PAGE_CATEGORIES, Category, GalleryFilter
from src.gallery.errors import InvalidCategory


def test_category_parse_accepts_values_and_members() -> None:
    assert Category.parse("home") is Category.HOME
    assert Category.parse(Category.INTERIOR) is Category.INTERIOR


def test_category_parse_error_keeps_value() -> None:
    with pytest.raises(InvalidCategory) as excinfo:
        Category.parse("garden")
    assert excinfo.value.value == "garden"
    assert excinfo.value.public_message == "Invalid type"


def test_gallery_filter_parse() -> None:
    assert GalleryFilter.parse("all") is GalleryFilter.ALL
    with pytest.raises(ValueError):
        GalleryFilter.parse("home")


def test_page_categories_order() -> None:
    assert PAGE_CATEGORIES == (Category.HOME, Category.EXTERIOR, Category.INTERIOR)
