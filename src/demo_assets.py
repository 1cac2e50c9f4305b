"""Placeholder images for running the landing page without real photos."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from .gallery.categories import Category

# Base colours per category; each image shifts it slightly so slides differ.
CATEGORY_COLORS: dict[Category, tuple[int, int, int]] = {
    Category.HOME: (38, 52, 74),
    Category.EXTERIOR: (96, 118, 92),
    Category.INTERIOR: (164, 138, 112),
}
CATEGORY_SIZES: dict[Category, tuple[int, int]] = {
    Category.HOME: (1600, 900),
    Category.EXTERIOR: (800, 800),
    Category.INTERIOR: (800, 800),
}


def _shade(color: tuple[int, int, int], step: int) -> tuple[int, int, int]:
    offset = (step * 17) % 80
    r, g, b = color
    return (min(r + offset, 255), min(g + offset, 255), min(b + offset, 255))


def seed_placeholder_images(
    public_root: Path,
    count: int = 12,
    overwrite: bool = False,
) -> dict[Category, int]:
    """Write `count` JPEGs per category under `<public_root>/images/<category>`.

    Existing files are left alone unless `overwrite` is set. Returns how many
    files were written per category.
    """
    if count < 1:
        raise ValueError("count must be at least 1")

    written: dict[Category, int] = {}
    for category in Category:
        target_dir = public_root / "images" / category.value
        target_dir.mkdir(parents=True, exist_ok=True)
        written[category] = 0
        for index in range(1, count + 1):
            target = target_dir / f"{category.value}_{index:02d}.jpg"
            if target.exists() and not overwrite:
                continue
            image = Image.new(
                "RGB",
                CATEGORY_SIZES[category],
                color=_shade(CATEGORY_COLORS[category], index),
            )
            image.save(target, format="JPEG", quality=85)
            written[category] += 1
    return written
