"""Pytest configuration and test utilities.

Ensures repository root is on sys.path so that the `src` package
(with `__init__.py`) can be imported without per-test hacks.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.gallery.categories import Category  # noqa: E402


def write_image(path: Path, color: str = "gray") -> Path:
    """Save a tiny real image at `path`, creating parent folders."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fmt = {".jpg": "JPEG", ".jpeg": "JPEG", ".png": "PNG", ".webp": "WEBP"}.get(
        path.suffix.lower(), "PNG"
    )
    Image.new("RGB", (8, 8), color=color).save(path, format=fmt)
    return path


@pytest.fixture
def public_root(tmp_path: Path) -> Path:
    """Public root with two images per category plus some noise files."""
    root = tmp_path / "public"
    for category in Category:
        folder = root / "images" / category.value
        write_image(folder / f"{category.value}_1.jpg")
        write_image(folder / f"{category.value}_2.PNG")
        (folder / "notes.txt").write_text("not an image")
    return root


class ManualClock:
    """Logical time for code that awaits an injectable `sleep`."""

    def __init__(self) -> None:
        self.now = 0.0
        self._waiters: list[tuple[float, asyncio.Future[None]]] = []

    @property
    def pending(self) -> int:
        return sum(1 for _, fut in self._waiters if not fut.done())

    async def sleep(self, delay: float) -> None:
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._waiters.append((self.now + delay, future))
        await future

    async def advance(self, seconds: float) -> None:
        """Move time forward, waking due sleepers one deadline at a time."""
        target = self.now + seconds
        # Let freshly scheduled tasks reach their first sleep.
        for _ in range(5):
            await asyncio.sleep(0)
        while True:
            due = [
                (deadline, fut)
                for deadline, fut in self._waiters
                if deadline <= target and not fut.done()
            ]
            if not due:
                break
            deadline = min(d for d, _ in due)
            self.now = deadline
            for d, fut in due:
                if d == deadline:
                    fut.set_result(None)
            self._waiters = [(d, f) for d, f in self._waiters if not f.done()]
            for _ in range(5):
                await asyncio.sleep(0)
        self.now = target


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


class FakeSource:
    """ImageSource returning canned listings or raising canned errors."""

    def __init__(self, listings: dict[Category, list[str] | Exception]) -> None:
        self.listings = listings
        self.calls: list[Category] = []

    async def fetch(self, category: Category) -> list[str]:
        self.calls.append(category)
        await asyncio.sleep(0)
        result = self.listings.get(category, [])
        if isinstance(result, Exception):
            raise result
        return list(result)


def refs(category: str, count: int) -> list[str]:
    return [f"/images/{category}/{category}_{i:02d}.jpg" for i in range(1, count + 1)]
