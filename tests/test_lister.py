"""Tests for the category directory lister."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from conftest import write_image
from src.gallery.categories import Category
from src.gallery.errors import DirectoryNotFound, InvalidCategory, ReadFailure
from src.gallery.lister import (
    ImageLister,
    image_ref,
    is_image_file,
    list_images,
)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("facade.jpg", True),
        ("facade.JPEG", True),
        ("lobby.Png", True),
        ("stairs.webp", True),
        ("animation.gif", False),
        ("readme.txt", False),
        ("no_extension", False),
        (".jpg", False),
    ],
)
def test_is_image_file(filename: str, expected: bool) -> None:
    assert is_image_file(filename) is expected


def test_image_ref_format() -> None:
    assert image_ref(Category.EXTERIOR, "a b.jpg") == "/images/exterior/a b.jpg"


def test_list_returns_only_allowed_extensions(tmp_path: Path) -> None:
    """Non-image files are dropped silently."""
    folder = tmp_path / "images" / "interior"
    for name in ("one.jpg", "two.JPEG", "three.png", "four.WebP"):
        write_image(folder / name)
    (folder / "five.gif").write_bytes(b"GIF89a")
    (folder / "notes.txt").write_text("hello")

    images = ImageLister(tmp_path).list("interior")

    assert sorted(images) == [
        "/images/interior/four.WebP",
        "/images/interior/one.jpg",
        "/images/interior/three.png",
        "/images/interior/two.JPEG",
    ]


def test_list_skips_directories_named_like_images(tmp_path: Path) -> None:
    folder = tmp_path / "images" / "home"
    write_image(folder / "hero.jpg")
    (folder / "album.jpg").mkdir()

    assert ImageLister(tmp_path).list(Category.HOME) == ["/images/home/hero.jpg"]


def test_list_every_ref_resolves_to_existing_file(public_root: Path) -> None:
    lister = ImageLister(public_root)
    for category in Category:
        for ref in lister.list(category):
            assert lister.resolve(ref).is_file()


def test_list_is_read_through(public_root: Path) -> None:
    """Repeated calls agree, and new files show up without any cache reset."""
    lister = ImageLister(public_root)
    first = lister.list("exterior")
    assert sorted(first) == sorted(lister.list("exterior"))

    write_image(public_root / "images" / "exterior" / "exterior_3.webp")
    assert "/images/exterior/exterior_3.webp" in lister.list("exterior")


@pytest.mark.parametrize("value", ["invalid", "", None, "HOME", "logo"])
def test_list_rejects_unknown_category(public_root: Path, value: str | None) -> None:
    with pytest.raises(InvalidCategory):
        ImageLister(public_root).list(value)


def test_list_missing_directory(public_root: Path) -> None:
    folder = public_root / "images" / "interior"
    for child in folder.iterdir():
        child.unlink()
    folder.rmdir()

    with pytest.raises(DirectoryNotFound) as excinfo:
        list_images("interior", public_root)
    assert excinfo.value.path == folder
    assert excinfo.value.status_code == 404


def test_list_read_failure_is_distinct(
    public_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """I/O errors other than a missing directory surface as ReadFailure."""

    def _denied(path: object) -> None:
        raise PermissionError("permission denied")

    monkeypatch.setattr(os, "scandir", _denied)

    with pytest.raises(ReadFailure) as excinfo:
        list_images("home", public_root)
    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert excinfo.value.status_code == 500


def test_list_path_that_is_a_file_is_read_failure(tmp_path: Path) -> None:
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "home").write_text("oops")

    with pytest.raises(ReadFailure):
        list_images("home", tmp_path)


@pytest.mark.parametrize(
    "ref",
    ["/images/../secrets.txt", "/static/home/a.jpg", "images/home/../../x.jpg"],
)
def test_resolve_rejects_foreign_refs(tmp_path: Path, ref: str) -> None:
    with pytest.raises(ValueError):
        ImageLister(tmp_path).resolve(ref)


def test_list_existence_check_failure_is_read_failure(
    public_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """An untraversable parent fails the existence check with ReadFailure."""

    def _denied(self: Path, *args: object, **kwargs: object) -> bool:
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "exists", _denied)

    with pytest.raises(ReadFailure) as excinfo:
        list_images("home", public_root)
    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert excinfo.value.status_code == 500
