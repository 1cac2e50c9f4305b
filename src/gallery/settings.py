"""Runtime settings for the listing service and the landing page."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from dotenv import load_dotenv

from .carousel import DRAG_THRESHOLD
from .pagination import BATCH_SIZE, INITIAL_PAGE_SIZE

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_PUBLIC_ROOT = PROJECT_ROOT / "public"
DEFAULT_GALLERY_CONFIG = PROJECT_ROOT / "configs" / "gallery.yaml"

load_dotenv(dotenv_path=PROJECT_ROOT / ".env", override=False)


@dataclass(frozen=True)
class GallerySettings:
    """Where the images live and how the page paces itself."""

    public_root: Path = DEFAULT_PUBLIC_ROOT
    initial_page_size: int = INITIAL_PAGE_SIZE
    batch_size: int = BATCH_SIZE
    load_more_delay: float = 0.5
    rotation_interval: float = 5.0
    drag_threshold: float = DRAG_THRESHOLD


def _resolve_path(value: str | Path) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def _positive(data: dict[str, Any], key: str, cast: type, default: Any) -> Any:
    raw = data.get(key)
    if raw is None:
        return default
    try:
        value = cast(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Setting '{key}' must be a number, got {raw!r}.") from exc
    if value <= 0:
        raise ValueError(f"Setting '{key}' must be positive, got {raw!r}.")
    return value


def settings_from_mapping(data: dict[str, Any]) -> GallerySettings:
    """Validate a raw mapping (YAML document) into `GallerySettings`."""
    public_root = data.get("public_root")
    return GallerySettings(
        public_root=_resolve_path(public_root) if public_root else DEFAULT_PUBLIC_ROOT,
        initial_page_size=_positive(data, "initial_page_size", int, INITIAL_PAGE_SIZE),
        batch_size=_positive(data, "batch_size", int, BATCH_SIZE),
        load_more_delay=_positive(data, "load_more_delay", float, 0.5),
        rotation_interval=_positive(data, "rotation_interval", float, 5.0),
        drag_threshold=_positive(data, "drag_threshold", float, DRAG_THRESHOLD),
    )


def load_settings(config_path: str | Path | None = None) -> GallerySettings:
    """Read settings from YAML (if any) and apply environment overrides.

    The first existing file among `config_path`, `$GALLERY_CONFIG` and
    `configs/gallery.yaml` wins; `$GALLERY_PUBLIC_ROOT` overrides the
    public root in every case.
    """
    candidates: list[str | Path | None] = [
        config_path,
        os.getenv("GALLERY_CONFIG"),
        DEFAULT_GALLERY_CONFIG,
    ]
    raw: dict[str, Any] = {}
    for candidate in candidates:
        if candidate is None or candidate == "":
            continue
        path = _resolve_path(candidate)
        if path.exists():
            with path.open("r") as fp:
                loaded = yaml.safe_load(fp) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"Gallery config must be a mapping: {path}")
            raw = loaded
            break

    env_root = os.getenv("GALLERY_PUBLIC_ROOT")
    if env_root:
        raw = {**raw, "public_root": env_root}
    return settings_from_mapping(raw)
