#!/usr/bin/env python3
"""Fill the public image folders with placeholder JPEGs for local development."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from src.demo_assets import seed_placeholder_images  # noqa: E402
from src.gallery.settings import load_settings  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate placeholder images for home/exterior/interior."
    )
    parser.add_argument(
        "--public-root",
        type=Path,
        default=None,
        help="Public asset root (defaults to the configured public_root).",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=12,
        help="Images per category (defaults to 12).",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace images that already exist.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    public_root = args.public_root or load_settings().public_root
    try:
        written = seed_placeholder_images(
            public_root, count=args.count, overwrite=args.overwrite
        )
    except ValueError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1

    for category, total in written.items():
        print(f"[seed] {category.value}: wrote {total} images")
    print(f"[seed] Images live under {public_root / 'images'}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
