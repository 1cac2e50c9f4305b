"""Tests for settings loading from YAML and the environment."""

from __future__ import annotations

from pathlib import Path

import pytest
import src.gallery.settings as settings_mod
from src.gallery.settings import GallerySettings, load_settings, settings_from_mapping


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("GALLERY_CONFIG", raising=False)
    monkeypatch.delenv("GALLERY_PUBLIC_ROOT", raising=False)
    monkeypatch.setattr(
        settings_mod, "DEFAULT_GALLERY_CONFIG", tmp_path / "absent.yaml"
    )


def test_defaults_without_any_file() -> None:
    assert load_settings() == GallerySettings()


def test_explicit_yaml(tmp_path: Path) -> None:
    config = tmp_path / "gallery.yaml"
    config.write_text(
        "public_root: {root}\nbatch_size: 4\nrotation_interval: 2.5\n".format(
            root=tmp_path / "www"
        )
    )

    settings = load_settings(config)

    assert settings.public_root == tmp_path / "www"
    assert settings.batch_size == 4
    assert settings.rotation_interval == 2.5
    assert settings.initial_page_size == 8


def test_env_config_and_public_root_override(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config = tmp_path / "env.yaml"
    config.write_text("public_root: /srv/ignored\nload_more_delay: 0.1\n")
    monkeypatch.setenv("GALLERY_CONFIG", str(config))
    monkeypatch.setenv("GALLERY_PUBLIC_ROOT", str(tmp_path / "assets"))

    settings = load_settings()

    assert settings.public_root == tmp_path / "assets"
    assert settings.load_more_delay == 0.1


def test_relative_public_root_resolves_against_project() -> None:
    settings = settings_from_mapping({"public_root": "public"})

    assert settings.public_root == settings_mod.PROJECT_ROOT / "public"


@pytest.mark.parametrize(
    "data",
    [{"batch_size": 0}, {"initial_page_size": -1}, {"rotation_interval": "soon"}],
)
def test_invalid_values_rejected(data: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        settings_from_mapping(data)


def test_non_mapping_yaml_rejected(tmp_path: Path) -> None:
    config = tmp_path / "list.yaml"
    config.write_text("- a\n- b\n")

    with pytest.raises(ValueError):
        load_settings(config)


def test_shipped_config_matches_defaults() -> None:
    shipped = settings_mod.PROJECT_ROOT / "configs" / "gallery.yaml"

    assert load_settings(shipped) == GallerySettings()
