# tests/conftest.py
from pathlib import Path

import pytest

from typekorean.domain import keyboard_layout
from typekorean.services.settings_store import SettingsStore


@pytest.fixture
def settings_store(tmp_path: Path) -> SettingsStore:
    """A SettingsStore pointed at a temp file so tests never touch settings.yaml."""
    return SettingsStore(str(tmp_path / "settings.yaml"))


@pytest.fixture
def layout_yaml(monkeypatch, tmp_path: Path) -> Path:
    """Redirect data/keyboard_layout.yaml to a temp path and drop the loader cache.

    The file is not created; tests write it when they need an override.
    """
    path = tmp_path / "data" / "keyboard_layout.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    monkeypatch.setattr(keyboard_layout, "_layout_yaml_path", lambda: path)
    monkeypatch.setattr(keyboard_layout, "_YAML_CACHE", None)
    monkeypatch.setattr(keyboard_layout, "_YAML_CACHE_PATH", None)
    monkeypatch.setattr(keyboard_layout, "_YAML_CACHE_MTIME_NS", None)
    return path
