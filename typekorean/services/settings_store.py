from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from typekorean.domain.enums import BackspaceUnit

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "TYPEKOREAN_SETTINGS"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the typing-practice options

    Notes:
      - The path defaults to $TYPEKOREAN_SETTINGS, else <project_root>/settings.yaml.
      - Unknown or malformed values fall back to defaults; they are never raised.
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            settings_path = os.environ.get(SETTINGS_ENV_VAR) or None
        if settings_path is None:
            # This resolves to: <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        try:
            p = self._path
            if not p.exists():
                return {}
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
                return data if isinstance(data, dict) else {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.debug("Failed to read settings %s: %s", self._path, e)
            return {}

    def save(self, data: dict[str, Any]) -> None:
        try:
            p = self._path
            p.parent.mkdir(parents=True, exist_ok=True)
            tmp = p.with_suffix(p.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
            os.replace(str(tmp), str(p))
        except (OSError, yaml.YAMLError) as e:
            # Best-effort persistence; callers should not crash on save failures.
            logger.warning("Failed to save settings atomically to %s: %s", self._path, e)

    def _update(self, key: str, value: Any) -> None:
        s = self.load()
        s[key] = value
        self.save(s)

    def get_backspace_unit(self) -> BackspaceUnit:
        raw = self.load().get("backspace_unit", BackspaceUnit.JAMO.value)
        try:
            return BackspaceUnit(str(raw).strip().lower())
        except ValueError:
            logger.debug("Invalid backspace_unit %r; using default", raw)
            return BackspaceUnit.JAMO

    def set_backspace_unit(self, unit: BackspaceUnit) -> None:
        self._update("backspace_unit", BackspaceUnit(unit).value)

    def get_clear_on_match(self) -> bool:
        v = self.load().get("clear_on_match", True)
        return v if isinstance(v, bool) else True

    def set_clear_on_match(self, value: bool) -> None:
        self._update("clear_on_match", bool(value))

    def get_log_level(self) -> str:
        v = self.load().get("log_level", "INFO")
        level = str(v).strip().upper()
        return level if level in _LOG_LEVELS else "INFO"
