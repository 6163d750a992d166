from __future__ import annotations

"""Dubeolsik (2-set) keyboard layout data.

The on-screen keyboard and physical Latin keys both end up here: a raw key
identifier is turned into the literal compatibility jamo before it reaches
the composition engine. Keys that are not part of the layout pass through
unchanged.

Values can be overridden by data/keyboard_layout.yaml:

    rows:
      - [ㅂ, ㅈ, ㄷ, ㄱ, ㅅ, ㅛ, ㅕ, ㅑ, ㅐ, ㅔ]
      - ...
    keys:
      q: ㅂ
      Q: ㅃ
"""

from pathlib import Path
from typing import Any, Final, Iterable

import yaml


# ---------------------------------------------------------------------
# Defaults (used if YAML is missing or malformed)
# ---------------------------------------------------------------------

_DEFAULT_ROWS: Final[tuple[tuple[str, ...], ...]] = (
    ("ㅂ", "ㅈ", "ㄷ", "ㄱ", "ㅅ", "ㅛ", "ㅕ", "ㅑ", "ㅐ", "ㅔ"),
    ("ㅁ", "ㄴ", "ㅇ", "ㄹ", "ㅎ", "ㅗ", "ㅓ", "ㅏ", "ㅣ"),
    ("ㅋ", "ㅌ", "ㅊ", "ㅍ", "ㅠ", "ㅜ", "ㅡ"),
)

# Latin keys in the same physical positions as _DEFAULT_ROWS
_LATIN_ROWS: Final[tuple[str, ...]] = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

# Shift variants printed on the upper half of a 2-set key cap
_SHIFTED: Final[dict[str, str]] = {
    "ㅂ": "ㅃ",
    "ㅈ": "ㅉ",
    "ㄷ": "ㄸ",
    "ㄱ": "ㄲ",
    "ㅅ": "ㅆ",
    "ㅐ": "ㅒ",
    "ㅔ": "ㅖ",
}


def _build_default_key_map() -> dict[str, str]:
    mapping: dict[str, str] = {}
    for latin_row, jamo_row in zip(_LATIN_ROWS, _DEFAULT_ROWS):
        for latin, jamo in zip(latin_row, jamo_row):
            mapping[latin] = jamo
            mapping[latin.upper()] = _SHIFTED.get(jamo, jamo)
    return mapping


_DEFAULT_KEY_MAP: Final[dict[str, str]] = _build_default_key_map()


# ---------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------

_YAML_CACHE: dict[str, Any] | None = None
_YAML_CACHE_PATH: Path | None = None
_YAML_CACHE_MTIME_NS: int | None = None


def _project_root() -> Path:
    # typekorean/domain/keyboard_layout.py -> typekorean/domain -> typekorean -> <project_root>
    return Path(__file__).resolve().parents[2]


def _layout_yaml_path() -> Path:
    return _project_root() / "data" / "keyboard_layout.yaml"


def _load_yaml() -> dict[str, Any]:
    """Load keyboard layout YAML if present.

    Failure is non-fatal; defaults will be used.
    """
    global _YAML_CACHE, _YAML_CACHE_PATH, _YAML_CACHE_MTIME_NS

    try:
        path = _layout_yaml_path()
        if not path.exists():
            _YAML_CACHE = {}
            _YAML_CACHE_PATH = path
            _YAML_CACHE_MTIME_NS = None
            return {}

        mtime_ns = path.stat().st_mtime_ns
        if _YAML_CACHE is not None and _YAML_CACHE_PATH == path and _YAML_CACHE_MTIME_NS == mtime_ns:
            return dict(_YAML_CACHE)

        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            parsed = data if isinstance(data, dict) else {}

        _YAML_CACHE = dict(parsed)
        _YAML_CACHE_PATH = path
        _YAML_CACHE_MTIME_NS = mtime_ns
        return dict(_YAML_CACHE)
    except (OSError, UnicodeError, yaml.YAMLError):
        return {}


# ---------------------------------------------------------------------
# Public API (domain-level)
# ---------------------------------------------------------------------

def get_rows() -> list[list[str]]:
    """Return the on-screen jamo rows, top to bottom."""
    data = _load_yaml()
    rows = data.get("rows")
    if isinstance(rows, list) and rows:
        cleaned: list[list[str]] = []
        for row in rows:
            if not isinstance(row, list) or not all(isinstance(k, str) for k in row):
                cleaned = []
                break
            keys = [k.strip() for k in row if k.strip()]
            if keys:
                cleaned.append(keys)
        if cleaned:
            return cleaned
    return [list(row) for row in _DEFAULT_ROWS]


def get_key_map() -> dict[str, str]:
    """Return the Latin key -> jamo map (defaults updated by YAML `keys`)."""
    mapping = dict(_DEFAULT_KEY_MAP)
    keys = _load_yaml().get("keys")
    if isinstance(keys, dict):
        for k, v in keys.items():
            if isinstance(k, str) and isinstance(v, str) and len(k) == 1 and v.strip():
                mapping[k] = v.strip()
    return mapping


def jamo_for_key(key: str) -> str:
    """Map one raw key to its jamo; unknown keys come back unchanged."""
    return get_key_map().get(key, key)


def keys_to_jamo(keys: Iterable[str]) -> list[str]:
    """Map every key of a Latin key string, e.g. "rk" -> ["ㄱ", "ㅏ"]."""
    mapping = get_key_map()
    return [mapping.get(k, k) for k in keys]


def shifted(jamo: str) -> str:
    """Return the Shift variant of an on-screen key (ㅂ -> ㅃ), else `jamo`."""
    return _SHIFTED.get(jamo, jamo)


# Public domain-data defaults (use the getters for YAML-backed values)
DUBEOLSIK_ROWS: Final[tuple[tuple[str, ...], ...]] = _DEFAULT_ROWS
DEFAULT_KEY_MAP: Final[dict[str, str]] = _DEFAULT_KEY_MAP
