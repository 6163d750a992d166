from __future__ import annotations

"""Compound vowel / compound final tables for the 2-set (Dubeolsik) layout.

Both tables are keyed by *ordered* pairs: ("ㅗ", "ㅏ") combines, ("ㅏ", "ㅗ")
does not. A miss returns None, which callers treat as "no rule applies".
"""

from typing import Final


# -----------------------------------------------------------------------------
# Domain data
# -----------------------------------------------------------------------------

VOWEL_PAIRS: Final[dict[tuple[str, str], str]] = {
    ("ㅗ", "ㅏ"): "ㅘ",
    ("ㅗ", "ㅐ"): "ㅙ",
    ("ㅗ", "ㅣ"): "ㅚ",
    ("ㅜ", "ㅓ"): "ㅝ",
    ("ㅜ", "ㅔ"): "ㅞ",
    ("ㅜ", "ㅣ"): "ㅟ",
    ("ㅡ", "ㅣ"): "ㅢ",
}

# Only simple finals appear as keys; a compound final never combines again.
FINAL_PAIRS: Final[dict[tuple[str, str], str]] = {
    ("ㄱ", "ㅅ"): "ㄳ",
    ("ㄴ", "ㅈ"): "ㄵ",
    ("ㄴ", "ㅎ"): "ㄶ",
    ("ㄹ", "ㄱ"): "ㄺ",
    ("ㄹ", "ㅁ"): "ㄻ",
    ("ㄹ", "ㅂ"): "ㄼ",
    ("ㄹ", "ㅅ"): "ㄽ",
    ("ㄹ", "ㅌ"): "ㄾ",
    ("ㄹ", "ㅍ"): "ㄿ",
    ("ㄹ", "ㅎ"): "ㅀ",
    ("ㅂ", "ㅅ"): "ㅄ",
}

_FINAL_PARTS: Final[dict[str, tuple[str, str]]] = {v: k for k, v in FINAL_PAIRS.items()}


# -----------------------------------------------------------------------------
# Lookups
# -----------------------------------------------------------------------------

def combine_vowels(first: str, second: str) -> str | None:
    """Return the compound vowel for (first, second), e.g. ㅜ + ㅓ -> ㅝ."""
    return VOWEL_PAIRS.get((first, second))


def combine_finals(first: str, second: str) -> str | None:
    """Return the compound final for (first, second), e.g. ㄹ + ㄱ -> ㄺ."""
    return FINAL_PAIRS.get((first, second))


def split_final(final: str) -> tuple[str, str | None]:
    """Split a compound final into its two consonants.

    ㄳ -> ("ㄱ", "ㅅ"); a simple final comes back as (final, None).
    """
    parts = _FINAL_PARTS.get(final)
    if parts is None:
        return final, None
    return parts
