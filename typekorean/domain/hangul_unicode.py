from __future__ import annotations

"""Hangul Unicode classification and syllable codec (domain layer).

This module is *domain* logic (no I/O, no UI).

It provides:
  - The canonical compatibility jamo tables for initials (choseong), vowels
    (jungseong) and finals (jongseong), in Unicode syllable order
  - `classify()` and the `is_*()` predicates used by the composition engine
  - `compose()` / `decompose()` for the precomposed syllable block

Notes:
  - Syllables follow the Unicode Hangul Syllables algorithm:
    SBase + (LIndex * VCount + VIndex) * TCount + TIndex
  - All functions are total: unknown input yields OTHER / False / "" / None.
"""

from typing import Final

from typekorean.domain.enums import JamoKind


# -----------------------------------------------------------------------------
# Unicode constants
# -----------------------------------------------------------------------------

S_BASE: Final[int] = 0xAC00  # 가
S_LAST: Final[int] = 0xD7A3  # 힣
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28
N_COUNT: Final[int] = V_COUNT * T_COUNT  # 588 syllables per initial


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Initial consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Final consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

NO_FINAL: Final[str] = JONGSEONG[0]


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def is_initial(ch: str) -> bool:
    return ch in _CHO_MAP


def is_vowel(ch: str) -> bool:
    return ch in _JUNG_MAP


def is_final(ch: str) -> bool:
    """True for a non-empty final consonant (simple or compound)."""
    return ch != NO_FINAL and ch in _JONG_MAP


def is_jamo(ch: str) -> bool:
    return is_initial(ch) or is_vowel(ch) or is_final(ch)


def is_syllable(ch: str) -> bool:
    """True if `ch` is a single precomposed syllable (U+AC00..U+D7A3)."""
    if not isinstance(ch, str) or len(ch) != 1:
        return False
    return S_BASE <= ord(ch) <= S_LAST


def classify(ch: str) -> JamoKind:
    """Return the first matching role for `ch` (INITIAL, VOWEL, FINAL, else OTHER).

    A consonant such as "ㄱ" is both an initial and a final; this returns
    INITIAL for it. Callers that care about the final role must ask
    `is_final()` directly.
    """
    if is_initial(ch):
        return JamoKind.INITIAL
    if is_vowel(ch):
        return JamoKind.VOWEL
    if is_final(ch):
        return JamoKind.FINAL
    return JamoKind.OTHER


# -----------------------------------------------------------------------------
# Syllable codec
# -----------------------------------------------------------------------------

def compose(initial: str, vowel: str, final: str = NO_FINAL) -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        initial: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        final: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.
    """
    li = _CHO_MAP.get(initial)
    vi = _JUNG_MAP.get(vowel)
    ti = _JONG_MAP.get(final or NO_FINAL)

    if li is None or vi is None or ti is None:
        return ""

    return chr(S_BASE + li * N_COUNT + vi * T_COUNT + ti)


def decompose(syllable: str) -> tuple[str, str, str] | None:
    """Split a precomposed syllable into (initial, vowel, final).

    The final is "" when the syllable has none. Returns None for anything
    outside the syllable block.
    """
    if not is_syllable(syllable):
        return None

    index = ord(syllable) - S_BASE
    li, rest = divmod(index, N_COUNT)
    vi, ti = divmod(rest, T_COUNT)
    return CHOSEONG[li], JUNGSEONG[vi], JONGSEONG[ti]
