from __future__ import annotations

"""Hangul composition engine (domain layer).

This module contains *no* UI dependencies and keeps no state.

The text buffer is the only state: every call re-derives what is being
composed from the trailing one or two characters of the buffer, so the engine
never drifts from what the user sees.

Primary API:
- add_jamo(current_text, new_jamo)
- handle_backspace(current_text)
"""

from functools import reduce
from typing import Iterable

from typekorean.domain.hangul_unicode import (
    NO_FINAL,
    compose,
    decompose,
    is_final,
    is_initial,
    is_jamo,
    is_syllable,
    is_vowel,
)
from typekorean.domain.jamo_combine import combine_finals, combine_vowels, split_final


# -----------------------------------------------------------------------------
# Composition transition
# -----------------------------------------------------------------------------

def add_jamo(current_text: str, new_jamo: str) -> str:
    """Return the buffer after typing one jamo.

    Args:
        current_text: everything typed so far (may be "")
        new_jamo: one compatibility jamo (e.g., "ㄱ", "ㅏ"); anything else is
            appended unchanged

    Returns:
        The recomposed buffer. Never raises; when no composition rule applies
        the key is appended literally.

    Examples:
        add_jamo("ㄱ", "ㅏ") -> "가"
        add_jamo("감", "ㅏ") -> "가마"
        add_jamo("우", "ㅓ") -> "워"
    """
    text = current_text or ""
    key = new_jamo or ""

    if not is_jamo(key) or not text:
        return text + key

    head, last = text[:-1], text[-1]

    if is_syllable(last):
        return head + _extend_syllable(last, key)

    if is_initial(last):
        if is_vowel(key):
            return _join_initial_and_vowel(head, last, key)
        if is_initial(key):
            # No vowel yet: the user changed their mind about the consonant.
            return head + key

    # Bare vowel, bare compound final, or an initial followed by a final-only
    # jamo: nothing combines.
    return text + key


def _extend_syllable(syllable: str, key: str) -> str:
    """Apply `key` to a trailing precomposed syllable; returns its replacement."""
    parts = decompose(syllable)
    if parts is None:
        return syllable + key
    initial, vowel, final = parts

    if final:
        if is_vowel(key):
            # The last consonant moves to the start of the next syllable.
            kept, moved = split_final(final)
            if moved is None:
                kept, moved = NO_FINAL, final
            return compose(initial, vowel, kept) + compose(moved, key)

        if is_final(key):
            compound = combine_finals(final, key)
            if compound is not None:
                return compose(initial, vowel, compound)
            if is_initial(key):
                return syllable + key
            return compose(initial, vowel, key)

        return syllable + key

    if is_vowel(key):
        compound = combine_vowels(vowel, key)
        if compound is not None:
            return compose(initial, compound)
        return syllable + key

    if is_final(key):
        return compose(initial, vowel, key)

    return syllable + key


def _join_initial_and_vowel(head: str, initial: str, vowel: str) -> str:
    """Turn a bare trailing initial into a syllable.

    Only this transition looks one character further back: a preceding
    syllable that carries a final is re-rendered in place.
    """
    if head and is_syllable(head[-1]):
        before = decompose(head[-1])
        if before is not None and before[2]:
            # Identity for a valid syllable; the final stays where it is.
            head = head[:-1] + compose(*before)
    return head + compose(initial, vowel)


def type_jamo(keys: Iterable[str], current_text: str = "") -> str:
    """Fold a sequence of keystrokes through `add_jamo`."""
    return reduce(add_jamo, keys, current_text or "")


# -----------------------------------------------------------------------------
# Backspace transition
# -----------------------------------------------------------------------------

def handle_backspace(current_text: str) -> str:
    """Return the buffer after one jamo-level deletion.

    - "감" -> "가"      (drop the final)
    - "가" -> "ㄱㅏ"    (unmerge into bare initial + vowel)
    - "ㄱㅏ" -> "ㄱ"    (anything else loses its last character)
    - "" -> ""
    """
    text = current_text or ""
    if not text:
        return text

    head, last = text[:-1], text[-1]
    parts = decompose(last)
    if parts is None:
        return head

    initial, vowel, final = parts
    if final:
        return head + compose(initial, vowel)
    return head + initial + vowel
