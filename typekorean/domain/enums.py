from __future__ import annotations

from enum import Enum


class JamoKind(Enum):
    """Role of a single character in the composition state machine."""

    INITIAL = "initial"  # 초성
    VOWEL = "vowel"  # 중성
    FINAL = "final"  # 종성
    OTHER = "other"


class BackspaceUnit(Enum):
    """How much one backspace press removes in a typing session.

    JAMO       : one unit of phonetic information (the engine's behaviour)
    CHARACTER  : the whole last visible character
    """

    JAMO = "jamo"
    CHARACTER = "character"
