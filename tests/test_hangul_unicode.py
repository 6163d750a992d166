# tests/test_hangul_unicode.py
import pytest

from typekorean.domain.enums import JamoKind
from typekorean.domain.hangul_unicode import (
    CHOSEONG,
    JONGSEONG,
    JUNGSEONG,
    S_BASE,
    S_LAST,
    classify,
    compose,
    decompose,
    is_final,
    is_initial,
    is_jamo,
    is_syllable,
    is_vowel,
)


def test_table_sizes():
    assert len(CHOSEONG) == 19
    assert len(JUNGSEONG) == 21
    assert len(JONGSEONG) == 28
    assert JONGSEONG[0] == ""


@pytest.mark.classification
@pytest.mark.parametrize("ch,kind", [
    ("ㄱ", JamoKind.INITIAL),   # also a final; initial wins
    ("ㄸ", JamoKind.INITIAL),   # never a final
    ("ㅏ", JamoKind.VOWEL),
    ("ㅘ", JamoKind.VOWEL),
    ("ㄳ", JamoKind.FINAL),     # compound finals are final-only
    ("ㅀ", JamoKind.FINAL),
    ("가", JamoKind.OTHER),
    ("a", JamoKind.OTHER),
    ("1", JamoKind.OTHER),
    (" ", JamoKind.OTHER),
    ("", JamoKind.OTHER),
    ("ㄱㅏ", JamoKind.OTHER),
])
def test_classify(ch, kind):
    assert classify(ch) is kind


@pytest.mark.classification
def test_membership_is_queried_per_role():
    assert is_initial("ㄱ") and is_final("ㄱ")
    assert is_initial("ㅉ") and not is_final("ㅉ")
    assert is_final("ㄵ") and not is_initial("ㄵ")
    assert is_vowel("ㅢ") and not is_initial("ㅢ")
    assert not is_final("")
    assert not is_jamo("")
    assert is_jamo("ㄶ")


@pytest.mark.classification
@pytest.mark.parametrize("ch,expected", [
    ("가", True), ("힣", True), ("한", True),
    ("ㄱ", False), ("a", False), ("", False), ("가나", False),
    (chr(S_BASE - 1), False), (chr(S_LAST + 1), False),
])
def test_is_syllable(ch, expected):
    assert is_syllable(ch) is expected


@pytest.mark.parametrize("parts,syllable", [
    (("ㄱ", "ㅏ", ""), "가"),
    (("ㅎ", "ㅏ", "ㄴ"), "한"),
    (("ㄱ", "ㅡ", "ㄹ"), "글"),
    (("ㅇ", "ㅝ", ""), "워"),
    (("ㄱ", "ㅏ", "ㅄ"), "값"),
    (("ㅎ", "ㅣ", "ㅎ"), "힣"),
])
def test_compose_and_decompose_known_syllables(parts, syllable):
    assert compose(*parts) == syllable
    assert decompose(syllable) == parts


def test_compose_final_defaults_to_none():
    assert compose("ㄱ", "ㅏ") == "가"
    assert compose("ㄱ", "ㅏ", None) == "가"


@pytest.mark.parametrize("initial,vowel,final", [
    ("", "ㅏ", ""),
    ("ㄱ", "", ""),
    ("ㅏ", "ㅏ", ""),    # vowel in initial position
    ("ㄳ", "ㅏ", ""),    # compound final is not an initial
    ("ㄱ", "ㄱ", ""),
    ("ㄱ", "ㅏ", "ㄸ"),  # not a valid final
    ("a", "b", ""),
])
def test_compose_invalid_returns_empty(initial, vowel, final):
    assert compose(initial, vowel, final) == ""


@pytest.mark.parametrize("ch", ["ㄱ", "a", "", "가나", chr(S_BASE - 1), chr(S_LAST + 1)])
def test_decompose_rejects_non_syllables(ch):
    assert decompose(ch) is None


def test_round_trip_for_every_syllable():
    seen = 0
    for initial in CHOSEONG:
        for vowel in JUNGSEONG:
            for final in JONGSEONG:
                s = compose(initial, vowel, final)
                assert S_BASE <= ord(s) <= S_LAST
                assert decompose(s) == (initial, vowel, final)
                seen += 1
    assert seen == S_LAST - S_BASE + 1
