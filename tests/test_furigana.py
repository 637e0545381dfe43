import pytest

from hangulize.furigana import (
    is_hiragana,
    is_katakana,
    merge_long_vowels,
    repeat_kana,
    to_dakuon,
    to_seion,
)


@pytest.mark.parametrize(
    "expected, ch",
    [
        ("く", "ぐ"),
        ("は", "ば"),
        ("は", "ぱ"),
        ("サ", "ザ"),
        ("ウ", "ヴ"),
        ("つ", "づ"),
        ("ヲ", "ヺ"),
        ("ゝ", "ゞ"),
    ],
)
def test_to_seion(expected, ch):
    assert to_seion(ch) == expected


@pytest.mark.parametrize(
    "expected, ch",
    [
        ("ぐ", "く"),
        ("ば", "は"),
        ("ザ", "サ"),
        ("ヴ", "ウ"),
        ("づ", "つ"),
        ("ヺ", "ヲ"),
        ("ゞ", "ゝ"),
    ],
)
def test_to_dakuon(expected, ch):
    assert to_dakuon(ch) == expected


def test_non_kana_unchanged():
    assert to_seion("a") == "a"
    assert to_dakuon("a") == "a"


def test_kana_blocks():
    assert is_hiragana("あ")
    assert not is_hiragana("ア")
    assert is_katakana("ア")
    assert not is_katakana("あ")
    assert not is_hiragana("")


@pytest.mark.parametrize(
    "expected, word",
    [
        ("かか", "かゝ"),
        ("かが", "かゞ"),
        ("がか", "がゝ"),
        ("がが", "がゞ"),
        ("カカ", "カヽ"),
        ("カガ", "カヾ"),
        ("ガカ", "ガヽ"),
        ("ガガ", "ガヾ"),
        ("かヽ", "かヽ"),
        ("カゝ", "カゝ"),
        ("かがか", "かゞゝ"),
    ],
)
def test_repeat_kana(expected, word):
    assert repeat_kana(word) == expected


def test_merge_long_vowels():
    assert merge_long_vowels("オウ", 0) == "オー"
    assert merge_long_vowels("オオ", 0) == "オー"
    assert merge_long_vowels("ケェ", 0) == "ケー"


@pytest.mark.parametrize(
    "offset, expected",
    [(0, "ホーオー"), (1, "ホーオー"), (2, "ホウオー"), (3, "ホウオー"), (4, "ホウオウ")],
)
def test_merge_long_vowels_offset(offset, expected):
    assert merge_long_vowels("ホウオウ", offset) == expected


@pytest.mark.parametrize(
    "word",
    ["ヴァヴィヴェヴォ", "ウィウェウォ", "ファフィフェフォ", "チェ", "ディドゥ", "ティトゥ", "ジェシェ"],
)
def test_merge_long_vowels_additional_sounds(word):
    assert merge_long_vowels(word, 0) == word


def test_merge_long_vowels_ei():
    assert merge_long_vowels("エイ", 0) == "エイ"
    assert merge_long_vowels("エィ", 0) == "エー"


def test_merge_long_vowels_first_letter_never_long():
    assert merge_long_vowels("ウ", 0) == "ウ"