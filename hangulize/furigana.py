"""Kana helpers: iteration marks and long vowels in Katakana."""

from __future__ import annotations

_LONG_VOWEL_RELS = {
    "ァ": "ァアカガサザタダナハバパマャヤラヮワ",
    "ア": "ァアカガサザタダナハバパマャヤラヮワ",
    "ィ": "ィイェエキギケゲシジセゼチヂニネヒビピヘベペミメリレヰヱヸヹ",
    "イ": "ィイキギシジニヒビピミリヰヸ",
    "ゥ": "ゥウォオクグコゴスズソゾツヅヌノフブプホボポムモュユョヨルロヲヴヺ",
    "ウ": "ゥウォオクグコゴスズソゾツヅトドヌノフブプホボポムモュユョヨルロヲヴヺ",
    "ェ": "ェエケゲセゼテデネヘベペメレヱヹ",
    "エ": "ェエケゲセゼテデネヘベペメレヱヹ",
    "ォ": "ォオコゴソゾトドノホボポモョヨロヲヺ",
    "オ": "ォオコゴソゾトドノホボポモョヨロヲヺ",
}


def _within(ch: str, low: str, high: str) -> bool:
    return low <= ch <= high


def is_hiragana(ch) -> bool:
    """Whether the character is in the Hiragana block."""
    return bool(ch) and _within(ch, "\u3040", "\u309f")


def is_katakana(ch) -> bool:
    """Whether the character is in the Katakana block."""
    return bool(ch) and _within(ch, "\u30a0", "\u30ff")


def _in_ka_row(ch: str) -> bool:
    return _within(ch, "か", "ぢ") or _within(ch, "カ", "ヂ")


def _in_tsu_row(ch: str) -> bool:
    return _within(ch, "つ", "ど") or _within(ch, "ツ", "ド")


def _in_ha_row(ch: str) -> bool:
    return _within(ch, "は", "ぽ") or _within(ch, "ハ", "ポ")


def to_seion(ch) -> str:
    """Convert a Dakuon or Handakuon to the corresponding Seion."""
    code = ord(ch)
    if ch in "ゔヴ":
        return chr(code - 78)
    if ch in "ゞヾ":
        return chr(code - 1)
    if code % 2 == 0 and _in_ka_row(ch):
        return chr(code - 1)
    if code % 2 == 1 and _in_tsu_row(ch):
        return chr(code - 1)
    if code % 3 == 1 and _in_ha_row(ch):
        return chr(code - 1)
    if code % 3 == 2 and _in_ha_row(ch):
        return chr(code - 2)
    if _within(ch, "ヷ", "ヺ"):
        return chr(code - 8)
    return ch


def to_dakuon(ch) -> str:
    """Convert a Seion to the corresponding Dakuon."""
    code = ord(ch)
    if ch in "うウ":
        return chr(code + 78)
    if ch in "ゝヽ":
        return chr(code + 1)
    if code % 2 == 1 and _in_ka_row(ch):
        return chr(code + 1)
    if code % 2 == 0 and _in_tsu_row(ch):
        return chr(code + 1)
    if code % 3 == 0 and _in_ha_row(ch):
        return chr(code + 1)
    if _within(ch, "ワ", "ヲ"):
        return chr(code + 8)
    return ch


def repeat_kana(word) -> str:
    """Resolve Kana iteration marks such as ゝ, ゞ, ヽ and ヾ."""
    out = []
    last = ""
    for ch in word:
        if is_hiragana(last):
            if ch == "ゝ":
                ch = to_seion(last)
            elif ch == "ゞ":
                ch = to_dakuon(last)
        elif is_katakana(last):
            if ch == "ヽ":
                ch = to_seion(last)
            elif ch == "ヾ":
                ch = to_dakuon(last)
        out.append(ch)
        last = ch
    return "".join(out)


def merge_long_vowels(word, offset) -> str:
    """Replace Katakana long vowels with 'ー' at or after the given offset."""
    out = []
    prev = None
    for i, ch in enumerate(word):
        prior = _LONG_VOWEL_RELS.get(ch)
        is_long = (
            offset <= i and prior is not None and prev is not None and prev in prior
        )
        out.append("ー" if is_long else ch)
        prev = ch
    return "".join(out)