"""Composition of decomposed Jamo phonemes into Hangul syllables.

    >>> compose_hangul("ㅈㅏㅁㅗ")
    '자모'
"""

from __future__ import annotations

_LEADS = "ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ"
_MEDIALS = "ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅘㅙㅚㅛㅜㅝㅞㅟㅠㅡㅢㅣ"
_TAILS = (
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ", "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ",
    "ㄿ", "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

_SYLLABLE_FIRST = 0xAC00
_SYLLABLE_LAST = 0xD7A3
_JAEUM_FIRST = 0x3131
_JAEUM_LAST = 0x314E
_MOEUM_FIRST = 0x314F
_MOEUM_LAST = 0x3163

_LEAD = 0
_MEDIAL = 1
_TAIL = 2

_JAEUM = "jaeum"
_MOEUM = "moeum"
_COMPOSED = "composed"


def _kind(ch: str) -> str | None:
    code = ord(ch)
    if _SYLLABLE_FIRST <= code <= _SYLLABLE_LAST:
        return _COMPOSED
    if _JAEUM_FIRST <= code <= _JAEUM_LAST:
        return _JAEUM
    if _MOEUM_FIRST <= code <= _MOEUM_LAST:
        return _MOEUM
    return None


def _split(ch: str) -> list[str]:
    code = ord(ch) - _SYLLABLE_FIRST
    return [_LEADS[code // 588], _MEDIALS[(code % 588) // 28], _TAILS[code % 28]]


def _join(lead: str, medial: str, tail: str) -> str:
    if lead in _LEADS and medial in _MEDIALS and tail in _TAILS:
        code = (
            _SYLLABLE_FIRST
            + _LEADS.index(lead) * 588
            + _MEDIALS.index(medial) * 28
            + _TAILS.index(tail)
        )
        return chr(code)
    # Jamo that cannot take this position are left as they are.
    return lead + medial + tail


def compose_hangul(word) -> str:
    """Convert decomposed Jamo phonemes to composed Hangul syllables.

    Decomposed Jamo look like "ㅎㅏ-ㄴㄱㅡ-ㄹ": a Jaeum after a hyphen is a
    tail. A missing lead becomes "ㅇ" and a missing medial becomes "ㅡ".
    """
    out: list[str] = []
    buffered = ["", "", ""]

    def flush() -> None:
        if not any(buffered):
            return
        lead = buffered[_LEAD] or "ㅇ"
        medial = buffered[_MEDIAL] or "ㅡ"
        out.append(_join(lead, medial, buffered[_TAIL]))
        buffered[:] = ["", "", ""]

    score = _LEAD
    pending_tail = False

    for ch in word:
        if ch == "-":
            pending_tail = True
            continue
        is_tail, pending_tail = pending_tail, False
        prev_score = score

        kind = _kind(ch)
        if kind is None:
            flush()
            out.append(ch)
            continue

        if kind is _COMPOSED:
            flush()
            # Decompose it to merge with a tail later.
            buffered[:] = _split(ch)
            score = _TAIL if buffered[_TAIL] else _MEDIAL
            continue

        if kind is _MOEUM:
            score = _MEDIAL
        elif is_tail:
            score = _TAIL
        else:
            score = _LEAD

        if score <= prev_score:
            flush()
        buffered[score] = ch

    flush()
    return "".join(out)