"""Writing systems: which letters belong to them and how to normalize them."""

from __future__ import annotations

import unicodedata
from abc import ABC, abstractmethod

import regex

_LATIN = regex.compile(r"\p{Script=Latin}")
_CYRILLIC = regex.compile(r"\p{Script=Cyrillic}")
_GEORGIAN = regex.compile(r"\p{Script=Georgian}")
_GREEK = regex.compile(r"\p{Script=Greek}")
_KANA = regex.compile(r"[\p{Script=Hiragana}\p{Script=Katakana}]")


def _to_lower(ch: str) -> str:
    lowered = ch.lower()
    return lowered[0] if lowered else ch


class Script(ABC):
    """A writing system."""

    @abstractmethod
    def includes(self, ch) -> bool:
        """Whether the character belongs to this script."""

    def normalize(self, ch) -> str:
        """Normalize a letter of this script. Returns it unchanged by default."""
        return ch

    def localize_punct(self, punct) -> str:
        """Convert a punctuation to fit in Korean. Returns it unchanged by default."""
        return punct

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class Latn(Script):
    """The Latin script, the default one."""

    def includes(self, ch) -> bool:
        return _LATIN.match(ch) is not None

    def normalize(self, ch) -> str:
        """Strip diacritics and lower the case: "é" -> "e"."""
        decomposed = unicodedata.normalize("NFD", ch)
        if decomposed:
            ch = decomposed[0]
        return _to_lower(ch)


class Cyrl(Script):
    """The Cyrillic script, with combining marks."""

    def includes(self, ch) -> bool:
        return (
            _CYRILLIC.match(ch) is not None
            or unicodedata.category(ch).startswith("M")
        )

    def normalize(self, ch) -> str:
        return _to_lower(ch)


class Geor(Script):
    """The Georgian script, which is unicase."""

    def includes(self, ch) -> bool:
        return _GEORGIAN.match(ch) is not None


class Grek(Script):
    """The Greek script."""

    def includes(self, ch) -> bool:
        return _GREEK.match(ch) is not None

    def normalize(self, ch) -> str:
        return _to_lower(ch)


_HRKT_PUNCTS = {
    "。": ". ",
    "、": ", ",
    "：": ": ",
    "！": "! ",
    "？": "? ",
    "〜": "~",
    "「": " '",
    "」": "' ",
    "『": ' "',
    "』": '" ',
}


class Hrkt(Script):
    """The Japanese syllabaries, Hiragana and Katakana."""

    def includes(self, ch) -> bool:
        return ch == "ー" or _KANA.match(ch) is not None

    def normalize(self, ch) -> str:
        """Convert Hiragana to Katakana."""
        code = ord(ch)
        if 0x3040 <= code <= 0x309F:
            return chr(code + 96)
        return ch

    def localize_punct(self, punct) -> str:
        return _HRKT_PUNCTS.get(punct, punct)


_REGISTRY: dict[str, Script] = {
    "": Latn(),
    "Latn": Latn(),
    "Cyrl": Cyrl(),
    "Geor": Geor(),
    "Grek": Grek(),
    "Hrkt": Hrkt(),
}


def get_script(name) -> Script:
    """Return the script by its ISO 15924 code; "" means Latin.

    Raises KeyError for an unknown script.
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"script not found: {name}") from None