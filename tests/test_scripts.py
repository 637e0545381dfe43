import pytest

from hangulize.scripts import Cyrl, Geor, Grek, Hrkt, Latn, get_script

LATIN_A = "A"  # U+0041
GREEK_ALPHA = "\u0391"
CYRILLIC_A = "\u0410"
GEORGIAN_AN = "\u10d0"
KATAKANA_A = "\u30a2"
HANGUL_A = "\u314f"

ALL_LETTERS = [LATIN_A, GREEK_ALPHA, CYRILLIC_A, GEORGIAN_AN, KATAKANA_A, HANGUL_A]


@pytest.mark.parametrize(
    "script, member",
    [
        (Latn(), LATIN_A),
        (Grek(), GREEK_ALPHA),
        (Cyrl(), CYRILLIC_A),
        (Geor(), GEORGIAN_AN),
        (Hrkt(), KATAKANA_A),
    ],
)
def test_includes(script, member):
    results = {ch: script.includes(ch) for ch in ALL_LETTERS}
    assert results == {ch: ch == member for ch in ALL_LETTERS}


def test_cyrl_normalize():
    assert Cyrl().normalize("\u0410") == "\u0430"


def test_hrkt_normalize():
    hrkt = Hrkt()
    assert hrkt.normalize("あ") == "ア"
    assert hrkt.normalize("ぁ") == "ァ"


def test_hrkt_includes_long_vowel_mark():
    assert Hrkt().includes("ー")


def test_latn_normalize():
    latin = Latn()
    assert latin.normalize("H") == "h"
    assert latin.normalize("é") == "e"


def test_hrkt_localize_punct():
    hrkt = Hrkt()
    assert hrkt.localize_punct("。") == ". "
    assert hrkt.localize_punct("「") == " '"
    assert hrkt.localize_punct("!") == "!"


def test_latn_localize_punct_is_identity():
    assert Latn().localize_punct("、") == "、"


@pytest.mark.parametrize("name", ["Latn", "Cyrl", "Geor", "Grek", "Hrkt"])
def test_iso15924_names(name):
    script = get_script(name)
    assert type(script).__name__ == name
    assert len(name) == 4 and name[0].isupper() and name[1:].islower()


def test_default_script_is_latin():
    script = get_script("")
    results = {ch: script.includes(ch) for ch in ALL_LETTERS}
    assert results == {ch: ch == LATIN_A for ch in ALL_LETTERS}
    assert script.normalize("É") == "e"


def test_unknown_script():
    with pytest.raises(KeyError):
        get_script("Xxxx")