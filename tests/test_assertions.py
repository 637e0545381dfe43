import pytest

from hangulize.hre.assertions import (
    expand_edges,
    expand_lookahead,
    expand_lookaround,
    expand_lookbehind,
)


def test_meta_patterns_match_empty():
    assert expand_lookahead("") == ("()()", "", 0)
    assert expand_lookbehind("") == ("()()", "", 0)


def test_positive_lookahead():
    assert expand_lookahead("han{gul}") == ("han(gul)()", "", 0)


def test_negative_lookahead():
    assert expand_lookahead("han{~gul}") == ("han()()", "^(gul)", 3)


def test_positive_lookahead_with_edge_never_matches():
    assert expand_lookahead("foo{bar}$") == (".^^", "", 0)


def test_negative_lookahead_with_edge():
    assert expand_lookahead("foo{~bar}$") == ("foo()($)", "", 0)


def test_positive_lookbehind():
    assert expand_lookbehind("{han}gul") == ("()(han)gul", "", 0)


def test_negative_lookbehind():
    assert expand_lookbehind("{~han}gul") == ("()()gul", "(han)$", 3)


def test_positive_lookbehind_with_edge_never_matches():
    assert expand_lookbehind("^{foo}bar") == (".^^", "", 0)


def test_complex_lookbehind():
    assert expand_lookbehind("{^^a|b}c") == ("()(^^a|b)c", "", 0)


def test_lookbehind_groups_lose_capture():
    assert expand_lookbehind("{(a|b)}c") == ("()((?:a|b))c", "", 0)


def test_expand_lookaround_widths():
    result = expand_lookaround("{~(a|e)}foo{~(a|e)*}")
    assert result == ("()()foo()()", "^((?:a|e)*)", "((?:a|e))$", -1, 1)


def test_expand_lookaround_limited_widths():
    result = expand_lookaround("{~(a|e)}foo{~(a|e)}")
    assert result[3:] == (1, 1)


def test_malformed_pattern():
    with pytest.raises(ValueError):
        expand_lookaround("{a} {b} {c}")


def test_unparsable_negative_lookbehind_never_matches():
    assert expand_lookaround("{~(}foo") == (".^^", "", "", 0, 0)


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("^foo", "(?:^|\\s+|{})foo"),
        ("^^foo", "^foo"),
        ("foo$", "foo(?:$|\\s+|{})"),
        ("foo$$", "foo$"),
        ("foo$$$", "foo$"),
        ("foo", "foo"),
    ],
)
def test_expand_edges(expr, expected):
    assert expand_edges(expr) == expected