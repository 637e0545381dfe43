import pytest

from hangulize.hre.util import (
    captured,
    expand_macros,
    expand_vars,
    get_var,
    no_capture,
    regexp_letters,
    substr,
    verbose_re,
)


@pytest.mark.parametrize(
    "expr, expected",
    [("abc", "abc"), ("(a|b|c)", "abc"), ("\\n", "")],
)
def test_regexp_letters(expr, expected):
    assert regexp_letters(expr) == expected


def test_regexp_letters_keeps_hyphen_and_drops_groups():
    assert regexp_letters("(?:a-b)(?P<x>c)") == "a-bc"


@pytest.mark.parametrize(
    "start, stop, expected",
    [(-1, 1, ""), (1, -1, ""), (0, 1, "a"), (1, 3, "bc"), (1, 10, "bc"), (1, 0, "")],
)
def test_substr(start, stop, expected):
    assert substr("abc", start, stop) == expected


def test_substr_start_past_end():
    assert substr("abc", 3, 5) == ""


def test_captured():
    m = [0, 6, 1, 3, -1, -1]
    assert captured("abcdef", m, 0) == "abcdef"
    assert captured("abcdef", m, 1) == "bc"
    assert captured("abcdef", m, 2) == ""


def test_no_capture():
    assert no_capture("(a|(b))") == "(?:a|(?:b))"


def test_verbose_re():
    pattern = verbose_re("\n--- comment\n    a\n    b\\ c\n")
    assert pattern.pattern == "ab\\ c"
    assert pattern.fullmatch("ab c") is not None


def test_expand_macros():
    assert expand_macros("_@_", {"@": "<vowels>"}) == "_<vowels>_"


def test_expand_macros_empty():
    assert expand_macros("a@b", {}) == "a@b"
    assert expand_macros("a@b", None) == "a@b"


def test_expand_macros_priority_by_order():
    assert expand_macros("aab", {"ab": "X", "a": "Y"}) == "YX"


def test_expand_vars():
    variables = {"abc": ["a", "b", "c"], "def": ["d", "e", "f"]}
    expr, used = expand_vars("<abc><def>", variables)
    assert expr == "(a|b|c)(d|e|f)"
    assert used == [["a", "b", "c"], ["d", "e", "f"]]


def test_expand_vars_quotes_meta():
    expr, used = expand_vars("x<p>", {"p": [".", "-"]})
    assert expr == "x(\\.|-)"
    assert used == [[".", "-"]]


def test_expand_vars_missing():
    expr, used = expand_vars("<nope>", None)
    assert expr == "()"
    assert used == [[]]


def test_get_var():
    assert get_var("<<foo>>", {"foo": ["x"]}) == ("foo", ["x"])
    assert get_var("<bar>", {}) == ("bar", [])