import pytest

from hangulize.hre.pattern import Pattern
from hangulize.hre.rpattern import InterpolationError, RPattern

VARS = {
    "abc": ["a", "b", "c"],
    "def": ["d", "e", "f"],
    "ghi": ["g", "h", "i"],
    "xyz": ["x", "y", "z"],
}


def interpolate_first(pattern, rpattern, word):
    m = pattern.find(word, 1)[0]
    return rpattern.interpolate(pattern, word, m)


def test_plain_interpolation():
    p = Pattern("foo", None, None)
    assert interpolate_first(p, RPattern("bar", None, None), "xfoo") == "bar"


def test_var_to_var():
    p = Pattern("<abc>", None, VARS)
    rp = RPattern("<xyz>", None, VARS)
    assert interpolate_first(p, rp, "b") == "y"
    assert p.replace("absolutely", rp, -1) == "xysolutely"


def test_two_vars_to_two_vars():
    p = Pattern("<abc><abc>", None, VARS)
    rp = RPattern("<def><ghi>", None, VARS)
    assert interpolate_first(p, rp, "aa") == "dg"
    assert interpolate_first(p, rp, "bc") == "ei"


def test_plain_around_var():
    p = Pattern("<abc>", None, VARS)
    rp = RPattern("[<xyz>]", None, VARS)
    assert interpolate_first(p, rp, "c") == "[z]"


def test_macro_in_rpattern():
    p = Pattern("<abc>", None, VARS)
    rp = RPattern("@", {"@": "<xyz>"}, VARS)
    assert interpolate_first(p, rp, "b") == "y"


def test_shorter_target_var_wraps():
    vars = {"abc": ["a", "b", "c"], "xy": ["x", "y"]}
    p = Pattern("<abc>", None, vars)
    rp = RPattern("<xy>", None, vars)
    assert interpolate_first(p, rp, "c") == "x"


def test_unmatched_var_count_raises():
    vars = {"foo": ["foo"], "bar": ["b", "a", "r"], "baz": ["b", "a", "z"]}
    p = Pattern("<foo>", None, vars)
    rp = RPattern("<bar><baz>", None, vars)
    with pytest.raises(InterpolationError):
        interpolate_first(p, rp, "abcfoodef")
    assert p.replace("abcfoodef", rp, -1) == "abcfoodef"


def test_letters_and_str():
    rp = RPattern("bar", None, None)
    assert rp.letters() == ["a", "b", "r"]
    assert str(rp) == "bar"


def test_letters_skip_escapes():
    rp = RPattern(r"a\.b", None, None)
    assert rp.letters() == ["a", "b"]