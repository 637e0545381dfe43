from hangulize.hre.pattern import Pattern
from hangulize.hre.rpattern import RPattern
from hangulize.rule import Rule
from hangulize.subword import Replacement


def _rule(frm, to, vars=None):
    return Rule(0, Pattern(frm, None, vars), RPattern(to, None, vars))


def test_rule_string():
    assert str(_rule("foo", "bar")) == '"foo" -> "bar"'


def test_rule_replacements():
    repls = _rule("foo", "bar").replacements("abcfoodef")
    assert repls == [Replacement(3, 6, "bar")]


def test_rule_replace():
    assert _rule("foo", "bar").replace("abcfoodef") == "abcbardef"


def test_rule_replace_multiple():
    assert _rule("o", "0").replace("foo boo") == "f00 b00"


def test_rule_unmatched_var():
    vars = {
        "foo": ["foo"],
        "bar": ["b", "a", "r"],
        "baz": ["b", "a", "z"],
    }
    rule = _rule("<foo>", "<bar><baz>", vars)
    # Silently, keep the original.
    assert rule.replace("abcfoodef") == "abcfoodef"
    assert rule.replacements("abcfoodef") == []


def test_rule_var_to_var():
    vars = {"abc": ["a", "b", "c"], "xyz": ["x", "y", "z"]}
    assert _rule("<abc>", "<xyz>", vars).replace("absolutely") == "xysolutely"