"""Helpers shared by the HRE pattern compiler: substrings, verbose
regular expressions, letter extraction, macros and variables."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

# Characters escaped by the RE2 meta quoting rule.
_META_CHARS = frozenset("\\.+*?()|[]{}^$")


def _quote_meta(text: str) -> str:
    """Escape only the regular-expression meta characters in ``text``."""
    return "".join("\\" + ch if ch in _META_CHARS else ch for ch in text)


def substr(s, start, stop) -> str:
    """Return ``s[start:stop]``, or an empty string when the range is invalid."""
    if start < 0 or stop < 0:
        return ""
    n = len(s)
    if start >= n:
        return ""
    stop = min(stop, n)
    if stop - start > 0:
        return s[start:stop]
    return ""


def captured(s, m, n) -> str:
    """Return the substring captured by group ``n`` of the span list ``m``."""
    i = n * 2
    return substr(s, m[i], m[i + 1])


def no_capture(expr) -> str:
    """Turn every capturing group in ``expr`` into a non-capturing one."""
    return expr.replace("(", "(?:")


_RE_COMMENT = re.compile(r"---.*")
_RE_WHITESPACE = re.compile(r"(^|[^\\])\s+")


def verbose_re(verbose_expr) -> re.Pattern:
    """Compile an indented, commented regular expression.

    Lines starting with ``---`` are comments. All whitespace except an
    escaped ``\\ `` is removed before compiling.
    """
    expr = _RE_COMMENT.sub("", verbose_expr)
    expr = _RE_WHITESPACE.sub(r"\1", expr)
    return re.compile(expr)


_RE_SPACE = re.compile(r"[\t\n\f\r ]")
_RE_GROUP = re.compile(r"\(\?(:|P<.+?>)")
_RE_META = re.compile(r"/")
_RE_QUOTED = re.compile(r"\\.")


def regexp_letters(expr) -> str:
    """Return the natural letters used in a regular expression."""
    letters = _RE_SPACE.sub("", expr)
    letters = _RE_GROUP.sub("", letters)
    letters = _RE_META.sub("", letters)
    letters = _RE_QUOTED.sub("", letters)
    letters = _quote_meta(letters)
    return _RE_QUOTED.sub("", letters)


def expand_macros(expr, macros) -> str:
    """Replace every macro source in ``expr`` with its target.

    At each position the first matching source, in mapping order, wins.
    """
    if not macros:
        return expr
    table = dict(macros)
    finder = re.compile("|".join(re.escape(src) for src in table))
    return finder.sub(lambda m: table[m.group()], expr)


VAR_RE = verbose_re(r"<(.+?)>")


def get_var(expr, vars) -> tuple[str, list[str]]:
    """Parse a ``<var>`` expression and return its name and values."""
    name = expr.strip("<>")
    values: Sequence[str] = (vars or {}).get(name) or []
    return name, list(values)


def expand_vars(expr, vars: Mapping[str, Sequence[str]] | None):
    """Replace each ``<var>`` with a group like ``(a|b|c)``.

    Returns the expanded expression and the values of each used variable
    in order of appearance.
    """
    used_vars: list[list[str]] = []

    def expand(match: re.Match) -> str:
        _, values = get_var(match.group(), vars)
        used_vars.append(values)
        return "(" + "|".join(_quote_meta(v) for v in values) + ")"

    return VAR_RE.sub(expand, expr), used_vars