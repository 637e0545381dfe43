"""HRE patterns: the regular expression dialect used by transcription rules.

HRE is based on ordinary regular expressions but tweaks the assertions:

    "^"      start of a word (chunk)
    "^^"     start of the string
    "$"      end of a word (chunk)
    "$$"     end of the string
    "{...}"  zero-width match, only at the leftmost or rightmost place
    "{~...}" zero-width negative match, only at the leftmost or rightmost place
    "<var>"  one of the values of a variable

Macros are plain text substitutions applied before anything else.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from hangulize.hre.assertions import expand_edges, expand_lookaround
from hangulize.hre.rpattern import InterpolationError
from hangulize.hre.util import expand_macros, expand_vars, regexp_letters, substr

if TYPE_CHECKING:
    from hangulize.hre.rpattern import RPattern


class PatternError(ValueError):
    """Raised when an HRE pattern cannot be compiled or matched."""


def _compile(expr: str, source: str) -> re.Pattern:
    try:
        return re.compile(expr, re.ASCII)
    except re.error as exc:
        raise PatternError(f"failed to compile pattern: {source!r}: {exc}") from exc


def _pick_start_stop(m: list[int]) -> tuple[int, int]:
    start = m[5]
    if start == -1:
        start = m[0]
    stop = m[-4]
    if stop == -1:
        stop = m[1]
    return start, stop


class Pattern:
    """A compiled HRE pattern."""

    def __init__(
        self,
        expr,
        macros: Mapping[str, str] | None = None,
        vars: Mapping[str, Sequence[str]] | None = None,
    ):
        if not expr:
            raise PatternError("empty pattern not allowed")

        self.expr = expr

        re_expr = expand_macros(expr, macros)
        re_expr, used_vars = expand_vars(re_expr, vars)

        try:
            (
                re_expr,
                neg_ahead_expr,
                neg_behind_expr,
                neg_ahead_width,
                neg_behind_width,
            ) = expand_lookaround(re_expr)
        except ValueError as exc:
            raise PatternError(f"failed to compile pattern: {expr!r}: {exc}") from exc

        re_expr = expand_edges(re_expr)

        self._letters = frozenset(
            regexp_letters(re_expr + neg_ahead_expr + neg_behind_expr)
        )

        self._re = _compile(re_expr, expr)
        self._neg_ahead = _compile(neg_ahead_expr, expr) if neg_ahead_expr else None
        self._neg_behind = _compile(neg_behind_expr, expr) if neg_behind_expr else None

        self._neg_ahead_width = neg_ahead_width
        self._neg_behind_width = neg_behind_width
        self._used_vars = used_vars

    def __str__(self) -> str:
        return self.expr

    def __repr__(self) -> str:
        return f"Pattern({self.expr!r})"

    @property
    def used_vars(self) -> list[list[str]]:
        """Values of each variable referenced by the pattern, in order."""
        return self._used_vars

    def letters(self) -> list[str]:
        """Return the natural letters used in the pattern in ascending order."""
        return sorted(self._letters)

    def explain(self) -> str:
        """Show the expression together with the underlying regular expressions."""

        def show(regexp: re.Pattern | None) -> str:
            return "<nil>" if regexp is None else regexp.pattern

        return (
            f"expr:/{self.expr}/, re:/{show(self._re)}/, "
            f"negA:/{show(self._neg_ahead)}/, negB:/{show(self._neg_behind)}/"
        )

    def negative_lookaround_widths(self) -> tuple[int, int]:
        """Return the maximum widths of the negative lookahead and lookbehind.

        -1 means unlimited.
        """
        return self._neg_ahead_width, self._neg_behind_width

    def find(self, word, n=-1) -> list[list[int]]:
        """Find up to ``n`` matches (all when ``n`` is negative).

        Each match is ``[start, stop, *submatch_spans]``.
        """
        matches: list[list[int]] = []
        offset = 0
        length = len(word)

        while offset < length and (n < 0 or len(matches) < n):
            found = self._re.search(word[offset:])
            if found is None:
                break

            m = [
                -1 if i == -1 else i + offset
                for g in range(found.re.groups + 1)
                for i in found.span(g)
            ]

            # 0      ┌4   ┌5      -2┐  -1┐
            # └(edge)(look)abc(look)(edge)┐
            #  └2   └3      -4┘  -3┘      1
            if len(m) < 10:
                raise PatternError(f"unexpected submatches from {self}: {m}")

            start, stop = _pick_start_stop(m)
            if stop == start:
                raise PatternError(f"zero-width match from {self}")

            offset = stop

            if self._neg_ahead is not None:
                neg_start = m[-4]
                if self._neg_ahead_width == -1:
                    neg_stop = length
                else:
                    neg_stop = m[-4] + self._neg_ahead_width
                if self._neg_ahead.search(substr(word, neg_start, neg_stop)):
                    continue

            if self._neg_behind is not None:
                neg_stop = m[5]
                if self._neg_behind_width == -1:
                    neg_start = 0
                else:
                    neg_start = m[5] - self._neg_behind_width
                if self._neg_behind.search(substr(word, neg_start, neg_stop)):
                    continue

            matches.append([start, stop, *m[6:-4]])

        return matches

    def replace(self, word, rpat: RPattern, n=-1) -> str:
        """Replace up to ``n`` matches by the replacement pattern.

        A match whose replacement cannot be interpolated is kept as is.
        """
        parts: list[str] = []
        cur = 0
        for m in self.find(word, n):
            start, stop = m[0], m[1]
            parts.append(word[cur:start])
            try:
                parts.append(rpat.interpolate(self, word, m))
            except InterpolationError:
                parts.append(word[start:stop])
            cur = stop
        parts.append(word[cur:])
        return "".join(parts)