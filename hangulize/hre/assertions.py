"""Expansion of HRE assertions: edges and simplified lookarounds."""

from __future__ import annotations

import re

from hangulize.hre.util import captured, no_capture, verbose_re
from hangulize.hre.width import RegexpSyntaxError, regexp_max_width

# ^^
_RE_LEFT_EDGE = re.compile(r"\^+")

# $$
_RE_RIGHT_EDGE = re.compile(r"\$+")

# {...}
_RE_ZERO_WIDTH = verbose_re(
    r"""
    --- open brace
        \{
    --- inside of brace
        ( [^}]+ )
    --- close brace
        \}
    """
)

# {...}$$ at the end
_RE_LOOKAHEAD = verbose_re(
    r"""
    --- zero-width
        (?:
            \{
            ( [^}]+ )
            \}
        )?
    --- right-edge
        ( \$* )
    --- end of string
        \Z
    """
)

# ^^{...} at the start
_RE_LOOKBEHIND = verbose_re(
    r"""
    --- start of string
        \A
    --- left-edge
        ( \^* )
    --- zero-width
        (?:
            \{
            ( [^}]+ )
            \}
        )?
    """
)

# An expression which never matches.
_NEVER = ".^^"

# "{}" is a zero-width space injected by an RPattern.
_WORD_START = r"(?:^|\s+|{})"
_WORD_END = r"(?:$|\s+|{})"


def _spans(match: re.Match) -> list[int]:
    return [i for g in range(match.re.groups + 1) for i in match.span(g)]


def _dissolve(template: str, look: str, has_edge: bool):
    """Split a lookaround into positive and negative parts.

    Returns ``(positive, negative, negative_width)`` or None when the
    lookaround can never match.
    """
    if not look:
        return "", "", 0

    if look.startswith("~"):
        negative, width = "", 0
        if not has_edge:
            negative = template.format(look[1:])
            try:
                width = regexp_max_width(negative)
            except RegexpSyntaxError:
                return None
        return "", negative, width

    if has_edge:
        # A positive lookaround together with an edge is a paradox.
        return None
    return look, "", 0


def expand_lookahead(expr) -> tuple[str, str, int]:
    """Expand a trailing ``{...}`` into ``(look)(edge)`` groups.

    Returns the positive expression, the negative lookahead expression and
    its maximum width.
    """
    m = _RE_LOOKAHEAD.search(expr)
    spans = _spans(m)
    other = expr[: m.start()]
    edge = no_capture(captured(expr, spans, 2))
    look = no_capture(captured(expr, spans, 1))

    dissolved = _dissolve("^({})", look, edge != "")
    if dissolved is None:
        return _NEVER, "", 0
    look, negative, width = dissolved
    return f"{other}({look})({edge})", negative, width


def expand_lookbehind(expr) -> tuple[str, str, int]:
    """Expand a leading ``{...}`` into ``(edge)(look)`` groups.

    Returns the positive expression, the negative lookbehind expression and
    its maximum width.
    """
    m = _RE_LOOKBEHIND.search(expr)
    spans = _spans(m)
    other = expr[m.end():]
    edge = no_capture(captured(expr, spans, 1))
    look = no_capture(captured(expr, spans, 2))

    dissolved = _dissolve("({})$", look, edge != "")
    if dissolved is None:
        return _NEVER, "", 0
    look, negative, width = dissolved
    return f"({edge})({look}){other}", negative, width


def expand_lookaround(expr) -> tuple[str, str, str, int, int]:
    """Expand both lookarounds of an expression.

    Returns the positive expression, the negative lookahead and lookbehind
    expressions and their widths. Raises ValueError when a zero-width group
    remains in the middle of the expression.
    """
    positive, neg_ahead, ahead_width = expand_lookahead(expr)
    positive, neg_behind, behind_width = expand_lookbehind(positive)

    if _RE_ZERO_WIDTH.search(positive):
        raise ValueError(f"zero-width group found in middle: {positive!r}")

    return positive, neg_ahead, neg_behind, ahead_width, behind_width


def _expand_runs(pattern: re.Pattern, expr: str, single: str) -> str:
    """Replace each run of an edge marker.

    A lone marker becomes ``single``; a repeated marker collapses into one
    plain marker, the string edge.
    """
    pieces = []
    pos = 0
    for m in pattern.finditer(expr):
        run = m.group()
        pieces.append(expr[pos:m.start()])
        pieces.append(single if len(run) == 1 else run[0])
        pos = m.end()
    pieces.append(expr[pos:])
    return "".join(pieces)


def expand_edges(expr) -> str:
    """Expand ``^``/``$`` into word edges and ``^^``/``$$`` into string edges."""
    expr = _expand_runs(_RE_LEFT_EDGE, expr, _WORD_START)
    return _expand_runs(_RE_RIGHT_EDGE, expr, _WORD_END)