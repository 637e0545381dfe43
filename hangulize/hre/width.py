"""Maximum match width of a regular expression."""

from __future__ import annotations

import re

_MAX_REPEAT = 1000
_REPEAT = re.compile(r"\{(\d+)(?:(,)(\d*))?\}")
_GROUP_PREFIX = re.compile(r"\?(?:P<([^>]*)>|([imsU]*)(?:(-)([imsU]*))?([:)]))")
_OCTAL = "01234567"
_ESCAPE_CLASSES = "dDsSwWaftnrv"


class RegexpSyntaxError(ValueError):
    """Raised when an expression is not a valid regular expression."""


def _add(total: int, width: int) -> int:
    if total == -1 or width == -1:
        return -1
    return total + width


class _WidthParser:
    def __init__(self, expr: str):
        self.expr = expr
        self.pos = 0

    def _error(self, message: str) -> RegexpSyntaxError:
        return RegexpSyntaxError(f"{message}: {self.expr!r}")

    def _peek(self) -> str:
        return self.expr[self.pos] if self.pos < len(self.expr) else ""

    def parse(self) -> int:
        width = self._alternation()
        if self.pos < len(self.expr):
            raise self._error("unexpected )")
        return width

    def _alternation(self) -> int:
        widths = [self._concat()]
        while self._peek() == "|":
            self.pos += 1
            widths.append(self._concat())
        if -1 in widths:
            return -1
        return max(max(widths), 0)

    def _concat(self) -> int:
        total = 0
        while self._peek() not in ("", "|", ")"):
            atom = self._atom()
            if atom is None:
                continue
            prefix, last = atom
            total = _add(total, prefix)
            total = _add(total, self._quantified(last))
        return total

    def _repeat_at(self, pos: int):
        return _REPEAT.match(self.expr, pos)

    def _quantified(self, width: int) -> int:
        ch = self._peek()
        if ch in ("*", "+"):
            self.pos += 1
            result = -1
        elif ch == "?":
            self.pos += 1
            result = width
        elif ch == "{" and (m := self._repeat_at(self.pos)):
            self.pos = m.end()
            low = int(m.group(1))
            high = low if m.group(2) is None else (int(m.group(3)) if m.group(3) else -1)
            if low > _MAX_REPEAT or high > _MAX_REPEAT or (high >= 0 and low > high):
                raise self._error("invalid repeat count")
            result = -1 if high == -1 else high * width
        else:
            return width

        if self._peek() == "?":
            self.pos += 1
        if self._peek() in ("*", "+", "?") or (
            self._peek() == "{" and self._repeat_at(self.pos)
        ):
            raise self._error("invalid nested repetition operator")
        return result

    def _atom(self):
        ch = self.expr[self.pos]
        if ch in "*+?" or (ch == "{" and self._repeat_at(self.pos)):
            raise self._error("missing argument to repetition operator")
        if ch == "(":
            return self._group()
        if ch == "[":
            return self._char_class()
        if ch == "\\":
            return self._escape()
        self.pos += 1
        if ch in "^$":
            return 0, 0
        return 0, 1

    def _group(self):
        self.pos += 1
        if self._peek() == "?":
            m = _GROUP_PREFIX.match(self.expr, self.pos)
            if m is None:
                raise self._error("invalid or unsupported Perl syntax")
            self.pos = m.end()
            name = m.group(1)
            if name is not None:
                if not re.fullmatch(r"\w+", name):
                    raise self._error("invalid named capture")
            else:
                flags, dash, negated, end = m.group(2), m.group(3), m.group(4), m.group(5)
                if dash and not negated:
                    raise self._error("invalid or unsupported Perl syntax")
                if end == ")":
                    if not flags and not dash:
                        raise self._error("invalid or unsupported Perl syntax")
                    return None
        width = self._alternation()
        if self._peek() != ")":
            raise self._error("missing closing )")
        self.pos += 1
        return 0, width

    def _find_closing(self, closer: str) -> int:
        end = self.expr.find(closer, self.pos)
        if end == -1:
            raise self._error("invalid character class range")
        return end

    def _char_class(self):
        self.pos += 1
        if self._peek() == "^":
            self.pos += 1
        first = True
        while True:
            if self.pos >= len(self.expr):
                raise self._error("missing closing ]")
            ch = self.expr[self.pos]
            if ch == "]" and not first:
                self.pos += 1
                return 0, 1
            first = False
            if self.expr.startswith("[:", self.pos):
                end = self.expr.find(":]", self.pos + 2)
                if end != -1:
                    self.pos = end + 2
                    continue
            if ch == "\\":
                if self.pos + 1 >= len(self.expr):
                    raise self._error("trailing backslash at end of expression")
                kind = self.expr[self.pos + 1]
                self.pos += 2
                if kind in "pPx" and self._peek() == "{":
                    self.pos = self._find_closing("}") + 1
                continue
            self.pos += 1

    def _escape(self):
        self.pos += 1
        if self.pos >= len(self.expr):
            raise self._error("trailing backslash at end of expression")
        ch = self.expr[self.pos]
        self.pos += 1

        if ch in "AzbB":
            return 0, 0
        if ch == "Q":
            end = self.expr.find("\\E", self.pos)
            if end == -1:
                literal = self.expr[self.pos:]
                self.pos = len(self.expr)
            else:
                literal = self.expr[self.pos:end]
                self.pos = end + 2
            if not literal:
                return None
            return len(literal) - 1, 1
        if ch in "pP":
            if self._peek() == "{":
                self.pos = self._find_closing("}") + 1
            elif self._peek():
                self.pos += 1
            else:
                raise self._error("invalid character class range")
            return 0, 1
        if ch == "x":
            if self._peek() == "{":
                self.pos = self._find_closing("}") + 1
            else:
                digits = self.expr[self.pos:self.pos + 2]
                if len(digits) != 2 or not all(c in "0123456789abcdefABCDEF" for c in digits):
                    raise self._error("invalid escape sequence")
                self.pos += 2
            return 0, 1
        if ch in _OCTAL:
            if ch != "0" and self._peek() not in tuple(_OCTAL):
                raise self._error("invalid escape sequence")
            for _ in range(2):
                if self._peek() and self._peek() in _OCTAL:
                    self.pos += 1
            return 0, 1
        if ch in _ESCAPE_CLASSES:
            return 0, 1
        if ch.isascii() and not ch.isalnum():
            return 0, 1
        raise self._error("invalid escape sequence")


def regexp_max_width(expr) -> int:
    """Return the maximum number of characters ``expr`` can match.

    -1 means unlimited. Raises RegexpSyntaxError for an invalid expression.
    """
    return _WidthParser(expr).parse()