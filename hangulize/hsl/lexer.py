"""Tokenizer for the HSL format."""

from __future__ import annotations

import unicodedata
from enum import Enum, auto
from typing import Callable

from hangulize.hsl.structures import HSLError

_END = ""
_NUL = "\0"


class Token(Enum):
    """Kinds of tokens in HSL source."""

    ILLEGAL = auto()
    EOF = auto()
    SPACE = auto()
    COMMENT = auto()
    NEWLINE = auto()
    STRING = auto()
    COLON = auto()
    COMMA = auto()
    EQUAL = auto()
    ARROW = auto()


def _is_eof(ch: str) -> bool:
    return ch == _END or ch == _NUL


def _is_unicode_space(ch: str) -> bool:
    return ch.isspace() and ch not in "\x1c\x1d\x1e\x1f"


def _is_space(ch: str) -> bool:
    return ch != "\n" and _is_unicode_space(ch)


def _is_in_line(ch: str) -> bool:
    return ch != "\n" and not _is_eof(ch)


def _is_initial_letter(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_letter(ch: str) -> bool:
    return _is_initial_letter(ch) or unicodedata.category(ch) == "Nd"


class Lexer:
    """Reads HSL text and yields tokens with their literals."""

    def __init__(self, text):
        self._text = text
        self._pos = 0
        self._line = 1
        self._prev_line = 1
        self._can_unread = False

    @property
    def line(self) -> int:
        """The current line number."""
        return self._line

    def _read(self) -> str:
        if self._pos >= len(self._text):
            self._can_unread = False
            return _END
        ch = self._text[self._pos]
        self._pos += 1
        self._can_unread = True
        self._prev_line = self._line
        if ch == "\n":
            self._line += 1
        return ch

    def _unread(self) -> None:
        if not self._can_unread:
            return
        self._pos -= 1
        self._line = self._prev_line
        self._can_unread = False

    def _read_while(self, test: Callable[[str], bool]) -> str:
        chars = []
        ch = self._read()
        while not _is_eof(ch) and test(ch):
            chars.append(ch)
            ch = self._read()
        self._unread()
        return "".join(chars)

    def _scan_comment(self) -> tuple[Token, str]:
        parts: list[str] = []
        n_empty = 0
        i = 0
        while True:
            self._read_while(_is_space)
            ch = self._read()
            if ch != "#":
                self._unread()
                break

            line = self._read_while(_is_in_line)
            self._read()  # discard the newline
            line = line.strip()

            if not line:
                n_empty += 1
                i += 1
                continue

            if i > 0:
                parts.append("\n\n" if n_empty > 0 else " ")
            n_empty = 0
            parts.append(line)
            i += 1

        return Token.COMMENT, "".join(parts)

    def _scan_quoted_string(self) -> tuple[Token, str]:
        if self._read() != '"':
            raise HSLError("not a quote")

        chars = []
        escaped = False
        while True:
            ch = self._read()
            if ch == _END:
                raise HSLError("unterminated quoted string")
            if ch == '"':
                if escaped:
                    escaped = False
                else:
                    break
            if ch == "\\":
                escaped = True
                continue
            if escaped:
                continue
            chars.append(ch)

        return Token.STRING, "".join(chars)

    def _scan_arrow(self) -> tuple[Token, str]:
        first = self._read()
        second = self._read()
        if first != "-" or second != ">":
            raise HSLError("not ->")
        return Token.ARROW, "->"

    def scan(self) -> tuple[Token, str]:
        """Read the next token and its literal."""
        ch = self._read()

        if _is_eof(ch):
            return Token.EOF, ""
        if ch == "\n":
            return Token.NEWLINE, "\n"
        if _is_unicode_space(ch):
            self._unread()
            return Token.SPACE, self._read_while(_is_space)
        if _is_initial_letter(ch):
            self._unread()
            return Token.STRING, self._read_while(_is_letter)
        if ch == '"':
            self._unread()
            return self._scan_quoted_string()
        if ch == "#":
            self._unread()
            return self._scan_comment()
        if ch == ":":
            return Token.COLON, ":"
        if ch == ",":
            return Token.COMMA, ","
        if ch == "=":
            return Token.EQUAL, "="
        if ch == "-":
            self._unread()
            return self._scan_arrow()

        return Token.ILLEGAL, ch