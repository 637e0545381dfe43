"""Parser for the HSL format.

An HSL document consists of sections. Each section holds either
``key = "value", ...`` pairs (a dictionary section, whose keys are unique)
or ``"left" -> "right", ...`` pairs (a list section, which keeps order).
"""

from __future__ import annotations

from typing import TextIO, Union

from hangulize.hsl.lexer import Lexer, Token
from hangulize.hsl.structures import DictSection, HSLError, ListSection

Section = Union[DictSection, ListSection]


class HSLParseError(HSLError):
    """Raised when HSL source cannot be parsed."""


def _parse_values(lexer: Lexer) -> list[str]:
    values: list[str] = []
    while True:
        tok, lit = lexer.scan()
        if tok is Token.ILLEGAL:
            raise HSLParseError(f"parse values: illegal token: {lit}")
        if tok is Token.EOF or tok is Token.NEWLINE:
            break
        if tok is Token.STRING:
            values.append(lit)
    return values


def _parse(lexer: Lexer) -> dict[str, Section]:
    hsl: dict[str, Section] = {}
    last_string = ""
    section_name = ""
    section_line = 0

    while True:
        tok, lit = lexer.scan()
        line = lexer.line

        if tok is Token.ILLEGAL:
            raise HSLParseError(f"parse: illegal token: {lit}")
        if tok is Token.EOF:
            break
        if tok is Token.COMMENT:
            continue

        if tok is Token.STRING:
            last_string = lit
        elif tok is Token.COLON:
            section_name = last_string
            section_line = line
        elif tok is Token.EQUAL or tok is Token.ARROW:
            if not section_name:
                raise HSLParseError("pair found not in section")
            values = _parse_values(lexer)
            section = hsl.get(section_name)
            if section is None:
                if tok is Token.EQUAL:
                    section = DictSection(section_line)
                else:
                    section = ListSection(section_line)
                hsl[section_name] = section
            try:
                section.add_pair(last_string, values, line)
            except HSLError as exc:
                raise HSLParseError(f"failed to add pair: {exc}") from exc

    return hsl


def parse(source) -> dict[str, Section]:
    """Parse HSL text (a string or a readable text stream) into sections."""
    text = source if isinstance(source, str) else _read(source)
    try:
        return _parse(Lexer(text))
    except HSLParseError:
        raise
    except HSLError as exc:
        raise HSLParseError(str(exc)) from exc


def _read(stream: TextIO) -> str:
    return stream.read()