"""Whitespace tests matching Unicode's White_Space letters."""

from __future__ import annotations

_NOT_SPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_space(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_SPACE


def has_space(word) -> bool:
    """Whether the word contains a space at least once."""
    return any(_is_space(ch) for ch in word)


def has_space_only(word) -> bool:
    """Whether the word is non-empty and contains nothing but spaces."""
    return bool(word) and all(_is_space(ch) for ch in word)