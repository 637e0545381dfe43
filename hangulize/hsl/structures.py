"""Data structures produced by the HSL parser."""

from __future__ import annotations

from dataclasses import dataclass, field


class HSLError(Exception):
    """Raised when HSL content is malformed or inconsistent."""


@dataclass
class Pair:
    """A left string with its right values, e.g. ``aa -> "ㅏ", "ㅐ"``."""

    left: str
    right: list[str] = field(default_factory=list)
    line: int = 0


class ListSection:
    """A section that keeps its pairs in the order they were written."""

    def __init__(self, line):
        self.line = line
        self._pairs: list[Pair] = []

    def __repr__(self) -> str:
        return f"ListSection(line={self.line}, pairs={self._pairs!r})"

    def pairs(self) -> list[Pair]:
        """Return the pairs in their written order."""
        return list(self._pairs)

    def add_pair(self, left, right, line) -> None:
        """Append a pair. Never fails."""
        self._pairs.append(Pair(left, list(right), line))


class DictSection:
    """A section whose pairs have unique left strings."""

    def __init__(self, line):
        self.line = line
        self._dict: dict[str, Pair] = {}

    def __repr__(self) -> str:
        return f"DictSection(line={self.line}, dict={self._dict!r})"

    def pairs(self) -> list[Pair]:
        """Return the key-values as a list of pairs."""
        return list(self._dict.values())

    def add_pair(self, left, right, line) -> None:
        """Add a pair; raise HSLError if the left is already present."""
        if left in self._dict:
            raise HSLError(f"left of pair duplicated: {left!r}")
        self._dict[left] = Pair(left, list(right), line)

    def to_dict(self) -> dict[str, list[str]]:
        """Return the section as a mapping of keys to value lists."""
        return {pair.left: list(pair.right) for pair in self._dict.values()}

    def injective(self) -> dict[str, str]:
        """Return a one-to-one mapping; raise HSLError if a key has not exactly one value."""
        one_to_one: dict[str, str] = {}
        for pair in self._dict.values():
            if len(pair.right) != 1:
                raise HSLError(f"right {pair.right!r} has multiple values")
            one_to_one[pair.left] = pair.right[0]
        return one_to_one

    def one(self, left) -> str:
        """Return the first value for a key, or an empty string."""
        pair = self._dict.get(left)
        if pair is None or not pair.right:
            return ""
        return pair.right[0]

    def all(self, left) -> list[str]:
        """Return all values for a key, or an empty list."""
        pair = self._dict.get(left)
        if pair is None:
            return []
        return list(pair.right)