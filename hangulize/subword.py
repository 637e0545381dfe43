"""Words split into chunks tagged with the procedure step that produced them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from operator import attrgetter, itemgetter


@dataclass(frozen=True)
class Subword:
    """A chunk of a word with a level telling which step produced it."""

    word: str
    level: int


@dataclass(frozen=True)
class Replacement:
    """A deferred replacement of ``word[start:stop]``."""

    start: int
    stop: int
    word: str

    def __str__(self) -> str:
        return f"[{self.start}-{self.stop}] {self.word!r}"


class Builder:
    """Collects subwords and merges adjoining ones of the same level."""

    def __init__(self, subwords=None):
        self._subwords: list[Subword] = list(subwords or [])

    def __str__(self) -> str:
        return "".join(sw.word for sw in self._subwords)

    def write(self, *args: Subword) -> None:
        """Append subwords."""
        self._subwords.extend(args)

    def reset(self) -> None:
        """Discard the collected subwords."""
        self._subwords.clear()

    def subwords(self) -> list[Subword]:
        """Return the subwords with adjoining same-level ones merged."""
        return [
            Subword("".join(sw.word for sw in group), level)
            for level, group in groupby(self._subwords, key=attrgetter("level"))
        ]


class Replacer:
    """Buffers replacements on a word and splits the result by level.

    Replaced text gets ``next_level``; untouched text keeps its level, which
    starts as ``prev_level``.
    """

    def __init__(self, word, prev_level, next_level):
        self._word: str = word
        self._levels: list[int] = [prev_level] * len(word)
        self._next_level = next_level
        self._pending: list[Replacement] = []

    def replace(self, start, stop, word) -> None:
        """Buffer a replacement of ``[start, stop)`` by ``word``."""
        self._pending.append(Replacement(start, stop, word))

    def replace_by(self, *args: Replacement) -> None:
        """Buffer several replacements, ordered by position."""
        self._pending.extend(args)

    def _commit(self) -> None:
        if not self._pending:
            return
        chunks: list[str] = []
        levels: list[int] = []
        offset = 0
        for repl in self._pending:
            chunks.append(self._word[offset:repl.start])
            levels.extend(self._levels[offset:repl.start])
            chunks.append(repl.word)
            levels.extend([self._next_level] * len(repl.word))
            offset = repl.stop
        chunks.append(self._word[offset:])
        levels.extend(self._levels[offset:])

        self._word = "".join(chunks)
        self._levels = levels
        self._pending = []

    def __str__(self) -> str:
        self._commit()
        return self._word

    def subwords(self) -> list[Subword]:
        """Apply the buffered replacements and split the word by level."""
        self._commit()
        return [
            Subword("".join(ch for ch, _ in group), level)
            for level, group in groupby(zip(self._word, self._levels), key=itemgetter(1))
        ]