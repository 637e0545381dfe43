"""Rewrite and transcribe rules: a pattern paired with its replacement."""

from __future__ import annotations

from dataclasses import dataclass

from hangulize.hre.pattern import Pattern
from hangulize.hre.rpattern import InterpolationError, RPattern
from hangulize.subword import Replacement, Replacer


@dataclass(frozen=True)
class Rule:
    """A Pattern and the RPattern that replaces what it matches."""

    id: int
    pattern: Pattern
    rpattern: RPattern

    def __str__(self) -> str:
        return f'"{self.pattern}" -> "{self.rpattern}"'

    def replace(self, word) -> str:
        """Replace every match of the pattern in the word."""
        rep = Replacer(word, 0, 0)
        rep.replace_by(*self.replacements(word))
        return str(rep)

    def replacements(self, word) -> list[Replacement]:
        """Return the ranges of the word to replace and their replacements.

        Matches whose replacement cannot be interpolated are skipped.
        """
        repls: list[Replacement] = []
        for m in self.pattern.find(word, -1):
            try:
                repl = self.rpattern.interpolate(self.pattern, word, m)
            except InterpolationError:
                continue
            repls.append(Replacement(m[0], m[1], repl))
        return repls