"""Replacement patterns for HRE rules.

In a replacement pattern ``{}`` stands for a zero-width space and ``<var>``
picks the value of a variable at the same index as the value matched by the
corresponding variable in the pattern.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, NamedTuple

from hangulize.hre.util import VAR_RE, expand_macros, get_var, regexp_letters

if TYPE_CHECKING:
    from hangulize.hre.pattern import Pattern


class InterpolationError(ValueError):
    """Raised when a replacement cannot be built for a match."""


class _Part(NamedTuple):
    is_var: bool
    literal: str
    values: tuple[str, ...] = ()


class RPattern:
    """A dynamic replacement pattern."""

    def __init__(
        self,
        expr,
        macros: Mapping[str, str] | None = None,
        vars: Mapping[str, Sequence[str]] | None = None,
    ):
        self.expr = expr

        expanded = expand_macros(expr, macros)
        parts: list[_Part] = []
        offset = 0

        for match in VAR_RE.finditer(expanded):
            plain = expanded[offset:match.start()]
            if plain:
                parts.append(_Part(False, plain))
            var_expr = match.group()
            _, values = get_var(var_expr, vars)
            parts.append(_Part(True, var_expr, tuple(values)))
            offset = match.end()

        plain = expanded[offset:]
        if plain:
            parts.append(_Part(False, plain))

        self._parts = parts
        self._letters = frozenset(regexp_letters(expr))

    def __str__(self) -> str:
        return self.expr

    def __repr__(self) -> str:
        return f"RPattern({self.expr!r})"

    def interpolate(self, pattern: Pattern, word, m) -> str:
        """Build the replacement for the match ``m`` of ``pattern`` in ``word``."""
        out: list[str] = []
        var_index = 0

        for part in self._parts:
            if not part.is_var:
                out.append(part.literal)
                continue

            used_vars = pattern.used_vars
            if var_index >= len(used_vars):
                raise InterpolationError("mapped vars have different length")
            if not part.values:
                raise InterpolationError(f"variable {part.literal} has no values")

            from_var = used_vars[var_index]
            i = 2 * (var_index + 1)
            start, stop = m[i], m[i + 1]
            from_val = word[start:stop] if 0 <= start <= stop else ""

            try:
                index = from_var.index(from_val)
            except ValueError:
                raise InterpolationError(
                    f"matched value {from_val!r} not found in variable"
                ) from None

            out.append(part.values[index % len(part.values)])
            var_index += 1

        return "".join(out)

    def letters(self) -> list[str]:
        """Return the natural letters used in the expression in ascending order."""
        return sorted(self._letters)