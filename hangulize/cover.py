"""Rule coverage of spec tests."""

from __future__ import annotations

from pathlib import Path

from hangulize.hsl.parser import parse
from hangulize.spec import Spec, parse_spec


def _read(name: str) -> str:
    return Path(name).read_text(encoding="utf-8")


def _scan_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class Cover:
    """Remembers which rules of which spec files have been covered."""

    def __init__(self):
        self._covered: set[tuple[str, str, int]] = set()
        self._names: set[str] = set()

    def visit(self, name) -> None:
        """Mark a spec file name as visited."""
        self._names.add(name)

    def cover(self, name, step, rule_id) -> None:
        """Mark a rule of a step in a spec file as covered."""
        self._covered.add((name, step, rule_id))
        self.visit(name)

    def covered(self, name, step, rule_id) -> bool:
        """Whether the rule has been covered."""
        return (name, step, rule_id) in self._covered

    def coverage(self) -> float:
        """Return the ratio of covered rules among all rules of visited specs."""
        total = 0
        for name in sorted(self._names):
            spec: Spec = parse_spec(_read(name))
            total += len(spec.rewrite) + len(spec.transcribe)
        if total == 0:
            return 0.0
        return len(self._covered) / total

    def write_profile(self, out) -> None:
        """Write a coverage profile in the "mode: count" line format."""
        out.write("mode: count\n")

        for name in sorted(self._names):
            text = _read(name)
            sections = parse(text)
            spec = parse_spec(text)
            cols = [len(line.encode("utf-8")) + 1 for line in _scan_lines(text)]

            for step, rules in (("Rewrite", spec.rewrite), ("Transcribe", spec.transcribe)):
                if not rules:
                    continue
                pairs = sections[step.lower()].pairs()
                for rule in rules:
                    line = pairs[rule.id].line
                    col = cols[line - 1]
                    hit = int(self.covered(name, step, rule.id))
                    out.write(f"{name}:{line}.1,{line}.{col} 1 {hit}\n")