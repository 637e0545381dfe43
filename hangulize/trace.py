"""Tracing events emitted by each step of the transcription procedure."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hangulize.subword import Builder, Subword


@dataclass(frozen=True)
class Trace:
    """A tracing event: the word after a step, and why it changed."""

    step: str
    word: str
    why: str = ""
    rule: Any = None


class Tracer:
    """Forwards tracing events to a function, skipping unchanged words.

    When the function is None every method does nothing.
    """

    def __init__(self, fn: Callable[[Trace], Any] | None):
        self._fn = fn
        self._prev_word = ""

    @property
    def enabled(self) -> bool:
        """Whether events are forwarded anywhere."""
        return self._fn is not None

    def emit(self, trace: Trace) -> None:
        """Forward an event unless its word equals the previous one."""
        if self._fn is None or trace.word == self._prev_word:
            return
        self._prev_word = trace.word
        self._fn(trace)

    def input(self, word) -> None:
        """Trace the "Input" step."""
        self.emit(Trace("Input", word))

    def transliterate(self, word, scheme) -> None:
        """Trace a "Transliterate" step."""
        self.emit(Trace("Transliterate", word, scheme))

    def normalize(self, word, script) -> None:
        """Trace a "Normalize" step."""
        self.emit(Trace("Normalize", word, script))

    def rewrite(self, subwords) -> SubwordsTracer:
        """Start tracing a "Rewrite" step over the subwords."""
        return SubwordsTracer(self, "Rewrite", subwords)

    def transcribe(self, subwords) -> SubwordsTracer:
        """Start tracing a "Transcribe" step over the subwords."""
        return SubwordsTracer(self, "Transcribe", subwords)

    def syllabify(self, word) -> None:
        """Trace the "Syllabify" step."""
        self.emit(Trace("Syllabify", word))

    def localize(self, word, script) -> None:
        """Trace the "Localize" step."""
        self.emit(Trace("Localize", word, script))


class SubwordsTracer:
    """Records subwords changed by rules and traces them on commit.

    Use it as a context manager to commit on exit::

        with tracer.rewrite(subwords) as st:
            st.record_subword(0, "1st subword", rule)
    """

    def __init__(self, tracer, step, subwords):
        self._tracer: Tracer = tracer
        self._step = step
        self._subwords: list[Subword] = list(subwords)
        self._records: dict[int, tuple[Any, dict[int, str]]] = {}

    def __enter__(self) -> SubwordsTracer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.commit()

    def record_subword(self, i, word, rule) -> None:
        """Record the i-th subword as modified by the rule."""
        if not self._tracer.enabled:
            return
        _, changed = self._records.setdefault(rule.id, (rule, {}))
        changed[i] = word

    def commit(self) -> None:
        """Merge the recorded subwords rule by rule and trace each result."""
        if not self._tracer.enabled:
            return

        subwords = list(self._subwords)
        for rule_id in sorted(self._records):
            rule, changed = self._records[rule_id]
            if not changed:
                continue
            for i, word in changed.items():
                subwords[i] = Subword(word, 0)
            word = str(Builder(subwords)).replace("\x00", ".")
            self._tracer.emit(Trace(self._step, word, rule=rule))