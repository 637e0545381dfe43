"""Transcription specifications parsed from HSL sources."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field

from hangulize.hre.pattern import Pattern, PatternError
from hangulize.hre.rpattern import RPattern
from hangulize.hsl.parser import parse
from hangulize.hsl.structures import DictSection, HSLError, ListSection, Pair
from hangulize.rule import Rule
from hangulize.scripts import Script, get_script


class SpecError(ValueError):
    """Raised when a spec cannot be built from its source."""


@dataclass
class Language:
    """Identifies a natural language."""

    id: str = ""
    codes: tuple[str, str] = ("", "")  # ISO 639-1 and ISO 639-3
    english: str = ""
    korean: str = ""
    script: str = ""
    translit: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.id}({self.english})"


@dataclass
class Config:
    """Configuration of a spec."""

    authors: list[str] = field(default_factory=list)
    stage: str = ""


def _is_punct(ch: str) -> bool:
    return unicodedata.category(ch).startswith("P")


def _collect_puncts(rewrite: list[Rule], transcribe: list[Rule]) -> frozenset[str]:
    """Collect punctuations in patterns, except those used as rewrite hints."""
    puncts: set[str] = set()
    rletters: set[str] = set()

    def collect(rule: Rule) -> None:
        puncts.update(
            let
            for let in rule.pattern.letters()
            if _is_punct(let) and let not in rletters
        )

    for rule in rewrite:
        rletters.update(rule.rpattern.letters())
        collect(rule)
    for rule in transcribe:
        collect(rule)

    return frozenset(puncts)


@dataclass(eq=False, repr=False)
class Spec:
    """A transcription specification for a language."""

    lang: Language = field(default_factory=Language)
    config: Config = field(default_factory=Config)
    macros: dict[str, str] = field(default_factory=dict)
    vars: dict[str, list[str]] = field(default_factory=dict)
    normalize: dict[str, list[str]] = field(default_factory=dict)
    rewrite: list[Rule] = field(default_factory=list)
    transcribe: list[Rule] = field(default_factory=list)
    test: list[tuple[str, str]] = field(default_factory=list)
    source: str = ""
    script: Script | None = None

    puncts: frozenset[str] = field(init=False)
    norm_letters: frozenset[str] = field(init=False)
    _norm_table: dict[str, str] = field(init=False)
    _norm_re: re.Pattern | None = field(init=False)

    def __post_init__(self) -> None:
        if self.script is None:
            self.script = get_script(self.lang.script)
        self.puncts = _collect_puncts(self.rewrite, self.transcribe)

        table: dict[str, str] = {}
        for to, froms in self.normalize.items():
            for frm in froms:
                if frm and frm not in table:
                    table[frm] = to
        self._norm_table = table
        self._norm_re = (
            re.compile("|".join(re.escape(frm) for frm in table)) if table else None
        )
        self.norm_letters = frozenset(to[0] for to in self.normalize if to)

    def __str__(self) -> str:
        return self.lang.id

    def __repr__(self) -> str:
        return f"Spec(lang={self.lang.id!r})"

    def apply_normalization(self, word) -> str:
        """Apply the spec's own normalization table to the word."""
        if self._norm_re is None:
            return word
        return self._norm_re.sub(lambda m: self._norm_table[m.group()], word)


def _dict_section(hsl: dict, name: str) -> DictSection | None:
    sec = hsl.get(name)
    if sec is not None and not isinstance(sec, DictSection):
        raise SpecError(f'section "{name}" must be a dictionary section')
    return sec


def _list_section(hsl: dict, name: str) -> ListSection | None:
    sec = hsl.get(name)
    if sec is not None and not isinstance(sec, ListSection):
        raise SpecError(f'section "{name}" must be a pair list section')
    return sec


def _new_language(sec: DictSection) -> Language:
    codes = sec.all("codes")
    if len(codes) != 2:
        raise SpecError("codes must be 2; ISO 639-1 and 3")
    return Language(
        id=sec.one("id"),
        codes=(codes[0], codes[1]),
        english=sec.one("english"),
        korean=sec.one("korean"),
        script=sec.one("script"),
        translit=sec.all("translit"),
    )


def _new_rules(pairs: list[Pair], macros, vars) -> list[Rule]:
    rules = []
    for i, pair in enumerate(pairs):
        try:
            pattern = Pattern(pair.left, macros, vars)
        except PatternError as exc:
            raise SpecError(str(exc)) from exc

        ahead, behind = pattern.negative_lookaround_widths()
        if ahead == -1 or behind == -1:
            raise SpecError(f"{pattern} contains unlimited negative lookaround")

        if not pair.right:
            raise SpecError(f"{pattern} has no replacement")
        rules.append(Rule(i, pattern, RPattern(pair.right[0], macros, vars)))
    return rules


def parse_spec(source) -> Spec:
    """Parse a Spec from HSL text or a readable text stream.

    Every section is optional; an empty source is a valid spec.
    """
    text = source if isinstance(source, str) else source.read()

    try:
        hsl = parse(text)
    except HSLError as exc:
        raise SpecError(f"failed to parse HSL source: {exc}") from exc

    lang_sec = _dict_section(hsl, "lang")
    lang = _new_language(lang_sec) if lang_sec is not None else Language()

    config_sec = _dict_section(hsl, "config")
    config = Config()
    if config_sec is not None:
        config = Config(authors=config_sec.all("authors"), stage=config_sec.one("stage"))

    macros: dict[str, str] = {}
    macros_sec = _dict_section(hsl, "macros")
    if macros_sec is not None:
        try:
            macros = macros_sec.injective()
        except HSLError as exc:
            raise SpecError(str(exc)) from exc

    vars_sec = _dict_section(hsl, "vars")
    vars = vars_sec.to_dict() if vars_sec is not None else {}

    norm_sec = _dict_section(hsl, "normalize")
    normalize = norm_sec.to_dict() if norm_sec is not None else {}

    rewrite_sec = _list_section(hsl, "rewrite")
    rewrite = _new_rules(rewrite_sec.pairs() if rewrite_sec else [], macros, vars)

    transcribe_sec = _list_section(hsl, "transcribe")
    transcribe = _new_rules(
        transcribe_sec.pairs() if transcribe_sec else [], macros, vars
    )

    test: list[tuple[str, str]] = []
    test_sec = _list_section(hsl, "test")
    if test_sec is not None:
        for pair in test_sec.pairs():
            if not pair.right:
                raise SpecError(f"test example {pair.left!r} has no result")
            test.append((pair.left, pair.right[0]))

    try:
        script = get_script(lang.script)
    except KeyError:
        raise SpecError(f"script not found: {lang.script}") from None

    return Spec(
        lang=lang,
        config=config,
        macros=macros,
        vars=vars,
        normalize=normalize,
        rewrite=rewrite,
        transcribe=transcribe,
        test=test,
        source=text,
        script=script,
    )