# hangulize

Building blocks for transcribing non-Korean words into Hangul, the Korean
alphabet.

A language is described by a *spec* written in HSL, a small configuration
language. A spec says how letters are normalized, which rules rewrite a
spelling towards its pronunciation, and which rules transcribe it into Hangul
Jamo. This package parses such specs, compiles and applies their rules, and
composes Jamo into syllable blocks.

## Installation

```sh
pip install .
```

For running the test suite:

```sh
pip install ".[test]"
pytest
```

## Writing a spec

```
lang:
    id      = "ita"
    codes   = "it", "ita"
    english = "Italian"
    korean  = "이탈리아어"
    script  = "Latn"

config:
    authors = "Jane Doe <jane@example.com>"
    stage   = "draft"

vars:
    "vowels" = "a", "e", "i", "o", "u"

macros:
    "@" = "<vowels>"

rewrite:
    "^gli$"   -> "li"
    "{@}gli"  -> "li"
    "gn{@}"   -> "nJ"

transcribe:
    "b" -> "ㅂ"
    "d" -> "ㄷ"
    "g" -> "ㄱ"

test:
    "gita" -> "지타"
```

Every section is optional. `script` must be one of `Latn` (the default when
empty), `Cyrl`, `Geor`, `Grek` or `Hrkt`; `codes` must hold exactly two
values.

## Parsing specs

```python
from hangulize.spec import parse_spec

with open("ita.hsl", encoding="utf-8") as f:
    spec = parse_spec(f)          # a string works as well

spec.lang.id          # "ita"
spec.config.stage     # "draft"
spec.test             # [("gita", "지타")]
spec.rewrite[0]       # a Rule
```

`parse_spec` raises `hangulize.spec.SpecError` for an unparsable source, an
unknown script, a malformed pattern or a negative lookaround of unlimited
width. A `Spec` also offers `apply_normalization(word)`, which applies its
`normalize` section, and `script`, the `hangulize.scripts.Script` it uses.

The lower-level HSL parser is `hangulize.hsl.parser.parse`, which returns a
dict of `DictSection` and `ListSection` objects (see
`hangulize.hsl.structures`).

## Rules and HRE patterns

Rule patterns use HRE, a regular-expression dialect with a few extras:

| Syntax    | Meaning                          |
|-----------|----------------------------------|
| `^`       | start of a chunk (word)          |
| `^^`      | start of the whole string        |
| `$`       | end of a chunk                   |
| `$$`      | end of the whole string          |
| `{...}`   | zero-width (lookaround) match    |
| `{~...}`  | zero-width negative match        |
| `<var>`   | one of the values of a variable  |

Lookarounds are allowed only at the very left or right of a pattern.

```python
from hangulize.hre.pattern import Pattern
from hangulize.hre.rpattern import RPattern

p = Pattern("foo{~bar}")
p.replace("foo foobar foobaz", RPattern("xxx"))   # "xxx foobar xxxbaz"

Pattern("^he(l+o){,}").find("hello, helo, hellllo")
# [[0, 5, 2, 5], [7, 11, 9, 11]]
```

A `<var>` in a replacement picks the value at the same index as the value
matched by the corresponding `<var>` in the pattern. `hangulize.rule.Rule`
pairs a `Pattern` with an `RPattern`; `Rule.replace(word)` applies it and
`Rule.replacements(word)` lists the ranges it would replace.

## Other helpers

- `hangulize.jamo.compose_hangul("ㅎㅏ-ㄴㄱㅡ-ㄹ")` gives `"한글"`; a
  consonant after `-` is a final consonant, a missing initial becomes `ㅇ` and
  a missing vowel `ㅡ`.
- `hangulize.scripts.get_script(name)` returns a script that tells whether a
  letter belongs to it (`includes`), normalizes it (`Latn` strips diacritics
  and lowers case, `Hrkt` turns Hiragana into Katakana) and adapts
  punctuation (`Hrkt` turns `、` into `", "`).
- `hangulize.subword` has `Replacer` and `Builder`, which track which parts of
  a word were produced at which level.
- `hangulize.trace` has `Trace`, `Tracer` and `SubwordsTracer` for recording
  tracing events, skipping events whose word did not change.
- `hangulize.translit` has the `Translit` base class, `TranslitRegistry`,
  and a default registry handled by `translits`, `use_translit` and
  `unuse_translit`.
- `hangulize.furigana` resolves Kana iteration marks (`repeat_kana`) and
  marks Katakana long vowels with `ー` (`merge_long_vowels`).
- `hangulize.space` has `has_space` and `has_space_only`.
- `hangulize.cover.Cover` records which rules of which spec files were
  covered, computes the ratio with `coverage()` and writes a
  `mode: count` profile with `write_profile(out)`.
- `hangulize.errors` defines `HangulizeError`, `SpecNotFoundError`,
  `TranslitError` and `TranslitNotImportedError`.

## What this package does not do

- It does not run the whole transcription of a word end to end: there is no
  object that takes a spec and a word and returns the Hangul result by
  normalizing, partitioning, rewriting, transcribing, composing and
  localizing in turn. The pieces above are the steps; chaining them is left
  to the caller.
- It has no command-line program.
- It ships no language specs; specs are read from text you supply.
- It includes no dictionary-based transliterators (for Kanji, Chinese
  characters or English); only the `Translit` interface and its registry.
- It does not render tracing events as text.