"""Exceptions raised while transcribing."""

from __future__ import annotations


class HangulizeError(Exception):
    """Base class of the transcription errors."""


class SpecNotFoundError(HangulizeError, LookupError):
    """The spec for the given language is not found."""


class TranslitError(HangulizeError):
    """A transliteration has failed."""


class TranslitNotImportedError(HangulizeError):
    """The spec requires a transliterator which has not been imported."""