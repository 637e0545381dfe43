"""Transliterators and the registries that hold them."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Translit(ABC):
    """Converts a word from one script to another, or guesses phonograms.

    Subclasses set ``scheme``, the identifier of the transliterator.
    """

    scheme: str = ""

    @abstractmethod
    def transliterate(self, word) -> str:
        """Transliterate the word."""


class TranslitRegistry:
    """Transliterators indexed by their scheme."""

    def __init__(self):
        self._translits: dict[str, Translit] = {}

    def __contains__(self, scheme) -> bool:
        return scheme in self._translits

    def __len__(self) -> int:
        return len(self._translits)

    def add(self, translit) -> bool:
        """Register a transliterator; False if its scheme is already taken."""
        scheme = translit.scheme
        if scheme in self._translits:
            return False
        self._translits[scheme] = translit
        return True

    def remove(self, scheme) -> bool:
        """Deregister a transliterator; False if the scheme is not registered."""
        return self._translits.pop(scheme, None) is not None

    def detach(self) -> dict[str, Translit]:
        """Return a copy of the registry as a plain dict."""
        return dict(self._translits)


_default_registry = TranslitRegistry()


def translits() -> dict[str, Translit]:
    """Return a copy of the default registry."""
    return _default_registry.detach()


def use_translit(translit) -> bool:
    """Import a transliterator into the default registry."""
    return _default_registry.add(translit)


def unuse_translit(scheme) -> bool:
    """Remove a transliterator from the default registry."""
    return _default_registry.remove(scheme)