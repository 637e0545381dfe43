"""Building blocks for transcribing non-Korean words into Hangul: HSL specs, HRE rules and Jamo composition."""

__version__ = "0.1.0"