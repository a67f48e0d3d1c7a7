"""
Breaker Errors
===============

Typed validation failures raised by the cryptanalysis engine.

Every error derives from :class:`CryptanalysisError`, itself a
``ValueError``: all of them are caused by bad input (a malformed
language model, a key outside the alphabet, ...) and none is retried,
since every operation is a deterministic pure computation.

"No result" outcomes (no repeated substrings, no key-length guess) are
returned as ``None`` and never raised.
"""

from __future__ import annotations


class CryptanalysisError(ValueError):
    """Base class for every Breaker validation failure."""

    pass


class UnknownCharacter(CryptanalysisError):
    """A frequency lookup was made for a character outside the alphabet."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Character {char!r} is not in the alphabet")
        self.char = char


class IncompleteFrequencyTable(CryptanalysisError):
    """A language model was built without a frequency for every letter."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            "Frequency table has no entry for: " + ", ".join(repr(c) for c in missing)
        )
        self.missing = missing


class InvalidAlphabet(CryptanalysisError):
    """The alphabet is too small, repeats a letter or holds non-characters."""

    pass


class InvalidFrequency(CryptanalysisError):
    """A frequency is negative or not a finite number."""

    pass


class InvalidKeyCharacter(CryptanalysisError):
    """A Caesar/Vigenere key character is not in the lower-case alphabet."""

    def __init__(self, char: str, reason: str | None = None) -> None:
        super().__init__(
            reason or f"Key character {char!r} is not a lower case alphabet character"
        )
        self.char = char


class ZeroExpectedFrequency(CryptanalysisError):
    """Chi-squared scoring would divide by a zero expected count."""

    def __init__(self, char: str) -> None:
        super().__init__(
            f"Letter {char!r} has zero expected frequency; chi-squared is undefined"
        )
        self.char = char


class InvalidSubstitutionKey(CryptanalysisError):
    """A substitution key is not a one-to-one mapping over the alphabet."""

    pass


class UnknownLanguage(CryptanalysisError):
    """No built-in or configured frequency table has the requested name."""

    def __init__(self, name: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown language {name!r} (available: {', '.join(sorted(available))})"
        )
        self.name = name
