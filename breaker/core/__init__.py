"""
Breaker Core Module
====================

Language model, typed errors and result models of the Breaker
cryptanalysis toolkit. The engine lives in :mod:`breaker.core.engine`;
it depends on the analyzers, which in turn import from this package.
"""

from breaker.core.errors import (
    CryptanalysisError,
    IncompleteFrequencyTable,
    InvalidAlphabet,
    InvalidFrequency,
    InvalidKeyCharacter,
    InvalidSubstitutionKey,
    UnknownCharacter,
    UnknownLanguage,
    ZeroExpectedFrequency,
)
from breaker.core.language import ENGLISH, FRENCH, LANGUAGES, LanguageModel, get_language
from breaker.core.models import (
    BruteForceCandidate,
    BruteForceReport,
    CaesarCandidate,
    CaesarResult,
    PeriodGuess,
    PeriodReport,
    ShiftDirection,
    VigenereResult,
)

__all__ = [
    "CryptanalysisError",
    "IncompleteFrequencyTable",
    "InvalidAlphabet",
    "InvalidFrequency",
    "InvalidKeyCharacter",
    "InvalidSubstitutionKey",
    "UnknownCharacter",
    "UnknownLanguage",
    "ZeroExpectedFrequency",
    "ENGLISH",
    "FRENCH",
    "LANGUAGES",
    "LanguageModel",
    "get_language",
    "BruteForceCandidate",
    "BruteForceReport",
    "CaesarCandidate",
    "CaesarResult",
    "PeriodGuess",
    "PeriodReport",
    "ShiftDirection",
    "VigenereResult",
]
