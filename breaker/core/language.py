"""
Language Models
================

A :class:`LanguageModel` pairs an ordered alphabet with the expected
relative frequency of each letter in natural-language plaintext. It is
the one piece of shared state in the engine: built once, immutable,
and passed explicitly to every operation that needs it.

The alphabet is given in lower case; an upper-case variant is derived
from it. Both variants count as "in the alphabet" for shifting, while
frequency lookups always fold to lower case.

Built-in tables cover English and French over a-z.

References:
    - Lewand, R. E. (2000). Cryptological Mathematics. Mathematical
      Association of America. (English letter frequencies)
    - Singh, S. (1999). The Code Book. Fourth Estate.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from breaker.core.errors import (
    IncompleteFrequencyTable,
    InvalidAlphabet,
    InvalidFrequency,
    UnknownCharacter,
    UnknownLanguage,
)


def _upper(char: str) -> str:
    # 'ß'.upper() == 'SS'; keep such letters caseless
    upper = char.upper()
    return upper if len(upper) == 1 else char


@dataclass(frozen=True)
class LanguageModel:
    """Ordered alphabet plus expected letter frequencies.

    Attributes:
        lower_case: The ordered alphabet, lower case.
        frequencies: Letter -> expected probability. Values are used as
            expected-count multipliers and need not sum exactly to 1.
        upper_case: Upper-case variant, derived from ``lower_case``.

    Raises:
        InvalidAlphabet: Fewer than two letters, a repeated letter, or an
            entry that is not a single character.
        IncompleteFrequencyTable: An alphabet letter has no frequency.
        InvalidFrequency: A frequency is negative or not finite.
    """

    lower_case: str
    frequencies: Mapping[str, float] = field(hash=False)
    upper_case: str = field(init=False, compare=False)
    _lower_index: Mapping[str, int] = field(init=False, repr=False, compare=False, hash=False)
    _upper_index: Mapping[str, int] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        letters = list(self.lower_case)
        if any(not isinstance(c, str) or len(c) != 1 for c in letters):
            raise InvalidAlphabet("Alphabet entries must be single characters")
        if len(letters) < 2:
            raise InvalidAlphabet("Alphabet must contain at least two letters")
        duplicates = sorted(c for c, n in Counter(letters).items() if n > 1)
        if duplicates:
            raise InvalidAlphabet(f"Alphabet repeats letters: {', '.join(duplicates)}")

        missing = [c for c in letters if c not in self.frequencies]
        if missing:
            raise IncompleteFrequencyTable(missing)

        table: dict[str, float] = {}
        for c in letters:
            value = float(self.frequencies[c])
            if not math.isfinite(value) or value < 0:
                raise InvalidFrequency(f"Frequency of {c!r} must be finite and >= 0, got {value}")
            table[c] = value

        upper = "".join(_upper(c) for c in letters)

        object.__setattr__(self, "lower_case", "".join(letters))
        object.__setattr__(self, "frequencies", MappingProxyType(table))
        object.__setattr__(self, "upper_case", upper)
        object.__setattr__(self, "_lower_index", MappingProxyType({c: i for i, c in enumerate(letters)}))
        object.__setattr__(self, "_upper_index", MappingProxyType({c: i for i, c in enumerate(upper)}))

    @classmethod
    def from_mapping(
        cls,
        frequencies: Mapping[str, float],
        alphabet: Optional[Iterable[str]] = None,
    ) -> LanguageModel:
        """Build a model from a frequency table.

        The alphabet defaults to the table's key order, lower-cased.
        """
        table = {str(k).lower(): v for k, v in frequencies.items()}
        letters = "".join(alphabet) if alphabet is not None else "".join(table)
        return cls(letters, table)

    # ------------------------------------------------------------------ #
    #  Alphabet queries
    # ------------------------------------------------------------------ #

    @property
    def size(self) -> int:
        """Number of letters in the alphabet (the rotation modulus)."""
        return len(self.lower_case)

    def is_lower_case(self, char: str) -> bool:
        return char in self._lower_index

    def is_upper_case(self, char: str) -> bool:
        return char in self._upper_index

    def is_in_alphabet(self, char: str) -> bool:
        """True if *char* belongs to either case variant."""
        return char in self._lower_index or char in self._upper_index

    def index_of(self, char: str) -> int:
        """Zero-based position of *char* within its own case variant.

        Raises:
            UnknownCharacter: *char* is in neither variant.
        """
        if char in self._lower_index:
            return self._lower_index[char]
        if char in self._upper_index:
            return self._upper_index[char]
        raise UnknownCharacter(char)

    def fold(self, char: str) -> str:
        """Lower-case form of an alphabet character."""
        return self.lower_case[self.index_of(char)]

    # ------------------------------------------------------------------ #
    #  Frequencies and counting
    # ------------------------------------------------------------------ #

    def frequency_of(self, char: str) -> float:
        """Expected frequency of *char*, case-folded.

        Raises:
            UnknownCharacter: *char* is not in the alphabet.
        """
        return self.frequencies[self.fold(char)]

    def clean(self, text: str) -> str:
        """Alphabet characters of *text* only, folded to lower case."""
        return "".join(self.fold(c) for c in text if self.is_in_alphabet(c))

    def letter_counts(self, text: str) -> dict[str, int]:
        """How many times each letter occurs in *text*, case-insensitively.

        eg, ``"Sos"`` -> ``{"s": 2, "o": 1}``. Letters that do not occur
        are absent.
        """
        return dict(Counter(self.clean(text)))


# ===================================================================== #
#  Built-in frequency tables
# ===================================================================== #

ENGLISH = LanguageModel(
    "abcdefghijklmnopqrstuvwxyz",
    {
        "a": 0.08167, "b": 0.01492, "c": 0.02782, "d": 0.04253,
        "e": 0.12702, "f": 0.02228, "g": 0.02015, "h": 0.06094,
        "i": 0.06966, "j": 0.00153, "k": 0.00772, "l": 0.04025,
        "m": 0.02406, "n": 0.06749, "o": 0.07507, "p": 0.01929,
        "q": 0.00095, "r": 0.05987, "s": 0.06327, "t": 0.09056,
        "u": 0.02758, "v": 0.00978, "w": 0.02360, "x": 0.00150,
        "y": 0.01974, "z": 0.00074,
    },
)

FRENCH = LanguageModel(
    "abcdefghijklmnopqrstuvwxyz",
    {
        "a": 0.0808, "b": 0.0096, "c": 0.0344, "d": 0.0408,
        "e": 0.1745, "f": 0.0112, "g": 0.0118, "h": 0.0093,
        "i": 0.0726, "j": 0.0030, "k": 0.0016, "l": 0.0586,
        "m": 0.0278, "n": 0.0732, "o": 0.0546, "p": 0.0298,
        "q": 0.0085, "r": 0.0686, "s": 0.0798, "t": 0.0711,
        "u": 0.0559, "v": 0.0129, "w": 0.0008, "x": 0.0043,
        "y": 0.0034, "z": 0.0010,
    },
)

LANGUAGES: Mapping[str, LanguageModel] = MappingProxyType(
    {"english": ENGLISH, "french": FRENCH}
)


def get_language(
    name: str,
    custom: Optional[Mapping[str, Mapping[str, float]]] = None,
) -> LanguageModel:
    """Look up a language model by name.

    Tables in *custom* (usually ``CryptexConfig.languages``) take
    precedence over the built-in ones.

    Raises:
        UnknownLanguage: No table with that name exists.
    """
    key = name.lower()
    if custom and key in custom:
        return LanguageModel.from_mapping(custom[key])
    if key in LANGUAGES:
        return LANGUAGES[key]
    available = set(LANGUAGES) | set(custom or {})
    raise UnknownLanguage(name, list(available))
