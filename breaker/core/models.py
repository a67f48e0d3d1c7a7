"""
Breaker Core Data Models
=========================

Shift direction enumeration and Pydantic result models for the Breaker
cryptanalysis engine. The analyzers themselves work on plain strings and
tuples; the engine wraps their output in these models so the console
and JSON report layers have one serialisable shape to consume.

References:
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class ShiftDirection(enum.IntEnum):
    """Direction of a Caesar rotation; the value is its sign."""

    FORWARD = 1
    BACKWARD = -1

    @property
    def sign(self) -> int:
        return int(self.value)


# ===================================================================== #
#  Caesar Models
# ===================================================================== #


class CaesarCandidate(BaseModel):
    """One trial decryption of a Caesar ciphertext.

    Attributes:
        key: Key letter (the lower-case letter the alphabet start maps to).
        shift: Numeric offset of ``key``.
        plaintext: Ciphertext shifted backwards by ``shift``.
        score: Chi-squared distance from the language model.
    """

    key: str
    shift: int
    plaintext: str
    score: float = Field(ge=0.0)


class CaesarResult(BaseModel):
    """Best guess for a Caesar ciphertext plus the full ranking.

    ``candidates`` is sorted by ascending score; its head is the guess.
    """

    language: str
    key: str
    shift: int
    plaintext: str
    score: float = Field(ge=0.0)
    candidates: list[CaesarCandidate] = Field(default_factory=list)


# ===================================================================== #
#  Vigenere Models
# ===================================================================== #


class PeriodGuess(BaseModel):
    """Key-length guess derived from repeats of one substring length.

    Attributes:
        repetition_length: Length of the repeated substrings examined.
        key_length: gcd of the observed gaps, or ``None`` without repeats.
        gaps: Histogram of gaps between adjacent repeats (gap -> count).
    """

    repetition_length: int
    key_length: Optional[int] = None
    gaps: dict[int, int] = Field(default_factory=dict)


class PeriodReport(BaseModel):
    """Period guesses over a range of repetition lengths."""

    language: str
    text_length: int
    guesses: list[PeriodGuess] = Field(default_factory=list)

    @property
    def key_lengths(self) -> list[int]:
        """Distinct key lengths guessed, in first-seen order."""
        seen: list[int] = []
        for g in self.guesses:
            if g.key_length is not None and g.key_length not in seen:
                seen.append(g.key_length)
        return seen


class VigenereResult(BaseModel):
    """Best frequency-analysis guess for a Vigenere ciphertext.

    Attributes:
        key: Recovered key.
        key_length: Length of ``key`` (the guessed period).
        plaintext: Ciphertext decrypted with ``key``.
        score: Chi-squared distance of ``plaintext``.
        repetition_length: Repeated-substring length that produced the
            winning period guess.
        periods: Every period guess that was tried.
    """

    language: str
    key: str
    key_length: int
    plaintext: str
    score: float = Field(ge=0.0)
    repetition_length: Optional[int] = None
    periods: list[PeriodGuess] = Field(default_factory=list)


# ===================================================================== #
#  Brute Force Models
# ===================================================================== #


class BruteForceCandidate(BaseModel):
    """A scored candidate key."""

    key: str
    plaintext: str
    score: float = Field(ge=0.0)


class BruteForceReport(BaseModel):
    """Lowest-scoring candidates of a brute-force scan.

    Attributes:
        key_length: Enumerated key length, ``None`` for a supplied key list.
        candidates_tried: Number of keys decrypted and scored.
        best: The ``top`` lowest-scoring candidates, ascending.
    """

    language: str
    key_length: Optional[int] = None
    candidates_tried: int = 0
    best: list[BruteForceCandidate] = Field(default_factory=list)
