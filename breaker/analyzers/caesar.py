"""
Caesar Solver
==============

Encrypts, decrypts and breaks single-offset rotation ciphers.

Breaking is exhaustive: with only ``alphabet size`` possible keys, every
one is tried and the decryption with the smallest chi-squared distance
wins. Cost is O(alphabet size x text length).

When several keys share the minimum score the first in alphabet order
is returned; this tie-break is an implementation detail, not a promise.
"""

from __future__ import annotations

from typing import Iterator

from breaker.analyzers.fitness import chi_squared
from breaker.analyzers.shift import Offset, backward, forward
from breaker.core.language import LanguageModel


def encrypt(plaintext: str, key: Offset, model: LanguageModel) -> str:
    """Shift *plaintext* forwards by *key* (an offset or a key letter)."""
    return forward(plaintext, key, model)


def decrypt(ciphertext: str, key: Offset, model: LanguageModel) -> str:
    """Shift *ciphertext* backwards by *key* (an offset or a key letter)."""
    return backward(ciphertext, key, model)


def candidates(ciphertext: str, model: LanguageModel) -> Iterator[tuple[str, str, float]]:
    """Yield ``(key, plaintext, score)`` for every key, in alphabet order."""
    for key in model.lower_case:
        plaintext = backward(ciphertext, key, model)
        yield key, plaintext, chi_squared(plaintext, model)


def rank(ciphertext: str, model: LanguageModel) -> list[tuple[str, str, float]]:
    """Every possible decryption, sorted by ascending score.

    The sort is stable, so equal scores keep alphabet order.
    """
    return sorted(candidates(ciphertext, model), key=lambda c: c[2])


def best_guess(ciphertext: str, model: LanguageModel) -> tuple[str, str]:
    """Most plaintext-like decryption as ``(key letter, plaintext)``."""
    key, plaintext, _ = min(candidates(ciphertext, model), key=lambda c: c[2])
    return key, plaintext
