"""
Key Enumeration and Brute Force
================================

Exhaustive search for short Vigenere keys.

The key space grows as ``alphabet size ** key length`` (26**6 is over
300 million), so everything here is a generator: keys are produced and
candidates scored one at a time, on demand, and the caller decides when
to stop pulling.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Callable, Iterable, Iterator

from breaker.analyzers.fitness import chi_squared
from breaker.analyzers.vigenere import decrypt
from breaker.core.language import LanguageModel

Scorer = Callable[[str, LanguageModel], float]


def all_keys(length: int, model: LanguageModel) -> Iterator[str]:
    """Every string of exactly *length* lower-case alphabet letters.

    Generated lazily in a deterministic order (``aa, ab, ... zz`` for
    English); call again to restart. Length 0 yields the empty string
    once.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    for letters in itertools.product(model.lower_case, repeat=length):
        yield "".join(letters)


def scan(
    ciphertext: str,
    candidate_keys: Iterable[str],
    model: LanguageModel,
    scorer: Scorer = chi_squared,
) -> Iterator[tuple[str, str, float]]:
    """Yield ``(key, plaintext, score)`` for each candidate key, in order.

    If the right key is among the candidates its plaintext will most
    likely have the minimum score, but finding the minimum is up to the
    caller (see :func:`best_candidates`).
    """
    for key in candidate_keys:
        plaintext = decrypt(ciphertext, key, model)
        yield key, plaintext, scorer(plaintext, model)


def best_candidates(
    results: Iterable[tuple[str, str, float]],
    top: int,
) -> list[tuple[str, str, float]]:
    """The *top* lowest-scoring results, ascending; memory bounded by *top*."""
    return heapq.nsmallest(top, results, key=lambda r: r[2])
