"""
Fitness Scorer
===============

Chi-squared distance between a candidate text's letter distribution and
the distribution a :class:`LanguageModel` expects. Used as a rough, but
usually accurate, measure of how much a decryption looks like plaintext:
the smaller the score, the more plaintext-like the text.

For a text with ``N`` alphabet characters, letter ``i`` is expected
``f_i * N`` times. Only letters that occur in the text contribute a
term; an absent letter adds nothing.

References:
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable. Philosophical Magazine, 50(302).
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

import numpy as np

from shared.math_utils import chi_squared_statistic
from breaker.core.errors import ZeroExpectedFrequency
from breaker.core.language import LanguageModel


def observed_counts(text: str, model: LanguageModel) -> np.ndarray:
    """Count of each alphabet letter in *text*, in alphabet order."""
    counts = np.zeros(model.size, dtype=np.float64)
    for char in text:
        if model.is_in_alphabet(char):
            counts[model.index_of(char)] += 1
    return counts


def chi_squared(text: str, model: LanguageModel) -> float:
    """Score *text* against *model*; smaller means more plaintext-like.

    Args:
        text: Candidate plaintext. Characters outside the alphabet are
            ignored; case is folded.
        model: Language model providing expected frequencies.

    Returns:
        Non-negative chi-squared distance; ``0.0`` if *text* holds no
        alphabet characters.

    Raises:
        ZeroExpectedFrequency: A letter that occurs in *text* has
            frequency 0 in the model.
    """
    observed = observed_counts(text, model)
    total = observed.sum()
    if total == 0:
        return 0.0

    frequencies = np.fromiter(
        (model.frequencies[c] for c in model.lower_case),
        dtype=np.float64,
        count=model.size,
    )
    present = observed > 0
    zero = np.flatnonzero(present & (frequencies == 0))
    if zero.size:
        raise ZeroExpectedFrequency(model.lower_case[zero[0]])

    return chi_squared_statistic(observed[present], frequencies[present] * total)
