"""
Period Finder
==============

Kasiski examination: guesses the key length (period) of a polyalphabetic
cipher from the spacing of repeated substrings.

When the same plaintext fragment is enciphered at two positions that
differ by a multiple of the period ``n``, the two ciphertext fragments
are identical. Gaps between repeats therefore cluster on multiples of
``n`` and their greatest common divisor estimates ``n``.

Only gaps between *adjacent* occurrences of a substring are tallied,
not every pair. This is a heuristic: short texts and coincidental
repeats add noise, so the guess may be a divisor (often 1) or a multiple
of the true period.

Reference:
    Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
    Berlin: E. S. Mittler und Sohn.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Mapping, Optional

from shared.math_utils import gcd_all


def gap_histogram(text: str, substring_length: int) -> Counter[int]:
    """Histogram of gaps between adjacent repeats of equal substrings.

    Every substring of *substring_length* characters, at every start
    position, is grouped by content. For each group seen at least twice
    the gaps between consecutive start positions are counted.

    Example: ``"abcxxabcyyabc"`` with length 3 repeats ``"abc"`` at
    0, 5 and 10, giving ``{5: 2}``.

    Args:
        text: Text to examine, used exactly as given (callers normally
            pass the cleaned ciphertext).
        substring_length: Length of the substrings to match.

    Returns:
        ``Counter`` mapping gap length to number of occurrences.

    Raises:
        ValueError: If *substring_length* is less than 1.
    """
    if substring_length < 1:
        raise ValueError(f"substring_length must be >= 1, got {substring_length}")

    positions: dict[str, list[int]] = defaultdict(list)
    for start in range(len(text) - substring_length + 1):
        positions[text[start : start + substring_length]].append(start)

    gaps: Counter[int] = Counter()
    for starts in positions.values():
        # starts is already ascending
        for a, b in zip(starts, starts[1:]):
            gaps[b - a] += 1
    return gaps


def key_length_from_gaps(gaps: Mapping[int, int]) -> Optional[int]:
    """gcd of every gap in a histogram, or ``None`` for an empty one."""
    if not gaps:
        return None
    return gcd_all(gaps)


def guess_key_length(text: str, substring_length: int) -> Optional[int]:
    """gcd of every gap in :func:`gap_histogram`, or ``None`` without repeats."""
    return key_length_from_gaps(gap_histogram(text, substring_length))
