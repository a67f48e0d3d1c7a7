"""
Cryptex Mathematical Utilities
===============================

Numeric primitives used by the cryptanalysis modules: Pearson's
chi-squared statistic over NumPy arrays and greatest-common-divisor
reduction over a collection of integers.

References:
    [1] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [2] Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2:
        Seminumerical Algorithms, 3rd ed., Section 4.5.2. Addison-Wesley.
"""

from __future__ import annotations

import math
from functools import reduce
from typing import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
#  Type aliases for readability
# ---------------------------------------------------------------------------
FloatArray = NDArray[np.floating]


# ======================== Statistical Tests ================================


def chi_squared_statistic(
    observed: FloatArray | Sequence[float],
    expected: FloatArray | Sequence[float],
) -> float:
    """Compute Pearson's chi-squared goodness-of-fit statistic.

    .. math::

        \\chi^2 = \\sum_i \\frac{(O_i - E_i)^2}{E_i}

    Only the statistic is returned; cryptanalysis compares candidate
    decryptions against each other, so no p-value is needed.

    Reference:
        Pearson, K. (1900). Philosophical Magazine, 50(302), 157-175.

    Args:
        observed: Observed counts (1-D, length *k*).
        expected: Expected counts (1-D, length *k*).

    Returns:
        The chi-squared statistic (``0.0`` for empty input).

    Raises:
        ValueError: If arrays differ in shape or expected contains
            non-positive values.
    """
    observed = np.asarray(observed, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if observed.shape != expected.shape:
        raise ValueError("Array shapes must match")
    if observed.size == 0:
        return 0.0
    if np.any(expected <= 0):
        raise ValueError("Expected values must be > 0")

    return float(np.sum((observed - expected) ** 2 / expected))


# ========================== Number Theory ==================================


def gcd_all(values: Iterable[int]) -> int:
    """Greatest common divisor of every value in *values*.

    The reduction is order-independent. An empty collection yields ``0``,
    the identity of gcd.
    """
    return reduce(math.gcd, values, 0)
