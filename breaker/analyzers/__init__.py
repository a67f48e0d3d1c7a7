"""
Breaker Analyzers
==================

The cryptanalysis primitives: fitness scoring, Caesar shifting and
solving, period finding, Vigenere solving, key enumeration with brute
force, and plain substitution. All are pure functions taking the
language model as an explicit argument.
"""

from breaker.analyzers import brute_force, caesar, substitution, vigenere
from breaker.analyzers.brute_force import all_keys, best_candidates, scan
from breaker.analyzers.fitness import chi_squared
from breaker.analyzers.period import gap_histogram, guess_key_length
from breaker.analyzers.shift import shift_char, shift_string

__all__ = [
    "brute_force",
    "caesar",
    "substitution",
    "vigenere",
    "all_keys",
    "best_candidates",
    "scan",
    "chi_squared",
    "gap_histogram",
    "guess_key_length",
    "shift_char",
    "shift_string",
]
