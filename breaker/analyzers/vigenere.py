"""
Vigenere Solver
================

Encrypts, decrypts and breaks repeating-key polyalphabetic ciphers.

Encryption shifts successive alphabet characters forwards by successive
key letters, cycling through the key. Characters outside the alphabet
pass through untouched and do not consume a key letter, so punctuation
and spacing never throw the key out of step.

Breaking works in two stages:

1. Guess the key length ``n`` with the period finder (Kasiski
   examination) on the cleaned ciphertext.
2. Transpose the cleaned ciphertext into ``n`` substreams, substream
   ``j`` holding characters ``j, j+n, j+2n, ...``. Each was enciphered
   with a single Caesar offset, so the Caesar solver recovers one key
   letter per substream. Interleaving the decrypted substreams back
   gives the plaintext.

Eg, ``abcdefghijklmnopqr`` with key length 4::

    abcd
    efgh
    ijkl
    mnop
    qr

    -> [aeimq, bfjnr, cgko, dhlp]

If the frequency table is right and the ciphertext long enough, this
usually finds the key, or something very close to it.

Reference:
    Kasiski, F. W. (1863). Die Geheimschriften und die Dechiffrirkunst.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from breaker.analyzers import caesar
from breaker.analyzers.fitness import chi_squared
from breaker.analyzers.period import guess_key_length
from breaker.analyzers.shift import key_offset, shift_char
from breaker.core.errors import InvalidKeyCharacter
from breaker.core.language import LanguageModel
from breaker.core.models import ShiftDirection

DEFAULT_REPETITION_LENGTHS = range(2, 11)


# ===================================================================== #
#  Encryption / decryption
# ===================================================================== #


def _vigenere(
    text: str,
    key: str,
    direction: ShiftDirection,
    model: LanguageModel,
) -> str:
    if not key:
        raise InvalidKeyCharacter("", "Vigenere key must not be empty")
    offsets = [key_offset(c, model) for c in key]

    out = []
    position = 0
    for char in text:
        if model.is_in_alphabet(char):
            out.append(shift_char(char, offsets[position], direction, model))
            position = (position + 1) % len(offsets)
        else:
            out.append(char)
    return "".join(out)


def encrypt(plaintext: str, key: str, model: LanguageModel) -> str:
    """Encrypt *plaintext* with the lower-case *key*."""
    return _vigenere(plaintext, key, ShiftDirection.FORWARD, model)


def decrypt(ciphertext: str, key: str, model: LanguageModel) -> str:
    """Decrypt *ciphertext* with the lower-case *key*.

    Raises:
        InvalidKeyCharacter: *key* is empty or holds a character outside
            the lower-case alphabet.
    """
    return _vigenere(ciphertext, key, ShiftDirection.BACKWARD, model)


def find_key_from_plaintext(
    ciphertext: str,
    plaintext: str,
    key_length: int,
    model: LanguageModel,
) -> str:
    """Recover the key from a known plaintext (known-plaintext attack).

    Both texts are cleaned first; the first *key_length* aligned letter
    pairs each give one key letter. A plaintext shorter than the key
    yields a correspondingly shorter key.
    """
    if key_length < 1:
        raise ValueError(f"key_length must be >= 1, got {key_length}")
    cipher = model.clean(ciphertext)[:key_length]
    plain = model.clean(plaintext)
    return "".join(
        shift_char(c, p, ShiftDirection.BACKWARD, model)
        for c, p in zip(cipher, plain)
    )


# ===================================================================== #
#  Transposition
# ===================================================================== #


def transpose(text: str, key_length: int) -> list[str]:
    """Split *text* into *key_length* substreams by position modulo key length."""
    if key_length < 1:
        raise ValueError(f"key_length must be >= 1, got {key_length}")
    return [text[j::key_length] for j in range(key_length)]


def untranspose(substreams: Sequence[str]) -> str:
    """Interleave substreams back into one text; inverse of :func:`transpose`.

    Raises:
        ValueError: The substream lengths cannot have come from
            :func:`transpose` (only trailing substreams may be one
            character shorter).
    """
    n = len(substreams)
    if n == 0:
        return ""
    total = sum(len(s) for s in substreams)
    expected = [(total - j + n - 1) // n for j in range(n)]
    if [len(s) for s in substreams] != expected:
        raise ValueError("Substream lengths are not those of a transposed text")
    return "".join(substreams[i % n][i // n] for i in range(total))


def _restore_layout(template: str, letters: str, model: LanguageModel) -> str:
    """Put lower-case *letters* back into *template*'s case and punctuation."""
    stream = iter(letters)
    out = []
    for char in template:
        if not model.is_in_alphabet(char):
            out.append(char)
            continue
        letter = next(stream)
        if model.is_lower_case(char):
            out.append(letter)
        else:
            out.append(model.upper_case[model.index_of(letter)])
    return "".join(out)


# ===================================================================== #
#  Frequency analysis
# ===================================================================== #


def frequency_analysis(
    ciphertext: str,
    key_length: int,
    model: LanguageModel,
) -> tuple[str, str]:
    """Recover ``(key, plaintext)`` for a known or guessed key length.

    Each substream of the transposed, cleaned ciphertext is broken as an
    independent Caesar cipher. The plaintext keeps the ciphertext's
    case and non-alphabet characters.
    """
    substreams = transpose(model.clean(ciphertext), key_length)
    guesses = [caesar.best_guess(s, model) for s in substreams]
    key = "".join(k for k, _ in guesses)
    letters = untranspose([p for _, p in guesses])
    return key, _restore_layout(ciphertext, letters, model)


def best_guess_for(
    ciphertext: str,
    repetition_length: int,
    model: LanguageModel,
) -> Optional[tuple[str, str]]:
    """Guess the key length from repeats of one length, then break.

    Long text usually has more and longer repeats, but also more
    coincidental ones, so *repetition_length* should grow with it.
    Returns ``None`` if no repeated substring of that length exists.
    """
    key_length = guess_key_length(model.clean(ciphertext), repetition_length)
    if key_length is None:
        return None
    return frequency_analysis(ciphertext, key_length, model)


def scored_guesses(
    ciphertext: str,
    model: LanguageModel,
    repetition_lengths: Iterable[int] = DEFAULT_REPETITION_LENGTHS,
) -> Iterator[tuple[int, str, str, float]]:
    """Yield ``(repetition_length, key, plaintext, score)`` per length.

    Lengths that found no repeated substring are skipped. The key length
    of each guess is ``len(key)``.
    """
    for repetition_length in repetition_lengths:
        guess = best_guess_for(ciphertext, repetition_length, model)
        if guess is None:
            continue
        key, plaintext = guess
        yield repetition_length, key, plaintext, chi_squared(plaintext, model)


def best_scored_guess(
    ciphertext: str,
    model: LanguageModel,
    repetition_lengths: Iterable[int] = DEFAULT_REPETITION_LENGTHS,
) -> Optional[tuple[int, str, str, float]]:
    """Lowest-scoring entry of :func:`scored_guesses`, earliest on ties."""
    return min(
        scored_guesses(ciphertext, model, repetition_lengths),
        key=lambda g: g[3],
        default=None,
    )


def best_guess(
    ciphertext: str,
    model: LanguageModel,
    repetition_lengths: Iterable[int] = DEFAULT_REPETITION_LENGTHS,
) -> Optional[tuple[str, str]]:
    """Best ``(key, plaintext)`` over several repetition lengths.

    Each repetition length proposes a key length and a decryption; the
    decryption with the lowest chi-squared score wins, the earliest
    winning ties. Returns ``None`` when no length found any repeat.
    """
    best = best_scored_guess(ciphertext, model, repetition_lengths)
    if best is None:
        return None
    _, key, plaintext, _ = best
    return key, plaintext


def brute_force(
    ciphertext: str,
    candidate_keys: Iterable[str],
    model: LanguageModel,
) -> Iterator[tuple[str, str, float]]:
    """Lazily decrypt and score with every candidate key.

    See :func:`breaker.analyzers.brute_force.scan`; never materialise the
    result (no ``list()``) for large key spaces.
    """
    from breaker.analyzers.brute_force import scan

    return scan(ciphertext, candidate_keys, model)
