"""
Substitution Cipher
====================

Plain monoalphabetic substitution with a known key: a direct letter to
letter mapping, no inference. Upper-case letters are mapped through
their lower-case form and stay upper case; anything outside the key
passes through.
"""

from __future__ import annotations

from typing import Mapping

from breaker.core.errors import InvalidSubstitutionKey
from breaker.core.language import LanguageModel


def _validate(key: Mapping[str, str], model: LanguageModel) -> None:
    for plain, cipher in key.items():
        if not (model.is_lower_case(plain) and model.is_lower_case(cipher)):
            raise InvalidSubstitutionKey(
                f"Mapping {plain!r} -> {cipher!r} is outside the lower case alphabet"
            )
    if len(set(key.values())) != len(key):
        raise InvalidSubstitutionKey("Two letters map to the same cipher letter")


def key_from_permutation(permutation: str, model: LanguageModel) -> dict[str, str]:
    """Key mapping the alphabet, in order, onto *permutation*.

    eg, ``"qwertyuiopasdfghjklzxcvbnm"`` maps ``a -> q``, ``b -> w`` ...
    """
    permutation = permutation.lower()
    if sorted(permutation) != sorted(model.lower_case):
        raise InvalidSubstitutionKey(
            f"Key must be a permutation of {model.lower_case!r}"
        )
    return dict(zip(model.lower_case, permutation))


def encrypt(plaintext: str, key: Mapping[str, str], model: LanguageModel) -> str:
    """Replace every letter of *plaintext* found in *key*."""
    _validate(key, model)
    out = []
    for char in plaintext:
        if char in key:
            out.append(key[char])
        elif model.is_upper_case(char) and model.fold(char) in key:
            mapped = key[model.fold(char)]
            out.append(model.upper_case[model.index_of(mapped)])
        else:
            out.append(char)
    return "".join(out)


def decrypt(ciphertext: str, key: Mapping[str, str], model: LanguageModel) -> str:
    """Undo :func:`encrypt` by applying the inverted key."""
    _validate(key, model)
    return encrypt(ciphertext, {v: k for k, v in key.items()}, model)
