"""
Caesar Shift
=============

Rotation of characters within a language model's alphabet, the primitive
every other cipher in Breaker is built from.

A shift is either FORWARD (``+offset``) or BACKWARD (``-offset``);
BACKWARD undoes FORWARD for the same offset. The offset is either an
``int`` or a key letter, which stands for its zero-based position in the
lower-case alphabet (``'a'`` = 0, ``'d'`` = 3 ...).

Characters outside the alphabet pass through unchanged, and letters
stay in their own case variant.
"""

from __future__ import annotations

from typing import Union

from breaker.core.errors import InvalidKeyCharacter
from breaker.core.language import LanguageModel
from breaker.core.models import ShiftDirection

Offset = Union[int, str]


def key_offset(by_char: str, model: LanguageModel) -> int:
    """Offset denoted by the key letter *by_char*.

    Raises:
        InvalidKeyCharacter: *by_char* is not a lower-case alphabet letter.
    """
    if not model.is_lower_case(by_char):
        raise InvalidKeyCharacter(by_char)
    return model.index_of(by_char)


def _as_int(by: Offset, model: LanguageModel) -> int:
    if isinstance(by, str):
        return key_offset(by, model)
    return int(by)


def shift_char(
    char: str,
    by: Offset,
    direction: ShiftDirection,
    model: LanguageModel,
) -> str:
    """Rotate a single character by *by* in *direction*.

    The result wraps with a floored modulo, so negative offsets and
    offsets larger than the alphabet behave as expected.
    """
    offset = _as_int(by, model)
    if not model.is_in_alphabet(char):
        return char

    variant = model.lower_case if model.is_lower_case(char) else model.upper_case
    rotated = model.index_of(char) + direction.sign * offset
    # Python's % is already floored
    return variant[rotated % model.size]


def shift_string(
    text: str,
    by: Offset,
    direction: ShiftDirection,
    model: LanguageModel,
) -> str:
    """Rotate every character of *text*; length and order are preserved."""
    offset = _as_int(by, model)
    return "".join(shift_char(c, offset, direction, model) for c in text)


def forward(text: str, by: Offset, model: LanguageModel) -> str:
    return shift_string(text, by, ShiftDirection.FORWARD, model)


def backward(text: str, by: Offset, model: LanguageModel) -> str:
    return shift_string(text, by, ShiftDirection.BACKWARD, model)
