"""Tests for single-character and string rotation."""

from __future__ import annotations

import pytest

from breaker.analyzers.shift import backward, forward, key_offset, shift_char, shift_string
from breaker.core.errors import InvalidKeyCharacter
from breaker.core.models import ShiftDirection


def test_forward_and_back(english):
    assert forward("hello", 3, english) == "khoor"
    assert backward("khoor", 3, english) == "hello"


def test_wraps_around(english):
    assert forward("xyz", 3, english) == "abc"
    assert backward("abc", 3, english) == "xyz"


def test_case_preserved(english):
    assert forward("Hello World", 3, english) == "Khoor Zruog"


@pytest.mark.parametrize("offset", range(0, 26, 5))
def test_non_alphabet_passes_through(english, offset):
    shifted = forward("Hello, World! 123", offset, english)
    assert shifted[5:7] == ", "
    assert shifted[-5:] == "! 123"
    assert len(shifted) == len("Hello, World! 123")


def test_offset_is_floored_modulo(english):
    assert forward("abc", -3, english) == "xyz"
    assert forward("hello", 29, english) == forward("hello", 3, english)
    assert forward("hello", -23, english) == forward("hello", 3, english)


def test_letter_offset(english):
    assert key_offset("a", english) == 0
    assert key_offset("d", english) == 3
    assert forward("hello", "d", english) == forward("hello", 3, english)
    assert shift_char("z", "b", ShiftDirection.FORWARD, english) == "a"


@pytest.mark.parametrize("bad", ["D", "!", "é"])
def test_invalid_key_letter(english, bad):
    with pytest.raises(InvalidKeyCharacter):
        shift_char("a", bad, ShiftDirection.FORWARD, english)


def test_invalid_key_checked_before_passthrough(english):
    with pytest.raises(InvalidKeyCharacter):
        shift_char("!", "D", ShiftDirection.FORWARD, english)


@pytest.mark.parametrize("offset", [0, 1, 13, 25, 26, 100, -7])
def test_backward_undoes_forward(english, sample_text, offset):
    text = sample_text[:200]
    assert backward(forward(text, offset, english), offset, english) == text


def test_shift_string_direction(english):
    assert shift_string("abc", 1, ShiftDirection.BACKWARD, english) == "zab"


def test_direction_sign():
    assert ShiftDirection.FORWARD.sign == 1
    assert ShiftDirection.BACKWARD.sign == -1
