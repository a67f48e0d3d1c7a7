"""Tests for the language model and the built-in frequency tables."""

from __future__ import annotations

import dataclasses

import pytest

from breaker.core.errors import (
    IncompleteFrequencyTable,
    InvalidAlphabet,
    InvalidFrequency,
    UnknownCharacter,
    UnknownLanguage,
)
from breaker.core.language import ENGLISH, FRENCH, LanguageModel, get_language


def test_english_alphabet():
    assert ENGLISH.size == 26
    assert ENGLISH.lower_case == "abcdefghijklmnopqrstuvwxyz"
    assert ENGLISH.upper_case == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert sum(ENGLISH.frequencies.values()) == pytest.approx(1.0, abs=0.01)


def test_membership_covers_both_cases():
    assert ENGLISH.is_in_alphabet("q")
    assert ENGLISH.is_in_alphabet("Q")
    assert not ENGLISH.is_in_alphabet("!")
    assert not ENGLISH.is_in_alphabet("é")
    assert ENGLISH.is_lower_case("q") and not ENGLISH.is_lower_case("Q")
    assert ENGLISH.is_upper_case("Q") and not ENGLISH.is_upper_case("q")


def test_frequency_lookup_folds_case():
    assert ENGLISH.frequency_of("E") == ENGLISH.frequency_of("e") == 0.12702


def test_frequency_of_unknown_character():
    with pytest.raises(UnknownCharacter) as exc_info:
        ENGLISH.frequency_of("#")
    assert exc_info.value.char == "#"


def test_missing_frequency_rejected():
    with pytest.raises(IncompleteFrequencyTable) as exc_info:
        LanguageModel("abc", {"a": 0.5, "b": 0.5})
    assert exc_info.value.missing == ["c"]


@pytest.mark.parametrize(
    "alphabet",
    ["a", "", "aba", ["a", "bc"]],
)
def test_invalid_alphabets(alphabet):
    frequencies = {c: 0.5 for c in "abc"}
    frequencies["bc"] = 0.1
    with pytest.raises(InvalidAlphabet):
        LanguageModel(alphabet, frequencies)


@pytest.mark.parametrize("value", [-0.1, float("nan"), float("inf")])
def test_invalid_frequencies(value):
    with pytest.raises(InvalidFrequency):
        LanguageModel("ab", {"a": 0.5, "b": value})


def test_model_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ENGLISH.lower_case = "abc"  # type: ignore[misc]
    with pytest.raises(TypeError):
        ENGLISH.frequencies["a"] = 1.0  # type: ignore[index]


def test_sequence_alphabet_is_joined():
    model = LanguageModel(["x", "y", "z"], {"x": 0.2, "y": 0.3, "z": 0.5})
    assert model.lower_case == "xyz"
    assert model.index_of("Y") == 1
    assert model.fold("Z") == "z"


def test_clean_and_letter_counts():
    assert ENGLISH.clean("Hello, World!") == "helloworld"
    assert ENGLISH.letter_counts("Sos") == {"s": 2, "o": 1}
    assert ENGLISH.letter_counts("123") == {}


def test_from_mapping_uses_key_order():
    model = LanguageModel.from_mapping({"C": 0.2, "a": 0.3, "b": 0.5})
    assert model.lower_case == "cab"
    assert model.frequency_of("A") == 0.3


def test_models_compare_by_value():
    same = LanguageModel(ENGLISH.lower_case, dict(ENGLISH.frequencies))
    assert same == ENGLISH
    assert hash(same) == hash(ENGLISH)
    assert FRENCH != ENGLISH


def test_get_language():
    assert get_language("English") is ENGLISH
    assert get_language("french") is FRENCH


def test_get_language_prefers_custom_tables():
    custom = {"english": {"a": 0.5, "b": 0.5}}
    model = get_language("english", custom)
    assert model.lower_case == "ab"


def test_unknown_language():
    with pytest.raises(UnknownLanguage, match="klingon"):
        get_language("klingon")
