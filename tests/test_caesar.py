"""Tests for the Caesar solver."""

from __future__ import annotations

import pytest

from breaker.analyzers import caesar


def test_encrypt_decrypt(english):
    assert caesar.encrypt("Hello, World!", 3, english) == "Khoor, Zruog!"
    assert caesar.decrypt("Khoor, Zruog!", "d", english) == "Hello, World!"


@pytest.mark.parametrize("shift", [0, 3, 13, 25])
def test_recovers_shift(english, sample_text, shift):
    ciphertext = caesar.encrypt(sample_text, shift, english)
    key, plaintext = caesar.best_guess(ciphertext, english)
    assert key == english.lower_case[shift]
    assert plaintext == sample_text


def test_rank_is_sorted_and_complete(english, sample_text):
    ciphertext = caesar.encrypt(sample_text, 7, english)
    ranking = caesar.rank(ciphertext, english)

    assert len(ranking) == english.size
    assert sorted(k for k, _, _ in ranking) == list(english.lower_case)
    scores = [score for _, _, score in ranking]
    assert scores == sorted(scores)
    assert ranking[0][:2] == caesar.best_guess(ciphertext, english)


def test_candidates_in_alphabet_order(english):
    keys = [key for key, _, _ in caesar.candidates("abc", english)]
    assert "".join(keys) == english.lower_case


def test_ties_go_to_first_key(english):
    # no letters: every key scores 0
    key, plaintext = caesar.best_guess("123 ...", english)
    assert key == "a"
    assert plaintext == "123 ..."
