"""Tests for chi-squared scoring and the numeric helpers behind it."""

from __future__ import annotations

import numpy as np
import pytest

from shared.math_utils import chi_squared_statistic, gcd_all
from breaker.analyzers.fitness import chi_squared, observed_counts
from breaker.core.errors import ZeroExpectedFrequency
from breaker.core.language import LanguageModel


@pytest.fixture
def binary():
    return LanguageModel("ab", {"a": 0.5, "b": 0.5})


def test_text_matching_expectation_scores_zero(binary):
    assert chi_squared("ab", binary) == 0.0
    assert chi_squared("abba", binary) == 0.0


def test_skewed_text_scores_positive(binary):
    # only "a" occurs: (2-1)^2/1
    assert chi_squared("aa", binary) == pytest.approx(1.0)


def test_absent_letters_add_nothing(english):
    expected = (1 - 0.12702) ** 2 / 0.12702
    assert chi_squared("e", english) == pytest.approx(expected)
    assert chi_squared("E!", english) == pytest.approx(expected)


def test_case_and_punctuation_ignored(binary):
    assert chi_squared("A, a!", binary) == chi_squared("aa", binary)


@pytest.mark.parametrize("text", ["", "123 ?!", "\n\t"])
def test_no_letters_scores_zero(english, text):
    assert chi_squared(text, english) == 0.0


def test_english_beats_gibberish(english, sample_text):
    gibberish = "zqxj" * 50
    assert chi_squared(sample_text, english) < chi_squared(gibberish, english)


def test_zero_frequency_rejected():
    model = LanguageModel("abc", {"a": 0.5, "b": 0.5, "c": 0.0})
    with pytest.raises(ZeroExpectedFrequency) as exc_info:
        chi_squared("abc", model)
    assert exc_info.value.char == "c"


def test_zero_frequency_ignored_when_letter_absent():
    model = LanguageModel("abc", {"a": 0.5, "b": 0.5, "c": 0.0})
    assert chi_squared("...", model) == 0.0
    assert chi_squared("ab", model) == 0.0
    assert chi_squared("aab", model) == pytest.approx(1 / 3)


def test_observed_counts(english):
    counts = observed_counts("Abba!", english)
    assert counts[0] == 2
    assert counts[1] == 2
    assert counts.sum() == 4


class TestChiSquaredStatistic:
    def test_basic(self):
        assert chi_squared_statistic([2, 0], [1, 1]) == pytest.approx(2.0)

    def test_numpy_input(self):
        observed = np.array([10.0, 20.0, 30.0])
        assert chi_squared_statistic(observed, observed) == 0.0

    def test_empty(self):
        assert chi_squared_statistic([], []) == 0.0

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="shapes"):
            chi_squared_statistic([1, 2], [1, 2, 3])

    def test_non_positive_expected(self):
        with pytest.raises(ValueError, match="Expected"):
            chi_squared_statistic([1, 2], [1, 0])


@pytest.mark.parametrize(
    ("values", "expected"),
    [([6, 9, 12], 3), ([35, 45], 5), ([7], 7), ([], 0), ((n for n in (8, 12)), 4)],
)
def test_gcd_all(values, expected):
    assert gcd_all(values) == expected
