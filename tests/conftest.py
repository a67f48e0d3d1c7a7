"""Shared fixtures: sample English plaintext and ready-made ciphertexts."""

from __future__ import annotations

import pytest

from shared.config import CryptexConfig
from breaker.analyzers import vigenere
from breaker.core.engine import BreakerEngine
from breaker.core.language import ENGLISH

# Dickens, A Tale of Two Cities (1859), opening paragraphs.
SAMPLE_TEXT = (
    "It was the best of times, it was the worst of times, it was the age of "
    "wisdom, it was the age of foolishness, it was the epoch of belief, it "
    "was the epoch of incredulity, it was the season of Light, it was the "
    "season of Darkness, it was the spring of hope, it was the winter of "
    "despair, we had everything before us, we had nothing before us, we were "
    "all going direct to Heaven, we were all going direct the other way. In "
    "short, the period was so far like the present period, that some of its "
    "noisiest authorities insisted on its being received, for good or for "
    "evil, in the superlative degree of comparison only. There were a king "
    "with a large jaw and a queen with a plain face, on the throne of "
    "England; there were a king with a large jaw and a queen with a fair "
    "face, on the throne of France. In both countries it was clearer than "
    "crystal to the lords of the State preserves of loaves and fishes, that "
    "things in general were settled for ever. It was the year of Our Lord "
    "one thousand seven hundred and seventy-five. Spiritual revelations were "
    "conceded to England at that favoured period, as at this. Mrs. Southcott "
    "had recently attained her five-and-twentieth blessed birthday, of whom "
    "a prophetic private in the Life Guards had heralded the sublime "
    "appearance by announcing that arrangements were made for the "
    "swallowing up of London and Westminster."
)

PHRASE = "meet at midnight"            # 14 letters
BETWEEN_FIRST = "and then we shall proceed"  # 21 letters: phrase gap 35
BETWEEN_SECOND = "to the old harbour where the big boats"  # 31 letters: gap 45

# The phrase recurs at letter gaps of 35 and 45, both multiples of 5,
# so every repeated substring of the ciphertext sits a multiple of the
# key length apart and the gcd of those gaps is 5.
REPEATING_TEXT = (
    "We " + PHRASE + " " + BETWEEN_FIRST + " " + PHRASE + " "
    + BETWEEN_SECOND + " " + PHRASE + ". " + SAMPLE_TEXT
)

VIGENERE_KEY = "lemon"


@pytest.fixture
def english():
    return ENGLISH


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def repeating_text() -> str:
    return REPEATING_TEXT


@pytest.fixture
def repeating_ciphertext() -> str:
    return vigenere.encrypt(REPEATING_TEXT, VIGENERE_KEY, ENGLISH)


@pytest.fixture
def config() -> CryptexConfig:
    cfg = CryptexConfig()
    cfg.global_settings.log_level = "WARNING"
    return cfg


@pytest.fixture
def engine(config: CryptexConfig) -> BreakerEngine:
    return BreakerEngine(config)
