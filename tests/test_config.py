"""Tests for TOML configuration loading."""

from __future__ import annotations

import pytest

from shared.config import BreakerConfig, CryptexConfig, GlobalConfig

CONFIG_TOML = """
[global]
log_level = "DEBUG"
log_json = true
colour = "always"

[breaker]
language = "latin_short"
repetition_min = 3
repetition_max = 6
brute_force_top = 4

[languages.Latin_Short]
a = 0.5
b = 0.25
c = 0.25

[languages]
not_a_table = 3
"""


def test_defaults():
    config = CryptexConfig()
    assert config.global_settings.log_level == "INFO"
    assert config.global_settings.log_file == ""
    assert config.breaker.language == "english"
    assert config.breaker.repetition_lengths == range(2, 11)
    assert config.breaker.max_brute_force_length == 6
    assert config.languages == {}


def test_load_from_file(tmp_path):
    path = tmp_path / "cryptex.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")

    config = CryptexConfig.load(path)

    assert config.global_settings.log_level == "DEBUG"
    assert config.global_settings.log_json is True
    assert config.breaker.language == "latin_short"
    assert config.breaker.repetition_lengths == range(3, 7)
    assert config.breaker.brute_force_top == 4
    # unset keys keep their defaults
    assert config.breaker.max_brute_force_length == 6
    assert config.languages == {"latin_short": {"a": 0.5, "b": 0.25, "c": 0.25}}


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "cryptex.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")
    config = CryptexConfig.load(path)
    assert not hasattr(config.global_settings, "colour")


def test_integer_frequencies_become_floats(tmp_path):
    path = tmp_path / "cryptex.toml"
    path.write_text("[languages.ab]\na = 1\nb = 1\n", encoding="utf-8")
    config = CryptexConfig.load(path)
    assert config.languages["ab"] == {"a": 1.0, "b": 1.0}
    assert isinstance(config.languages["ab"]["a"], float)


def test_missing_explicit_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        CryptexConfig.load(tmp_path / "missing.toml")


def test_to_dict():
    data = CryptexConfig().to_dict()
    assert data["breaker"]["language"] == "english"
    assert data["global_settings"]["log_level"] == "INFO"
    assert data["languages"] == {}


def test_sections_are_independent():
    first, second = CryptexConfig(), CryptexConfig()
    first.breaker.language = "french"
    assert second.breaker.language == "english"
    assert isinstance(first.breaker, BreakerConfig)
    assert isinstance(first.global_settings, GlobalConfig)


def test_default_path(tmp_path, monkeypatch):
    default = tmp_path / "config.toml"
    monkeypatch.setattr("shared.config._DEFAULT_CONFIG_PATH", default)
    assert CryptexConfig.load().breaker.language == "english"

    default.write_text('[breaker]\nlanguage = "french"\n', encoding="utf-8")
    assert CryptexConfig.load().breaker.language == "french"
