"""Tests for the console formatters and the JSON report generator."""

from __future__ import annotations

import json

import pytest

from shared.console import CryptexConsole
from breaker import __version__
from breaker.analyzers import caesar
from breaker.core.language import ENGLISH
from breaker.output.console import BreakerConsoleOutput
from breaker.output.report import BreakerReportGenerator


@pytest.fixture
def recorded():
    console = CryptexConsole(record=True)
    return console, BreakerConsoleOutput(console)


def test_json_report_file(engine, sample_text, tmp_path):
    result = engine.crack_caesar(caesar.encrypt(sample_text, 3, ENGLISH))
    path = BreakerReportGenerator().generate_json(result, tmp_path / "reports" / "caesar.json")

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["tool"] == "breaker"
    assert data["version"] == __version__
    assert data["result_type"] == "CaesarResult"
    assert data["result"]["key"] == "d"
    assert data["result"]["plaintext"] == sample_text
    assert len(data["result"]["candidates"]) == 26


def test_json_report_gap_keys(engine, repeating_ciphertext):
    report = engine.guess_period(repeating_ciphertext, [10])
    data = json.loads(BreakerReportGenerator().to_json(report))
    gaps = data["result"]["guesses"][0]["gaps"]
    assert "35" in gaps and "45" in gaps


def test_display_caesar(engine, sample_text, recorded):
    console, output = recorded
    output.display_caesar(engine.crack_caesar(caesar.encrypt(sample_text, 3, ENGLISH)), top=3)
    text = console.export_text()

    assert "Caesar Analysis" in text
    assert "'d' (shift 3)" in text
    assert "Ranked Shifts" in text
    assert "26 shifts tried" in text


def test_display_vigenere(engine, repeating_ciphertext, recorded):
    console, output = recorded
    output.display_vigenere(engine.crack_vigenere(repeating_ciphertext))
    text = console.export_text()

    assert "Vigenere Analysis" in text
    assert "'lemon'" in text


def test_display_period(engine, recorded):
    console, output = recorded
    output.display_period(engine.guess_period("abcxxabcyyabc", [3, 4]))
    text = console.export_text()

    assert "Period Analysis" in text
    assert "5x2" in text
    assert "13 alphabet characters examined" in text


def test_display_brute_force(engine, recorded):
    console, output = recorded
    output.display_brute_force(engine.brute_force("lxfopv ef rnhr", keys=["lemon"]))
    text = console.export_text()

    assert "Best key: lemon" in text
    assert "1 keys tried" in text


def test_display_empty_brute_force(engine, recorded):
    console, output = recorded
    output.display_brute_force(engine.brute_force("abc", keys=[]))
    assert "No candidate keys were tried" in console.export_text()
