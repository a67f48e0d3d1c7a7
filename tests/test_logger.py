"""Tests for the structured logger's file output."""

from __future__ import annotations

import json

from shared.logger import CryptexLogger


def _close(log: CryptexLogger) -> None:
    for handler in list(log.underlying.handlers):
        handler.close()
        log.underlying.removeHandler(handler)


def test_json_lines(tmp_path):
    path = tmp_path / "logs" / "breaker.log"
    log = CryptexLogger("test.json", log_file=path, json_logs=True, console_output=False)
    try:
        with log.operation("vigenere_crack"):
            log.info("Trying key length %d", 5, repetition_length=3)
        log.warning("No repeats")
    finally:
        _close(log)

    first, second = (json.loads(line) for line in path.read_text(encoding="utf-8").splitlines())
    assert first["message"] == "Trying key length 5"
    assert first["logger"] == "cryptex.test.json"
    assert first["tool_name"] == "test.json"
    assert first["operation"] == "vigenere_crack"
    assert first["extra"] == {"repetition_length": 3}
    assert second["level"] == "WARNING"
    assert "operation" not in second


def test_level_filters_records(tmp_path):
    path = tmp_path / "breaker.log"
    log = CryptexLogger("test.level", log_level="WARNING", log_file=path, console_output=False)
    try:
        log.info("hidden")
        with log.timed("scan"):
            pass
        log.error("shown")
    finally:
        _close(log)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert "ERROR" in lines[0] and "shown" in lines[0]


def test_reinstantiation_closes_previous_file(tmp_path):
    first = CryptexLogger("test.reopen", log_file=tmp_path / "a.log", console_output=False)
    (old_handler,) = first.underlying.handlers

    second = CryptexLogger("test.reopen", log_file=tmp_path / "b.log", console_output=False)
    try:
        assert old_handler.stream is None
        assert old_handler not in second.underlying.handlers
        assert len(second.underlying.handlers) == 1
    finally:
        _close(second)


def test_operation_scope_restored(tmp_path):
    path = tmp_path / "scope.log"
    log = CryptexLogger("test.scope", log_file=path, json_logs=True, console_output=False)
    try:
        with log.operation("outer"):
            with log.operation("inner"):
                log.info("a")
            log.info("b")
    finally:
        _close(log)

    records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [r["operation"] for r in records] == ["inner", "outer"]
