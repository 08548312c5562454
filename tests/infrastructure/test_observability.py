"""Structured logging — JSON envelope and setup."""

import json
import logging

from bookclub.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "bookclub.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_emits_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "bookclub.test"
    assert payload["message"] == "hello world"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(path="/ping", status_code=200, secret="nope"),
    ))
    assert payload["path"] == "/ping"
    assert payload["status_code"] == 200
    assert "secret" not in payload


def test_setup_logging_replaces_previous_handler():
    original_level = logging.root.level
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert logging.root.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(second)
        logging.root.setLevel(original_level)
