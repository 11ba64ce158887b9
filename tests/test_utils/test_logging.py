"""Tests for einvoice_checker.utils.logging."""

from __future__ import annotations

import json
import logging

import pytest

from einvoice_checker.config import LoggingConfig
from einvoice_checker.utils.logging import (
    LOG_FORMAT,
    _JsonFormatter,
    _TextFormatter,
    configure_logging,
    record_extras,
)

pytestmark = pytest.mark.usefixtures("reset_logging")


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "einvoice_checker.engine.deadline", logging.WARNING, __file__, 1,
        "Invalid implementation date: %r", ("bad",), None,
    )
    for key, val in extra.items():
        setattr(record, key, val)
    return record


class TestJsonFormatter:
    def test_core_fields(self):
        payload = json.loads(_JsonFormatter().format(_record()))
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "einvoice_checker.engine.deadline"
        assert payload["msg"] == "Invalid implementation date: 'bad'"
        assert payload["ts"].endswith("Z")

    def test_extra_fields_included(self):
        payload = json.loads(_JsonFormatter().format(_record(error_kind="unparsable_date")))
        assert payload["error_kind"] == "unparsable_date"

    def test_standard_attributes_excluded(self):
        payload = json.loads(_JsonFormatter().format(_record()))
        assert "lineno" not in payload
        assert "args" not in payload


class TestConfigureLogging:
    def test_sets_level(self):
        configure_logging(LoggingConfig(level="ERROR"))
        assert logging.getLogger().level == logging.ERROR

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        configure_logging(LoggingConfig(level="INFO", log_file=str(log_file), json_format=True))
        logging.getLogger("einvoice_checker.test").info("hello", extra={"step": 2})
        for handler in logging.getLogger().handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["msg"] == "hello"
        assert payload["step"] == 2

    def test_no_file_handler_by_default(self):
        configure_logging(LoggingConfig())
        assert not any(
            isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers
        )


class TestTextFormatter:
    def test_error_kind_suffix(self):
        line = _TextFormatter(LOG_FORMAT).format(_record(error_kind="unparsable_date"))
        assert line.endswith("Invalid implementation date: 'bad' [unparsable_date]")

    def test_untagged_record_unchanged(self):
        line = _TextFormatter(LOG_FORMAT).format(_record())
        assert line.endswith("einvoice_checker.engine.deadline: Invalid implementation date: 'bad'")


def test_record_extras_only_caller_fields():
    assert record_extras(_record(error_kind="x", signup={"email": "a@b.co"})) == {
        "error_kind": "x",
        "signup": {"email": "a@b.co"},
    }
    assert record_extras(_record()) == {}
