"""
Log output for the checker's CLI commands.

What gets logged
----------------
    engine.classifier  WARNING  no category rule matched      error_kind=indeterminate_category
    engine.deadline    WARNING  unusable date or year         error_kind=unparsable_date
    engine.assessment  INFO     one summary line per run
    flow.questionnaire INFO     newsletter signup             signup={...}

Library modules only ever call ``logging.getLogger(__name__)``.  The CLI
calls ``configure_logging(config.logging)`` once per command; nothing else
touches the root logger.

Output goes to stderr (plus an optional log file) so ``classify --json``
can pipe clean JSON from stdout.  With ``json_format = true`` each record is
one JSON object and every ``extra=`` field becomes a top-level key::

    {"ts": "2026-02-24T15:00:00Z", "level": "WARNING",
     "logger": "einvoice_checker.engine.deadline",
     "msg": "Invalid implementation date: 'NaN-01-01'",
     "error_kind": "unparsable_date"}

The plain text format appends ``error_kind`` in brackets when present.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from einvoice_checker.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Attributes every LogRecord carries; anything else came from ``extra=``.
_STANDARD_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Return the fields a caller attached to ``record`` through ``extra=``."""
    return {
        key: val
        for key, val in record.__dict__.items()
        if key not in _STANDARD_RECORD_KEYS and not key.startswith("_")
    }


class _TextFormatter(logging.Formatter):
    """``LOG_FORMAT`` line, suffixed with ``[error_kind]`` for tagged failures."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        kind = getattr(record, "error_kind", None)
        return f"{line} [{kind}]" if kind else line


class _JsonFormatter(logging.Formatter):
    """One JSON object per record: ``ts``, ``level``, ``logger``, ``msg``,
    ``exc`` when an exception is attached, then every ``extra=`` field."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: dict[str, Any] = {
            "ts": created.strftime(LOG_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        payload.update(record_extras(record))
        return json.dumps(payload, default=str)


def configure_logging(config: "LoggingConfig") -> None:
    """Install the stderr (and optional file) handler on the root logger.

    Replaces whatever handlers the root logger had, so calling it again
    (e.g. once per CLI command in tests) does not duplicate output.

    Args:
        config: ``[logging]`` section of ``AppConfig``.  An empty
            ``log_file`` disables the file handler.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter: logging.Formatter = (
        _JsonFormatter()
        if config.json_format
        else _TextFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)
