"""Tests for structured logging and dev diagnostics."""

from __future__ import annotations

import json
import logging
import logging.handlers

import pytest

from civicfolio.devtools import dev_log, format_context
from civicfolio.logging_config import (
    JSONFormatter,
    SessionBufferHandler,
    get_logger,
    session_log_path,
    setup_logging,
)


@pytest.fixture
def configured_logger(config):
    logger = setup_logging(config)
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="civicfolio.services.importers",
        level=logging.WARNING,
        pathname="importers.py",
        lineno=7,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    payload = json.loads(JSONFormatter().format(_record("Import failed", kind="actions", error_code="MalformedInput")))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "civicfolio.services.importers"
    assert payload["message"] == "Import failed"
    assert payload["extra"] == {"kind": "actions", "error_code": "MalformedInput"}


def test_json_formatter_serializes_exceptions():
    try:
        raise RuntimeError("renderer exploded")
    except RuntimeError:
        import sys

        record = logging.LogRecord("civicfolio.desktop", logging.ERROR, "charts.py", 1, "boom", (), sys.exc_info())

    payload = json.loads(JSONFormatter().format(record))

    assert payload["exception"]["type"] == "RuntimeError"
    assert "renderer exploded" in payload["exception"]["message"]


def test_setup_logging_writes_json_file(configured_logger, config):
    assert configured_logger.name == "civicfolio"
    handler_types = {type(h) for h in configured_logger.handlers}
    assert logging.handlers.RotatingFileHandler in handler_types
    assert SessionBufferHandler in handler_types

    get_logger("civicfolio.services.graph").warning("Skipping connection c-1")
    for handler in configured_logger.handlers:
        handler.flush()

    log_file = config.DATA_DIR / "logs" / "civicfolio.log"
    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]
    assert any(entry["message"] == "Skipping connection c-1" for entry in lines)
    assert session_log_path().parent == config.DATA_DIR / "logs"


def test_console_is_quiet_outside_dev_mode(configured_logger):
    console = next(
        h
        for h in configured_logger.handlers
        if type(h) is logging.StreamHandler
    )
    assert console.level == logging.WARNING


def test_get_logger_namespacing():
    assert get_logger("desktop").name == "civicfolio.desktop"
    assert get_logger("civicfolio.services.store").name == "civicfolio.services.store"


def test_dev_log_prints_only_in_dev_mode(config, capsys):
    dev_log(config, "Import picker selected", context={"kind": "actors"})
    assert capsys.readouterr().out == ""

    config.DEV_MODE = True
    dev_log(config, "Import picker selected", context={"kind": "actors"})
    assert "[DEV] Import picker selected (kind=actors)" in capsys.readouterr().out


def test_format_context_keeps_order():
    assert format_context({"b": 1, "a": 2}) == "b=1 a=2"
    assert format_context(None) == ""
