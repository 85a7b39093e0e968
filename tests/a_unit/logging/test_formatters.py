"""Tests for JSON log formatters and logger setup."""

from __future__ import annotations

import json
import logging
import sys

import pytest

from rekey.config.models import LoggingConfig
from rekey.logging import CompactJSONFormatter, JSONFormatter, configure_logging


def make_record(msg="Test message", level=logging.INFO, args=()):
    return logging.LogRecord(
        name="rekey.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_json_formatter():
    output = JSONFormatter().format(make_record())

    data = json.loads(output)
    assert data["level"] == "INFO"
    assert data["logger"] == "rekey.test"
    assert data["message"] == "Test message"
    assert data["timestamp"].endswith("Z")


def test_json_formatter_interpolates_args():
    data = json.loads(JSONFormatter().format(make_record("renamed %s", args=("a",))))
    assert data["message"] == "renamed a"


def test_json_formatter_with_custom_fields():
    record = make_record("Body rewritten", level=logging.WARNING)
    record.middleware = "camel"
    record.structured_data = {"error_code": "BODY-3002", "body_size": 12}

    data = json.loads(JSONFormatter().format(record))

    assert data["middleware"] == "camel"
    assert data["structured_data"]["error_code"] == "BODY-3002"
    assert "pathname" not in data
    assert "args" not in data


def test_json_formatter_exception():
    try:
        raise ValueError("bad body")
    except ValueError:
        record = logging.LogRecord(
            "rekey", logging.ERROR, "x.py", 1, "failed", (), exc_info=sys.exc_info()
        )

    data = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad body" in data["exception"]


def test_compact_json_formatter():
    output = CompactJSONFormatter().format(make_record())
    assert ", " not in output
    assert json.loads(output)["message"] == "Test message"


@pytest.fixture
def rekey_logger():
    logger = logging.getLogger("rekey")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)


def test_configure_logging_text(rekey_logger):
    configure_logging(LoggingConfig(level="DEBUG"))

    installed = [h for h in rekey_logger.handlers if getattr(h, "_rekey_handler", False)]
    assert len(installed) == 1
    assert not isinstance(installed[0].formatter, JSONFormatter)
    assert rekey_logger.level == logging.DEBUG


def test_configure_logging_json_file(rekey_logger, tmp_path):
    output = tmp_path / "rekey.log"
    configure_logging(LoggingConfig(level="INFO", format="json", output=str(output)))

    logging.getLogger("rekey.middleware").info("hello")
    for handler in rekey_logger.handlers:
        handler.flush()

    line = output.read_text().strip().splitlines()[-1]
    assert json.loads(line)["message"] == "hello"


def test_configure_logging_replaces_handler(rekey_logger):
    configure_logging()
    configure_logging(LoggingConfig(format="json"))

    installed = [h for h in rekey_logger.handlers if getattr(h, "_rekey_handler", False)]
    assert len(installed) == 1
    assert isinstance(installed[0].formatter, JSONFormatter)
