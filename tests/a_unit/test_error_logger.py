"""Tests for structured error logging."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

from rekey.exceptions import BodyReadError, InvalidJSONError
from rekey.logging.error_logger import log_body_processing_error, log_error


def test_log_error_with_rekey_error(caplog):
    caplog.set_level(logging.ERROR)

    error = InvalidJSONError("Invalid JSON syntax", body_snippet='{"incomplete":')
    log_error(error, path="/users")

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.ERROR
    assert "BODY-3002" in record.message
    assert "Invalid JSON syntax" in record.message

    data = record.__dict__["structured_data"]
    assert data["error_code"] == "BODY-3002"
    assert data["error_category"] == "body_processing"
    assert data["context"]["body_snippet"] == '{"incomplete":'
    assert data["path"] == "/users"


def test_log_error_with_regular_exception(caplog):
    caplog.set_level(logging.ERROR)

    log_error(ValueError("Invalid value"), user_id="123")

    record = caplog.records[0]
    assert record.message == "ValueError: Invalid value"
    data = record.__dict__["structured_data"]
    assert data["error_type"] == "ValueError"
    assert data["user_id"] == "123"


def test_log_error_custom_logger():
    mock_logger = MagicMock(spec=logging.Logger)

    log_error(ValueError("Test error"), log=mock_logger, level=logging.WARNING)

    assert mock_logger.log.called
    assert mock_logger.log.call_args[0][0] == logging.WARNING


def test_log_body_processing_error(caplog):
    caplog.set_level(logging.ERROR)

    log_body_processing_error(
        content_type="application/json",
        error=BodyReadError("Client disconnected"),
        body_size=1024,
        middleware="camel",
    )

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert "application/json" in record.message
    assert "1024" in record.message

    data = record.__dict__["structured_data"]
    assert data["content_type"] == "application/json"
    assert data["body_size"] == 1024
    assert data["exception"] == "BodyReadError"
    assert data["error_code"] == "BODY-3001"
    assert data["middleware"] == "camel"


def test_log_body_processing_error_respects_level(caplog):
    caplog.set_level(logging.INFO)

    log_body_processing_error("application/json", ValueError("x"), level=logging.DEBUG)

    assert caplog.records == []
