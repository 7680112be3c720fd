"""Tests for the logging configuration."""

import logging

from upbank.logger import get_logger


def test_root_logger_has_handler():
    """Root 'upbank' logger should have exactly one handler."""
    logger = get_logger()
    assert len(logger.handlers) == 1


def test_child_logger_has_no_handler():
    """Child loggers should have no handlers and rely on propagation."""
    get_logger()

    client_logger = get_logger("upbank.client")
    export_logger = get_logger("upbank.export")

    assert len(client_logger.handlers) == 0
    assert len(export_logger.handlers) == 0


def test_no_double_logging(caplog):
    """Messages from child loggers should only appear once."""
    caplog.clear()

    with caplog.at_level(logging.INFO):
        root_logger = get_logger()
        child_logger = get_logger("upbank.client")

        assert len(root_logger.handlers) == 1, "Root logger should have 1 handler"
        assert len(child_logger.handlers) == 0, "Child logger should have 0 handlers"

        test_message = "Test message for double logging"
        child_logger.info(test_message)

        matching_records = [r for r in caplog.records if test_message in r.message]
        assert len(matching_records) == 1, f"Expected 1 log record, found {len(matching_records)}"


def test_child_logger_propagates_to_root():
    get_logger()
    child_logger = get_logger("upbank.client")

    assert child_logger.propagate is True
    assert child_logger.parent.name == "upbank"


def test_token_never_logged(caplog, client):
    """Request logging names the method and URL only."""
    from unittest.mock import Mock

    client.session = Mock()
    client.session.request.return_value = Mock(status_code=200, content=b'{"meta": {"id": "c", "statusEmoji": "x"}}')

    with caplog.at_level(logging.DEBUG, logger="upbank"):
        client.ping()

    assert any("GET https://api.up.com.au/api/v1/util/ping" in r.message for r in caplog.records)
    assert all("up:yeah" not in r.message for r in caplog.records)
