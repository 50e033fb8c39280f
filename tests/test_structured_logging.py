"""Tests for utils/logging.py — JSON log lines and logger setup."""

import json
import logging

import pytest

from ticker_analytics.utils.logging import (
    PACKAGE_LOGGER,
    StructuredFormatter,
    configure_logging,
    get_logger,
)


def _record(msg="hello", **extra):
    record = logging.LogRecord("ticker_analytics.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:

    def test_required_fields(self):
        entry = json.loads(StructuredFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert {"timestamp", "module"} <= set(entry)
        assert "metrics" not in entry

    def test_metrics_extra(self):
        entry = json.loads(StructuredFormatter().format(_record(metrics={"points": 3})))
        assert entry["metrics"] == {"points": 3}

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            import sys
            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info(),
            )
        entry = json.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestGetLogger:

    @pytest.fixture(autouse=True)
    def _clean(self):
        yield
        for name in ("ticker_analytics.test_logger", PACKAGE_LOGGER):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                logger.removeHandler(handler)

    def test_no_duplicate_handlers(self):
        get_logger("ticker_analytics.test_logger")
        logger = get_logger("ticker_analytics.test_logger")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_plain_formatter(self):
        logger = get_logger("ticker_analytics.test_logger", level="DEBUG", structured=False)
        assert logger.level == logging.DEBUG
        assert not isinstance(logger.handlers[0].formatter, StructuredFormatter)

    def test_configure_logging_uses_package_logger(self):
        logger = configure_logging(level="WARNING")
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.WARNING
