"""Tests for logging helpers."""

import logging

from advent.log import configure_logging, scoped


class TestScoped:

    def test_prefix(self, caplog):
        log = scoped(logging.getLogger("advent.test"), "[Day 3]")
        with caplog.at_level(logging.DEBUG, logger="advent.test"):
            log.debug("Begin execution")
        assert caplog.messages == ["[Day 3] Begin execution"]

    def test_nested(self, caplog):
        outer = scoped(logging.getLogger("advent.test"), "[Day 3]")
        inner = scoped(outer, "[InputFetcher]")
        with caplog.at_level(logging.DEBUG, logger="advent.test"):
            inner.info("Trying from website")
        assert caplog.messages == ["[Day 3] [InputFetcher] Trying from website"]


class TestConfigureLogging:

    def test_verbosity_shifts_level(self, monkeypatch):
        monkeypatch.setattr("advent.log.LOG_LEVEL", "WARNING")
        assert configure_logging(0) == logging.WARNING
        assert configure_logging(1) == logging.INFO
        assert configure_logging(5) == logging.DEBUG
        assert configure_logging(-1) == logging.ERROR
        assert configure_logging(-9) == logging.CRITICAL
