"""Tests for structured logging configuration."""

import json
import logging

import pytest
import structlog

from esfixtures.logging_config import get_logger, setup_logging


class TestSetupLogging:
    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_accepts_levels(self, level):
        setup_logging(json_logs=False, log_level=level)
        assert logging.getLogger().level == getattr(logging, level)

    def test_lowercase_level(self):
        setup_logging(log_level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_json_output_is_parseable(self, capsys):
        setup_logging(json_logs=True, log_level="INFO")
        logger = get_logger("esfixtures.test")

        logger.info("fixture_loaded", index="orders", documents=3)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "fixture_loaded"
        assert record["index"] == "orders"
        assert record["documents"] == 3
        assert record["level"] == "info"
        assert record["logger"] == "esfixtures.test"
        assert "timestamp" in record

    def test_level_filters_events(self, capsys):
        setup_logging(json_logs=True, log_level="ERROR")
        logger = get_logger("esfixtures.test")

        logger.info("hidden_event")
        logger.error("shown_event")

        err = capsys.readouterr().err
        assert "hidden_event" not in err
        assert "shown_event" in err


class TestGetLogger:
    def test_leaves_structlog_unconfigured(self):
        structlog.reset_defaults()

        logger = get_logger("esfixtures.test")
        logger.info("fixture_loaded", index="orders")

        assert not structlog.is_configured()

    def test_follows_host_configuration(self, caplog):
        structlog.configure(
            processors=[structlog.processors.KeyValueRenderer(key_order=["event"])],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
        )
        logger = get_logger("esfixtures.test")

        with caplog.at_level(logging.WARNING, logger="esfixtures.test"):
            logger.warning("bulk_load_rejected", status=503)

        assert "bulk_load_rejected" in caplog.text
        assert "status=503" in caplog.text
