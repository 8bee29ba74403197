"""
Tests for the Logger wrapper, the colorlog configuration, and the emitter's
own debug logging.
"""

import logging

from colorlog import ColoredFormatter
from unittest.mock import Mock

from event_emitter.config.logging import EMITTER_LOGGER_NAME, build_formatter, get_color
from event_emitter.config.settings import initialize_settings, reset_settings
from event_emitter.core.events.event_emitter import EventEmitter, augment
from event_emitter.loggers.base import Logger


class TestLogger:
    """Tests for Logger."""

    def test_initialization(self):
        """Test logger level, handler and formatter setup."""
        logger = Logger("LoggerInitTest", "emitter", "debug")

        underlying = logger.get_logger()
        assert underlying.level == logging.DEBUG
        assert len(underlying.handlers) == 1
        assert isinstance(logger.formatter, ColoredFormatter)

    def test_no_duplicate_handlers(self):
        """Test that a second Logger for the same name reuses the handler."""
        Logger("LoggerDuplicateTest", "emitter")
        logger = Logger("LoggerDuplicateTest", "emitter")

        assert len(logger.get_logger().handlers) == 1

    def test_is_enabled_for(self):
        """Test level checks against the construction level."""
        logger = Logger("LoggerLevelTest", "emitter", "warning")

        assert not logger.is_enabled_for("debug")
        assert logger.is_enabled_for("error")

    def test_records_carry_class_name(self, caplog):
        """Test that the adapter injects class_name into every record."""
        logger = Logger("LoggerRecordTest", "emitter", "debug")

        with caplog.at_level(logging.DEBUG, logger="LoggerRecordTest"):
            logger.info("hello")

        record = caplog.records[-1]
        assert record.class_name == "LoggerRecordTest"
        assert record.getMessage() == "hello"

    def test_exception_traceback_inlined(self, caplog):
        """Test that exc_info is rendered into the message text."""
        logger = Logger("LoggerErrorTest", "emitter", "debug")

        try:
            raise ValueError("bad listener")
        except ValueError as e:
            with caplog.at_level(logging.ERROR, logger="LoggerErrorTest"):
                logger.error("listener failed", exc_info=e)

        record = caplog.records[-1]
        assert "Traceback" in record.getMessage()
        assert "ValueError: bad listener" in record.getMessage()
        assert record.exc_info is None


class TestColorConfig:
    """Tests for the colour map helpers."""

    def test_known_type(self):
        assert get_color("emitter", "ERROR") == "red"

    def test_unknown_type_falls_back_to_white(self):
        assert get_color("unknown", "INFO") == "white"

    def test_build_formatter(self):
        formatter = build_formatter("emitter")
        assert isinstance(formatter, ColoredFormatter)
        assert formatter.log_colors["INFO"] == "light_blue"


class TestEmitterLogging:
    """Tests for the emitter's debug logging."""

    def test_silent_by_default(self, caplog):
        """Test that nothing is logged at the default WARNING level."""
        emitter = EventEmitter()

        with caplog.at_level(logging.DEBUG):
            emitter.on("e", Mock())
            emitter.trigger("e")

        assert not [r for r in caplog.records if r.name == "EventEmitter"]

    def test_debug_logging(self, caplog):
        """Test registration and removal messages at DEBUG level."""
        initialize_settings(log_level="debug")
        emitter = EventEmitter()

        def handler(self, payload):
            pass

        with caplog.at_level(logging.DEBUG):
            emitter.on("e", handler)
            emitter.trigger("e")
            emitter.remove_listener("e", handler)

        messages = [r.getMessage() for r in caplog.records if r.name == "EventEmitter"]
        assert any(m.startswith("Listener bound: e -> ") for m in messages)
        assert any("Listener unbound: e" in m and "(1 removed)" in m for m in messages)
        assert not any(m.startswith("Triggering") for m in messages)

    def test_host_configured_level_is_kept(self, caplog):
        """Test that emitter calls leave an application-set level alone."""
        emitter_logger = logging.getLogger(EMITTER_LOGGER_NAME)
        emitter_logger.setLevel(logging.DEBUG)
        emitter = EventEmitter()

        with caplog.at_level(logging.DEBUG):
            emitter.on("e", Mock())
            emitter.once("e", Mock())
            emitter.trigger("e")

        assert emitter_logger.level == logging.DEBUG
        messages = [r.getMessage() for r in caplog.records if r.name == EMITTER_LOGGER_NAME]
        assert any(m.startswith("Listener bound: e -> ") for m in messages)

    def test_settings_changes_apply_level(self):
        """Test that initialize/reset are what move the emitter's level."""
        emitter_logger = logging.getLogger(EMITTER_LOGGER_NAME)

        initialize_settings(log_level="info")
        assert emitter_logger.level == logging.INFO

        reset_settings()
        assert emitter_logger.level == logging.WARNING

    def test_dispatch_logging(self, caplog):
        """Test that log_dispatch adds a message per trigger."""
        initialize_settings(log_level="debug", log_dispatch=True)
        target = augment(type("Target", (), {})())

        with caplog.at_level(logging.DEBUG):
            target.once("e", Mock())
            target.trigger("e")

        messages = [r.getMessage() for r in caplog.records if r.name == "EventEmitter"]
        assert "Triggering e for 1 listener(s)" in messages
        assert any(m.startswith("Augmented ") for m in messages)
