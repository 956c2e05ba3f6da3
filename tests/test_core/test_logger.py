"""
Tests for the logging module.

Tests logger setup, configuration, and output handling.
"""

import io
import logging
import sys
from pathlib import Path

from minigrep.core.logger import LOG_FILENAME, setup_logging, get_logger


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_configures_root_logger(self, reset_logger_singleton):
        """Test that setup_logging configures the root logger."""
        setup_logging(log_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_default_level_is_warning(self, reset_logger_singleton):
        """Test that the default level keeps normal runs quiet."""
        setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_console_handler_writes_to_stderr(self, reset_logger_singleton):
        """Test that console logging never goes to stdout."""
        before = list(logging.getLogger().handlers)
        setup_logging()

        added = [h for h in logging.getLogger().handlers if h not in before]
        streams = [h.stream for h in added if isinstance(h, logging.StreamHandler)]

        assert sys.stderr in streams
        assert sys.stdout not in streams

    def test_custom_console_stream(self, reset_logger_singleton):
        """Test that records go to the stream passed in."""
        stream = io.StringIO()
        setup_logging(log_format="%(levelname)s:%(message)s", stream=stream)

        get_logger("stream_test").warning("poem.txt is empty")

        assert "WARNING:poem.txt is empty" in stream.getvalue()

    def test_unknown_level_falls_back_to_warning(self, reset_logger_singleton):
        """Test that a misspelled level name does not raise."""
        setup_logging(log_level="LOUD")

        assert logging.getLogger().level == logging.WARNING

    def test_setup_with_file_handler(self, temp_dir: Path, reset_logger_singleton):
        """Test that setup_logging creates file handler when directory provided."""
        logs_dir = temp_dir / "logs"

        setup_logging(
            log_level="INFO",
            logs_directory=logs_dir,
            max_file_size_mb=1,
            backup_count=1
        )

        logger = get_logger("test")
        logger.info("Test message")

        assert (logs_dir / LOG_FILENAME).exists()

    def test_setup_only_runs_once(self, reset_logger_singleton):
        """Test that setup_logging only initializes once."""
        setup_logging(log_level="DEBUG")
        initial_handlers = len(logging.getLogger().handlers)

        setup_logging(log_level="WARNING")

        assert len(logging.getLogger().handlers) == initial_handlers
        assert logging.getLogger().level == logging.DEBUG


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_named_logger(self, reset_logger_singleton):
        """Test that get_logger returns a logger with the given name."""
        logger = get_logger("my_module")

        assert logger.name == "my_module"

    def test_get_logger_initializes_from_config(self, temp_config: Path, reset_config_singleton,
                                                reset_logger_singleton):
        """Test that get_logger applies the loaded configuration."""
        from minigrep.core.config_loader import get_config
        get_config(temp_config)

        get_logger("auto_init_test").debug("routed to file")

        assert logging.getLogger().level == logging.DEBUG
        assert (temp_config.parent.parent / "output" / "logs" / "minigrep.log").exists()

    def test_get_logger_falls_back_on_bad_config(self, temp_dir: Path, monkeypatch,
                                                 reset_config_singleton, reset_logger_singleton):
        """Test that an unreadable config does not prevent logging."""
        bad_config = temp_dir / "broken.json"
        bad_config.write_text("not json")
        monkeypatch.setenv("MINIGREP_CONFIG", str(bad_config))

        logger = get_logger("fallback_test")
        logger.warning("This should not raise")

        assert logging.getLogger().level == logging.WARNING
