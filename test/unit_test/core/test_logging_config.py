"""Unit tests for logging configuration module.

Tests verify that the logging configuration functions work correctly with different
scenarios including various log levels, formats, and file logging options.
"""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from isuumo.core.logging_config import (
    DETAILED_FORMAT,
    JSON_FORMAT,
    MODULE_LOG_LEVELS,
    SIMPLE_FORMAT,
    _get_logging_config,
    get_logger,
    setup_logging,
)


def _console_handler():
    root_logger = logging.getLogger()
    return next(
        (h for h in root_logger.handlers if type(h) is logging.StreamHandler),
        None,
    )


def _file_handler():
    root_logger = logging.getLogger()
    return next(
        (h for h in root_logger.handlers if isinstance(h, logging.FileHandler)),
        None,
    )


class TestSetupLoggingLogLevels:
    """Test setup_logging with different log levels."""

    @pytest.mark.parametrize(
        "log_level,expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("debug", logging.DEBUG),
        ],
    )
    def test_setup_logging_with_different_levels(self, log_level, expected_level):
        setup_logging(log_level=log_level, enable_file=False)

        console_handler = _console_handler()
        assert console_handler is not None
        assert console_handler.level == expected_level

    def test_setup_logging_default_level(self):
        with patch("isuumo.core.logging_config.LOG_LEVEL", "INFO"):
            setup_logging(enable_file=False)

        assert _console_handler().level == logging.INFO

    def test_root_logger_level_is_debug(self):
        """Filtering happens at handler level."""
        setup_logging(log_level="WARNING", enable_file=False)

        assert logging.getLogger().level == logging.DEBUG


class TestSetupLoggingFormats:
    """Test setup_logging with different log formats."""

    @pytest.mark.parametrize(
        "log_format,expected_format",
        [
            ("simple", SIMPLE_FORMAT),
            ("detailed", DETAILED_FORMAT),
            ("json", JSON_FORMAT),
            ("unknown", DETAILED_FORMAT),
        ],
    )
    def test_setup_logging_with_different_formats(self, log_format, expected_format):
        setup_logging(log_format=log_format, enable_file=False)

        console_handler = _console_handler()
        assert console_handler.formatter._fmt == expected_format
        assert console_handler.formatter.datefmt == "%Y-%m-%d %H:%M:%S"


class TestSetupLoggingFileHandling:
    """Test setup_logging file logging functionality."""

    def test_file_handler_when_enabled(self, tmp_path: Path):
        log_dir = tmp_path / "new_logs"
        with (
            patch("isuumo.core.logging_config.LOG_FILE_DIR", str(log_dir)),
            patch("isuumo.core.logging_config.ENABLE_FILE_LOGGING", True),
        ):
            setup_logging(log_level="ERROR", enable_file=True)

        file_handler = _file_handler()
        try:
            assert file_handler is not None
            assert file_handler.level == logging.DEBUG
            assert Path(file_handler.baseFilename) == log_dir / "isuumo.log"
        finally:
            setup_logging(enable_file=False)
            file_handler.close()

    def test_no_file_handler_when_disabled_by_setting(self, tmp_path: Path):
        with (
            patch("isuumo.core.logging_config.LOG_FILE_DIR", str(tmp_path)),
            patch("isuumo.core.logging_config.ENABLE_FILE_LOGGING", False),
        ):
            setup_logging(enable_file=True)

        assert _file_handler() is None

    def test_no_file_handler_when_disabled_by_argument(self):
        with patch("isuumo.core.logging_config.ENABLE_FILE_LOGGING", True):
            setup_logging(enable_file=False)

        assert _file_handler() is None


class TestSetupLoggingHandlerManagement:
    def test_setup_logging_removes_existing_handlers(self):
        setup_logging(enable_file=False)
        setup_logging(enable_file=False)

        assert len(logging.getLogger().handlers) == 1


class TestSetupLoggingModuleSpecificLevels:
    """Test module-specific log level configuration."""

    @pytest.mark.parametrize(
        "module_name,expected_level",
        [
            ("isuumo.core", logging.INFO),
            ("isuumo.core.importers", logging.DEBUG),
            ("isuumo.server.api", logging.DEBUG),
            ("sqlalchemy", logging.WARNING),
            ("asyncio", logging.WARNING),
        ],
    )
    def test_module_specific_log_levels(self, module_name, expected_level):
        setup_logging(enable_file=False)

        assert logging.getLogger(module_name).level == expected_level

    def test_all_module_log_levels_configured(self):
        setup_logging(enable_file=False)

        for module_name, expected_level_str in MODULE_LOG_LEVELS.items():
            assert logging.getLogger(module_name).level == getattr(logging, expected_level_str)


class TestGetLoggingConfig:
    def test_reads_server_settings(self):
        with patch("isuumo.server.core.config.settings.log_level", "warning"):
            config = _get_logging_config()

        assert config["log_level"] == "WARNING"
        assert set(config) == {"log_level", "log_format", "log_file_dir", "enable_file_logging"}


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_returns_named_logger(self):
        logger = get_logger("isuumo.core.importers.listings")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "isuumo.core.importers.listings"

    def test_get_logger_returns_same_instance(self):
        assert get_logger("isuumo.test") is get_logger("isuumo.test")
