"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, resolve_level, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "uischema"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup accepts a level name."""
        stream = StringIO()
        setup_logging(level="debug", stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op once the root logger has handlers
        assert logger.level == logging.NOTSET


class TestResolveLevel:
    """Test level name resolution."""

    @pytest.mark.unit
    def test_numbers_pass_through(self) -> None:
        """Numeric levels are returned unchanged."""
        assert resolve_level(logging.WARNING) == logging.WARNING

    @pytest.mark.unit
    def test_names_are_case_insensitive(self) -> None:
        """Level names resolve regardless of case."""
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" Error ") == logging.ERROR

    @pytest.mark.unit
    def test_unknown_name_is_info(self) -> None:
        """Unknown names fall back to INFO."""
        assert resolve_level("chatty") == logging.INFO
