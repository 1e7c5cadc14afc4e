"""Tests for logging configuration."""

from __future__ import annotations

import logging
import sys

import pytest

from mrya_lsp._logging import MryaFormatter, setup_colored_logging


def _record(name="mrya_lsp.engine", level=logging.INFO, msg="hello"):
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


class TestMryaFormatter:
    """Test the log line format."""

    def test_plain_format(self):
        """Test the plain prefix and shortened module name."""
        line = MryaFormatter().format(_record())
        assert line.startswith("[I ")
        assert line.endswith(" engine] hello")
        assert "\033[" not in line

    def test_colored_format(self):
        """Test that colored output wraps the prefix."""
        line = MryaFormatter(use_color=True).format(_record(level=logging.ERROR))
        assert line.startswith("\033[31m[E ")
        assert line.endswith("\033[0m hello")

    def test_package_logger_name(self):
        """Test the name used for the package logger."""
        assert MryaFormatter().format(_record(name="mrya_lsp")).endswith(" MryaLSP] hello")

    def test_foreign_logger_name(self):
        """Test that other loggers keep their full name."""
        assert MryaFormatter().format(_record(name="pygls.server")).endswith(
            " pygls.server] hello"
        )

    def test_exception_info(self):
        """Test that tracebacks are appended."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "mrya_lsp", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )
        line = MryaFormatter().format(record)
        assert "ValueError: boom" in line


class TestSetupColoredLogging:
    """Test root logger configuration."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_replaces_handlers(self):
        """Test that a single formatted handler is installed."""
        setup_colored_logging(level=logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, MryaFormatter)
