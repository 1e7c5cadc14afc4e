"""Logging configuration for mrya-lsp."""

from __future__ import annotations

import logging
import sys
from typing import ClassVar


class MryaFormatter(logging.Formatter):
    """Format log records as ``[L YYYY-MM-DD HH:MM:SS.mmm module] message``.

    With ``use_color`` the bracketed prefix is colored by level.
    """

    # ANSI color codes
    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET: ClassVar[str] = "\033[0m"

    LEVEL_CODES: ClassVar[dict[str, str]] = {
        "DEBUG": "D",
        "INFO": "I",
        "WARNING": "W",
        "ERROR": "E",
        "CRITICAL": "C",
    }

    def __init__(self, use_color: bool = False):
        super().__init__()
        self.use_color = use_color

    @staticmethod
    def _short_name(name: str) -> str:
        if name.startswith("mrya_lsp."):
            return name[len("mrya_lsp.") :]
        if name == "mrya_lsp":
            return "MryaLSP"
        return name

    def format(self, record: logging.LogRecord) -> str:
        level_code = self.LEVEL_CODES.get(record.levelname, record.levelname[0])

        ct = self.converter(record.created)
        timestamp = f"{ct.tm_year:04d}-{ct.tm_mon:02d}-{ct.tm_mday:02d} {ct.tm_hour:02d}:{ct.tm_min:02d}:{ct.tm_sec:02d}.{int(record.msecs):03d}"

        prefix = f"[{level_code} {timestamp} {self._short_name(record.name)}]"
        if self.use_color:
            color = self.COLORS.get(record.levelname, self.RESET)
            prefix = f"{color}{prefix}{self.RESET}"

        message = f"{prefix} {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_colored_logging(level: int = logging.INFO) -> None:
    """Configure root logging on stderr, colored when stderr is a terminal.

    stdout is left alone since it carries the LSP stream in stdio mode.

    Args:
        level: The logging level to use (e.g., logging.INFO, logging.DEBUG)
    """
    supports_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(MryaFormatter(use_color=supports_color))
    root_logger.addHandler(handler)
