"""Logging setup for the command line tool.

Logs go to stderr so the report on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter, colors the level name on a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool) -> None:
        super().__init__("%(levelname)s %(name)s: %(message)s")
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self._use_color:
            return message
        color = self.COLORS.get(record.levelname, "")
        #only the leading level name is colored
        return f"{color}{record.levelname}{self.RESET}{message[len(record.levelname):]}"


def configure_logging(level: str) -> None:
    """Configure root logging with a single stderr handler."""
    root = logging.getLogger()

    #reconfiguring must not stack handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(ConsoleFormatter(use_color=sys.stderr.isatty()))

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    logging.getLogger("urllib3").setLevel(max(root.level, logging.INFO))
