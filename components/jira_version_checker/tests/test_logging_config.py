"""Tests for the logging setup."""

import logging

import pytest

from jira_version_checker.logging_config import ConsoleFormatter, configure_logging


@pytest.fixture
def root_logger():
    """Give the test the root logger and put its handlers back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_installs_single_handler(root_logger):
    configure_logging("debug")
    configure_logging("info")

    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO
    assert isinstance(root_logger.handlers[0].formatter, ConsoleFormatter)


def test_configure_logging_unknown_level_falls_back_to_warning(root_logger):
    configure_logging("chatty")

    assert root_logger.level == logging.WARNING


def _record(level=logging.ERROR, msg="Error opening credentials file"):
    return logging.LogRecord("jira_version_checker.cli", level, __file__, 1, msg, None, None)


def test_formatter_without_color():
    assert ConsoleFormatter(use_color=False).format(_record()) == (
        "ERROR jira_version_checker.cli: Error opening credentials file"
    )


def test_formatter_colors_only_the_level_name():
    formatted = ConsoleFormatter(use_color=True).format(_record())

    assert formatted == "\033[31mERROR\033[0m jira_version_checker.cli: Error opening credentials file"
