# tests/utils_tests/test_logger.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Tests for the logging utility

import logging

import pytest

from utils.logger import (
    LogLevel,
    TarskiFormatter,
    configure_logging,
    get_logger,
    set_log_level,
)


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("tarski", level, __file__, 1, message, None, None)


class TestFormatter:
    def setup_method(self):
        self.formatter = TarskiFormatter()

    @pytest.mark.parametrize(
        "level, expected",
        [
            (logging.DEBUG, "[DEBUG] hello"),
            (logging.INFO, "hello"),
            (logging.WARNING, "hello"),
            (logging.ERROR, "hello"),
        ],
    )
    def test_format_by_level(self, level, expected):
        assert self.formatter.format(_record(level, "hello")) == expected


class TestLevels:
    def teardown_method(self):
        set_log_level(LogLevel.WARNING)

    def test_global_logger_is_shared(self):
        assert get_logger() is get_logger()

    def test_global_logger_does_not_propagate(self):
        assert get_logger().logger.propagate is False

    @pytest.mark.parametrize(
        "verbose, debug, expected",
        [
            (False, False, logging.WARNING),
            (True, False, logging.INFO),
            (False, True, logging.DEBUG),
            (True, True, logging.DEBUG),
        ],
    )
    def test_configure_logging(self, verbose, debug, expected):
        configure_logging(verbose=verbose, debug=debug)
        logger = get_logger().logger
        assert logger.level == expected
        assert all(handler.level == expected for handler in logger.handlers)

    def test_set_log_level(self):
        set_log_level(LogLevel.ERROR)
        assert get_logger().logger.level == logging.ERROR
