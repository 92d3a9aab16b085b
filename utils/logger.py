# utils/logger.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Logging utility for solver interaction with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for solver interaction."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TarskiLogger:
    """Centralized logger for SMT bridge activity with structured output."""

    def __init__(self, name: str = "tarski", level: LogLevel = LogLevel.WARNING):
        """Initialize the Tarski logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TarskiFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for solver interaction
    def solver_call(self, kind: str, logic: str, script: str):
        """Log a solver request before it is sent."""
        self.debug(f"    🔧 {kind} query for {logic}")
        self.debug(f"      script: {script}")

    def solver_result(self, kind: str, output: str):
        """Log the raw answer of a solver request."""
        self.debug(f"    📨 {kind} answer: {output.strip()}")

    def short_circuit(self, operation: str, reason: str):
        """Log an operation decided without asking the solver."""
        self.debug(f"    ⚡ {operation} decided without solver: {reason}")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class TarskiFormatter(logging.Formatter):
    """Custom formatter for Tarski logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TarskiLogger] = None


def get_logger(name: str = "tarski") -> TarskiLogger:
    """Get or create the global Tarski logger instance.

    Args:
        name: Logger name (default: "tarski")

    Returns:
        TarskiLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TarskiLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
