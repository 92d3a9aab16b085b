# utils/__init__.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Utility module exports

from .logger import LogLevel, configure_logging, get_logger, set_log_level

__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
]
