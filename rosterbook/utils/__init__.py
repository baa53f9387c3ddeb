"""
Utilities package for the Roster Book application.

This package contains constants and the logging setup used throughout the application.
"""
from .constants import (
    APP_TITLE, DEFAULT_PREFS_PATH, DEFAULT_ADDRESS_BOOK_PATH,
    DEFAULT_INJURY_NAME, NO_POSITION_NAME, LOG_LEVEL
)
from .logging_setup import setup_logging

__all__ = [
    "APP_TITLE", "DEFAULT_PREFS_PATH", "DEFAULT_ADDRESS_BOOK_PATH",
    "DEFAULT_INJURY_NAME", "NO_POSITION_NAME", "LOG_LEVEL", "setup_logging"
]
