"""
Constants for the Roster Book application.

This module contains configuration constants used throughout the application.
"""
import os

# Application metadata
APP_TITLE = "Roster Book"

# File locations (overridable through the environment)
DEFAULT_PREFS_PATH = os.environ.get("ROSTERBOOK_PREFS", "preferences.json")
DEFAULT_ADDRESS_BOOK_PATH = os.path.join("data", "rosterbook.json")

# Logging
LOG_LEVEL = os.environ.get("ROSTERBOOK_LOG_LEVEL", "INFO")
VALID_LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

# Default window geometry kept in user preferences
DEFAULT_WINDOW_WIDTH = 740.0
DEFAULT_WINDOW_HEIGHT = 600.0

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122

# Domain sentinels
DEFAULT_INJURY_NAME = "FIT"
NO_POSITION_NAME = "NONE"
