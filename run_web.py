#!/usr/bin/env python3
"""
Main entry point for the Roster Book web application.

This script launches the Flask-based JSON API.
"""
from rosterbook.ui.web_app import run_web_app
from rosterbook.utils import setup_logging

if __name__ == "__main__":
    setup_logging()
    run_web_app()
