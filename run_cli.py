#!/usr/bin/env python3
"""
Main entry point for the Roster Book console application.

This script launches the interactive command loop.
"""
from rosterbook.ui.console_app import main

if __name__ == "__main__":
    main()
