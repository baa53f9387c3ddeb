"""
User interface package for the Roster Book application.

Provides a console loop and a Flask JSON API over the same command pipeline.
"""
from .person_card import PersonCard, person_cards, help_text
from .console_app import ConsoleApp, create_console_app, run_console_app
from .web_app import create_app, run_web_app

__all__ = [
    "PersonCard", "person_cards", "help_text", "ConsoleApp", "create_console_app",
    "run_console_app", "create_app", "run_web_app"
]
