"""
Roster Book

A roster manager for sports teams: players with contact details, team and
position assignments, injury status and captaincy, driven by typed commands
and saved to a JSON file.

This package provides both a console loop and a Flask JSON API over the same
command pipeline.
"""
from .models import Model, AddressBook, Person, Team, Position
from .services.logic_manager import LogicManager
from .services.service_factory import ServiceFactory
from .ui import create_app, run_web_app, run_console_app
from .utils import APP_TITLE, setup_logging

__version__ = "1.0.0"

__all__ = [
    "Model", "AddressBook", "Person", "Team", "Position", "LogicManager",
    "ServiceFactory", "create_app", "run_web_app", "run_console_app",
    "APP_TITLE", "setup_logging"
]
