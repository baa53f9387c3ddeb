"""Application-level commands: help and exit."""
from dataclasses import dataclass

from ..models import Model
from .command_base import Command, CommandResult


@dataclass(frozen=True)
class HelpCommand(Command):
    """Shows the command summary."""

    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions."
    SHOWING_HELP_MESSAGE = "Opened help window."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    """Leaves the application."""

    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Roster Book as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
