"""
Command pattern base types for roster actions.

Every user intent is a Command that executes against the Model and returns
a CommandResult, or raises CommandError with a user-facing message.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..models import Model, Name, Person, Team
from .messages import MESSAGE_PERSON_NOT_FOUND, MESSAGE_TEAM_NOT_FOUND


class CommandError(Exception):
    """Raised when a command cannot be executed; the message is shown to the user."""
    pass


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a successfully executed command.

    Attributes:
        feedback_to_user: Message shown to the user
        show_help: Whether the surface should display help
        exit: Whether the application should exit
    """
    feedback_to_user: str
    show_help: bool = False
    exit: bool = False


class Command(ABC):
    """Abstract base class for all roster commands - Command pattern."""

    COMMAND_WORD = ""
    MESSAGE_USAGE = ""

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """
        Execute the command against ``model``.

        Returns:
            The result to report to the user

        Raises:
            CommandError: If the command cannot be carried out
        """
        pass


def require_person(model: Model, name: Name) -> Person:
    """Look up a player by name or raise CommandError."""
    person = model.get_person_by_name(name)
    if person is None:
        raise CommandError(MESSAGE_PERSON_NOT_FOUND.format(name))
    return person


def require_team(model: Model, team: Team) -> Team:
    """Return the stored team matching ``team`` or raise CommandError."""
    stored: Optional[Team] = model.get_team_by_name(team)
    if stored is None:
        raise CommandError(MESSAGE_TEAM_NOT_FOUND.format(team))
    return stored
