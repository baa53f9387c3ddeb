"""Position commands: managing the position list and assigning positions."""
from dataclasses import dataclass

from ..models import Model, Name, Position
from ..models.predicates import PREDICATE_SHOW_ALL_POSITIONS
from .command_base import Command, CommandError, CommandResult, require_person
from .messages import MESSAGE_NO_POSITIONS, MESSAGE_POSITION_NOT_FOUND


@dataclass(frozen=True)
class NewPositionCommand(Command):
    """Adds a position; the name is kept exactly as typed."""
    name: str

    COMMAND_WORD = "newposition"
    MESSAGE_USAGE = (
        "newposition: Creates a new position.\n"
        "Parameters: ps/POSITION\n"
        "Example: newposition ps/Striker"
    )
    MESSAGE_SUCCESS = "New position added: {}"
    MESSAGE_DUPLICATE = "This position already exists in the address book"
    MESSAGE_MISSING_FLAG = "Missing position flag. Usage: newposition ps/POSITION"
    MESSAGE_INVALID_FORMAT = "Invalid format. Usage: newposition ps/POSITION (a single word, no spaces)"
    MESSAGE_RESERVED = "NONE is reserved for players without a position"

    def execute(self, model: Model) -> CommandResult:
        if not Position.is_valid(self.name):
            raise CommandError(Position.MESSAGE_CONSTRAINTS)
        position = Position(self.name)
        if position.is_none:
            raise CommandError(self.MESSAGE_RESERVED)
        if model.has_position(position):
            raise CommandError(self.MESSAGE_DUPLICATE)
        model.add_position(position)
        return CommandResult(self.MESSAGE_SUCCESS.format(position))


@dataclass(frozen=True)
class DeletePositionCommand(Command):
    """Deletes a position no player holds."""
    position: Position

    COMMAND_WORD = "deleteposition"
    MESSAGE_USAGE = (
        "deleteposition: Deletes a position that is not assigned to any player.\n"
        "Parameters: ps/POSITION\n"
        "Example: deleteposition ps/Striker"
    )
    MESSAGE_SUCCESS = "Deleted position: {}"
    MESSAGE_POSITION_ASSIGNED = "Position {} is still assigned to at least one player."

    def execute(self, model: Model) -> CommandResult:
        stored = model.get_position_by_name(self.position.name)
        if stored is None:
            raise CommandError(MESSAGE_POSITION_NOT_FOUND.format(self.position))
        if model.is_position_assigned(stored):
            raise CommandError(self.MESSAGE_POSITION_ASSIGNED.format(stored))
        model.delete_position(stored)
        return CommandResult(self.MESSAGE_SUCCESS.format(stored))


@dataclass(frozen=True)
class ListPositionsCommand(Command):
    """Lists every position."""

    COMMAND_WORD = "listpositions"
    MESSAGE_USAGE = "listpositions: Lists all positions."
    MESSAGE_SUCCESS = "Listed all positions"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_position_list(PREDICATE_SHOW_ALL_POSITIONS)
        if not model.filtered_position_list():
            raise CommandError(MESSAGE_NO_POSITIONS)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class AssignPositionCommand(Command):
    """Gives a player an existing position."""
    player_name: Name
    position: Position

    COMMAND_WORD = "assignposition"
    MESSAGE_USAGE = (
        "assignposition: Assigns an existing position to a player.\n"
        "Parameters: pl/PLAYER ps/POSITION\n"
        "Example: assignposition pl/John Doe ps/Striker"
    )
    MESSAGE_SUCCESS = "{} is now playing {}"

    def execute(self, model: Model) -> CommandResult:
        person = require_person(model, self.player_name)
        stored = model.get_position_by_name(self.position.name)
        if stored is None:
            raise CommandError(MESSAGE_POSITION_NOT_FOUND.format(self.position))
        updated = model.assign_position(person, stored)
        return CommandResult(self.MESSAGE_SUCCESS.format(updated.name, stored))
