"""
Services package for the Roster Book application.

This package contains the commands that act on the model and their shared
result/error types. The LogicManager and ServiceFactory live in their own
modules because they depend on the parser package.
"""
from .command_base import Command, CommandError, CommandResult
from .player_commands import (
    AddCommand, EditCommand, EditPersonDescriptor, DeleteCommand, FindCommand,
    ListCommand, ClearCommand, create_edited_person
)
from .team_commands import (
    FilterCommand, NewTeamCommand, DeleteTeamCommand, ListTeamsCommand, AssignTeamCommand
)
from .position_commands import (
    NewPositionCommand, DeletePositionCommand, ListPositionsCommand, AssignPositionCommand
)
from .status_commands import (
    AddInjuryCommand, DeleteInjuryCommand, ListInjuredCommand,
    AssignCaptainCommand, StripCaptainCommand, ListCaptainsCommand
)
from .app_commands import HelpCommand, ExitCommand

__all__ = [
    "Command", "CommandError", "CommandResult",
    "AddCommand", "EditCommand", "EditPersonDescriptor", "DeleteCommand", "FindCommand",
    "ListCommand", "ClearCommand", "create_edited_person",
    "FilterCommand", "NewTeamCommand", "DeleteTeamCommand", "ListTeamsCommand",
    "AssignTeamCommand", "NewPositionCommand", "DeletePositionCommand",
    "ListPositionsCommand", "AssignPositionCommand", "AddInjuryCommand",
    "DeleteInjuryCommand", "ListInjuredCommand", "AssignCaptainCommand",
    "StripCaptainCommand", "ListCaptainsCommand", "HelpCommand", "ExitCommand"
]
