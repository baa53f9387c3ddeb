"""
Player status commands for the Roster Book application.

This module covers injury tracking and team captaincy. The one-captain-per-team
rule is kept here by stripping the current captain before assigning a new one;
the Model double-checks it and refuses a second captain.
"""
from dataclasses import dataclass

from loguru import logger

from ..models import Injury, Model, Name
from ..models.predicates import PREDICATE_SHOW_ALL_INJURED, PREDICATE_SHOW_CAPTAINS
from .command_base import Command, CommandError, CommandResult, require_person
from .messages import MESSAGE_PERSONS_LISTED_OVERVIEW


@dataclass(frozen=True)
class AddInjuryCommand(Command):
    """Records an injury for a player."""
    player_name: Name
    injury: Injury

    COMMAND_WORD = "addinjury"
    MESSAGE_USAGE = (
        "addinjury: Records an injury for a player.\n"
        "Parameters: pl/PLAYER i/INJURY\n"
        "Example: addinjury pl/John Doe i/ACL tear"
    )
    MESSAGE_SUCCESS = "Injury {} recorded for {}"
    MESSAGE_DUPLICATE_INJURY = "{} already has the injury {}"
    MESSAGE_DEFAULT_INJURY = "FIT is not an injury. Use deleteinjury to clear injuries instead."

    def execute(self, model: Model) -> CommandResult:
        person = require_person(model, self.player_name)
        if self.injury.is_default:
            raise CommandError(self.MESSAGE_DEFAULT_INJURY)
        if model.has_specific_injury(person, self.injury):
            raise CommandError(self.MESSAGE_DUPLICATE_INJURY.format(person.name, self.injury))
        updated = model.add_injury(person, self.injury)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.injury, updated.name))


@dataclass(frozen=True)
class DeleteInjuryCommand(Command):
    """Removes an injury from a player."""
    player_name: Name
    injury: Injury

    COMMAND_WORD = "deleteinjury"
    MESSAGE_USAGE = (
        "deleteinjury: Removes an injury from a player.\n"
        "Parameters: pl/PLAYER i/INJURY\n"
        "Example: deleteinjury pl/John Doe i/ACL tear"
    )
    MESSAGE_SUCCESS = "Injury {} removed from {}"
    MESSAGE_INJURY_NOT_FOUND = "{} does not have the injury {}"
    MESSAGE_ALREADY_FIT = "{} has no recorded injuries"

    def execute(self, model: Model) -> CommandResult:
        person = require_person(model, self.player_name)
        if not model.has_non_default_injury(person):
            raise CommandError(self.MESSAGE_ALREADY_FIT.format(person.name))
        if not model.has_specific_injury(person, self.injury):
            raise CommandError(self.MESSAGE_INJURY_NOT_FOUND.format(person.name, self.injury))
        updated = model.delete_injury(person, self.injury)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.injury, updated.name))


@dataclass(frozen=True)
class ListInjuredCommand(Command):
    """Lists players with at least one injury."""

    COMMAND_WORD = "listinjured"
    MESSAGE_USAGE = "listinjured: Lists all injured players."
    MESSAGE_NO_INJURED = "No injured players found"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_INJURED)
        count = len(model.filtered_person_list())
        if count == 0:
            return CommandResult(self.MESSAGE_NO_INJURED)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(count))


@dataclass(frozen=True)
class AssignCaptainCommand(Command):
    """Makes a player captain of their team, replacing any current captain."""
    player_name: Name

    COMMAND_WORD = "assigncaptain"
    MESSAGE_USAGE = (
        "assigncaptain: Makes a player the captain of their team.\n"
        "Parameters: pl/PLAYER\n"
        "Example: assigncaptain pl/John Doe"
    )
    MESSAGE_SUCCESS = "{} is now captain of {}"
    MESSAGE_REPLACED = "{} is now captain of {} (replacing {})"
    MESSAGE_ALREADY_CAPTAIN = "{} is already captain of {}"

    def execute(self, model: Model) -> CommandResult:
        person = require_person(model, self.player_name)
        if person.is_captain:
            raise CommandError(self.MESSAGE_ALREADY_CAPTAIN.format(person.name, person.team))

        previous = model.get_team_captain(person.team)
        if previous is not None:
            logger.info("Replacing captain {} of {}", previous.name, person.team)
            model.strip_captain(previous)
        model.assign_captain(person)

        if previous is not None:
            return CommandResult(self.MESSAGE_REPLACED.format(person.name, person.team, previous.name))
        return CommandResult(self.MESSAGE_SUCCESS.format(person.name, person.team))


@dataclass(frozen=True)
class StripCaptainCommand(Command):
    """Removes a player's captaincy."""
    player_name: Name

    COMMAND_WORD = "stripcaptain"
    MESSAGE_USAGE = (
        "stripcaptain: Removes the captaincy of a player.\n"
        "Parameters: pl/PLAYER\n"
        "Example: stripcaptain pl/John Doe"
    )
    MESSAGE_SUCCESS = "{} is no longer captain of {}"
    MESSAGE_NOT_CAPTAIN = "{} is not a captain"

    def execute(self, model: Model) -> CommandResult:
        person = require_person(model, self.player_name)
        if not person.is_captain:
            raise CommandError(self.MESSAGE_NOT_CAPTAIN.format(person.name))
        model.strip_captain(person)
        return CommandResult(self.MESSAGE_SUCCESS.format(person.name, person.team))


@dataclass(frozen=True)
class ListCaptainsCommand(Command):
    """Lists team captains."""

    COMMAND_WORD = "listcaptains"
    MESSAGE_USAGE = "listcaptains: Lists all team captains."
    MESSAGE_NO_CAPTAINS = "No captains found"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_CAPTAINS)
        count = len(model.filtered_person_list())
        if count == 0:
            return CommandResult(self.MESSAGE_NO_CAPTAINS)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(count))
