"""Team commands: filtering players by team and managing the team list."""
from dataclasses import dataclass

from loguru import logger

from ..models import Model, Name, Team
from ..models.predicates import FilterByTeamPredicate, PREDICATE_SHOW_ALL_TEAMS
from .command_base import Command, CommandError, CommandResult, require_person, require_team
from .messages import MESSAGE_NO_TEAMS, MESSAGE_PERSONS_LISTED_OVERVIEW


@dataclass(frozen=True)
class FilterCommand(Command):
    """Shows only the players of one team."""
    predicate: FilterByTeamPredicate

    COMMAND_WORD = "filter"
    MESSAGE_USAGE = (
        "filter: Shows all players belonging to the given team (case-insensitive).\n"
        "Parameters: t/TEAM\n"
        "Example: filter t/U12"
    )

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(model.filtered_person_list())))


@dataclass(frozen=True)
class NewTeamCommand(Command):
    """Adds a team."""
    team: Team

    COMMAND_WORD = "newteam"
    MESSAGE_USAGE = (
        "newteam: Creates a new team.\n"
        "Parameters: t/TEAM\n"
        "Example: newteam t/U12"
    )
    MESSAGE_SUCCESS = "New team added: {}"
    MESSAGE_DUPLICATE_TEAM = "This team already exists in the address book"

    def execute(self, model: Model) -> CommandResult:
        if model.has_team(self.team):
            raise CommandError(self.MESSAGE_DUPLICATE_TEAM)
        model.add_team(self.team)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.team))


@dataclass(frozen=True)
class DeleteTeamCommand(Command):
    """Deletes a team that has no players."""
    team: Team

    COMMAND_WORD = "deleteteam"
    MESSAGE_USAGE = (
        "deleteteam: Deletes a team with no players assigned.\n"
        "Parameters: t/TEAM\n"
        "Example: deleteteam t/U12"
    )
    MESSAGE_SUCCESS = "Deleted team: {}"
    MESSAGE_TEAM_NOT_EMPTY = "Team {} still has players assigned. Reassign or delete them first."

    def execute(self, model: Model) -> CommandResult:
        stored = require_team(model, self.team)
        if not model.is_team_empty(stored):
            raise CommandError(self.MESSAGE_TEAM_NOT_EMPTY.format(stored))
        model.delete_team(stored)
        return CommandResult(self.MESSAGE_SUCCESS.format(stored))


@dataclass(frozen=True)
class ListTeamsCommand(Command):
    """Lists every team."""

    COMMAND_WORD = "listteams"
    MESSAGE_USAGE = "listteams: Lists all teams."
    MESSAGE_SUCCESS = "Listed all teams"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_team_list(PREDICATE_SHOW_ALL_TEAMS)
        if not model.filtered_team_list():
            raise CommandError(MESSAGE_NO_TEAMS)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class AssignTeamCommand(Command):
    """Moves a player to another team, giving up any captaincy."""
    player_name: Name
    team: Team

    COMMAND_WORD = "assignteam"
    MESSAGE_USAGE = (
        "assignteam: Assigns a player to an existing team.\n"
        "Parameters: pl/PLAYER t/TEAM\n"
        "Example: assignteam pl/John Doe t/U12"
    )
    MESSAGE_SUCCESS = "{} assigned to team {}"
    MESSAGE_ALREADY_IN_TEAM = "{} is already in team {}"

    def execute(self, model: Model) -> CommandResult:
        person = require_person(model, self.player_name)
        team = require_team(model, self.team)
        if person.team.key == team.key:
            raise CommandError(self.MESSAGE_ALREADY_IN_TEAM.format(person.name, team))
        if person.is_captain:
            logger.info("Stripping captaincy of {} before moving to {}", person.name, team)
            person = model.strip_captain(person)
        model.assign_team(person, team)
        return CommandResult(self.MESSAGE_SUCCESS.format(person.name, team))
