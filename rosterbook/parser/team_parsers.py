"""Parsers for team commands (filter, newteam, deleteteam, assignteam)."""
from ..models.predicates import FilterByTeamPredicate
from ..services.team_commands import (
    AssignTeamCommand, DeleteTeamCommand, FilterCommand, NewTeamCommand
)
from . import parser_util
from .player_parsers import required_player_value, usage_error
from .tokenizer import PREFIX_PLAYER, PREFIX_TEAM, ArgumentMultimap, are_prefixes_present, tokenize


def _single_team_value(multimap: ArgumentMultimap, usage: str) -> str:
    """Return the only, non-empty ``t/`` value with an empty preamble."""
    if not are_prefixes_present(multimap, PREFIX_TEAM) or multimap.preamble:
        raise usage_error(usage)
    multimap.verify_no_duplicate_prefixes_for(PREFIX_TEAM)
    value = multimap.get_value(PREFIX_TEAM).strip()
    if not value:
        raise usage_error(usage)
    return value


class FilterCommandParser:
    """Parses ``filter t/TEAM`` into a team-membership predicate."""

    def parse(self, args: str) -> FilterCommand:
        multimap = tokenize(args, PREFIX_TEAM)
        team = parser_util.parse_team(_single_team_value(multimap, FilterCommand.MESSAGE_USAGE))
        return FilterCommand(FilterByTeamPredicate(team.name))


class NewTeamCommandParser:

    def parse(self, args: str) -> NewTeamCommand:
        multimap = tokenize(args, PREFIX_TEAM)
        return NewTeamCommand(parser_util.parse_team(
            _single_team_value(multimap, NewTeamCommand.MESSAGE_USAGE)))


class DeleteTeamCommandParser:

    def parse(self, args: str) -> DeleteTeamCommand:
        multimap = tokenize(args, PREFIX_TEAM)
        return DeleteTeamCommand(parser_util.parse_team(
            _single_team_value(multimap, DeleteTeamCommand.MESSAGE_USAGE)))


class AssignTeamCommandParser:

    def parse(self, args: str) -> AssignTeamCommand:
        multimap = tokenize(args, PREFIX_PLAYER, PREFIX_TEAM)
        usage = AssignTeamCommand.MESSAGE_USAGE
        player_value = required_player_value(multimap, usage)
        team_value = _single_team_value(multimap, usage)
        multimap.verify_no_duplicate_prefixes_for(PREFIX_PLAYER)
        return AssignTeamCommand(parser_util.parse_name(player_value),
                                 parser_util.parse_team(team_value))
