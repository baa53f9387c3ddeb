"""Parsers for injury and captaincy commands."""
from ..services.status_commands import (
    AddInjuryCommand, AssignCaptainCommand, DeleteInjuryCommand, StripCaptainCommand
)
from . import parser_util
from .player_parsers import required_player_value, usage_error
from .tokenizer import PREFIX_INJURY, PREFIX_PLAYER, are_prefixes_present, tokenize


class _InjuryCommandParser:
    """Shared parsing for ``pl/PLAYER i/INJURY`` commands."""

    command_class = AddInjuryCommand

    def parse(self, args: str):
        multimap = tokenize(args, PREFIX_PLAYER, PREFIX_INJURY)
        usage = self.command_class.MESSAGE_USAGE
        player_value = required_player_value(multimap, usage)
        injury_value = multimap.get_value(PREFIX_INJURY)
        if not are_prefixes_present(multimap, PREFIX_INJURY) or not injury_value:
            raise usage_error(usage)
        multimap.verify_no_duplicate_prefixes_for(PREFIX_PLAYER, PREFIX_INJURY)
        return self.command_class(parser_util.parse_name(player_value),
                                  parser_util.parse_injury(injury_value))


class AddInjuryCommandParser(_InjuryCommandParser):
    command_class = AddInjuryCommand


class DeleteInjuryCommandParser(_InjuryCommandParser):
    command_class = DeleteInjuryCommand


class _CaptainCommandParser:
    """Shared parsing for ``pl/PLAYER`` captaincy commands."""

    command_class = AssignCaptainCommand

    def parse(self, args: str):
        multimap = tokenize(args, PREFIX_PLAYER)
        player_value = required_player_value(multimap, self.command_class.MESSAGE_USAGE)
        multimap.verify_no_duplicate_prefixes_for(PREFIX_PLAYER)
        return self.command_class(parser_util.parse_name(player_value))


class AssignCaptainCommandParser(_CaptainCommandParser):
    command_class = AssignCaptainCommand


class StripCaptainCommandParser(_CaptainCommandParser):
    command_class = StripCaptainCommand
