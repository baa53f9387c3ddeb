"""Parsers for position commands (newposition, deleteposition, assignposition)."""
import re

from ..services.position_commands import (
    AssignPositionCommand, DeletePositionCommand, NewPositionCommand
)
from . import parser_util
from .player_parsers import required_player_value, usage_error
from .tokenizer import PREFIX_PLAYER, PREFIX_POSITION, ParseError, are_prefixes_present, tokenize


class NewPositionCommandParser:
    """
    Parses ``newposition ps/NAME``.

    The whole argument string must be a single ``ps/`` marker (any case)
    followed by one non-whitespace token. The token is kept verbatim.
    """

    ARG_PATTERN = re.compile(r"\s*ps/(?P<name>\S+)\s*", re.IGNORECASE)

    def parse(self, args: str) -> NewPositionCommand:
        args = args or ""
        match = self.ARG_PATTERN.fullmatch(args)
        if match is None:
            if PREFIX_POSITION.prefix not in args.lower():
                raise ParseError(NewPositionCommand.MESSAGE_MISSING_FLAG)
            raise ParseError(NewPositionCommand.MESSAGE_INVALID_FORMAT)
        return NewPositionCommand(match.group("name"))


class DeletePositionCommandParser:

    def parse(self, args: str) -> DeletePositionCommand:
        multimap = tokenize(args, PREFIX_POSITION)
        usage = DeletePositionCommand.MESSAGE_USAGE
        if not are_prefixes_present(multimap, PREFIX_POSITION) or multimap.preamble:
            raise usage_error(usage)
        multimap.verify_no_duplicate_prefixes_for(PREFIX_POSITION)
        return DeletePositionCommand(parser_util.parse_position(multimap.get_value(PREFIX_POSITION)))


class AssignPositionCommandParser:

    def parse(self, args: str) -> AssignPositionCommand:
        multimap = tokenize(args, PREFIX_PLAYER, PREFIX_POSITION)
        usage = AssignPositionCommand.MESSAGE_USAGE
        player_value = required_player_value(multimap, usage)
        if not are_prefixes_present(multimap, PREFIX_POSITION):
            raise usage_error(usage)
        multimap.verify_no_duplicate_prefixes_for(PREFIX_PLAYER, PREFIX_POSITION)
        return AssignPositionCommand(parser_util.parse_name(player_value),
                                     parser_util.parse_position(multimap.get_value(PREFIX_POSITION)))
