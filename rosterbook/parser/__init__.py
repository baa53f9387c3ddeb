"""
Parser package for the Roster Book application.

Turns free-text commands into typed Command objects.
"""
from .tokenizer import (
    ParseError, Prefix, ArgumentMultimap, tokenize, are_prefixes_present,
    PREFIX_PLAYER, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
    PREFIX_TEAM, PREFIX_POSITION, PREFIX_INJURY, PREFIX_TAG
)
from .player_parsers import (
    AddCommandParser, EditCommandParser, DeleteCommandParser, FindCommandParser
)
from .team_parsers import (
    FilterCommandParser, NewTeamCommandParser, DeleteTeamCommandParser, AssignTeamCommandParser
)
from .position_parsers import (
    NewPositionCommandParser, DeletePositionCommandParser, AssignPositionCommandParser
)
from .status_parsers import (
    AddInjuryCommandParser, DeleteInjuryCommandParser,
    AssignCaptainCommandParser, StripCaptainCommandParser
)
from .roster_book_parser import RosterBookParser

__all__ = [
    "ParseError", "Prefix", "ArgumentMultimap", "tokenize", "are_prefixes_present",
    "PREFIX_PLAYER", "PREFIX_NAME", "PREFIX_PHONE", "PREFIX_EMAIL", "PREFIX_ADDRESS",
    "PREFIX_TEAM", "PREFIX_POSITION", "PREFIX_INJURY", "PREFIX_TAG",
    "AddCommandParser", "EditCommandParser", "DeleteCommandParser", "FindCommandParser",
    "FilterCommandParser", "NewTeamCommandParser", "DeleteTeamCommandParser",
    "AssignTeamCommandParser", "NewPositionCommandParser", "DeletePositionCommandParser",
    "AssignPositionCommandParser", "AddInjuryCommandParser", "DeleteInjuryCommandParser",
    "AssignCaptainCommandParser", "StripCaptainCommandParser", "RosterBookParser"
]
