"""
Top-level command parser.

Splits user input into a command word and its arguments and hands the
arguments to the parser registered for that word.
"""
import re
from typing import Callable, Dict

from loguru import logger

from ..services.app_commands import ExitCommand, HelpCommand
from ..services.command_base import Command
from ..services.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from ..services.player_commands import (
    AddCommand, ClearCommand, DeleteCommand, EditCommand, FindCommand, ListCommand
)
from ..services.position_commands import (
    AssignPositionCommand, DeletePositionCommand, ListPositionsCommand, NewPositionCommand
)
from ..services.status_commands import (
    AddInjuryCommand, AssignCaptainCommand, DeleteInjuryCommand, ListCaptainsCommand,
    ListInjuredCommand, StripCaptainCommand
)
from ..services.team_commands import (
    AssignTeamCommand, DeleteTeamCommand, FilterCommand, ListTeamsCommand, NewTeamCommand
)
from .player_parsers import AddCommandParser, DeleteCommandParser, EditCommandParser, FindCommandParser
from .position_parsers import (
    AssignPositionCommandParser, DeletePositionCommandParser, NewPositionCommandParser
)
from .status_parsers import (
    AddInjuryCommandParser, AssignCaptainCommandParser, DeleteInjuryCommandParser,
    StripCaptainCommandParser
)
from .team_parsers import (
    AssignTeamCommandParser, DeleteTeamCommandParser, FilterCommandParser, NewTeamCommandParser
)
from .tokenizer import ParseError

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


def _no_arguments(command: Command) -> Callable[[str], Command]:
    """Parser for commands that ignore their arguments."""
    return lambda _args: command


class RosterBookParser:
    """Parses user input into commands for execution."""

    def __init__(self) -> None:
        self._parsers: Dict[str, Callable[[str], Command]] = {
            AddCommand.COMMAND_WORD: AddCommandParser().parse,
            EditCommand.COMMAND_WORD: EditCommandParser().parse,
            DeleteCommand.COMMAND_WORD: DeleteCommandParser().parse,
            FindCommand.COMMAND_WORD: FindCommandParser().parse,
            ListCommand.COMMAND_WORD: _no_arguments(ListCommand()),
            ClearCommand.COMMAND_WORD: _no_arguments(ClearCommand()),
            FilterCommand.COMMAND_WORD: FilterCommandParser().parse,
            NewTeamCommand.COMMAND_WORD: NewTeamCommandParser().parse,
            DeleteTeamCommand.COMMAND_WORD: DeleteTeamCommandParser().parse,
            ListTeamsCommand.COMMAND_WORD: _no_arguments(ListTeamsCommand()),
            AssignTeamCommand.COMMAND_WORD: AssignTeamCommandParser().parse,
            NewPositionCommand.COMMAND_WORD: NewPositionCommandParser().parse,
            DeletePositionCommand.COMMAND_WORD: DeletePositionCommandParser().parse,
            ListPositionsCommand.COMMAND_WORD: _no_arguments(ListPositionsCommand()),
            AssignPositionCommand.COMMAND_WORD: AssignPositionCommandParser().parse,
            AddInjuryCommand.COMMAND_WORD: AddInjuryCommandParser().parse,
            DeleteInjuryCommand.COMMAND_WORD: DeleteInjuryCommandParser().parse,
            ListInjuredCommand.COMMAND_WORD: _no_arguments(ListInjuredCommand()),
            AssignCaptainCommand.COMMAND_WORD: AssignCaptainCommandParser().parse,
            StripCaptainCommand.COMMAND_WORD: StripCaptainCommandParser().parse,
            ListCaptainsCommand.COMMAND_WORD: _no_arguments(ListCaptainsCommand()),
            HelpCommand.COMMAND_WORD: _no_arguments(HelpCommand()),
            ExitCommand.COMMAND_WORD: _no_arguments(ExitCommand()),
        }

    @property
    def command_words(self):
        return sorted(self._parsers)

    def parse_command(self, user_input: str) -> Command:
        """
        Parse ``user_input`` into a command.

        Raises:
            ParseError: If the input is empty, the command word is unknown,
                or the arguments do not fit the command
        """
        match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if match is None:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE))

        command_word = match.group("command_word")
        arguments = match.group("arguments")
        logger.debug("Command word: {}; Arguments: {}", command_word, arguments)

        parser = self._parsers.get(command_word)
        if parser is None:
            logger.info("Input with unknown command word: {}", command_word)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
        return parser(arguments)
