"""
Console interface for the Roster Book application.

A read-eval-print loop over the LogicManager: one command is read, executed
and saved before the next prompt appears.
"""
from typing import Callable, Optional

from loguru import logger

from ..parser import ParseError
from ..services import CommandError
from ..services.logic_manager import LogicManager
from ..services.service_factory import ServiceFactory
from ..utils import APP_TITLE, setup_logging
from .person_card import help_text, person_cards

PERSON_LIST_COMMANDS = {"list", "find", "filter", "listinjured", "listcaptains"}
PROMPT = "> "


class ConsoleApp:
    """
    Interactive command loop.

    Args:
        logic: Logic manager executing the commands
        read_line: Function returning the next line of input
        write: Function printing a line of output
    """

    def __init__(self, logic: LogicManager, read_line: Callable[[str], str] = input,
                 write: Callable[[str], None] = print):
        self.logic = logic
        self._read_line = read_line
        self._write = write

    def handle(self, command_text: str) -> bool:
        """
        Execute one line of input.

        Returns:
            False once the user asked to exit, True otherwise
        """
        if not command_text.strip():
            return True
        try:
            result = self.logic.execute(command_text)
        except (ParseError, CommandError) as e:
            logger.info("An error occurred while executing command: {}", command_text)
            self._write(str(e))
            return True

        self._write(result.feedback_to_user)
        if result.show_help:
            self._write(help_text())
        if result.exit:
            return False

        command_word = command_text.split()[0]
        if command_word in PERSON_LIST_COMMANDS:
            for card in person_cards(self.logic.filtered_person_list):
                self._write(card.render())
        elif command_word == "listteams":
            for index, team in enumerate(self.logic.filtered_team_list, start=1):
                self._write(f"{index}. {team}")
        elif command_word == "listpositions":
            for index, position in enumerate(self.logic.filtered_position_list, start=1):
                self._write(f"{index}. {position}")
        return True

    def run(self) -> None:
        self._write(f"Welcome to {APP_TITLE}! Type 'help' to see the available commands.")
        while True:
            try:
                line = self._read_line(PROMPT)
            except EOFError:
                break
            if not self.handle(line):
                break


def create_console_app(factory: Optional[ServiceFactory] = None) -> ConsoleApp:
    factory = factory or ServiceFactory()
    return ConsoleApp(factory.create_logic())


def run_console_app(factory: Optional[ServiceFactory] = None) -> None:
    """Run the console loop until the user exits."""
    app = create_console_app(factory)
    logger.info("Starting {}", APP_TITLE)
    try:
        app.run()
    finally:
        storage = app.logic.storage
        try:
            storage.save_user_prefs(app.logic.model.user_prefs)
        except OSError as e:
            logger.error("Failed to save preferences {}", e)
        logger.info("Stopping {}", APP_TITLE)


def main() -> None:
    """Console script entry point."""
    setup_logging()
    run_console_app()


__all__ = ["ConsoleApp", "create_console_app", "run_console_app", "main"]
