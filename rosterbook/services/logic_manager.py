"""
Logic manager: the single command-execution path.

Parses user text, executes the command against the model and persists the
address book after every command.
"""
from typing import Optional

from loguru import logger

from ..models import GuiSettings, Model
from ..parser import RosterBookParser
from ..storage import StorageManager
from .command_base import CommandError, CommandResult

FILE_OPS_ERROR_FORMAT = "Could not save data due to the following error: {}"
FILE_OPS_PERMISSION_ERROR_FORMAT = "Could not save data to file {} due to insufficient permissions to write to the file or the folder."


class LogicManager:
    """
    Runs one user command at a time.

    Args:
        model: The model commands act on
        storage: Where the address book is saved after each command
        parser: Optional parser (defaults to RosterBookParser)
    """

    def __init__(self, model: Model, storage: StorageManager,
                 parser: Optional[RosterBookParser] = None):
        self.model = model
        self.storage = storage
        self.parser = parser or RosterBookParser()

    def execute(self, command_text: str) -> CommandResult:
        """
        Execute ``command_text``.

        Returns:
            The command result

        Raises:
            ParseError: If the text cannot be parsed
            CommandError: If the command fails or the data cannot be saved
        """
        logger.info("----------------[USER COMMAND][{}]", command_text)
        command = self.parser.parse_command(command_text)
        result = command.execute(self.model)

        try:
            self.storage.save_address_book(self.model.address_book)
        except PermissionError as e:
            logger.error("Permission denied saving address book: {}", e)
            raise CommandError(FILE_OPS_PERMISSION_ERROR_FORMAT.format(
                self.storage.address_book_file_path)) from e
        except OSError as e:
            logger.error("Failed to save address book: {}", e)
            raise CommandError(FILE_OPS_ERROR_FORMAT.format(e)) from e
        return result

    # ==================== Views for the outer surfaces ==================== #

    @property
    def filtered_person_list(self):
        return self.model.filtered_person_list()

    @property
    def filtered_team_list(self):
        return self.model.filtered_team_list()

    @property
    def filtered_position_list(self):
        return self.model.filtered_position_list()

    @property
    def address_book_file_path(self) -> str:
        return self.model.address_book_file_path

    @property
    def gui_settings(self) -> GuiSettings:
        return self.model.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self.model.gui_settings = gui_settings
