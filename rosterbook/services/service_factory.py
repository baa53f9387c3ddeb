"""
Service Factory for wiring the application together.

Builds storage, loads preferences and roster data, and creates the Model and
LogicManager that the console and web surfaces share.
"""
from typing import Optional

from loguru import logger

from ..models import AddressBook, Model, UserPrefs
from ..storage import DataLoadingError, JsonAddressBookStorage, JsonUserPrefsStorage, StorageManager
from ..utils.constants import DEFAULT_PREFS_PATH
from .logic_manager import LogicManager


class ServiceFactory:
    """
    Factory for creating the application's services.

    Args:
        prefs_path: Location of the preferences file
        address_book_path: Overrides the roster file named in the preferences
    """

    def __init__(self, prefs_path: str = DEFAULT_PREFS_PATH, address_book_path: Optional[str] = None):
        self.prefs_path = prefs_path
        self.address_book_path = address_book_path
        self._storage: Optional[StorageManager] = None
        self._user_prefs: Optional[UserPrefs] = None

    def load_user_prefs(self) -> UserPrefs:
        """Load preferences, falling back to defaults on a missing or corrupt file."""
        if self._user_prefs is not None:
            return self._user_prefs
        prefs_storage = JsonUserPrefsStorage(self.prefs_path)
        try:
            prefs = prefs_storage.read_user_prefs()
        except DataLoadingError as e:
            logger.warning("Preference file at {} is not in the correct format. "
                           "Using default preferences. ({})", self.prefs_path, e)
            prefs = None
        if prefs is None:
            prefs = UserPrefs()
        if self.address_book_path:
            prefs.address_book_file_path = self.address_book_path
        self._user_prefs = prefs
        return prefs

    def create_storage(self) -> StorageManager:
        """Get singleton storage manager."""
        if self._storage is None:
            prefs = self.load_user_prefs()
            self._storage = StorageManager(
                JsonAddressBookStorage(prefs.address_book_file_path),
                JsonUserPrefsStorage(self.prefs_path),
            )
        return self._storage

    def create_model(self) -> Model:
        """
        Create the Model from stored data.

        A missing file starts an empty roster; a corrupt file is logged and
        also starts empty without being overwritten until the next command.
        """
        storage = self.create_storage()
        try:
            address_book = storage.read_address_book()
            if address_book is None:
                logger.info("Creating a new data file {}", storage.address_book_file_path)
                address_book = AddressBook()
        except DataLoadingError as e:
            logger.warning("Data file at {} could not be loaded. Starting with an empty "
                           "address book. ({})", storage.address_book_file_path, e)
            address_book = AddressBook()
        return Model(address_book, self.load_user_prefs())

    def create_logic(self, model: Optional[Model] = None) -> LogicManager:
        return LogicManager(model or self.create_model(), self.create_storage())
