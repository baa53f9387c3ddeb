"""
Storage service for the Roster Book application.

This module handles saving and loading the address book and user preferences
to/from JSON files.
"""
import json
import os
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from ..models import AddressBook, UserPrefs
from .json_adapted import IllegalValueError, address_book_from_record, address_book_to_record

PathLike = Union[str, Path]


class DataLoadingError(Exception):
    """Raised when a stored file exists but cannot be read or parsed."""
    pass


def _read_json(file_path: Path) -> Optional[dict]:
    """Read a JSON document, returning None if the file does not exist."""
    if not file_path.exists():
        return None
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
    # ValueError covers JSONDecodeError and UnicodeDecodeError
    except (OSError, ValueError) as e:
        raise DataLoadingError(f"Could not read {file_path}: {e}") from e


def _write_json(file_path: Path, data: dict) -> None:
    """Write a JSON document, creating parent directories as needed."""
    directory = file_path.parent
    if str(directory) and not directory.exists():
        os.makedirs(directory)
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


class JsonAddressBookStorage:
    """Stores the address book as a JSON file."""

    def __init__(self, file_path: PathLike):
        self.file_path = Path(file_path)

    def read_address_book(self, file_path: Optional[PathLike] = None) -> Optional[AddressBook]:
        """
        Load the address book.

        Args:
            file_path: Alternative file to read (defaults to the configured one)

        Returns:
            The loaded AddressBook, or None if the file does not exist

        Raises:
            DataLoadingError: If the file is unreadable or holds invalid data
        """
        path = Path(file_path) if file_path is not None else self.file_path
        data = _read_json(path)
        if data is None:
            logger.info("Address book file {} not found", path)
            return None
        try:
            address_book = address_book_from_record(data)
        except IllegalValueError as e:
            raise DataLoadingError(f"Illegal values found in {path}: {e}") from e
        logger.debug("Loaded {!r} from {}", address_book, path)
        return address_book

    def save_address_book(self, address_book: AddressBook, file_path: Optional[PathLike] = None) -> None:
        """
        Save the address book.

        Raises:
            OSError: If the file cannot be written
        """
        path = Path(file_path) if file_path is not None else self.file_path
        _write_json(path, address_book_to_record(address_book))
        logger.debug("Saved {!r} to {}", address_book, path)


class JsonUserPrefsStorage:
    """Stores user preferences as a JSON file."""

    def __init__(self, file_path: PathLike):
        self.file_path = Path(file_path)

    def read_user_prefs(self) -> Optional[UserPrefs]:
        data = _read_json(self.file_path)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise DataLoadingError(f"Preferences file {self.file_path} must hold a JSON object")
        try:
            return UserPrefs.from_dict(data)
        except (TypeError, ValueError) as e:
            raise DataLoadingError(f"Invalid preferences in {self.file_path}: {e}") from e

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        _write_json(self.file_path, user_prefs.to_dict())


class StorageManager:
    """
    Facade over address book and preference storage.

    Args:
        address_book_storage: Storage for roster data
        user_prefs_storage: Storage for preferences
    """

    def __init__(self, address_book_storage: JsonAddressBookStorage,
                 user_prefs_storage: JsonUserPrefsStorage):
        self.address_book_storage = address_book_storage
        self.user_prefs_storage = user_prefs_storage

    @property
    def address_book_file_path(self) -> Path:
        return self.address_book_storage.file_path

    @property
    def user_prefs_file_path(self) -> Path:
        return self.user_prefs_storage.file_path

    def read_user_prefs(self) -> Optional[UserPrefs]:
        return self.user_prefs_storage.read_user_prefs()

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        self.user_prefs_storage.save_user_prefs(user_prefs)

    def read_address_book(self) -> Optional[AddressBook]:
        return self.address_book_storage.read_address_book()

    def save_address_book(self, address_book: AddressBook) -> None:
        self.address_book_storage.save_address_book(address_book)
