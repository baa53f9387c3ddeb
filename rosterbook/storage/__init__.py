"""
Storage package for the Roster Book application.

JSON adapters for roster entities and the file-backed storages built on them.
"""
from .json_adapted import (
    IllegalValueError, MISSING_FIELD_MESSAGE_FORMAT, person_to_record, person_from_record,
    address_book_to_record, address_book_from_record
)
from .storage_service import (
    DataLoadingError, JsonAddressBookStorage, JsonUserPrefsStorage, StorageManager
)

__all__ = [
    "IllegalValueError", "MISSING_FIELD_MESSAGE_FORMAT", "person_to_record",
    "person_from_record", "address_book_to_record", "address_book_from_record",
    "DataLoadingError", "JsonAddressBookStorage", "JsonUserPrefsStorage", "StorageManager"
]
