"""
Models package for the Roster Book application.

This package contains the domain entities, the address book aggregate and
the Model that owns the filtered views.
"""
from .identity import IdentityKey
from .team import Team
from .position import Position
from .person import (
    Person, Name, Phone, Email, Address, Tag, Injury,
    DEFAULT_INJURY, DEFAULT_CAPTAIN_STATUS, normalize_injuries
)
from .address_book import (
    AddressBook, ModelError, DuplicateEntityError, EntityNotFoundError,
    EntityInUseError, CaptainConflictError
)
from .user_prefs import GuiSettings, UserPrefs
from .model import Model, FilteredView

__all__ = [
    "IdentityKey", "Team", "Position", "Person", "Name", "Phone", "Email",
    "Address", "Tag", "Injury", "DEFAULT_INJURY", "DEFAULT_CAPTAIN_STATUS",
    "normalize_injuries", "AddressBook", "ModelError", "DuplicateEntityError",
    "EntityNotFoundError", "EntityInUseError", "CaptainConflictError",
    "GuiSettings", "UserPrefs", "Model", "FilteredView"
]
