"""
Model for the Roster Book application.

The Model is the only component that mutates the address book. It exposes
existence checks, atomic whole-object replacements and three filtered views
(persons, teams, positions) driven by swappable predicates.
"""
from collections.abc import Sequence
from typing import Callable, Generic, Optional, Tuple, TypeVar

from loguru import logger

from .address_book import (
    AddressBook, CaptainConflictError, DuplicateEntityError, EntityInUseError, EntityNotFoundError
)
from .identity import IdentityKey
from .person import Injury, Name, Person, normalize_injuries
from .position import Position
from .predicates import PREDICATE_SHOW_ALL_PERSONS, PREDICATE_SHOW_ALL_POSITIONS, PREDICATE_SHOW_ALL_TEAMS
from .team import Team
from .user_prefs import GuiSettings, UserPrefs

T = TypeVar("T")


class FilteredView(Sequence, Generic[T]):
    """
    Read-only view over a backing list, defined by the last-applied predicate.

    The view holds no copy of the data: every access re-evaluates the
    predicate against the current backing list.
    """

    def __init__(self, source: Callable[[], Tuple[T, ...]], predicate: Callable[[T], bool]):
        self._source = source
        self._predicate = predicate

    @property
    def predicate(self) -> Callable[[T], bool]:
        return self._predicate

    def apply(self, predicate: Callable[[T], bool]) -> Tuple[T, ...]:
        """Swap the predicate and return the freshly filtered items."""
        if predicate is None:
            raise TypeError("predicate must not be None")
        self._predicate = predicate
        return self.items

    @property
    def items(self) -> Tuple[T, ...]:
        return tuple(item for item in self._source() if self._predicate(item))

    def __getitem__(self, index):
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self) -> str:
        return f"FilteredView({list(self.items)!r})"


class Model:
    """
    In-memory roster store with filtered views.

    Args:
        address_book: Initial roster data (copied)
        user_prefs: Initial user preferences (copied)
    """

    def __init__(self, address_book: Optional[AddressBook] = None,
                 user_prefs: Optional[UserPrefs] = None):
        self._address_book = AddressBook.copy_of(address_book) if address_book else AddressBook()
        self._user_prefs = UserPrefs.from_dict(user_prefs.to_dict()) if user_prefs else UserPrefs()
        self._filtered_persons: FilteredView[Person] = FilteredView(
            lambda: self._address_book.persons, PREDICATE_SHOW_ALL_PERSONS)
        self._filtered_teams: FilteredView[Team] = FilteredView(
            lambda: self._address_book.teams, PREDICATE_SHOW_ALL_TEAMS)
        self._filtered_positions: FilteredView[Position] = FilteredView(
            lambda: self._address_book.positions, PREDICATE_SHOW_ALL_POSITIONS)
        logger.debug("Initializing model with {!r}", self._address_book)

    # ==================== User preferences ==================== #

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    @user_prefs.setter
    def user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs = UserPrefs.from_dict(user_prefs.to_dict())

    @property
    def gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self._user_prefs.gui_settings = gui_settings

    @property
    def address_book_file_path(self) -> str:
        return self._user_prefs.address_book_file_path

    @address_book_file_path.setter
    def address_book_file_path(self, path: str) -> None:
        self._user_prefs.address_book_file_path = str(path)

    # ==================== Address book ==================== #

    @property
    def address_book(self) -> AddressBook:
        return self._address_book

    def set_address_book(self, address_book: AddressBook) -> None:
        self._address_book.reset_data(address_book)

    # ==================== Persons ==================== #

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def get_person_by_name(self, name: Name) -> Optional[Person]:
        """Return the person whose name matches ``name`` case-insensitively, or None."""
        return self._address_book.find_person(name.key)

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

    def delete_person(self, target: Person) -> None:
        self._address_book.remove_person(target)

    def set_person(self, target: Person, edited_person: Person) -> None:
        """
        Replace ``target`` with ``edited_person``.

        Raises:
            EntityNotFoundError: If ``target`` is not in the address book
            DuplicateEntityError: If the edited identity collides with another person
        """
        self._address_book.set_person(target, edited_person)

    def filtered_person_list(self) -> FilteredView[Person]:
        return self._filtered_persons

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        self._filtered_persons.apply(predicate)

    # ==================== Injuries ==================== #

    def add_injury(self, target: Person, injury: Injury) -> Person:
        """Return and store a copy of ``target`` with ``injury`` added."""
        updated = target.with_changes(injuries=normalize_injuries(target.injuries | {injury}))
        self.set_person(target, updated)
        return updated

    def delete_injury(self, target: Person, injury: Injury) -> Person:
        """
        Return and store a copy of ``target`` without ``injury``.

        Removing the last real injury reinstates the default ``FIT`` entry.
        """
        updated = target.with_changes(injuries=normalize_injuries(target.injuries - {injury}))
        self.set_person(target, updated)
        return updated

    def has_non_default_injury(self, target: Person) -> bool:
        return target.has_non_default_injury()

    def has_specific_injury(self, target: Person, injury: Injury) -> bool:
        return target.has_injury(injury)

    # ==================== Teams ==================== #

    def has_team(self, team: Team) -> bool:
        return self._address_book.has_team(team)

    def get_team_by_name(self, team: Team) -> Optional[Team]:
        """Return the stored team matching ``team`` case-insensitively, or None."""
        return self._address_book.find_team(team.key)

    def add_team(self, team: Team) -> None:
        self._address_book.add_team(team)
        self.update_filtered_team_list(PREDICATE_SHOW_ALL_TEAMS)

    def is_team_empty(self, team: Team) -> bool:
        """Return True if the team has no players or does not exist."""
        return self._address_book.team_member_count(team) == 0

    def delete_team(self, team: Team) -> None:
        """
        Delete ``team``.

        Raises:
            EntityInUseError: If any player is still assigned to the team
            EntityNotFoundError: If the team does not exist
        """
        self._address_book.remove_team(team)

    def filtered_team_list(self) -> FilteredView[Team]:
        return self._filtered_teams

    def update_filtered_team_list(self, predicate: Callable[[Team], bool]) -> None:
        self._filtered_teams.apply(predicate)

    def assign_team(self, person: Person, team: Team) -> Person:
        """
        Move ``person`` to ``team``. Captaincy is left untouched.

        Raises:
            EntityNotFoundError: If the team does not exist
        """
        stored_team = self._require_team(team)
        updated = person.with_changes(team=stored_team)
        self.set_person(person, updated)
        return updated

    def get_team_captain(self, team: Team) -> Optional[Person]:
        for person in self._address_book.persons:
            if person.is_captain and person.team.key == team.key:
                return person
        return None

    # ==================== Positions ==================== #

    def has_position(self, position: Position) -> bool:
        return self._address_book.has_position(position)

    def get_position_by_name(self, name: str) -> Optional[Position]:
        return self._address_book.find_position(IdentityKey.of(name))

    def add_position(self, position: Position) -> None:
        self._address_book.add_position(position)
        self.update_filtered_position_list(PREDICATE_SHOW_ALL_POSITIONS)

    def delete_position(self, position: Position) -> None:
        """
        Delete ``position``.

        Raises:
            EntityInUseError: If any player still holds the position
            EntityNotFoundError: If the position does not exist
        """
        self._address_book.remove_position(position)

    def is_position_assigned(self, position: Position) -> bool:
        return self._address_book.position_holder_count(position) > 0

    def assign_position(self, person: Person, position: Position) -> Person:
        if position.is_none:
            stored = Position.none()
        else:
            stored = self._address_book.find_position(position.key)
            if stored is None:
                raise EntityNotFoundError(f"Position {position} does not exist")
        updated = person.with_changes(position=stored)
        self.set_person(person, updated)
        return updated

    def filtered_position_list(self) -> FilteredView[Position]:
        return self._filtered_positions

    def update_filtered_position_list(self, predicate: Callable[[Position], bool]) -> None:
        self._filtered_positions.apply(predicate)

    # ==================== Captains ==================== #

    def assign_captain(self, person: Person) -> Person:
        """
        Make ``person`` captain of their team.

        Raises:
            CaptainConflictError: If a different player already captains the team
        """
        current = self.get_team_captain(person.team)
        if current is not None and not current.is_same_person(person):
            raise CaptainConflictError(f"{current.name} is already captain of {person.team}")
        updated = person.with_changes(is_captain=True)
        self.set_person(person, updated)
        return updated

    def strip_captain(self, person: Person) -> Person:
        updated = person.with_changes(is_captain=False)
        self.set_person(person, updated)
        return updated

    # ==================== Helpers ==================== #

    def _require_team(self, team: Team) -> Team:
        stored = self._address_book.find_team(team.key)
        if stored is None:
            raise EntityNotFoundError(f"Team {team} does not exist")
        return stored

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (self._address_book == other._address_book
                and self._user_prefs == other._user_prefs
                and tuple(self._filtered_persons) == tuple(other._filtered_persons)
                and tuple(self._filtered_teams) == tuple(other._filtered_teams)
                and tuple(self._filtered_positions) == tuple(other._filtered_positions))


__all__ = [
    "Model", "FilteredView", "DuplicateEntityError", "EntityNotFoundError",
    "EntityInUseError", "CaptainConflictError",
]
