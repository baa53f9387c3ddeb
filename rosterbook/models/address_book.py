"""
Address book aggregate for the Roster Book application.

This module contains the AddressBook, which owns the lists of persons, teams
and positions and guarantees identity-key uniqueness within each list.
"""
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .identity import IdentityKey
from .person import Person
from .position import Position
from .team import Team


class ModelError(Exception):
    """Base class for model precondition failures."""
    pass


class DuplicateEntityError(ModelError):
    """Raised when an entity with the same identity already exists."""
    pass


class EntityNotFoundError(ModelError):
    """Raised when an operation targets an entity that does not exist."""
    pass


class EntityInUseError(ModelError):
    """Raised when deleting a team or position still referenced by a person."""
    pass


class CaptainConflictError(ModelError):
    """Raised when a team would end up with more than one captain."""
    pass


T = TypeVar("T")


class UniqueList(Generic[T]):
    """
    Ordered list of entities whose identity keys are unique.

    Args:
        kind: Human-readable entity name used in error messages
        key_of: Function returning an entity's identity key
    """

    def __init__(self, kind: str, key_of: Callable[[T], IdentityKey]):
        self.kind = kind
        self._key_of = key_of
        self._items: List[T] = []

    def contains(self, item: T) -> bool:
        return self.find(self._key_of(item)) is not None

    def find(self, key: IdentityKey) -> Optional[T]:
        for item in self._items:
            if self._key_of(item) == key:
                return item
        return None

    def add(self, item: T) -> None:
        if self.contains(item):
            raise DuplicateEntityError(f"This {self.kind} already exists")
        self._items.append(item)

    def replace(self, target: T, edited: T) -> None:
        """Replace ``target`` in place, keeping its position in the list."""
        index = self._index_of(self._key_of(target))
        edited_key = self._key_of(edited)
        if edited_key != self._key_of(target) and self.find(edited_key) is not None:
            raise DuplicateEntityError(f"This {self.kind} already exists")
        self._items[index] = edited

    def remove(self, item: T) -> None:
        del self._items[self._index_of(self._key_of(item))]

    def set_all(self, items: Iterable[T]) -> None:
        items = list(items)
        keys = [self._key_of(i) for i in items]
        if len(set(keys)) != len(keys):
            raise DuplicateEntityError(f"Duplicate {self.kind} entries")
        self._items = items

    def as_tuple(self) -> Tuple[T, ...]:
        return tuple(self._items)

    def _index_of(self, key: IdentityKey) -> int:
        for index, item in enumerate(self._items):
            if self._key_of(item) == key:
                return index
        raise EntityNotFoundError(f"This {self.kind} does not exist")

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)


class AddressBook:
    """
    Wraps all roster data: persons, teams and positions.

    Uniqueness is checked by identity key; referential checks (teams and
    positions in use) live here too so that a rejected delete never mutates
    any list.
    """

    def __init__(self, persons: Iterable[Person] = (), teams: Iterable[Team] = (),
                 positions: Iterable[Position] = ()):
        self._persons: UniqueList[Person] = UniqueList("person", lambda p: p.key)
        self._teams: UniqueList[Team] = UniqueList("team", lambda t: t.key)
        self._positions: UniqueList[Position] = UniqueList("position", lambda p: p.key)
        self._teams.set_all(teams)
        self._positions.set_all(positions)
        self._persons.set_all(persons)

    @classmethod
    def copy_of(cls, other: "AddressBook") -> "AddressBook":
        return cls(other.persons, other.teams, other.positions)

    def reset_data(self, new_data: "AddressBook") -> None:
        """Replace all contents with a copy of ``new_data``."""
        self._teams.set_all(new_data.teams)
        self._positions.set_all(new_data.positions)
        self._persons.set_all(new_data.persons)

    # ==================== Persons ==================== #

    @property
    def persons(self) -> Tuple[Person, ...]:
        return self._persons.as_tuple()

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def find_person(self, key: IdentityKey) -> Optional[Person]:
        return self._persons.find(key)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons.replace(target, edited)

    def remove_person(self, person: Person) -> None:
        self._persons.remove(person)

    # ==================== Teams ==================== #

    @property
    def teams(self) -> Tuple[Team, ...]:
        return self._teams.as_tuple()

    def has_team(self, team: Team) -> bool:
        return self._teams.contains(team)

    def find_team(self, key: IdentityKey) -> Optional[Team]:
        return self._teams.find(key)

    def add_team(self, team: Team) -> None:
        self._teams.add(team)

    def team_member_count(self, team: Team) -> int:
        return sum(1 for p in self._persons if p.team.key == team.key)

    def remove_team(self, team: Team) -> None:
        if self.team_member_count(team):
            raise EntityInUseError(f"Team {team} still has players assigned")
        self._teams.remove(team)

    # ==================== Positions ==================== #

    @property
    def positions(self) -> Tuple[Position, ...]:
        return self._positions.as_tuple()

    def has_position(self, position: Position) -> bool:
        return self._positions.contains(position)

    def find_position(self, key: IdentityKey) -> Optional[Position]:
        return self._positions.find(key)

    def add_position(self, position: Position) -> None:
        if position.is_none:
            raise ValueError("The NONE position is reserved")
        self._positions.add(position)

    def position_holder_count(self, position: Position) -> int:
        return sum(1 for p in self._persons if p.position.key == position.key)

    def remove_position(self, position: Position) -> None:
        if self.position_holder_count(position):
            raise EntityInUseError(f"Position {position} is still assigned to players")
        self._positions.remove(position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return (self.persons == other.persons and self.teams == other.teams
                and self.positions == other.positions)

    def __repr__(self) -> str:
        return (f"AddressBook(persons={len(self._persons)}, teams={len(self._teams)}, "
                f"positions={len(self._positions)})")
