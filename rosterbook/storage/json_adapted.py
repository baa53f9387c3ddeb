"""
JSON adapters for roster entities.

This module maps Person, Team and Position values to plain JSON-ready
dictionaries and back. Loading validates every field and raises
IllegalValueError naming the offending field.

Person records come in three shapes:

* v1: a single ``injury`` string, usually without an ``isCaptain`` flag
* v2: an ``injuries`` list and no ``isCaptain`` flag
* v3: the current shape with ``injuries`` and ``isCaptain``

Older shapes are detected and normalized into v3 before conversion.
"""
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ..models import (
    Address, AddressBook, DEFAULT_CAPTAIN_STATUS, DEFAULT_INJURY, Email, Injury, Name,
    Person, Phone, Position, Tag, Team
)
from ..models.address_book import DuplicateEntityError

MISSING_FIELD_MESSAGE_FORMAT = "Person's {} field is missing!"
MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."
MESSAGE_DUPLICATE_TEAM = "Teams list contains duplicate team(s)."
MESSAGE_DUPLICATE_POSITION = "Positions list contains duplicate position(s)."
MESSAGE_DUPLICATE_CAPTAIN = "Team {} has more than one captain."

RECORD_V1 = 1
RECORD_V2 = 2
RECORD_V3 = 3

T = TypeVar("T")


class IllegalValueError(Exception):
    """Raised when a stored record violates a data constraint."""
    pass


def _convert(value: Any, kind: type, field_name: str) -> T:
    """Validate ``value`` with ``kind.is_valid`` and build it."""
    if value is None:
        raise IllegalValueError(MISSING_FIELD_MESSAGE_FORMAT.format(field_name))
    if not isinstance(value, str) or not kind.is_valid(value):
        raise IllegalValueError(kind.MESSAGE_CONSTRAINTS)
    return kind(value)


# ==================== Team / Position ==================== #

def team_to_record(team: Team) -> Dict[str, Any]:
    return {"name": team.name}


def team_from_record(data: Any) -> Team:
    name = data.get("name") if isinstance(data, dict) else data
    return _convert(name, Team, "Team")


def position_to_record(position: Position) -> Dict[str, Any]:
    return {"name": position.name}


def position_from_record(data: Any) -> Position:
    name = data.get("name") if isinstance(data, dict) else data
    return _convert(name, Position, "Position")


# ==================== Person ==================== #

def person_to_record(person: Person) -> Dict[str, Any]:
    """
    Convert a person to its current (v3) on-disk shape.

    Sets are written as lists sorted by name so files diff cleanly.
    """
    return {
        "name": person.name.full_name,
        "phone": person.phone.value,
        "email": person.email.value,
        "address": person.address.value,
        "team": team_to_record(person.team),
        "position": position_to_record(person.position),
        "injuries": [injury.injury_name for injury in person.sorted_injuries()],
        "tags": [tag.tag_name for tag in person.sorted_tags()],
        "isCaptain": person.is_captain,
    }


def _detect_record_version(data: Dict[str, Any]) -> int:
    """
    Work out which shape a person record was written in.

    A single ``injury`` string marks v1 whether or not an ``isCaptain`` flag
    was added to the record later.
    """
    if "injury" in data and "injuries" not in data:
        return RECORD_V1
    if "isCaptain" in data:
        return RECORD_V3
    return RECORD_V2


def _normalize_record(data: Dict[str, Any], version: int) -> Dict[str, Any]:
    """Translate a record of any known version into the current shape."""
    record = dict(data)
    if version == RECORD_V1:
        injury = record.pop("injury", None)
        record["injuries"] = [injury] if injury is not None else []
    # a missing flag loads as the default captain status
    record.setdefault("isCaptain", None)
    return record


def _list_field(record: Dict[str, Any], key: str) -> List[Any]:
    values = record.get(key)
    if values is None:
        return []
    if not isinstance(values, list):
        raise IllegalValueError(f"Person's {key} field must be a list")
    return values


def _entry_name(entry: Any, key: str) -> Any:
    """Accept both plain strings and ``{key: value}`` objects for list entries."""
    return entry.get(key) if isinstance(entry, dict) else entry


def person_from_record(data: Dict[str, Any]) -> Person:
    """
    Convert a stored person record of any known version into a Person.

    Raises:
        IllegalValueError: If a mandatory field is missing or any field is invalid
    """
    if not isinstance(data, dict):
        raise IllegalValueError("Person record must be a JSON object")
    record = _normalize_record(data, _detect_record_version(data))

    injuries = [_convert(_entry_name(i, "injuryName"), Injury, "Injury")
                for i in _list_field(record, "injuries")]
    tags = [_convert(_entry_name(t, "tagName"), Tag, "Tag")
            for t in _list_field(record, "tags")]

    name = _convert(record.get("name"), Name, "Name")
    phone = _convert(record.get("phone"), Phone, "Phone")
    email = _convert(record.get("email"), Email, "Email")
    address = _convert(record.get("address"), Address, "Address")

    if record.get("team") is None:
        raise IllegalValueError(MISSING_FIELD_MESSAGE_FORMAT.format("Team"))
    team = team_from_record(record["team"])

    position_data = record.get("position")
    position = Position.none() if position_data is None else position_from_record(position_data)

    is_captain = record.get("isCaptain")
    if is_captain is None:
        is_captain = DEFAULT_CAPTAIN_STATUS
    elif not isinstance(is_captain, bool):
        raise IllegalValueError("Person's isCaptain field must be true or false")

    return Person(
        name=name,
        phone=phone,
        email=email,
        address=address,
        team=team,
        tags=frozenset(tags),
        position=position,
        injuries=frozenset(injuries or [DEFAULT_INJURY]),
        is_captain=is_captain,
    )


# ==================== Address book ==================== #

def address_book_to_record(address_book: AddressBook) -> Dict[str, Any]:
    return {
        "persons": [person_to_record(p) for p in address_book.persons],
        "teams": [team_to_record(t) for t in address_book.teams],
        "positions": [position_to_record(p) for p in address_book.positions],
    }


def _load_unique(records: List[Any], loader: Callable[[Any], T], add: Callable[[T], None],
                 duplicate_message: str) -> None:
    for record in records:
        try:
            add(loader(record))
        except DuplicateEntityError:
            raise IllegalValueError(duplicate_message) from None
        except ValueError as e:
            raise IllegalValueError(str(e)) from e


def address_book_from_record(data: Optional[Dict[str, Any]]) -> AddressBook:
    """
    Build an AddressBook from the stored document.

    Teams and positions referenced by players but missing from their lists are
    registered so older files keep loading.

    Raises:
        IllegalValueError: On any invalid record, duplicate entry or captain clash
    """
    if not isinstance(data, dict):
        raise IllegalValueError("Address book file must contain a JSON object")

    address_book = AddressBook()
    _load_unique(data.get("teams") or [], team_from_record, address_book.add_team,
                 MESSAGE_DUPLICATE_TEAM)
    _load_unique(data.get("positions") or [], position_from_record, address_book.add_position,
                 MESSAGE_DUPLICATE_POSITION)

    captains = set()
    for record in data.get("persons") or []:
        person = person_from_record(record)
        stored_team = address_book.find_team(person.team.key)
        if stored_team is None:
            address_book.add_team(person.team)
            stored_team = person.team
        position = person.position
        if not position.is_none:
            stored_position = address_book.find_position(position.key)
            if stored_position is None:
                address_book.add_position(position)
                stored_position = position
            position = stored_position
        if person.is_captain:
            if stored_team.key in captains:
                raise IllegalValueError(MESSAGE_DUPLICATE_CAPTAIN.format(stored_team))
            captains.add(stored_team.key)
        if address_book.has_person(person):
            raise IllegalValueError(MESSAGE_DUPLICATE_PERSON)
        address_book.add_person(person.with_changes(team=stored_team, position=position))
    return address_book
