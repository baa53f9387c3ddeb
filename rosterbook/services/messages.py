"""User-facing messages shared by parsers and commands."""
from typing import Iterable

from ..models import Person

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_PERSON_NOT_FOUND = "The player '{}' does not exist in the address book"
MESSAGE_TEAM_NOT_FOUND = "The team '{}' does not exist in the address book"
MESSAGE_POSITION_NOT_FOUND = "The position '{}' does not exist in the address book"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} players listed!"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "
MESSAGE_NO_TEAMS = "There are no teams in the address book."
MESSAGE_NO_POSITIONS = "There are no positions in the address book."


def duplicate_prefixes_message(prefixes: Iterable[object]) -> str:
    """Build the error shown when single-valued prefixes are repeated."""
    return MESSAGE_DUPLICATE_FIELDS + " ".join(sorted({str(p) for p in prefixes}))


def format_person(person: Person) -> str:
    """Format a person for display in command feedback."""
    return str(person)
