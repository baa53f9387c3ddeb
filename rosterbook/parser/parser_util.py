"""
Field parsers shared by the command parsers.

Each function trims its input, validates it against the domain rule and
returns the typed value, raising ParseError with the field's constraint
message otherwise.
"""
from typing import FrozenSet, Iterable

from ..models import Address, Email, Injury, Name, Phone, Position, Tag, Team
from .tokenizer import ParseError


def parse_name(name: str) -> Name:
    trimmed = name.strip()
    if not Name.is_valid(trimmed):
        raise ParseError(Name.MESSAGE_CONSTRAINTS)
    return Name(trimmed)


def parse_phone(phone: str) -> Phone:
    trimmed = phone.strip()
    if not Phone.is_valid(trimmed):
        raise ParseError(Phone.MESSAGE_CONSTRAINTS)
    return Phone(trimmed)


def parse_email(email: str) -> Email:
    trimmed = email.strip()
    if not Email.is_valid(trimmed):
        raise ParseError(Email.MESSAGE_CONSTRAINTS)
    return Email(trimmed)


def parse_address(address: str) -> Address:
    trimmed = address.strip()
    if not Address.is_valid(trimmed):
        raise ParseError(Address.MESSAGE_CONSTRAINTS)
    return Address(trimmed)


def parse_team(team: str) -> Team:
    trimmed = team.strip()
    if not Team.is_valid(trimmed):
        raise ParseError(Team.MESSAGE_CONSTRAINTS)
    return Team(trimmed)


def parse_position(position: str) -> Position:
    trimmed = position.strip()
    if not Position.is_valid(trimmed):
        raise ParseError(Position.MESSAGE_CONSTRAINTS)
    return Position(trimmed)


def parse_injury(injury: str) -> Injury:
    trimmed = injury.strip()
    if not Injury.is_valid(trimmed):
        raise ParseError(Injury.MESSAGE_CONSTRAINTS)
    return Injury(trimmed)


def parse_tag(tag: str) -> Tag:
    trimmed = tag.strip()
    if not Tag.is_valid(trimmed):
        raise ParseError(Tag.MESSAGE_CONSTRAINTS)
    return Tag(trimmed)


def parse_tags(tags: Iterable[str]) -> FrozenSet[Tag]:
    """Parse every tag value into a set, rejecting any invalid one."""
    return frozenset(parse_tag(tag) for tag in tags)
