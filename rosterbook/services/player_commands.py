"""
Player commands for the Roster Book application.

This module contains the commands that create, edit, delete, search and list
players, together with the sparse edit descriptor produced by the edit parser.
"""
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional

from loguru import logger

from ..models import (
    Address, AddressBook, Email, Injury, Model, Name, Person, Phone, Tag, Team
)
from ..models.predicates import NameContainsKeywordsPredicate, PREDICATE_SHOW_ALL_PERSONS
from .command_base import Command, CommandError, CommandResult, require_person, require_team
from .messages import MESSAGE_PERSONS_LISTED_OVERVIEW, MESSAGE_POSITION_NOT_FOUND, format_person


@dataclass(frozen=True)
class AddCommand(Command):
    """Adds a player to the address book."""
    to_add: Person

    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a player to the address book. Parameters: "
        "n/NAME p/PHONE e/EMAIL a/ADDRESS t/TEAM [ps/POSITION] [tg/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2 "
        "t/U12 ps/Striker tg/friends"
    )
    MESSAGE_SUCCESS = "New player added: {}"
    MESSAGE_DUPLICATE_PERSON = "This player already exists in the address book"

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self.to_add):
            raise CommandError(self.MESSAGE_DUPLICATE_PERSON)
        team = require_team(model, self.to_add.team)
        position = self.to_add.position
        if not position.is_none:
            stored = model.get_position_by_name(position.name)
            if stored is None:
                raise CommandError(MESSAGE_POSITION_NOT_FOUND.format(position))
            position = stored
        person = self.to_add.with_changes(team=team, position=position, is_captain=False)
        model.add_person(person)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(person)))


@dataclass(frozen=True)
class EditPersonDescriptor:
    """
    Sparse set of field updates for a player.

    Only fields that are not None are applied; ``tags`` set to an empty
    frozenset clears all tags, while ``tags`` left as None keeps them.
    """
    name: Optional[Name] = None
    phone: Optional[Phone] = None
    email: Optional[Email] = None
    address: Optional[Address] = None
    team: Optional[Team] = None
    injury: Optional[Injury] = None
    tags: Optional[FrozenSet[Tag]] = None

    def is_any_field_edited(self) -> bool:
        return any(value is not None for value in (
            self.name, self.phone, self.email, self.address, self.team, self.injury, self.tags
        ))


def create_edited_person(person: Person, descriptor: EditPersonDescriptor) -> Person:
    """
    Merge ``descriptor`` onto ``person``.

    Args:
        person: Player being edited
        descriptor: Fields to change

    Returns:
        A new Person equal to ``person`` except in the edited fields
    """
    return Person(
        name=descriptor.name if descriptor.name is not None else person.name,
        phone=descriptor.phone if descriptor.phone is not None else person.phone,
        email=descriptor.email if descriptor.email is not None else person.email,
        address=descriptor.address if descriptor.address is not None else person.address,
        team=descriptor.team if descriptor.team is not None else person.team,
        tags=descriptor.tags if descriptor.tags is not None else person.tags,
        position=person.position,
        injuries=frozenset({descriptor.injury}) if descriptor.injury is not None else person.injuries,
        is_captain=person.is_captain,
    )


@dataclass(frozen=True)
class EditCommand(Command):
    """Edits the details of an existing player identified by name."""
    player_name: Name
    descriptor: EditPersonDescriptor = field(default_factory=EditPersonDescriptor)

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the details of the player identified by name. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: pl/PLAYER [n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TEAM] [i/INJURY] [tg/TAG]...\n"
        "Example: edit pl/John Doe p/91234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS = "Edited Player: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_PERSON = "This player already exists in the address book."

    def execute(self, model: Model) -> CommandResult:
        person = require_person(model, self.player_name)
        descriptor = self.descriptor
        if descriptor.team is not None:
            descriptor = replace(descriptor, team=require_team(model, descriptor.team))

        edited = create_edited_person(person, descriptor)
        if not person.is_same_person(edited) and model.has_person(edited):
            raise CommandError(self.MESSAGE_DUPLICATE_PERSON)
        if person.is_captain and edited.team.key != person.team.key:
            logger.info("Stripping captaincy of {} after team change", person.name)
            edited = edited.with_changes(is_captain=False)

        model.set_person(person, edited)
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(edited)))


@dataclass(frozen=True)
class DeleteCommand(Command):
    """Deletes a player identified by name."""
    player_name: Name

    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the player identified by name.\n"
        "Parameters: pl/PLAYER\n"
        "Example: delete pl/John Doe"
    )
    MESSAGE_SUCCESS = "Deleted Player: {}"

    def execute(self, model: Model) -> CommandResult:
        person = require_person(model, self.player_name)
        model.delete_person(person)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(person)))


@dataclass(frozen=True)
class FindCommand(Command):
    """Finds players whose names contain any of the keywords."""
    predicate: NameContainsKeywordsPredicate

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all players whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob charlie"
    )

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(model.filtered_person_list())))


@dataclass(frozen=True)
class ListCommand(Command):
    """Lists all players."""

    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list: Lists all players."
    MESSAGE_SUCCESS = "Listed all players"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ClearCommand(Command):
    """Clears the address book."""

    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Removes every player, team and position."
    MESSAGE_SUCCESS = "Address book has been cleared!"

    def execute(self, model: Model) -> CommandResult:
        model.set_address_book(AddressBook())
        return CommandResult(self.MESSAGE_SUCCESS)
