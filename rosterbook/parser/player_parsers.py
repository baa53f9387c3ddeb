"""
Parsers for player commands (add, edit, delete, find).

Every parser takes the argument string that followed the command word and
returns a ready-to-execute Command, or raises ParseError.
"""
from typing import FrozenSet, List, Optional

from ..models import Person, Position, Tag
from ..models.predicates import NameContainsKeywordsPredicate
from ..services.messages import MESSAGE_INVALID_COMMAND_FORMAT
from ..services.player_commands import (
    AddCommand, DeleteCommand, EditCommand, EditPersonDescriptor, FindCommand
)
from . import parser_util
from .tokenizer import (
    PREFIX_ADDRESS, PREFIX_EMAIL, PREFIX_INJURY, PREFIX_NAME, PREFIX_PHONE, PREFIX_PLAYER,
    PREFIX_POSITION, PREFIX_TAG, PREFIX_TEAM, ArgumentMultimap, ParseError,
    are_prefixes_present, tokenize
)


def usage_error(usage: str) -> ParseError:
    """Build the ParseError shown for a malformed command."""
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


def required_player_value(multimap: ArgumentMultimap, usage: str) -> str:
    """Return the non-empty ``pl/`` value, or raise the usage error."""
    value = multimap.get_value(PREFIX_PLAYER)
    if value is None or not value.strip() or multimap.preamble:
        raise usage_error(usage)
    return value


class AddCommandParser:
    """Parses arguments for the ``add`` command."""

    def parse(self, args: str) -> AddCommand:
        multimap = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS,
                            PREFIX_TEAM, PREFIX_POSITION, PREFIX_TAG)

        if (not are_prefixes_present(multimap, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL,
                                     PREFIX_ADDRESS, PREFIX_TEAM)
                or multimap.preamble):
            raise usage_error(AddCommand.MESSAGE_USAGE)

        multimap.verify_no_duplicate_prefixes_for(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL,
                                                  PREFIX_ADDRESS, PREFIX_TEAM, PREFIX_POSITION)

        position_value = multimap.get_value(PREFIX_POSITION)
        person = Person(
            name=parser_util.parse_name(multimap.get_value(PREFIX_NAME)),
            phone=parser_util.parse_phone(multimap.get_value(PREFIX_PHONE)),
            email=parser_util.parse_email(multimap.get_value(PREFIX_EMAIL)),
            address=parser_util.parse_address(multimap.get_value(PREFIX_ADDRESS)),
            team=parser_util.parse_team(multimap.get_value(PREFIX_TEAM)),
            tags=parser_util.parse_tags(multimap.get_all_values(PREFIX_TAG)),
            position=(parser_util.parse_position(position_value)
                      if position_value is not None else Position.none()),
        )
        return AddCommand(person)


class EditCommandParser:
    """Parses arguments for the ``edit`` command into an edit descriptor."""

    def parse(self, args: str) -> EditCommand:
        multimap = tokenize(args, PREFIX_PLAYER, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL,
                            PREFIX_ADDRESS, PREFIX_TEAM, PREFIX_INJURY, PREFIX_TAG)

        player_value = required_player_value(multimap, EditCommand.MESSAGE_USAGE)

        multimap.verify_no_duplicate_prefixes_for(PREFIX_PLAYER, PREFIX_NAME, PREFIX_PHONE,
                                                  PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TEAM,
                                                  PREFIX_INJURY)

        def optional(prefix, field_parser):
            value = multimap.get_value(prefix)
            return field_parser(value) if value is not None else None

        descriptor = EditPersonDescriptor(
            name=optional(PREFIX_NAME, parser_util.parse_name),
            phone=optional(PREFIX_PHONE, parser_util.parse_phone),
            email=optional(PREFIX_EMAIL, parser_util.parse_email),
            address=optional(PREFIX_ADDRESS, parser_util.parse_address),
            team=optional(PREFIX_TEAM, parser_util.parse_team),
            injury=optional(PREFIX_INJURY, parser_util.parse_injury),
            tags=self._parse_tags_for_edit(multimap.get_all_values(PREFIX_TAG)),
        )

        if not descriptor.is_any_field_edited():
            raise ParseError(EditCommand.MESSAGE_NOT_EDITED)

        return EditCommand(parser_util.parse_name(player_value), descriptor)

    @staticmethod
    def _parse_tags_for_edit(tags: List[str]) -> Optional[FrozenSet[Tag]]:
        """
        Parse tag values for an edit.

        No ``tg/`` at all means "leave tags alone" (None); a single empty
        ``tg/`` means "clear all tags" (empty set).
        """
        if not tags:
            return None
        if tags == [""]:
            return frozenset()
        return parser_util.parse_tags(tags)


class DeleteCommandParser:
    """Parses arguments for the ``delete`` command."""

    def parse(self, args: str) -> DeleteCommand:
        multimap = tokenize(args, PREFIX_PLAYER)
        player_value = required_player_value(multimap, DeleteCommand.MESSAGE_USAGE)
        multimap.verify_no_duplicate_prefixes_for(PREFIX_PLAYER)
        return DeleteCommand(parser_util.parse_name(player_value))


class FindCommandParser:
    """Parses arguments for the ``find`` command."""

    def parse(self, args: str) -> FindCommand:
        keywords = args.split()
        if not keywords:
            raise usage_error(FindCommand.MESSAGE_USAGE)
        return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))
