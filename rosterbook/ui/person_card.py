"""
Display-ready views of roster entities shared by the console and web surfaces.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..models import Person
from ..services import (
    AddCommand, AddInjuryCommand, AssignCaptainCommand, AssignPositionCommand, AssignTeamCommand,
    ClearCommand, DeleteCommand, DeleteInjuryCommand, DeletePositionCommand, DeleteTeamCommand,
    EditCommand, ExitCommand, FilterCommand, FindCommand, HelpCommand, ListCaptainsCommand,
    ListCommand, ListInjuredCommand, ListPositionsCommand, ListTeamsCommand, NewPositionCommand,
    NewTeamCommand, StripCaptainCommand
)

FIT_STYLE = "fit-tag"
INJURED_STYLE = "injured-tag"

COMMANDS_IN_HELP_ORDER = [
    AddCommand, EditCommand, DeleteCommand, FindCommand, ListCommand, FilterCommand,
    NewTeamCommand, DeleteTeamCommand, ListTeamsCommand, AssignTeamCommand,
    NewPositionCommand, DeletePositionCommand, ListPositionsCommand, AssignPositionCommand,
    AddInjuryCommand, DeleteInjuryCommand, ListInjuredCommand,
    AssignCaptainCommand, StripCaptainCommand, ListCaptainsCommand,
    ClearCommand, HelpCommand, ExitCommand,
]


def help_text() -> str:
    """Usage summary for every command."""
    return "\n\n".join(command.MESSAGE_USAGE for command in COMMANDS_IN_HELP_ORDER)


@dataclass
class PersonCard:
    """
    Information of a Person laid out for display.

    Attributes:
        person: The player shown on the card
        displayed_index: 1-based position in the visible list
    """
    person: Person
    displayed_index: int
    injury_style: str = field(init=False)

    def __post_init__(self) -> None:
        self.injury_style = INJURED_STYLE if self.person.has_non_default_injury() else FIT_STYLE

    @property
    def tags(self) -> List[str]:
        return [tag.tag_name for tag in self.person.sorted_tags()]

    @property
    def injuries(self) -> List[str]:
        return [injury.injury_name for injury in self.person.sorted_injuries()]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        person = self.person
        return {
            "id": self.displayed_index,
            "name": person.name.full_name,
            "team": person.team.name,
            "position": person.position.name,
            "phone": person.phone.value,
            "address": person.address.value,
            "email": person.email.value,
            "tags": self.tags,
            "injuries": self.injuries,
            "injury_style": self.injury_style,
            "is_captain": person.is_captain,
        }

    def render(self) -> str:
        """Render the card as plain text lines."""
        person = self.person
        captain = " (C)" if person.is_captain else ""
        lines = [
            f"{self.displayed_index}. {person.name}{captain}",
            f"   Team: {person.team}   Position: {person.position}",
            f"   Phone: {person.phone}   Email: {person.email}",
            f"   Address: {person.address}",
            f"   Status: {', '.join(self.injuries)}",
        ]
        if self.tags:
            lines.append(f"   Tags: {' '.join(self.tags)}")
        return "\n".join(lines)


def person_cards(persons) -> List[PersonCard]:
    """Build cards for a person list, numbered from 1."""
    return [PersonCard(person, index) for index, person in enumerate(persons, start=1)]
