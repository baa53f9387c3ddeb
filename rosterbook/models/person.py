"""
Person model for the Roster Book application.

This module contains the validated value types making up a player record
(name, phone, email, address, tag, injury) and the immutable Person itself.
"""
import re
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Optional

from .identity import IdentityKey
from .position import Position
from .team import Team
from ..utils.constants import DEFAULT_INJURY_NAME


@dataclass(frozen=True)
class Name:
    """A player's full name. Identity is case-insensitive."""
    full_name: str

    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    VALIDATION_REGEX = re.compile(r"[^\W_](?:[^\W_]| )*")

    def __post_init__(self) -> None:
        if not Name.is_valid(self.full_name):
            raise ValueError(Name.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(test: str) -> bool:
        """Return True if ``test`` is a valid name."""
        return isinstance(test, str) and Name.VALIDATION_REGEX.fullmatch(test) is not None

    @property
    def key(self) -> IdentityKey:
        return IdentityKey.of(self.full_name)

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Phone:
    """A player's phone number."""
    value: str

    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    def __post_init__(self) -> None:
        if not Phone.is_valid(self.value):
            raise ValueError(Phone.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(test: str) -> bool:
        """Return True if ``test`` is a valid phone number."""
        return isinstance(test, str) and re.fullmatch(r"\d{3,}", test) is not None

    def __str__(self) -> str:
        return self.value


# Email building blocks: alphanumerics without underscore
_ALNUM = r"[^\W_]+"
_SPECIAL_CHARACTERS = "+_.-"
_LOCAL_PART = rf"{_ALNUM}(?:[{re.escape(_SPECIAL_CHARACTERS)}]{_ALNUM})*"
_DOMAIN_LABEL = rf"{_ALNUM}(?:-{_ALNUM})*"
_EMAIL_REGEX = re.compile(rf"{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*(?=[^.]{{2,}}$){_DOMAIN_LABEL}")


@dataclass(frozen=True)
class Email:
    """A player's email address."""
    value: str

    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        f"1. The local-part should only contain alphanumeric characters and these special characters, "
        f"excluding the parentheses, ({_SPECIAL_CHARACTERS}). The local-part may not start or end with "
        "any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )

    def __post_init__(self) -> None:
        if not Email.is_valid(self.value):
            raise ValueError(Email.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(test: str) -> bool:
        """Return True if ``test`` is a valid email address."""
        return isinstance(test, str) and _EMAIL_REGEX.fullmatch(test) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """A player's address."""
    value: str

    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"

    def __post_init__(self) -> None:
        if not Address.is_valid(self.value):
            raise ValueError(Address.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(test: str) -> bool:
        """Return True if ``test`` is a valid address."""
        return isinstance(test, str) and re.fullmatch(r"\S.*", test, re.DOTALL) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """A free-form alphanumeric label attached to a player."""
    tag_name: str

    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"

    def __post_init__(self) -> None:
        if not Tag.is_valid(self.tag_name):
            raise ValueError(Tag.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(test: str) -> bool:
        return isinstance(test, str) and re.fullmatch(r"[^\W_]+", test) is not None

    def __str__(self) -> str:
        return f"[{self.tag_name}]"


@dataclass(frozen=True)
class Injury:
    """An injury status; ``FIT`` is the default meaning "no injury"."""
    injury_name: str

    MESSAGE_CONSTRAINTS = (
        "Injury names should start with an alphanumeric character and only contain "
        "alphanumeric characters, spaces and hyphens"
    )

    def __post_init__(self) -> None:
        if not Injury.is_valid(self.injury_name):
            raise ValueError(Injury.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(test: str) -> bool:
        return isinstance(test, str) and re.fullmatch(r"[^\W_][\w \-]*", test) is not None

    @property
    def is_default(self) -> bool:
        return self.injury_name == DEFAULT_INJURY_NAME

    def __str__(self) -> str:
        return self.injury_name


DEFAULT_INJURY = Injury(DEFAULT_INJURY_NAME)
DEFAULT_CAPTAIN_STATUS = False


def normalize_injuries(injuries: Optional[Iterable[Injury]]) -> FrozenSet[Injury]:
    """
    Normalize an injury collection into a person's injury set.

    The default ``FIT`` entry never coexists with a real injury, and an empty
    collection becomes ``{FIT}``.

    Args:
        injuries: Injuries to normalize (may be None or empty)

    Returns:
        A non-empty frozenset of injuries
    """
    real = frozenset(i for i in (injuries or ()) if not i.is_default)
    return real if real else frozenset({DEFAULT_INJURY})


@dataclass(frozen=True)
class Person:
    """
    Represents a player in the roster.

    Attributes:
        name: Player's name (identity key, case-insensitive)
        phone: Contact phone number
        email: Contact email address
        address: Home address
        team: Team the player belongs to
        position: Playing position, ``NONE`` when unassigned
        tags: Free-form labels
        injuries: Current injuries; ``{FIT}`` when healthy, never empty
        is_captain: Whether the player captains their team
    """
    name: Name
    phone: Phone
    email: Email
    address: Address
    team: Team
    tags: FrozenSet[Tag] = frozenset()
    position: Position = field(default_factory=Position.none)
    injuries: FrozenSet[Injury] = frozenset({DEFAULT_INJURY})
    is_captain: bool = DEFAULT_CAPTAIN_STATUS

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", frozenset(self.tags))
        object.__setattr__(self, "injuries", normalize_injuries(self.injuries))

    @property
    def key(self) -> IdentityKey:
        return self.name.key

    def is_same_person(self, other: Optional["Person"]) -> bool:
        """Return True if both persons share the same identity key."""
        return other is not None and other.key == self.key

    def has_non_default_injury(self) -> bool:
        return any(not injury.is_default for injury in self.injuries)

    def has_injury(self, injury: Injury) -> bool:
        return injury in self.injuries

    def sorted_injuries(self):
        """Injuries ordered by name, for display and stable serialization."""
        return sorted(self.injuries, key=lambda i: i.injury_name)

    def sorted_tags(self):
        return sorted(self.tags, key=lambda t: t.tag_name)

    def with_changes(self, **changes) -> "Person":
        """Return a copy of this person with the given fields replaced."""
        return replace(self, **changes)

    def __str__(self) -> str:
        parts = [
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; Address: {self.address}",
            f"; Team: {self.team}; Position: {self.position}",
            "; Injuries: " + ", ".join(str(i) for i in self.sorted_injuries()),
        ]
        if self.tags:
            parts.append("; Tags: " + "".join(str(t) for t in self.sorted_tags()))
        if self.is_captain:
            parts.append("; Captain")
        return "".join(parts)
