"""Team model for the Roster Book application."""
import re
from dataclasses import dataclass

from .identity import IdentityKey


@dataclass(frozen=True)
class Team:
    """
    A team players can be assigned to.

    Team names compare case-insensitively for identity purposes; the stored
    name keeps the casing it was created with.
    """
    name: str

    MESSAGE_CONSTRAINTS = (
        "Team names should start with an alphanumeric character and only contain "
        "alphanumeric characters, spaces, hyphens and underscores"
    )

    def __post_init__(self) -> None:
        if not Team.is_valid(self.name):
            raise ValueError(Team.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(test: str) -> bool:
        """Return True if ``test`` is a valid team name."""
        return isinstance(test, str) and re.fullmatch(r"[^\W_][\w \-]*", test) is not None

    @property
    def key(self) -> IdentityKey:
        return IdentityKey.of(self.name)

    def is_same_team(self, other: "Team") -> bool:
        return other is not None and other.key == self.key

    def __str__(self) -> str:
        return self.name
