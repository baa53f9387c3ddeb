"""Position model for the Roster Book application."""
import re
from dataclasses import dataclass

from .identity import IdentityKey
from ..utils.constants import NO_POSITION_NAME


@dataclass(frozen=True)
class Position:
    """
    A playing position such as "Striker" or "GK".

    ``Position.none()`` is the sentinel for players without an assigned
    position; it is never stored in the position list.
    """
    name: str

    MESSAGE_CONSTRAINTS = "Position names should be a single word without spaces and should not be blank"

    def __post_init__(self) -> None:
        if not Position.is_valid(self.name):
            raise ValueError(Position.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(test: str) -> bool:
        return isinstance(test, str) and re.fullmatch(r"\S+", test) is not None

    @classmethod
    def none(cls) -> "Position":
        return cls(NO_POSITION_NAME)

    @property
    def is_none(self) -> bool:
        return self.key == IdentityKey.of(NO_POSITION_NAME)

    @property
    def key(self) -> IdentityKey:
        return IdentityKey.of(self.name)

    def is_same_position(self, other: "Position") -> bool:
        return other is not None and other.key == self.key

    def __str__(self) -> str:
        return self.name
