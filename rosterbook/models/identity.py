"""Normalized identity keys used for every uniqueness and lookup check."""
from dataclasses import dataclass


@dataclass(frozen=True)
class IdentityKey:
    """
    Case-insensitive key identifying a named entity.

    Two keys are equal when their source names match after casefolding, so
    "U12 Blue" and "u12 blue" collide. Whitespace is compared as written.
    """
    value: str

    @classmethod
    def of(cls, name: str) -> "IdentityKey":
        """Build the key for a raw name."""
        return cls(str(name).casefold())

    def __str__(self) -> str:
        return self.value
