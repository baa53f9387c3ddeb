"""
Predicates used to drive the model's filtered views.

Predicates are small frozen dataclasses so that two commands built from the
same input compare equal.
"""
from dataclasses import dataclass
from typing import Tuple

from .identity import IdentityKey
from .person import Person


def show_all(_item) -> bool:
    """Predicate that always evaluates to True."""
    return True


PREDICATE_SHOW_ALL_PERSONS = show_all
PREDICATE_SHOW_ALL_TEAMS = show_all
PREDICATE_SHOW_ALL_POSITIONS = show_all


@dataclass(frozen=True)
class FilterByTeamPredicate:
    """Matches persons whose team name equals ``team_name`` case-insensitively."""
    team_name: str

    def __call__(self, person: Person) -> bool:
        return person.team.key == IdentityKey.of(self.team_name)


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any keyword as a whole word."""
    keywords: Tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {w.casefold() for w in person.name.full_name.split()}
        return any(keyword.casefold() in words for keyword in self.keywords)


@dataclass(frozen=True)
class FilterInjuredPredicate:
    """Matches persons carrying at least one non-default injury."""

    def __call__(self, person: Person) -> bool:
        return person.has_non_default_injury()


@dataclass(frozen=True)
class FilterCaptainPredicate:
    """Matches team captains."""

    def __call__(self, person: Person) -> bool:
        return person.is_captain


PREDICATE_SHOW_ALL_INJURED = FilterInjuredPredicate()
PREDICATE_SHOW_CAPTAINS = FilterCaptainPredicate()
