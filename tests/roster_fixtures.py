"""
Typical roster data shared by the test modules.
"""
from rosterbook.models import (
    Address, AddressBook, Email, Injury, Name, Person, Phone, Position, Tag, Team
)

U12 = Team("U12")
U16 = Team("U16")
STRIKER = Position("Striker")
GOALKEEPER = Position("GK")
ACL = Injury("ACL")


def make_person(name: str, phone: str = "94351253", email: str = "player@example.com",
                address: str = "123, Jurong West Ave 6", team: Team = U12,
                tags=(), position: Position = None, injuries=(), is_captain: bool = False) -> Person:
    """Build a Person from plain values."""
    return Person(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        address=Address(address),
        team=team,
        tags=frozenset(Tag(t) for t in tags),
        position=position or Position.none(),
        injuries=frozenset(injuries),
        is_captain=is_captain,
    )


ALICE = make_person("Alice Pauline", "94351253", "alice@example.com",
                    "123, Jurong West Ave 6, #08-111", U12, tags=["friends"], position=STRIKER)
BENSON = make_person("Benson Meier", "98765432", "johnd@example.com",
                     "311, Clementi Ave 2, #02-25", U12, tags=["owesMoney", "friends"],
                     injuries=[ACL], is_captain=True)
CARL = make_person("Carl Kurz", "95352563", "heinz@example.com", "wall street", U16,
                   position=GOALKEEPER)
DANIEL = make_person("Daniel Meier", "87652533", "cornelia@example.com", "10th street", U16,
                     tags=["friends"])

# Not part of the typical address book
HOON = make_person("Hoon Meier", "8482424", "stefan@example.com", "little india", U16)


def typical_persons():
    return [ALICE, BENSON, CARL, DANIEL]


def typical_address_book() -> AddressBook:
    """An address book with two teams, two positions and four players."""
    return AddressBook(typical_persons(), [U12, U16], [STRIKER, GOALKEEPER])
