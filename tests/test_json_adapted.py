"""
Unit tests for the JSON record adapters.

Covers the current record shape, the two legacy shapes and every way a
stored document can be rejected.
"""
import unittest

from rosterbook.models import DEFAULT_INJURY, Injury, Name, Phone, Position, Team
from rosterbook.storage import (
    IllegalValueError, MISSING_FIELD_MESSAGE_FORMAT, address_book_from_record,
    address_book_to_record, person_from_record, person_to_record
)
from rosterbook.storage.json_adapted import (
    MESSAGE_DUPLICATE_CAPTAIN, MESSAGE_DUPLICATE_PERSON, MESSAGE_DUPLICATE_TEAM
)
from roster_fixtures import ALICE, BENSON, typical_address_book


def benson_record(**overrides):
    """A valid current-shape record for Benson, with fields overridden or removed (None)."""
    record = {
        "name": "Benson Meier",
        "phone": "98765432",
        "email": "johnd@example.com",
        "address": "311, Clementi Ave 2, #02-25",
        "team": {"name": "U12"},
        "position": {"name": "NONE"},
        "injuries": ["ACL"],
        "tags": ["owesMoney", "friends"],
        "isCaptain": True,
    }
    for key, value in overrides.items():
        if value is None:
            record.pop(key, None)
        else:
            record[key] = value
    return record


class TestPersonRecords(unittest.TestCase):
    """Test cases for single person records."""

    def test_current_shape(self) -> None:
        self.assertEqual(person_from_record(benson_record()), BENSON)

    def test_person_to_record(self) -> None:
        record = person_to_record(BENSON)
        self.assertEqual(record["tags"], ["friends", "owesMoney"])
        self.assertEqual(record["injuries"], ["ACL"])
        self.assertEqual(record["team"], {"name": "U12"})
        self.assertEqual(record["position"], {"name": "NONE"})
        self.assertTrue(record["isCaptain"])
        self.assertEqual(person_from_record(person_to_record(ALICE)), ALICE)

    def test_legacy_single_injury(self) -> None:
        record = benson_record(isCaptain=None, injuries=None, injury="ACL")
        person = person_from_record(record)
        self.assertEqual(person.injuries, frozenset({Injury("ACL")}))
        self.assertFalse(person.is_captain)

    def test_single_injury_with_captain_flag(self) -> None:
        person = person_from_record(benson_record(injuries=None, injury="ACL"))
        self.assertEqual(person.injuries, frozenset({Injury("ACL")}))
        self.assertTrue(person.is_captain)

    def test_legacy_injury_list(self) -> None:
        person = person_from_record(benson_record(isCaptain=None))
        self.assertEqual(person.injuries, frozenset({Injury("ACL")}))
        self.assertFalse(person.is_captain)

    def test_missing_optional_fields(self) -> None:
        person = person_from_record(benson_record(position=None, injuries=None, tags=None))
        self.assertTrue(person.position.is_none)
        self.assertEqual(person.injuries, frozenset({DEFAULT_INJURY}))
        self.assertEqual(person.tags, frozenset())

    def test_object_entries_accepted(self) -> None:
        person = person_from_record(benson_record(injuries=[{"injuryName": "ACL"}],
                                                  tags=[{"tagName": "friends"}]))
        self.assertEqual(person.injuries, frozenset({Injury("ACL")}))

    def test_missing_mandatory_field(self) -> None:
        cases = {"name": "Name", "phone": "Phone", "email": "Email", "address": "Address", "team": "Team"}
        for key, label in cases.items():
            with self.assertRaises(IllegalValueError) as ctx:
                person_from_record(benson_record(**{key: None}))
            self.assertEqual(str(ctx.exception), MISSING_FIELD_MESSAGE_FORMAT.format(label), key)

    def test_invalid_field(self) -> None:
        with self.assertRaises(IllegalValueError) as ctx:
            person_from_record(benson_record(name="R@chel"))
        self.assertEqual(str(ctx.exception), Name.MESSAGE_CONSTRAINTS)
        with self.assertRaises(IllegalValueError) as ctx:
            person_from_record(benson_record(phone="+651234"))
        self.assertEqual(str(ctx.exception), Phone.MESSAGE_CONSTRAINTS)
        with self.assertRaises(IllegalValueError) as ctx:
            person_from_record(benson_record(team={"name": "#U12"}))
        self.assertEqual(str(ctx.exception), Team.MESSAGE_CONSTRAINTS)
        with self.assertRaises(IllegalValueError) as ctx:
            person_from_record(benson_record(position={"name": "Centre Back"}))
        self.assertEqual(str(ctx.exception), Position.MESSAGE_CONSTRAINTS)

    def test_invalid_captain_flag(self) -> None:
        with self.assertRaises(IllegalValueError):
            person_from_record(benson_record(isCaptain="yes"))

    def test_non_list_tags(self) -> None:
        with self.assertRaises(IllegalValueError):
            person_from_record(benson_record(tags="friends"))


class TestAddressBookRecords(unittest.TestCase):
    """Test cases for the whole document."""

    def test_round_trip(self) -> None:
        book = typical_address_book()
        self.assertEqual(address_book_from_record(address_book_to_record(book)), book)

    def test_document_keys(self) -> None:
        record = address_book_to_record(typical_address_book())
        self.assertEqual(set(record), {"persons", "teams", "positions"})
        self.assertEqual(record["teams"], [{"name": "U12"}, {"name": "U16"}])

    def test_unknown_team_and_position_registered(self) -> None:
        record = {"persons": [benson_record(team={"name": "U14"}, position={"name": "Winger"})]}
        book = address_book_from_record(record)
        self.assertEqual(book.teams, (Team("U14"),))
        self.assertEqual(book.positions, (Position("Winger"),))

    def test_team_reference_uses_stored_casing(self) -> None:
        record = {"persons": [benson_record(team={"name": "u12"})], "teams": [{"name": "U12"}]}
        book = address_book_from_record(record)
        self.assertEqual(book.persons[0].team, Team("U12"))

    def test_duplicate_person(self) -> None:
        record = {"persons": [benson_record(), benson_record(name="benson meier", isCaptain=False)]}
        with self.assertRaises(IllegalValueError) as ctx:
            address_book_from_record(record)
        self.assertEqual(str(ctx.exception), MESSAGE_DUPLICATE_PERSON)

    def test_duplicate_team(self) -> None:
        with self.assertRaises(IllegalValueError) as ctx:
            address_book_from_record({"teams": [{"name": "U12"}, {"name": "u12"}]})
        self.assertEqual(str(ctx.exception), MESSAGE_DUPLICATE_TEAM)

    def test_two_captains_on_one_team(self) -> None:
        record = {"persons": [benson_record(), benson_record(name="Alice Pauline")]}
        with self.assertRaises(IllegalValueError) as ctx:
            address_book_from_record(record)
        self.assertEqual(str(ctx.exception), MESSAGE_DUPLICATE_CAPTAIN.format("U12"))

    def test_reserved_position_in_list_rejected(self) -> None:
        with self.assertRaises(IllegalValueError):
            address_book_from_record({"positions": [{"name": "NONE"}]})

    def test_not_an_object(self) -> None:
        with self.assertRaises(IllegalValueError):
            address_book_from_record([])


if __name__ == "__main__":
    unittest.main()
