"""
Unit tests for roster commands.

Each command is executed against a Model built from the typical roster; the
tests check both the feedback and the resulting model state.
"""
import unittest

from rosterbook.models import (
    DEFAULT_INJURY, AddressBook, Injury, Model, Name, Phone, Position, Team, UserPrefs
)
from rosterbook.models.predicates import FilterByTeamPredicate, NameContainsKeywordsPredicate
from rosterbook.services import (
    AddCommand, AddInjuryCommand, AssignCaptainCommand, AssignPositionCommand, AssignTeamCommand,
    ClearCommand, CommandError, DeleteCommand, DeleteInjuryCommand, DeletePositionCommand,
    DeleteTeamCommand, EditCommand, EditPersonDescriptor, ExitCommand, FilterCommand, FindCommand,
    HelpCommand, ListCaptainsCommand, ListCommand, ListInjuredCommand, ListPositionsCommand,
    ListTeamsCommand, NewPositionCommand, NewTeamCommand, StripCaptainCommand, create_edited_person
)
from rosterbook.services.messages import (
    MESSAGE_NO_POSITIONS, MESSAGE_NO_TEAMS, MESSAGE_PERSON_NOT_FOUND, MESSAGE_PERSONS_LISTED_OVERVIEW,
    MESSAGE_POSITION_NOT_FOUND, MESSAGE_TEAM_NOT_FOUND
)
from roster_fixtures import (
    ACL, ALICE, BENSON, CARL, GOALKEEPER, HOON, STRIKER, U12, U16, make_person,
    typical_address_book
)


class CommandTestCase(unittest.TestCase):
    """Base class providing a fresh typical model for each test."""

    def setUp(self) -> None:
        self.model = Model(typical_address_book(), UserPrefs())

    def assertCommandFailure(self, command, message: str) -> None:
        """Execution fails with ``message`` and leaves the address book untouched."""
        before = AddressBook.copy_of(self.model.address_book)
        with self.assertRaises(CommandError) as ctx:
            command.execute(self.model)
        self.assertEqual(str(ctx.exception), message)
        self.assertEqual(self.model.address_book, before)

    def person(self, name: str):
        return self.model.get_person_by_name(Name(name))


class TestPlayerCommands(CommandTestCase):

    def test_add_person(self) -> None:
        result = AddCommand(HOON).execute(self.model)
        self.assertEqual(result.feedback_to_user, AddCommand.MESSAGE_SUCCESS.format(HOON))
        self.assertTrue(self.model.has_person(HOON))

    def test_add_uses_stored_team_and_position(self) -> None:
        new_person = make_person("Ian Tan", team=Team("u16"), position=Position("striker"))
        AddCommand(new_person).execute(self.model)
        stored = self.person("Ian Tan")
        self.assertEqual(stored.team, U16)
        self.assertEqual(stored.position, STRIKER)

    def test_add_never_creates_captain(self) -> None:
        AddCommand(make_person("Ian Tan", team=U16, is_captain=True)).execute(self.model)
        self.assertFalse(self.person("Ian Tan").is_captain)

    def test_add_duplicate_rejected(self) -> None:
        self.assertCommandFailure(AddCommand(make_person("alice PAULINE")),
                                  AddCommand.MESSAGE_DUPLICATE_PERSON)

    def test_add_unknown_team_or_position_rejected(self) -> None:
        self.assertCommandFailure(AddCommand(make_person("Ian Tan", team=Team("U99"))),
                                  MESSAGE_TEAM_NOT_FOUND.format("U99"))
        self.assertCommandFailure(AddCommand(make_person("Ian Tan", position=Position("Sweeper"))),
                                  MESSAGE_POSITION_NOT_FOUND.format("Sweeper"))

    def test_edit_fields(self) -> None:
        descriptor = EditPersonDescriptor(phone=Phone("91234567"), tags=frozenset())
        EditCommand(Name("alice pauline"), descriptor).execute(self.model)
        edited = self.person("Alice Pauline")
        self.assertEqual(edited.phone, Phone("91234567"))
        self.assertEqual(edited.tags, frozenset())
        self.assertEqual(edited.position, STRIKER)

    def test_edit_injury_replaces_set(self) -> None:
        EditCommand(Name("Benson Meier"), EditPersonDescriptor(injury=Injury("Concussion"))).execute(self.model)
        self.assertEqual(self.person("Benson Meier").injuries, frozenset({Injury("Concussion")}))

    def test_edit_team_strips_captaincy(self) -> None:
        EditCommand(Name("Benson Meier"), EditPersonDescriptor(team=Team("u16"))).execute(self.model)
        edited = self.person("Benson Meier")
        self.assertEqual(edited.team, U16)
        self.assertFalse(edited.is_captain)

    def test_edit_rename(self) -> None:
        EditCommand(Name("Alice Pauline"), EditPersonDescriptor(name=Name("Alice Tan"))).execute(self.model)
        self.assertIsNone(self.person("Alice Pauline"))
        self.assertIsNotNone(self.person("Alice Tan"))

    def test_edit_rename_case_only_allowed(self) -> None:
        EditCommand(Name("Alice Pauline"), EditPersonDescriptor(name=Name("ALICE PAULINE"))).execute(self.model)
        self.assertEqual(self.person("alice pauline").name.full_name, "ALICE PAULINE")

    def test_edit_failures(self) -> None:
        self.assertCommandFailure(EditCommand(Name("Alice Pauline"), EditPersonDescriptor(name=Name("Carl Kurz"))),
                                  EditCommand.MESSAGE_DUPLICATE_PERSON)
        self.assertCommandFailure(EditCommand(Name("Hoon Meier"), EditPersonDescriptor(phone=Phone("123"))),
                                  MESSAGE_PERSON_NOT_FOUND.format("Hoon Meier"))
        self.assertCommandFailure(EditCommand(Name("Alice Pauline"), EditPersonDescriptor(team=Team("U99"))),
                                  MESSAGE_TEAM_NOT_FOUND.format("U99"))

    def test_delete(self) -> None:
        result = DeleteCommand(Name("carl kurz")).execute(self.model)
        self.assertEqual(result.feedback_to_user, DeleteCommand.MESSAGE_SUCCESS.format(CARL))
        self.assertFalse(self.model.has_person(CARL))
        self.assertCommandFailure(DeleteCommand(Name("Carl Kurz")), MESSAGE_PERSON_NOT_FOUND.format("Carl Kurz"))

    def test_find_and_list(self) -> None:
        result = FindCommand(NameContainsKeywordsPredicate(("Kurz", "Pauline"))).execute(self.model)
        self.assertEqual(result.feedback_to_user, MESSAGE_PERSONS_LISTED_OVERVIEW.format(2))
        self.assertEqual(list(self.model.filtered_person_list()), [ALICE, CARL])
        ListCommand().execute(self.model)
        self.assertEqual(len(self.model.filtered_person_list()), 4)

    def test_clear(self) -> None:
        ClearCommand().execute(self.model)
        self.assertEqual(self.model.address_book, AddressBook())

    def test_create_edited_person_changes_only_given_fields(self) -> None:
        edited = create_edited_person(BENSON, EditPersonDescriptor(email=ALICE.email))
        self.assertEqual(edited, BENSON.with_changes(email=ALICE.email))
        untouched = create_edited_person(BENSON, EditPersonDescriptor(tags=None, phone=BENSON.phone))
        self.assertEqual(untouched, BENSON)
        cleared = create_edited_person(BENSON, EditPersonDescriptor(tags=frozenset()))
        self.assertEqual(cleared.tags, frozenset())
        self.assertEqual(cleared.with_changes(tags=BENSON.tags), BENSON)

    def test_commands_compare_by_value(self) -> None:
        self.assertEqual(DeleteCommand(Name("Amy")), DeleteCommand(Name("Amy")))
        self.assertNotEqual(DeleteCommand(Name("Amy")), DeleteCommand(Name("Bob")))
        self.assertEqual(ListCommand(), ListCommand())


class TestTeamCommands(CommandTestCase):

    def test_filter(self) -> None:
        result = FilterCommand(FilterByTeamPredicate("u12")).execute(self.model)
        self.assertEqual(result.feedback_to_user, MESSAGE_PERSONS_LISTED_OVERVIEW.format(2))
        self.assertEqual(list(self.model.filtered_person_list()), [ALICE, BENSON])

    def test_filter_unknown_team_lists_nobody(self) -> None:
        result = FilterCommand(FilterByTeamPredicate("U13")).execute(self.model)
        self.assertEqual(result.feedback_to_user, MESSAGE_PERSONS_LISTED_OVERVIEW.format(0))

    def test_new_team(self) -> None:
        NewTeamCommand(Team("U18")).execute(self.model)
        self.assertTrue(self.model.has_team(Team("u18")))
        self.assertCommandFailure(NewTeamCommand(Team("u18")), NewTeamCommand.MESSAGE_DUPLICATE_TEAM)

    def test_delete_team(self) -> None:
        self.assertCommandFailure(DeleteTeamCommand(Team("u12")),
                                  DeleteTeamCommand.MESSAGE_TEAM_NOT_EMPTY.format("U12"))
        self.assertCommandFailure(DeleteTeamCommand(Team("U99")), MESSAGE_TEAM_NOT_FOUND.format("U99"))
        NewTeamCommand(Team("U18")).execute(self.model)
        result = DeleteTeamCommand(Team("u18")).execute(self.model)
        self.assertEqual(result.feedback_to_user, DeleteTeamCommand.MESSAGE_SUCCESS.format("U18"))

    def test_list_teams(self) -> None:
        self.assertEqual(ListTeamsCommand().execute(self.model).feedback_to_user,
                         ListTeamsCommand.MESSAGE_SUCCESS)
        self.model = Model(AddressBook(), UserPrefs())
        self.assertCommandFailure(ListTeamsCommand(), MESSAGE_NO_TEAMS)

    def test_assign_team_strips_captaincy(self) -> None:
        result = AssignTeamCommand(Name("Benson Meier"), Team("u16")).execute(self.model)
        self.assertEqual(result.feedback_to_user, AssignTeamCommand.MESSAGE_SUCCESS.format("Benson Meier", "U16"))
        moved = self.person("Benson Meier")
        self.assertEqual(moved.team, U16)
        self.assertFalse(moved.is_captain)
        self.assertIsNone(self.model.get_team_captain(U12))

    def test_assign_team_failures(self) -> None:
        self.assertCommandFailure(AssignTeamCommand(Name("Alice Pauline"), Team("u12")),
                                  AssignTeamCommand.MESSAGE_ALREADY_IN_TEAM.format("Alice Pauline", "U12"))
        self.assertCommandFailure(AssignTeamCommand(Name("Alice Pauline"), Team("U99")),
                                  MESSAGE_TEAM_NOT_FOUND.format("U99"))
        self.assertCommandFailure(AssignTeamCommand(Name("Hoon Meier"), U16),
                                  MESSAGE_PERSON_NOT_FOUND.format("Hoon Meier"))


class TestPositionCommands(CommandTestCase):

    def test_new_position(self) -> None:
        result = NewPositionCommand("Sweeper").execute(self.model)
        self.assertEqual(result.feedback_to_user, NewPositionCommand.MESSAGE_SUCCESS.format("Sweeper"))
        self.assertTrue(self.model.has_position(Position("sweeper")))

    def test_new_position_failures(self) -> None:
        self.assertCommandFailure(NewPositionCommand("striker"), NewPositionCommand.MESSAGE_DUPLICATE)
        self.assertCommandFailure(NewPositionCommand("none"), NewPositionCommand.MESSAGE_RESERVED)

    def test_delete_position(self) -> None:
        self.assertCommandFailure(DeletePositionCommand(Position("Striker")),
                                  DeletePositionCommand.MESSAGE_POSITION_ASSIGNED.format("Striker"))
        self.assertCommandFailure(DeletePositionCommand(Position("Sweeper")),
                                  MESSAGE_POSITION_NOT_FOUND.format("Sweeper"))
        NewPositionCommand("Sweeper").execute(self.model)
        DeletePositionCommand(Position("SWEEPER")).execute(self.model)
        self.assertFalse(self.model.has_position(Position("Sweeper")))

    def test_list_positions(self) -> None:
        ListPositionsCommand().execute(self.model)
        self.assertEqual(list(self.model.filtered_position_list()), [STRIKER, GOALKEEPER])
        self.model = Model(AddressBook(), UserPrefs())
        self.assertCommandFailure(ListPositionsCommand(), MESSAGE_NO_POSITIONS)

    def test_assign_position(self) -> None:
        result = AssignPositionCommand(Name("Daniel Meier"), Position("gk")).execute(self.model)
        self.assertEqual(result.feedback_to_user,
                         AssignPositionCommand.MESSAGE_SUCCESS.format("Daniel Meier", "GK"))
        self.assertEqual(self.person("Daniel Meier").position, GOALKEEPER)
        self.assertCommandFailure(AssignPositionCommand(Name("Daniel Meier"), Position("Sweeper")),
                                  MESSAGE_POSITION_NOT_FOUND.format("Sweeper"))


class TestStatusCommands(CommandTestCase):

    def test_add_injury(self) -> None:
        AddInjuryCommand(Name("Alice Pauline"), Injury("Hamstring")).execute(self.model)
        self.assertEqual(self.person("Alice Pauline").injuries, frozenset({Injury("Hamstring")}))

    def test_add_injury_failures(self) -> None:
        self.assertCommandFailure(AddInjuryCommand(Name("Alice Pauline"), DEFAULT_INJURY),
                                  AddInjuryCommand.MESSAGE_DEFAULT_INJURY)
        self.assertCommandFailure(AddInjuryCommand(Name("Benson Meier"), ACL),
                                  AddInjuryCommand.MESSAGE_DUPLICATE_INJURY.format("Benson Meier", "ACL"))

    def test_delete_injury(self) -> None:
        DeleteInjuryCommand(Name("Benson Meier"), ACL).execute(self.model)
        self.assertEqual(self.person("Benson Meier").injuries, frozenset({DEFAULT_INJURY}))

    def test_delete_injury_failures(self) -> None:
        self.assertCommandFailure(DeleteInjuryCommand(Name("Alice Pauline"), ACL),
                                  DeleteInjuryCommand.MESSAGE_ALREADY_FIT.format("Alice Pauline"))
        self.assertCommandFailure(DeleteInjuryCommand(Name("Benson Meier"), Injury("Concussion")),
                                  DeleteInjuryCommand.MESSAGE_INJURY_NOT_FOUND.format("Benson Meier", "Concussion"))

    def test_list_injured(self) -> None:
        result = ListInjuredCommand().execute(self.model)
        self.assertEqual(result.feedback_to_user, MESSAGE_PERSONS_LISTED_OVERVIEW.format(1))
        DeleteInjuryCommand(Name("Benson Meier"), ACL).execute(self.model)
        result = ListInjuredCommand().execute(self.model)
        self.assertEqual(result.feedback_to_user, ListInjuredCommand.MESSAGE_NO_INJURED)

    def test_assign_captain_replaces_previous(self) -> None:
        result = AssignCaptainCommand(Name("Alice Pauline")).execute(self.model)
        self.assertEqual(result.feedback_to_user,
                         AssignCaptainCommand.MESSAGE_REPLACED.format("Alice Pauline", "U12", "Benson Meier"))
        self.assertTrue(self.person("Alice Pauline").is_captain)
        self.assertFalse(self.person("Benson Meier").is_captain)

    def test_assign_captain_fresh_team(self) -> None:
        result = AssignCaptainCommand(Name("Carl Kurz")).execute(self.model)
        self.assertEqual(result.feedback_to_user, AssignCaptainCommand.MESSAGE_SUCCESS.format("Carl Kurz", "U16"))

    def test_assign_captain_already_captain(self) -> None:
        self.assertCommandFailure(AssignCaptainCommand(Name("Benson Meier")),
                                  AssignCaptainCommand.MESSAGE_ALREADY_CAPTAIN.format("Benson Meier", "U12"))

    def test_strip_captain(self) -> None:
        StripCaptainCommand(Name("Benson Meier")).execute(self.model)
        self.assertFalse(self.person("Benson Meier").is_captain)
        self.assertCommandFailure(StripCaptainCommand(Name("Benson Meier")),
                                  StripCaptainCommand.MESSAGE_NOT_CAPTAIN.format("Benson Meier"))

    def test_list_captains(self) -> None:
        result = ListCaptainsCommand().execute(self.model)
        self.assertEqual(result.feedback_to_user, MESSAGE_PERSONS_LISTED_OVERVIEW.format(1))
        self.assertEqual(list(self.model.filtered_person_list()), [BENSON])
        StripCaptainCommand(Name("Benson Meier")).execute(self.model)
        self.assertEqual(ListCaptainsCommand().execute(self.model).feedback_to_user,
                         ListCaptainsCommand.MESSAGE_NO_CAPTAINS)


class TestAppCommands(CommandTestCase):

    def test_help(self) -> None:
        result = HelpCommand().execute(self.model)
        self.assertTrue(result.show_help)
        self.assertFalse(result.exit)

    def test_exit(self) -> None:
        result = ExitCommand().execute(self.model)
        self.assertTrue(result.exit)
        self.assertEqual(result.feedback_to_user, ExitCommand.MESSAGE_EXIT_ACKNOWLEDGEMENT)


if __name__ == "__main__":
    unittest.main()
