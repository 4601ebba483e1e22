from dataclasses import fields

import pytest
from src.addressbook.constants import (
    MESSAGE_INVALID_TEACHER_DISPLAYED_INDEX,
    MESSAGE_TEACHERS_LISTED_OVERVIEW,
)
from src.addressbook.domain.commands.teacher.add_teacher_command import (
    AddTeacherCommand,
)
from src.addressbook.domain.commands.teacher.delete_teacher_command import (
    DeleteTeacherCommand,
)
from src.addressbook.domain.commands.teacher.edit_teacher_command import (
    EditTeacherCommand,
)
from src.addressbook.domain.commands.teacher.teacher_view_commands import (
    ClearTeacherCommand,
    FindTeacherCommand,
    ListTeacherCommand,
)
from src.addressbook.domain.descriptors import EditTeacherDescriptor
from src.addressbook.domain.fields import Name
from src.addressbook.domain.index import Index
from src.addressbook.domain.predicates import TeacherNameContainsKeywordsPredicate
from src.addressbook.services.model_manager import ModelManager

from tests.utils.command_assertions import assert_command_failure, assert_command_success
from tests.utils.person_builders import TeacherBuilder, descriptor_from_teacher
from tests.utils.typical_persons import ALICE, BENSON, BOB, CARL, DANIEL, ELLE

FIRST = Index.from_one_based(1)
SECOND = Index.from_one_based(2)


class TestAddTeacherCommand:
    def test_adds_new_teacher(self, model: ModelManager, expected_model: ModelManager) -> None:
        expected_model.add_person(BOB)
        assert_command_success(
            AddTeacherCommand(BOB),
            model,
            AddTeacherCommand.MESSAGE_SUCCESS.format(BOB),
            expected_model,
        )

    def test_duplicate(self, model: ModelManager) -> None:
        duplicate = TeacherBuilder(DANIEL).with_email("other@example.com").build()
        assert_command_failure(
            AddTeacherCommand(duplicate), model, AddTeacherCommand.MESSAGE_DUPLICATE_TEACHER
        )

    def test_same_name_as_student_is_allowed(self, model: ModelManager) -> None:
        teacher = TeacherBuilder(BOB).with_name(ALICE.name.value).build()
        AddTeacherCommand(teacher).execute(model)
        assert model.get_filtered_teacher_list()[-1] == teacher


class TestDeleteTeacherCommand:
    def test_index_counts_only_teachers(
        self, model: ModelManager, expected_model: ModelManager
    ) -> None:
        expected_model.delete_person(ELLE)
        assert_command_success(
            DeleteTeacherCommand(SECOND),
            model,
            DeleteTeacherCommand.MESSAGE_DELETE_TEACHER_SUCCESS.format(ELLE),
            expected_model,
        )

    def test_out_of_bounds(self, model: ModelManager) -> None:
        assert_command_failure(
            DeleteTeacherCommand(Index.from_one_based(3)),
            model,
            MESSAGE_INVALID_TEACHER_DISPLAYED_INDEX,
        )

    def test_filtered_list(self, model: ModelManager) -> None:
        model.update_filtered_person_list(TeacherNameContainsKeywordsPredicate(["Elle"]))
        DeleteTeacherCommand(FIRST).execute(model)
        assert model.address_book.teachers == [DANIEL]

    def test_removes_teacher_from_meetings(self, model: ModelManager) -> None:
        DeleteTeacherCommand(FIRST).execute(model)
        assert model.get_meeting_list()[0].attendees == (ALICE,)


class TestEditTeacherCommand:
    def test_all_fields(self, model: ModelManager, expected_model: ModelManager) -> None:
        expected_model.set_person(ELLE, BOB)
        assert_command_success(
            EditTeacherCommand(SECOND, descriptor_from_teacher(BOB)),
            model,
            EditTeacherCommand.MESSAGE_EDIT_TEACHER_SUCCESS.format(BOB),
            expected_model,
        )

    @pytest.mark.parametrize("field", [f.name for f in fields(EditTeacherDescriptor)])
    def test_one_field_leaves_others_untouched(self, model: ModelManager, field: str) -> None:
        descriptor = EditTeacherDescriptor(**{field: getattr(BOB, field)})
        EditTeacherCommand(FIRST, descriptor).execute(model)

        edited = model.get_filtered_teacher_list()[0]
        assert getattr(edited, field) == getattr(BOB, field)
        assert edited.model_copy(update={field: getattr(DANIEL, field)}) == DANIEL

    def test_duplicate(self, model: ModelManager) -> None:
        assert_command_failure(
            EditTeacherCommand(SECOND, EditTeacherDescriptor(name=DANIEL.name)),
            model,
            EditTeacherCommand.MESSAGE_DUPLICATE_TEACHER,
        )

    def test_out_of_bounds(self, model: ModelManager) -> None:
        assert_command_failure(
            EditTeacherCommand(Index.from_one_based(3), EditTeacherDescriptor(name=Name("X"))),
            model,
            MESSAGE_INVALID_TEACHER_DISPLAYED_INDEX,
        )

    def test_renames_meeting_attendee(self, model: ModelManager) -> None:
        EditTeacherCommand(FIRST, EditTeacherDescriptor(name=Name("Daniel Tan"))).execute(model)
        assert model.get_meeting_list()[0].attendees[1].name == Name("Daniel Tan")


class TestTeacherViewCommands:
    def test_list(self, model: ModelManager) -> None:
        result = ListTeacherCommand().execute(model)
        assert result.message == ListTeacherCommand.MESSAGE_SUCCESS
        assert model.get_filtered_person_list() == [DANIEL, ELLE]
        assert model.get_filtered_student_list() == []

    def test_find(self, model: ModelManager) -> None:
        result = FindTeacherCommand(TeacherNameContainsKeywordsPredicate(["Meier"])).execute(
            model
        )
        assert result.message == MESSAGE_TEACHERS_LISTED_OVERVIEW.format(1)
        assert model.get_filtered_teacher_list() == [DANIEL]
        assert BENSON not in model.get_filtered_person_list()

    def test_clear(self, model: ModelManager) -> None:
        result = ClearTeacherCommand().execute(model)
        assert result.message == ClearTeacherCommand.MESSAGE_SUCCESS
        assert model.address_book.persons == [ALICE, BENSON, CARL]
