from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import cast

from src.addressbook.common.exceptions import CommandError, DuplicatePersonError
from src.addressbook.constants import MESSAGE_INVALID_STUDENT_DISPLAYED_INDEX
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command, resolve_index
from src.addressbook.domain.descriptors import EditStudentDescriptor
from src.addressbook.domain.index import Index
from src.addressbook.domain.person import Student
from src.addressbook.domain.predicates import PREDICATE_SHOW_ALL_PERSONS
from src.addressbook.interfaces.model_interface import IModel
from src.addressbook.parsing.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_EMERGENCY_CONTACT,
    PREFIX_FORM_CLASS,
    PREFIX_GENDER,
    PREFIX_INVOLVEMENT,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
)

logger = logging.getLogger(__name__)


def create_edited_student(
    student_to_edit: Student, descriptor: EditStudentDescriptor
) -> Student:
    """Return ``student_to_edit`` with the descriptor's fields applied.

    Fields the descriptor leaves unset keep their current values; the
    medical history is never touched by an edit.
    """
    return cast(Student, descriptor.apply_to(student_to_edit))


@dataclass(frozen=True)
class EditStudentCommand(Command):
    """Edits the details of a student in the displayed student list."""

    COMMAND_WORD = "edit-s"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the student identified "
        "by the index number used in the displayed student list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        f"[{PREFIX_NAME}NAME] [{PREFIX_PHONE}PHONE] [{PREFIX_EMAIL}EMAIL] "
        f"[{PREFIX_ADDRESS}ADDRESS] [{PREFIX_GENDER}GENDER] "
        f"[{PREFIX_INVOLVEMENT}INVOLVEMENT] "
        f"[{PREFIX_EMERGENCY_CONTACT}EMERGENCY_CONTACT] "
        f"[{PREFIX_FORM_CLASS}FORM_CLASS] [{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_PHONE}91234567 "
        f"{PREFIX_EMAIL}johndoe@example.com"
    )

    MESSAGE_EDIT_STUDENT_SUCCESS = "Edited Student: {}"
    MESSAGE_DUPLICATE_STUDENT = "This student already exists in the address book."

    index: Index
    descriptor: EditStudentDescriptor

    def execute(self, model: IModel) -> CommandResult:
        student_to_edit = resolve_index(
            model.get_filtered_student_list(),
            self.index,
            MESSAGE_INVALID_STUDENT_DISPLAYED_INDEX,
        )
        edited_student = create_edited_student(student_to_edit, self.descriptor)

        try:
            model.set_person(student_to_edit, edited_student)
        except DuplicatePersonError as exc:
            raise CommandError(self.MESSAGE_DUPLICATE_STUDENT) from exc

        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        logger.debug("Edited student at index %s", self.index)
        return CommandResult(
            name=self.name,
            message=self.MESSAGE_EDIT_STUDENT_SUCCESS.format(edited_student),
        )
