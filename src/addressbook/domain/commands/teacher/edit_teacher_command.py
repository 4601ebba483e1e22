from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from src.addressbook.common.exceptions import CommandError, DuplicatePersonError
from src.addressbook.constants import MESSAGE_INVALID_TEACHER_DISPLAYED_INDEX
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command, resolve_index
from src.addressbook.domain.descriptors import EditTeacherDescriptor
from src.addressbook.domain.index import Index
from src.addressbook.domain.person import Teacher
from src.addressbook.domain.predicates import PREDICATE_SHOW_ALL_PERSONS
from src.addressbook.interfaces.model_interface import IModel
from src.addressbook.parsing.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_GENDER,
    PREFIX_INVOLVEMENT,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
)


@dataclass(frozen=True)
class EditTeacherCommand(Command):
    """Edits the details of a teacher in the displayed teacher list."""

    COMMAND_WORD = "edit-t"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the teacher identified "
        "by the index number used in the displayed teacher list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        f"[{PREFIX_NAME}NAME] [{PREFIX_PHONE}PHONE] [{PREFIX_EMAIL}EMAIL] "
        f"[{PREFIX_ADDRESS}ADDRESS] [{PREFIX_GENDER}GENDER] "
        f"[{PREFIX_INVOLVEMENT}INVOLVEMENT] [{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_INVOLVEMENT}Physics"
    )

    MESSAGE_EDIT_TEACHER_SUCCESS = "Edited Teacher: {}"
    MESSAGE_DUPLICATE_TEACHER = "This teacher already exists in the address book."

    index: Index
    descriptor: EditTeacherDescriptor

    def execute(self, model: IModel) -> CommandResult:
        teacher_to_edit = resolve_index(
            model.get_filtered_teacher_list(),
            self.index,
            MESSAGE_INVALID_TEACHER_DISPLAYED_INDEX,
        )
        edited_teacher = cast(Teacher, self.descriptor.apply_to(teacher_to_edit))

        try:
            model.set_person(teacher_to_edit, edited_teacher)
        except DuplicatePersonError as exc:
            raise CommandError(self.MESSAGE_DUPLICATE_TEACHER) from exc

        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(
            name=self.name,
            message=self.MESSAGE_EDIT_TEACHER_SUCCESS.format(edited_teacher),
        )
