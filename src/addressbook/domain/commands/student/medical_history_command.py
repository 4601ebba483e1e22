from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.constants import MESSAGE_INVALID_STUDENT_DISPLAYED_INDEX
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command, resolve_index
from src.addressbook.domain.fields import MedicalHistory
from src.addressbook.domain.index import Index
from src.addressbook.domain.person import Student
from src.addressbook.interfaces.model_interface import IModel
from src.addressbook.parsing.cli_syntax import PREFIX_MEDICAL_HISTORY


@dataclass(frozen=True)
class MedicalHistoryCommand(Command):
    """Sets the medical history of a student. An empty value clears it."""

    COMMAND_WORD = "medical"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the medical history of the student identified "
        "by the index number used in the displayed student list. "
        "Existing medical history will be overwritten by the input.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_MEDICAL_HISTORY}[MEDICAL_HISTORY]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_MEDICAL_HISTORY}ADHD"
    )

    MESSAGE_ADD_MEDICAL_HISTORY_SUCCESS = "Added medical history to Student: {}"
    MESSAGE_DELETE_MEDICAL_HISTORY_SUCCESS = "Removed medical history from Student: {}"

    index: Index
    medical_history: MedicalHistory

    def execute(self, model: IModel) -> CommandResult:
        student_to_edit = resolve_index(
            model.get_filtered_student_list(),
            self.index,
            MESSAGE_INVALID_STUDENT_DISPLAYED_INDEX,
        )
        edited_student = student_to_edit.with_medical_history(self.medical_history)
        model.set_person(student_to_edit, edited_student)
        return CommandResult(
            name=self.name, message=self._success_message(edited_student)
        )

    def _success_message(self, student: Student) -> str:
        if self.medical_history.is_empty:
            return self.MESSAGE_DELETE_MEDICAL_HISTORY_SUCCESS.format(student)
        return self.MESSAGE_ADD_MEDICAL_HISTORY_SUCCESS.format(student)
