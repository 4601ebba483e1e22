from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.constants import MESSAGE_INVALID_STUDENT_DISPLAYED_INDEX
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command, resolve_index
from src.addressbook.domain.index import Index
from src.addressbook.interfaces.model_interface import IModel


@dataclass(frozen=True)
class DeleteStudentCommand(Command):
    """Deletes the student at a position in the displayed student list."""

    COMMAND_WORD = "delete-s"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the student identified by the index number "
        "used in the displayed student list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )

    MESSAGE_DELETE_STUDENT_SUCCESS = "Deleted Student: {}"

    target_index: Index

    def execute(self, model: IModel) -> CommandResult:
        student_to_delete = resolve_index(
            model.get_filtered_student_list(),
            self.target_index,
            MESSAGE_INVALID_STUDENT_DISPLAYED_INDEX,
        )
        model.delete_person(student_to_delete)
        return CommandResult(
            name=self.name,
            message=self.MESSAGE_DELETE_STUDENT_SUCCESS.format(student_to_delete),
        )
