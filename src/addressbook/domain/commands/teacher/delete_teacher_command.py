from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.constants import MESSAGE_INVALID_TEACHER_DISPLAYED_INDEX
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command, resolve_index
from src.addressbook.domain.index import Index
from src.addressbook.interfaces.model_interface import IModel


@dataclass(frozen=True)
class DeleteTeacherCommand(Command):
    """Deletes the teacher at a position in the displayed teacher list."""

    COMMAND_WORD = "delete-t"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the teacher identified by the index number "
        "used in the displayed teacher list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )

    MESSAGE_DELETE_TEACHER_SUCCESS = "Deleted Teacher: {}"

    target_index: Index

    def execute(self, model: IModel) -> CommandResult:
        teacher_to_delete = resolve_index(
            model.get_filtered_teacher_list(),
            self.target_index,
            MESSAGE_INVALID_TEACHER_DISPLAYED_INDEX,
        )
        model.delete_person(teacher_to_delete)
        return CommandResult(
            name=self.name,
            message=self.MESSAGE_DELETE_TEACHER_SUCCESS.format(teacher_to_delete),
        )
