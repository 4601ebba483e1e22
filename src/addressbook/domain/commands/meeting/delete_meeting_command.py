from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.constants import MESSAGE_INVALID_MEETING_DISPLAYED_INDEX
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command, resolve_index
from src.addressbook.domain.index import Index
from src.addressbook.interfaces.model_interface import IModel


@dataclass(frozen=True)
class DeleteMeetingCommand(Command):
    """Deletes an existing meeting from the address book."""

    COMMAND_WORD = "delete-m"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Deletes the meeting identified by the index number "
        "used in the displayed meeting list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )

    MESSAGE_DELETE_MEETING_SUCCESS = "Deleted Meeting: {}"

    target_index: Index

    def execute(self, model: IModel) -> CommandResult:
        meeting_to_delete = resolve_index(
            model.get_meeting_list(),
            self.target_index,
            MESSAGE_INVALID_MEETING_DISPLAYED_INDEX,
        )
        model.delete_meeting(meeting_to_delete)
        return CommandResult(
            name=self.name,
            message=self.MESSAGE_DELETE_MEETING_SUCCESS.format(meeting_to_delete),
        )
