from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.common.exceptions import CommandError, DuplicateMeetingError
from src.addressbook.constants import MESSAGE_INVALID_MEETING_DISPLAYED_INDEX
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command, resolve_index
from src.addressbook.domain.descriptors import EditMeetingDescriptor
from src.addressbook.domain.index import Index
from src.addressbook.domain.predicates import PREDICATE_SHOW_ALL_MEETINGS
from src.addressbook.interfaces.model_interface import IModel
from src.addressbook.parsing.cli_syntax import (
    PREFIX_DATE_TIME,
    PREFIX_DESCRIPTION,
    PREFIX_LOCATION,
)


@dataclass(frozen=True)
class EditMeetingCommand(Command):
    """Edits the description, time or location of a displayed meeting."""

    COMMAND_WORD = "edit-m"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the details of the meeting identified "
        "by the index number used in the displayed meeting list.\n"
        "Parameters: INDEX (must be a positive integer) "
        f"[{PREFIX_DESCRIPTION}DESCRIPTION] [{PREFIX_DATE_TIME}YYYY-MM-DD HH:MM] "
        f"[{PREFIX_LOCATION}LOCATION]\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_LOCATION}Library"
    )

    MESSAGE_EDIT_MEETING_SUCCESS = "Edited Meeting: {}"
    MESSAGE_DUPLICATE_MEETING = "This meeting already exists in the address book."

    index: Index
    descriptor: EditMeetingDescriptor

    def execute(self, model: IModel) -> CommandResult:
        meeting_to_edit = resolve_index(
            model.get_meeting_list(), self.index, MESSAGE_INVALID_MEETING_DISPLAYED_INDEX
        )
        edited_meeting = self.descriptor.apply_to(meeting_to_edit)

        try:
            model.set_meeting(meeting_to_edit, edited_meeting)
        except DuplicateMeetingError as exc:
            raise CommandError(self.MESSAGE_DUPLICATE_MEETING) from exc

        model.update_filtered_meeting_list(PREDICATE_SHOW_ALL_MEETINGS)
        return CommandResult(
            name=self.name,
            message=self.MESSAGE_EDIT_MEETING_SUCCESS.format(edited_meeting),
        )
