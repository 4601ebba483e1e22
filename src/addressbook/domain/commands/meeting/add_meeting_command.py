from __future__ import annotations

import logging
from dataclasses import dataclass

from src.addressbook.common.exceptions import CommandError, DuplicateMeetingError
from src.addressbook.constants import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command, resolve_index
from src.addressbook.domain.fields import Description, Location, MeetingDateTime
from src.addressbook.domain.index import Index
from src.addressbook.domain.meeting import Meeting
from src.addressbook.domain.person import Person
from src.addressbook.interfaces.model_interface import IModel
from src.addressbook.parsing.cli_syntax import (
    PREFIX_DATE_TIME,
    PREFIX_DESCRIPTION,
    PREFIX_LOCATION,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddMeetingCommand(Command):
    """Schedules a meeting with persons picked from the displayed person list."""

    COMMAND_WORD = "meeting"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a meeting with the persons identified by the index "
        "numbers used in the displayed person list.\n"
        "Parameters: INDEX [MORE_INDEXES]... "
        f"{PREFIX_DESCRIPTION}DESCRIPTION {PREFIX_DATE_TIME}YYYY-MM-DD HH:MM "
        f"{PREFIX_LOCATION}LOCATION\n"
        f"Example: {COMMAND_WORD} 1 3 {PREFIX_DESCRIPTION}Parent teacher meeting "
        f"{PREFIX_DATE_TIME}2026-11-02 15:30 {PREFIX_LOCATION}Staff room"
    )

    MESSAGE_SUCCESS = "New meeting added: {}"
    MESSAGE_DUPLICATE_MEETING = "This meeting already exists in the address book"

    attendee_indexes: tuple[Index, ...]
    description: Description
    date_time: MeetingDateTime
    location: Location

    def execute(self, model: IModel) -> CommandResult:
        displayed = model.get_filtered_person_list()
        attendees: list[Person] = []
        for index in self.attendee_indexes:
            person = resolve_index(
                displayed, index, MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
            )
            if person not in attendees:
                attendees.append(person)

        meeting = Meeting(
            description=self.description,
            date_time=self.date_time,
            location=self.location,
            attendees=tuple(attendees),
        )
        try:
            model.add_meeting(meeting)
        except DuplicateMeetingError as exc:
            raise CommandError(self.MESSAGE_DUPLICATE_MEETING) from exc

        logger.info("Scheduled meeting '%s' at %s", self.description, self.date_time)
        return CommandResult(name=self.name, message=self.MESSAGE_SUCCESS.format(meeting))
