"""Meeting entity."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from src.addressbook.domain.base import ValueObject
from src.addressbook.domain.fields import Description, Location, MeetingDateTime
from src.addressbook.domain.person import Person


class Meeting(ValueObject):
    """A scheduled meeting with one or more attendees."""

    description: Description
    date_time: MeetingDateTime
    location: Location
    attendees: tuple[Person, ...] = Field(default_factory=tuple)

    def is_same_meeting(self, other: Any) -> bool:
        """Two meetings are the same if they share a description and a start time."""
        if other is self:
            return True
        return (
            isinstance(other, Meeting)
            and other.description == self.description
            and other.date_time == self.date_time
        )

    def has_attendee(self, person: Person) -> bool:
        return any(attendee == person for attendee in self.attendees)

    def with_attendee_replaced(self, target: Person, replacement: Person) -> Meeting:
        attendees = tuple(
            replacement if attendee == target else attendee
            for attendee in self.attendees
        )
        return self.model_copy(update={"attendees": attendees})

    def without_attendee(self, person: Person) -> Meeting:
        attendees = tuple(a for a in self.attendees if a != person)
        return self.model_copy(update={"attendees": attendees})

    def __str__(self) -> str:
        names = ", ".join(str(attendee.name) for attendee in self.attendees)
        return (
            f"{self.description}; Date: {self.date_time}; "
            f"Location: {self.location}; Attendees: {names}"
        )
