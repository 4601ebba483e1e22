"""
Descriptors carried by edit and copy commands.

A descriptor holds only the fields a command intends to change (or, for
copy, the field it reads). Every field of an edit descriptor is optional;
``None`` means "leave unchanged".
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from src.addressbook.domain.fields import (
    Address,
    Description,
    Email,
    FormClass,
    Gender,
    Involvement,
    Location,
    MeetingDateTime,
    Name,
    Phone,
    Tag,
)
from src.addressbook.domain.meeting import Meeting
from src.addressbook.domain.person import Person


class _EditDescriptor:
    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))  # type: ignore[arg-type]

    def _changes(self) -> dict[str, object]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)  # type: ignore[arg-type]
            if getattr(self, f.name) is not None
        }


@dataclass
class EditPersonDescriptor(_EditDescriptor):
    """Fields shared by the student and teacher edit commands."""

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    gender: Gender | None = None
    involvement: Involvement | None = None
    tags: frozenset[Tag] | None = None

    def apply_to(self, person: Person) -> Person:
        """Return ``person`` with every set field replaced."""
        return person.with_updates(**self._changes())


@dataclass
class EditStudentDescriptor(EditPersonDescriptor):
    emergency_contact: Phone | None = None
    form_class: FormClass | None = None


@dataclass
class EditTeacherDescriptor(EditPersonDescriptor):
    """Teachers expose exactly the shared person fields."""


@dataclass
class EditMeetingDescriptor(_EditDescriptor):
    description: Description | None = None
    date_time: MeetingDateTime | None = None
    location: Location | None = None

    def apply_to(self, meeting: Meeting) -> Meeting:
        return meeting.model_copy(update=self._changes())


@dataclass(frozen=True)
class CopyCommandDescriptor:
    """Names the person field whose values the copy command collects."""

    field: str
