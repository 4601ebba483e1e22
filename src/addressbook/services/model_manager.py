from __future__ import annotations

import logging

from src.addressbook.domain.address_book import AddressBook
from src.addressbook.domain.meeting import Meeting
from src.addressbook.domain.person import Person, Student, Teacher
from src.addressbook.domain.predicates import (
    PREDICATE_SHOW_ALL_MEETINGS,
    PREDICATE_SHOW_ALL_PERSONS,
    MeetingPredicate,
    PersonPredicate,
)
from src.addressbook.interfaces.model_interface import IModel

logger = logging.getLogger(__name__)


class ModelManager(IModel):
    """In-memory model backed by an ``AddressBook``.

    A single person predicate drives the person, student and teacher views;
    meetings have their own predicate. Views are recomputed on every read so
    they always reflect the latest mutation.
    """

    def __init__(self, address_book: AddressBook | None = None) -> None:
        self._address_book = AddressBook(address_book)
        self._person_predicate: PersonPredicate = PREDICATE_SHOW_ALL_PERSONS
        self._meeting_predicate: MeetingPredicate = PREDICATE_SHOW_ALL_MEETINGS
        logger.debug("Initializing model with %r", self._address_book)

    @property
    def address_book(self) -> AddressBook:
        return self._address_book

    def reset_address_book(self, address_book: AddressBook | None = None) -> None:
        self._address_book.reset_data(address_book or AddressBook())

    # Persons

    def has_person(self, person: Person) -> bool:
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._address_book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)

    def delete_person(self, target: Person) -> None:
        self._address_book.remove_person(target)

    def set_person(self, target: Person, edited: Person) -> None:
        self._address_book.set_person(target, edited)

    def clear_persons(self, kind: type[Person] = Person) -> None:
        self._address_book.clear_persons(kind)

    # Meetings

    def has_meeting(self, meeting: Meeting) -> bool:
        return self._address_book.has_meeting(meeting)

    def add_meeting(self, meeting: Meeting) -> None:
        self._address_book.add_meeting(meeting)
        self.update_filtered_meeting_list(PREDICATE_SHOW_ALL_MEETINGS)

    def delete_meeting(self, target: Meeting) -> None:
        self._address_book.remove_meeting(target)

    def set_meeting(self, target: Meeting, edited: Meeting) -> None:
        self._address_book.set_meeting(target, edited)

    def clear_meetings(self) -> None:
        self._address_book.clear_meetings()

    # Filtered views

    def get_filtered_person_list(self) -> list[Person]:
        return [p for p in self._address_book.persons if self._person_predicate(p)]

    def get_filtered_student_list(self) -> list[Student]:
        return [p for p in self.get_filtered_person_list() if isinstance(p, Student)]

    def get_filtered_teacher_list(self) -> list[Teacher]:
        return [p for p in self.get_filtered_person_list() if isinstance(p, Teacher)]

    def get_meeting_list(self) -> list[Meeting]:
        return [m for m in self._address_book.meetings if self._meeting_predicate(m)]

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._person_predicate = predicate

    def update_filtered_meeting_list(self, predicate: MeetingPredicate) -> None:
        self._meeting_predicate = predicate

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return False
        return (
            self._address_book == other._address_book
            and self.get_filtered_person_list() == other.get_filtered_person_list()
            and self.get_meeting_list() == other.get_meeting_list()
        )
