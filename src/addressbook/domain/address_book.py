"""
The canonical entity collections.

``AddressBook`` owns every person and meeting in insertion order and refuses
duplicates. Identity for duplicate checks is ``Person.is_same_person`` /
``Meeting.is_same_meeting``; removal and replacement use full equality.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from src.addressbook.common.exceptions import (
    DuplicateMeetingError,
    DuplicatePersonError,
    MeetingNotFoundError,
    PersonNotFoundError,
)
from src.addressbook.domain.meeting import Meeting
from src.addressbook.domain.person import Person, Student, Teacher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _UniqueList(Generic[T]):
    """An ordered list that rejects two elements considered the same."""

    def __init__(
        self,
        is_same: Callable[[T, T], bool],
        duplicate_error: type[Exception],
        not_found_error: type[Exception],
    ) -> None:
        self._items: list[T] = []
        self._is_same = is_same
        self._duplicate_error = duplicate_error
        self._not_found_error = not_found_error

    def contains(self, to_check: T) -> bool:
        return any(self._is_same(item, to_check) for item in self._items)

    def add(self, to_add: T) -> None:
        if self.contains(to_add):
            raise self._duplicate_error()
        self._items.append(to_add)

    def set_item(self, target: T, edited: T) -> None:
        """Replace ``target`` with ``edited``, keeping its position."""
        try:
            position = self._items.index(target)
        except ValueError:
            raise self._not_found_error() from None

        if not self._is_same(target, edited) and self.contains(edited):
            raise self._duplicate_error()
        self._items[position] = edited

    def remove(self, to_remove: T) -> None:
        try:
            self._items.remove(to_remove)
        except ValueError:
            raise self._not_found_error() from None

    def set_items(self, items: Iterable[T]) -> None:
        replacement = list(items)
        for i, item in enumerate(replacement):
            if any(self._is_same(item, other) for other in replacement[i + 1 :]):
                raise self._duplicate_error()
        self._items = replacement

    def as_list(self) -> list[T]:
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _UniqueList) and self._items == other._items


class UniquePersonList(_UniqueList[Person]):
    def __init__(self) -> None:
        super().__init__(
            lambda a, b: a.is_same_person(b), DuplicatePersonError, PersonNotFoundError
        )


class UniqueMeetingList(_UniqueList[Meeting]):
    def __init__(self) -> None:
        super().__init__(
            lambda a, b: a.is_same_meeting(b),
            DuplicateMeetingError,
            MeetingNotFoundError,
        )


class AddressBook:
    """All persons and meetings known to the application."""

    def __init__(self, to_be_copied: AddressBook | None = None) -> None:
        self._persons = UniquePersonList()
        self._meetings = UniqueMeetingList()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    def reset_data(self, new_data: AddressBook) -> None:
        """Replace the contents of this address book with ``new_data``."""
        self._persons.set_items(new_data.persons)
        self._meetings.set_items(new_data.meetings)

    # Persons

    def has_person(self, person: Person) -> bool:
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` here and in every meeting it attends."""
        self._persons.set_item(target, edited)
        for meeting in self._meetings:
            if meeting.has_attendee(target):
                self._meetings.set_item(
                    meeting, meeting.with_attendee_replaced(target, edited)
                )

    def remove_person(self, person: Person) -> None:
        """Remove ``person`` and drop it from the attendees of every meeting."""
        self._persons.remove(person)
        for meeting in self._meetings:
            if meeting.has_attendee(person):
                self._meetings.set_item(meeting, meeting.without_attendee(person))
        logger.debug("Removed %s %s", person.KIND.lower(), person.name)

    def clear_persons(self, kind: type[Person] = Person) -> None:
        """Remove every person of ``kind`` (all persons by default)."""
        for person in self._persons:
            if isinstance(person, kind):
                self.remove_person(person)

    # Meetings

    def has_meeting(self, meeting: Meeting) -> bool:
        return self._meetings.contains(meeting)

    def add_meeting(self, meeting: Meeting) -> None:
        self._meetings.add(meeting)

    def set_meeting(self, target: Meeting, edited: Meeting) -> None:
        self._meetings.set_item(target, edited)

    def remove_meeting(self, meeting: Meeting) -> None:
        self._meetings.remove(meeting)

    def clear_meetings(self) -> None:
        self._meetings.set_items([])

    # Views

    @property
    def persons(self) -> list[Person]:
        return self._persons.as_list()

    @property
    def students(self) -> list[Student]:
        return [p for p in self._persons if isinstance(p, Student)]

    @property
    def teachers(self) -> list[Teacher]:
        return [p for p in self._persons if isinstance(p, Teacher)]

    @property
    def meetings(self) -> list[Meeting]:
        return self._meetings.as_list()

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, AddressBook)
            and self._persons == other._persons
            and self._meetings == other._meetings
        )

    def __repr__(self) -> str:
        return f"<AddressBook persons={len(self._persons)} meetings={len(self._meetings)}>"
