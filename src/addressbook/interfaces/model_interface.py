"""Interface for the in-memory model that commands execute against."""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.addressbook.domain.address_book import AddressBook
from src.addressbook.domain.meeting import Meeting
from src.addressbook.domain.person import Person, Student, Teacher
from src.addressbook.domain.predicates import MeetingPredicate, PersonPredicate


class IModel(ABC):
    """The application state commands read and mutate.

    Index-based commands resolve their index against the filtered lists
    returned here, never against the full underlying collections.
    """

    @property
    @abstractmethod
    def address_book(self) -> AddressBook:
        """The canonical collections."""

    @abstractmethod
    def reset_address_book(self, address_book: AddressBook | None = None) -> None:
        """Replace the model's data with ``address_book`` (empty when None)."""

    @abstractmethod
    def has_person(self, person: Person) -> bool:
        """Return True if a person with the same identity exists."""

    @abstractmethod
    def add_person(self, person: Person) -> None:
        """Add ``person``; raises ``DuplicatePersonError`` on a duplicate."""

    @abstractmethod
    def delete_person(self, target: Person) -> None:
        """Remove ``target``, which must exist."""

    @abstractmethod
    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited``."""

    @abstractmethod
    def clear_persons(self, kind: type[Person] = Person) -> None:
        """Remove every person of ``kind``."""

    @abstractmethod
    def has_meeting(self, meeting: Meeting) -> bool:
        """Return True if a meeting with the same identity exists."""

    @abstractmethod
    def add_meeting(self, meeting: Meeting) -> None:
        """Add ``meeting``; raises ``DuplicateMeetingError`` on a duplicate."""

    @abstractmethod
    def delete_meeting(self, target: Meeting) -> None:
        """Remove ``target``, which must exist."""

    @abstractmethod
    def set_meeting(self, target: Meeting, edited: Meeting) -> None:
        """Replace ``target`` with ``edited``."""

    @abstractmethod
    def clear_meetings(self) -> None:
        """Remove every meeting."""

    @abstractmethod
    def get_filtered_person_list(self) -> list[Person]:
        """Persons currently displayed, in address book order."""

    @abstractmethod
    def get_filtered_student_list(self) -> list[Student]:
        """Students currently displayed."""

    @abstractmethod
    def get_filtered_teacher_list(self) -> list[Teacher]:
        """Teachers currently displayed."""

    @abstractmethod
    def get_meeting_list(self) -> list[Meeting]:
        """Meetings currently displayed."""

    @abstractmethod
    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        """Show only the persons matching ``predicate``."""

    @abstractmethod
    def update_filtered_meeting_list(self, predicate: MeetingPredicate) -> None:
        """Show only the meetings matching ``predicate``."""
