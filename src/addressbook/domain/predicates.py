"""
Display predicates.

Find and list commands hand one of these to the model to decide which
entities are visible. They are plain callables with value equality so that
parsed commands can be compared in tests.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from src.addressbook.common.string_utils import contains_word_ignore_case
from src.addressbook.domain.meeting import Meeting
from src.addressbook.domain.person import Person, Student, Teacher

PersonPredicate = Callable[[Person], bool]
MeetingPredicate = Callable[[Meeting], bool]


def _show_all(_entity: object) -> bool:
    return True


def _is_student(person: Person) -> bool:
    return isinstance(person, Student)


def _is_teacher(person: Person) -> bool:
    return isinstance(person, Teacher)


PREDICATE_SHOW_ALL_PERSONS: PersonPredicate = _show_all
PREDICATE_SHOW_ALL_STUDENTS: PersonPredicate = _is_student
PREDICATE_SHOW_ALL_TEACHERS: PersonPredicate = _is_teacher
PREDICATE_SHOW_ALL_MEETINGS: MeetingPredicate = _show_all


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches any person whose name contains one of the keywords as a word."""

    keywords: tuple[str, ...]

    def __init__(self, keywords: list[str] | tuple[str, ...]) -> None:
        object.__setattr__(self, "keywords", tuple(keywords))

    def __call__(self, person: Person) -> bool:
        return any(
            contains_word_ignore_case(person.name.value, keyword)
            for keyword in self.keywords
        )


class StudentNameContainsKeywordsPredicate(NameContainsKeywordsPredicate):
    """Like ``NameContainsKeywordsPredicate`` but only ever matches students."""

    def __call__(self, person: Person) -> bool:
        return isinstance(person, Student) and super().__call__(person)


class TeacherNameContainsKeywordsPredicate(NameContainsKeywordsPredicate):
    """Like ``NameContainsKeywordsPredicate`` but only ever matches teachers."""

    def __call__(self, person: Person) -> bool:
        return isinstance(person, Teacher) and super().__call__(person)


@dataclass(frozen=True)
class DescriptionContainsKeywordsPredicate:
    """Matches meetings whose description contains one of the keywords as a word."""

    keywords: tuple[str, ...]

    def __init__(self, keywords: list[str] | tuple[str, ...]) -> None:
        object.__setattr__(self, "keywords", tuple(keywords))

    def __call__(self, meeting: Meeting) -> bool:
        return any(
            contains_word_ignore_case(meeting.description.value, keyword)
            for keyword in self.keywords
        )
