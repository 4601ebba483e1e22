"""
Person entities.

Students and teachers share the contact fields of ``Person``. Entities are
immutable: editing one builds a new value that replaces the old one in the
address book.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from src.addressbook.domain.base import ValueObject
from src.addressbook.domain.fields import (
    Address,
    Email,
    FormClass,
    Gender,
    Involvement,
    MedicalHistory,
    Name,
    Phone,
    Tag,
)


class Person(ValueObject):
    """Contact details common to every person in the address book."""

    KIND: ClassVar[str] = "Person"

    name: Name
    phone: Phone
    email: Email
    address: Address
    gender: Gender
    involvement: Involvement
    tags: frozenset[Tag] = Field(default_factory=frozenset)

    def is_same_person(self, other: Any) -> bool:
        """Return True if ``other`` is the same kind of person with the same name.

        This is a weaker notion of equality than ``==`` and decides what
        counts as a duplicate entry.
        """
        if other is self:
            return True
        return type(other) is type(self) and other.name == self.name

    def with_updates(self, **changes: Any) -> Person:
        """Return a copy of this person with the given fields replaced."""
        return self.model_copy(update=changes)

    def _describe_fields(self) -> list[str]:
        parts = [
            str(self.name),
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Address: {self.address}",
            f"Gender: {self.gender}",
            f"Involvement: {self.involvement}",
        ]
        if self.tags:
            rendered = "".join(f"[{tag}]" for tag in sorted(t.value for t in self.tags))
            parts.append(f"Tags: {rendered}")
        return parts

    def __str__(self) -> str:
        return "; ".join(self._describe_fields())


class Student(Person):
    """A student, with the extra details a form teacher keeps."""

    KIND: ClassVar[str] = "Student"

    emergency_contact: Phone
    form_class: FormClass
    medical_history: MedicalHistory = Field(default_factory=lambda: MedicalHistory(""))

    def with_medical_history(self, medical_history: MedicalHistory) -> Student:
        """Return a copy of this student with a new medical history."""
        return self.model_copy(update={"medical_history": medical_history})

    def _describe_fields(self) -> list[str]:
        parts = super()._describe_fields()
        parts.insert(6, f"Form Class: {self.form_class}")
        parts.insert(7, f"Emergency Contact: {self.emergency_contact}")
        if not self.medical_history.is_empty:
            parts.append(f"Medical History: {self.medical_history}")
        return parts


class Teacher(Person):
    """A member of staff."""

    KIND: ClassVar[str] = "Teacher"
