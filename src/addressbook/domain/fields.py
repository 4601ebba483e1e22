"""
Typed field values for persons and meetings.

Every field is an immutable value object that validates itself on
construction. User input reaches these classes through the functions in
``src.addressbook.parsing.parser_util``, which trim the raw text and turn a
failed check into a ``ParseError`` carrying ``MESSAGE_CONSTRAINTS``.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import ClassVar

from src.addressbook.domain.base import SingleValueField

_TRIMMED_TEXT = re.compile(r"\S(?:.*\S)?", re.DOTALL)

_EMAIL_SPECIAL_CHARACTERS = "+_.-"
_ALPHANUMERIC_NO_UNDERSCORE = r"[^\W_]+"
_LOCAL_PART_REGEX = (
    _ALPHANUMERIC_NO_UNDERSCORE
    + "(["
    + re.escape(_EMAIL_SPECIAL_CHARACTERS)
    + "]"
    + _ALPHANUMERIC_NO_UNDERSCORE
    + ")*"
)
_DOMAIN_PART_REGEX = _ALPHANUMERIC_NO_UNDERSCORE + "(-" + _ALPHANUMERIC_NO_UNDERSCORE + ")*"
_DOMAIN_LAST_PART_REGEX = "(" + _DOMAIN_PART_REGEX + "){2,}"
_DOMAIN_REGEX = "(" + _DOMAIN_PART_REGEX + r"\.)*" + _DOMAIN_LAST_PART_REGEX
_EMAIL_REGEX = re.compile(_LOCAL_PART_REGEX + "@" + _DOMAIN_REGEX, re.ASCII)


class Name(SingleValueField):
    """A person's name."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(
        r"[A-Za-z0-9](?:[A-Za-z0-9 ]*[A-Za-z0-9])?"
    )

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(cls.VALIDATION_REGEX.fullmatch(test))


class Phone(SingleValueField):
    """A phone number. Also used for a student's emergency contact."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, "
        "and it should be between 3 and 15 digits long"
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(r"[0-9]{3,15}")

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(cls.VALIDATION_REGEX.fullmatch(test))


class Email(SingleValueField):
    """An email address of the form ``local-part@domain``."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these "
        f"special characters, excluding the parentheses, ({_EMAIL_SPECIAL_CHARACTERS}). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is "
        "made up of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = _EMAIL_REGEX

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(cls.VALIDATION_REGEX.fullmatch(test))


class Address(SingleValueField):
    """A postal address; any text without surrounding whitespace."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Addresses can take any values, and it should not be blank"

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(_TRIMMED_TEXT.fullmatch(test))


class Gender(SingleValueField):
    """Gender, stored as ``M`` or ``F``."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Gender should be either M or F"
    VALID_VALUES: ClassVar[tuple[str, ...]] = ("M", "F")

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return test in cls.VALID_VALUES


class Involvement(SingleValueField):
    """What the person is involved in, e.g. a subject taught or a CCA."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Involvement can take any values, and it should not be blank"

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(_TRIMMED_TEXT.fullmatch(test))


class FormClass(SingleValueField):
    """A student's form class, e.g. ``4A``."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Form class should be alphanumeric, and it should not be blank"
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(cls.VALIDATION_REGEX.fullmatch(test))


class MedicalHistory(SingleValueField):
    """Free-text medical notes for a student. May be empty."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Medical history can take any values, "
        "and it should not start or end with whitespace"
    )

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return test == "" or bool(_TRIMMED_TEXT.fullmatch(test))

    @property
    def is_empty(self) -> bool:
        return not self.value


class Tag(SingleValueField):
    """A tag attached to a person."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(cls.VALIDATION_REGEX.fullmatch(test))


class Description(SingleValueField):
    """What a meeting is about."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Descriptions can take any values, and it should not be blank"

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(_TRIMMED_TEXT.fullmatch(test))


class Location(SingleValueField):
    """Where a meeting takes place."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Locations can take any values, and it should not be blank"

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return bool(_TRIMMED_TEXT.fullmatch(test))


class MeetingDateTime(SingleValueField):
    """The start of a meeting, written as ``YYYY-MM-DD HH:MM``."""

    FORMAT: ClassVar[str] = "%Y-%m-%d %H:%M"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Meeting date-time should be a valid date and time "
        "in the format YYYY-MM-DD HH:MM"
    )
    VALIDATION_REGEX: ClassVar[re.Pattern[str]] = re.compile(
        r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}"
    )

    @classmethod
    def is_valid(cls, test: str) -> bool:
        if not cls.VALIDATION_REGEX.fullmatch(test):
            return False
        try:
            datetime.strptime(test, cls.FORMAT)
        except ValueError:
            return False
        return True
