"""Prefix markers recognised in command arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    """A literal marker such as ``n/`` that starts a named argument."""

    prefix: str

    def __str__(self) -> str:
        return self.prefix


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_GENDER = Prefix("g/")
PREFIX_INVOLVEMENT = Prefix("i/")
PREFIX_TAG = Prefix("t/")
PREFIX_EMERGENCY_CONTACT = Prefix("ec/")
PREFIX_FORM_CLASS = Prefix("f/")
PREFIX_MEDICAL_HISTORY = Prefix("m/")
PREFIX_DESCRIPTION = Prefix("d/")
PREFIX_DATE_TIME = Prefix("dt/")
PREFIX_LOCATION = Prefix("l/")

PERSON_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_GENDER,
    PREFIX_INVOLVEMENT,
    PREFIX_TAG,
)
STUDENT_PREFIXES = PERSON_PREFIXES + (PREFIX_EMERGENCY_CONTACT, PREFIX_FORM_CLASS)
TEACHER_PREFIXES = PERSON_PREFIXES
MEETING_PREFIXES = (PREFIX_DESCRIPTION, PREFIX_DATE_TIME, PREFIX_LOCATION)
