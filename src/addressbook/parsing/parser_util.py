"""
Field parsers shared by the command parsers.

Each ``parse_*`` function trims its input, validates it and returns the typed
value. Invalid input raises ``ParseError`` with the field's constraint
message, so a caller can surface it to the user unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from src.addressbook.common.exceptions import ParseError
from src.addressbook.common.string_utils import is_non_zero_unsigned_integer
from src.addressbook.constants import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_INDEX,
)
from src.addressbook.domain.base import SingleValueField
from src.addressbook.domain.fields import (
    Address,
    Description,
    Email,
    FormClass,
    Gender,
    Involvement,
    Location,
    MedicalHistory,
    MeetingDateTime,
    Name,
    Phone,
    Tag,
)
from src.addressbook.domain.index import Index
from src.addressbook.parsing.argument_tokenizer import ArgumentMultimap
from src.addressbook.parsing.cli_syntax import Prefix

F = TypeVar("F", bound=SingleValueField)


def invalid_format(usage: str) -> ParseError:
    """Build the error reported when a command does not match its usage."""
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage), {"usage": usage})


def are_prefixes_present(multimap: ArgumentMultimap, *prefixes: Prefix) -> bool:
    return all(multimap.get_value(prefix) is not None for prefix in prefixes)


def parse_index(one_based_index: str) -> Index:
    """Parse a one-based index such as ``"3"``.

    Raises:
        ParseError: If the text is not a non-zero unsigned integer
    """
    trimmed = one_based_index.strip()
    if not is_non_zero_unsigned_integer(trimmed):
        raise ParseError(MESSAGE_INVALID_INDEX, {"index": trimmed})
    return Index.from_one_based(int(trimmed))


def parse_indexes(indexes: str) -> tuple[Index, ...]:
    """Parse whitespace separated one-based indexes, keeping their order."""
    parts = indexes.split()
    if not parts:
        raise ParseError(MESSAGE_INVALID_INDEX, {"index": indexes})
    return tuple(parse_index(part) for part in parts)


def _parse_field(field_type: type[F], raw: str) -> F:
    trimmed = raw.strip()
    if not field_type.is_valid(trimmed):
        raise ParseError(field_type.MESSAGE_CONSTRAINTS, {"value": trimmed})
    return field_type(trimmed)


def parse_name(name: str) -> Name:
    return _parse_field(Name, name)


def parse_phone(phone: str) -> Phone:
    return _parse_field(Phone, phone)


def parse_email(email: str) -> Email:
    return _parse_field(Email, email)


def parse_address(address: str) -> Address:
    return _parse_field(Address, address)


def parse_gender(gender: str) -> Gender:
    """Parse ``M`` or ``F``; lower-case input is accepted."""
    return _parse_field(Gender, gender.upper())


def parse_involvement(involvement: str) -> Involvement:
    return _parse_field(Involvement, involvement)


def parse_form_class(form_class: str) -> FormClass:
    return _parse_field(FormClass, form_class)


def parse_medical_history(medical_history: str) -> MedicalHistory:
    return _parse_field(MedicalHistory, medical_history)


def parse_tag(tag: str) -> Tag:
    return _parse_field(Tag, tag)


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    """Parse every tag, failing on the first invalid one."""
    return frozenset(parse_tag(tag) for tag in tags)


def parse_tags_for_edit(tags: Iterable[str]) -> frozenset[Tag] | None:
    """Parse the tags of an edit command.

    Returns None when no ``t/`` was given and an empty set when the only
    ``t/`` was left empty, which clears the person's tags.
    """
    tag_values = list(tags)
    if not tag_values:
        return None
    if tag_values == [""]:
        return frozenset()
    return parse_tags(tag_values)


def parse_description(description: str) -> Description:
    return _parse_field(Description, description)


def parse_meeting_date_time(date_time: str) -> MeetingDateTime:
    return _parse_field(MeetingDateTime, date_time)


def parse_location(location: str) -> Location:
    return _parse_field(Location, location)
