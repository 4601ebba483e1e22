"""Parsers for the ``edit-s``, ``edit-t`` and ``edit-m`` commands."""

from __future__ import annotations

from src.addressbook.common.exceptions import ParseError
from src.addressbook.constants import MESSAGE_NOT_EDITED
from src.addressbook.domain.commands.meeting.edit_meeting_command import (
    EditMeetingCommand,
)
from src.addressbook.domain.commands.student.edit_student_command import (
    EditStudentCommand,
)
from src.addressbook.domain.commands.teacher.edit_teacher_command import (
    EditTeacherCommand,
)
from src.addressbook.domain.descriptors import (
    EditMeetingDescriptor,
    EditPersonDescriptor,
    EditStudentDescriptor,
    EditTeacherDescriptor,
)
from src.addressbook.domain.index import Index
from src.addressbook.interfaces.parser_interface import IParser
from src.addressbook.parsing.argument_tokenizer import ArgumentMultimap, tokenize
from src.addressbook.parsing.cli_syntax import (
    MEETING_PREFIXES,
    PREFIX_ADDRESS,
    PREFIX_DATE_TIME,
    PREFIX_DESCRIPTION,
    PREFIX_EMAIL,
    PREFIX_EMERGENCY_CONTACT,
    PREFIX_FORM_CLASS,
    PREFIX_GENDER,
    PREFIX_INVOLVEMENT,
    PREFIX_LOCATION,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    STUDENT_PREFIXES,
    TEACHER_PREFIXES,
)
from src.addressbook.parsing.parser_util import (
    invalid_format,
    parse_address,
    parse_description,
    parse_email,
    parse_form_class,
    parse_gender,
    parse_index,
    parse_involvement,
    parse_location,
    parse_meeting_date_time,
    parse_name,
    parse_phone,
    parse_tags_for_edit,
)


def _parse_target_index(multimap: ArgumentMultimap, usage: str) -> Index:
    try:
        return parse_index(multimap.get_preamble())
    except ParseError as exc:
        raise invalid_format(usage) from exc


def _fill_person_fields(
    descriptor: EditPersonDescriptor, multimap: ArgumentMultimap
) -> None:
    if (value := multimap.get_value(PREFIX_NAME)) is not None:
        descriptor.name = parse_name(value)
    if (value := multimap.get_value(PREFIX_PHONE)) is not None:
        descriptor.phone = parse_phone(value)
    if (value := multimap.get_value(PREFIX_EMAIL)) is not None:
        descriptor.email = parse_email(value)
    if (value := multimap.get_value(PREFIX_ADDRESS)) is not None:
        descriptor.address = parse_address(value)
    if (value := multimap.get_value(PREFIX_GENDER)) is not None:
        descriptor.gender = parse_gender(value)
    if (value := multimap.get_value(PREFIX_INVOLVEMENT)) is not None:
        descriptor.involvement = parse_involvement(value)
    descriptor.tags = parse_tags_for_edit(multimap.get_all_values(PREFIX_TAG))


class EditStudentCommandParser(IParser[EditStudentCommand]):
    def parse(self, args: str) -> EditStudentCommand:
        multimap = tokenize(args, *STUDENT_PREFIXES)
        index = _parse_target_index(multimap, EditStudentCommand.MESSAGE_USAGE)

        descriptor = EditStudentDescriptor()
        _fill_person_fields(descriptor, multimap)
        if (value := multimap.get_value(PREFIX_EMERGENCY_CONTACT)) is not None:
            descriptor.emergency_contact = parse_phone(value)
        if (value := multimap.get_value(PREFIX_FORM_CLASS)) is not None:
            descriptor.form_class = parse_form_class(value)

        if not descriptor.is_any_field_edited():
            raise ParseError(MESSAGE_NOT_EDITED)
        return EditStudentCommand(index, descriptor)


class EditTeacherCommandParser(IParser[EditTeacherCommand]):
    def parse(self, args: str) -> EditTeacherCommand:
        multimap = tokenize(args, *TEACHER_PREFIXES)
        index = _parse_target_index(multimap, EditTeacherCommand.MESSAGE_USAGE)

        descriptor = EditTeacherDescriptor()
        _fill_person_fields(descriptor, multimap)

        if not descriptor.is_any_field_edited():
            raise ParseError(MESSAGE_NOT_EDITED)
        return EditTeacherCommand(index, descriptor)


class EditMeetingCommandParser(IParser[EditMeetingCommand]):
    def parse(self, args: str) -> EditMeetingCommand:
        multimap = tokenize(args, *MEETING_PREFIXES)
        index = _parse_target_index(multimap, EditMeetingCommand.MESSAGE_USAGE)

        descriptor = EditMeetingDescriptor()
        if (value := multimap.get_value(PREFIX_DESCRIPTION)) is not None:
            descriptor.description = parse_description(value)
        if (value := multimap.get_value(PREFIX_DATE_TIME)) is not None:
            descriptor.date_time = parse_meeting_date_time(value)
        if (value := multimap.get_value(PREFIX_LOCATION)) is not None:
            descriptor.location = parse_location(value)

        if not descriptor.is_any_field_edited():
            raise ParseError(MESSAGE_NOT_EDITED)
        return EditMeetingCommand(index, descriptor)
