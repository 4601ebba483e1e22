"""Parsers for the ``student`` and ``teacher`` commands."""

from __future__ import annotations

from src.addressbook.domain.commands.student.add_student_command import (
    AddStudentCommand,
)
from src.addressbook.domain.commands.teacher.add_teacher_command import (
    AddTeacherCommand,
)
from src.addressbook.domain.fields import MedicalHistory
from src.addressbook.domain.person import Student, Teacher
from src.addressbook.interfaces.parser_interface import IParser
from src.addressbook.parsing.argument_tokenizer import ArgumentMultimap, tokenize
from src.addressbook.parsing.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_EMERGENCY_CONTACT,
    PREFIX_FORM_CLASS,
    PREFIX_GENDER,
    PREFIX_INVOLVEMENT,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    STUDENT_PREFIXES,
    TEACHER_PREFIXES,
)
from src.addressbook.parsing.parser_util import (
    are_prefixes_present,
    invalid_format,
    parse_address,
    parse_email,
    parse_form_class,
    parse_gender,
    parse_involvement,
    parse_name,
    parse_phone,
    parse_tags,
)

_REQUIRED_PERSON_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_GENDER,
    PREFIX_INVOLVEMENT,
)


def _person_fields(multimap: ArgumentMultimap) -> dict[str, object]:
    # Every required prefix has been checked by the caller.
    return {
        "name": parse_name(multimap.get_value(PREFIX_NAME) or ""),
        "phone": parse_phone(multimap.get_value(PREFIX_PHONE) or ""),
        "email": parse_email(multimap.get_value(PREFIX_EMAIL) or ""),
        "address": parse_address(multimap.get_value(PREFIX_ADDRESS) or ""),
        "gender": parse_gender(multimap.get_value(PREFIX_GENDER) or ""),
        "involvement": parse_involvement(multimap.get_value(PREFIX_INVOLVEMENT) or ""),
        "tags": parse_tags(multimap.get_all_values(PREFIX_TAG)),
    }


class AddStudentCommandParser(IParser[AddStudentCommand]):
    def parse(self, args: str) -> AddStudentCommand:
        multimap = tokenize(args, *STUDENT_PREFIXES)
        required = _REQUIRED_PERSON_PREFIXES + (
            PREFIX_EMERGENCY_CONTACT,
            PREFIX_FORM_CLASS,
        )
        if not are_prefixes_present(multimap, *required) or multimap.get_preamble():
            raise invalid_format(AddStudentCommand.MESSAGE_USAGE)

        student = Student(
            **_person_fields(multimap),
            emergency_contact=parse_phone(
                multimap.get_value(PREFIX_EMERGENCY_CONTACT) or ""
            ),
            form_class=parse_form_class(multimap.get_value(PREFIX_FORM_CLASS) or ""),
            medical_history=MedicalHistory(""),
        )
        return AddStudentCommand(student)


class AddTeacherCommandParser(IParser[AddTeacherCommand]):
    def parse(self, args: str) -> AddTeacherCommand:
        multimap = tokenize(args, *TEACHER_PREFIXES)
        if (
            not are_prefixes_present(multimap, *_REQUIRED_PERSON_PREFIXES)
            or multimap.get_preamble()
        ):
            raise invalid_format(AddTeacherCommand.MESSAGE_USAGE)

        return AddTeacherCommand(Teacher(**_person_fields(multimap)))
