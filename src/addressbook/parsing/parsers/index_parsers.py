"""Parsers for commands whose only argument is a displayed-list index."""

from __future__ import annotations

from src.addressbook.common.exceptions import ParseError
from src.addressbook.domain.commands.meeting.delete_meeting_command import (
    DeleteMeetingCommand,
)
from src.addressbook.domain.commands.student.delete_student_command import (
    DeleteStudentCommand,
)
from src.addressbook.domain.commands.student.medical_history_command import (
    MedicalHistoryCommand,
)
from src.addressbook.domain.commands.teacher.delete_teacher_command import (
    DeleteTeacherCommand,
)
from src.addressbook.domain.index import Index
from src.addressbook.interfaces.parser_interface import IParser
from src.addressbook.parsing.argument_tokenizer import tokenize
from src.addressbook.parsing.cli_syntax import PREFIX_MEDICAL_HISTORY
from src.addressbook.parsing.parser_util import (
    invalid_format,
    parse_index,
    parse_medical_history,
)


def _parse_index_or_usage(args: str, usage: str) -> Index:
    try:
        return parse_index(args)
    except ParseError as exc:
        raise invalid_format(usage) from exc


class DeleteStudentCommandParser(IParser[DeleteStudentCommand]):
    def parse(self, args: str) -> DeleteStudentCommand:
        return DeleteStudentCommand(
            _parse_index_or_usage(args, DeleteStudentCommand.MESSAGE_USAGE)
        )


class DeleteTeacherCommandParser(IParser[DeleteTeacherCommand]):
    def parse(self, args: str) -> DeleteTeacherCommand:
        return DeleteTeacherCommand(
            _parse_index_or_usage(args, DeleteTeacherCommand.MESSAGE_USAGE)
        )


class DeleteMeetingCommandParser(IParser[DeleteMeetingCommand]):
    def parse(self, args: str) -> DeleteMeetingCommand:
        return DeleteMeetingCommand(
            _parse_index_or_usage(args, DeleteMeetingCommand.MESSAGE_USAGE)
        )


class MedicalHistoryCommandParser(IParser[MedicalHistoryCommand]):
    """Parses ``INDEX m/[MEDICAL_HISTORY]``; an empty ``m/`` clears the history."""

    def parse(self, args: str) -> MedicalHistoryCommand:
        multimap = tokenize(args, PREFIX_MEDICAL_HISTORY)
        index = _parse_index_or_usage(
            multimap.get_preamble(), MedicalHistoryCommand.MESSAGE_USAGE
        )
        value = multimap.get_value(PREFIX_MEDICAL_HISTORY)
        if value is None:
            raise invalid_format(MedicalHistoryCommand.MESSAGE_USAGE)
        return MedicalHistoryCommand(index, parse_medical_history(value))
