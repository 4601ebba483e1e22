"""Parsers for the find and copy commands, which take free words."""

from __future__ import annotations

from src.addressbook.domain.commands.general.copy_command import CopyCommand
from src.addressbook.domain.commands.meeting.meeting_view_commands import (
    FindMeetingCommand,
)
from src.addressbook.domain.commands.student.student_view_commands import FindCommand
from src.addressbook.domain.commands.teacher.teacher_view_commands import (
    FindTeacherCommand,
)
from src.addressbook.domain.descriptors import CopyCommandDescriptor
from src.addressbook.domain.predicates import (
    DescriptionContainsKeywordsPredicate,
    StudentNameContainsKeywordsPredicate,
    TeacherNameContainsKeywordsPredicate,
)
from src.addressbook.interfaces.parser_interface import IParser
from src.addressbook.parsing.parser_util import invalid_format


def _keywords(args: str, usage: str) -> list[str]:
    keywords = args.split()
    if not keywords:
        raise invalid_format(usage)
    return keywords


class FindCommandParser(IParser[FindCommand]):
    def parse(self, args: str) -> FindCommand:
        keywords = _keywords(args, FindCommand.MESSAGE_USAGE)
        return FindCommand(StudentNameContainsKeywordsPredicate(keywords))


class FindTeacherCommandParser(IParser[FindTeacherCommand]):
    def parse(self, args: str) -> FindTeacherCommand:
        keywords = _keywords(args, FindTeacherCommand.MESSAGE_USAGE)
        return FindTeacherCommand(TeacherNameContainsKeywordsPredicate(keywords))


class FindMeetingCommandParser(IParser[FindMeetingCommand]):
    def parse(self, args: str) -> FindMeetingCommand:
        keywords = _keywords(args, FindMeetingCommand.MESSAGE_USAGE)
        return FindMeetingCommand(DescriptionContainsKeywordsPredicate(keywords))


class CopyCommandParser(IParser[CopyCommand]):
    """Parses the name of the person field to copy; matching is case-insensitive."""

    def parse(self, args: str) -> CopyCommand:
        field = args.strip().lower()
        if not field:
            raise invalid_format(CopyCommand.MESSAGE_USAGE)
        return CopyCommand(CopyCommandDescriptor(field))
