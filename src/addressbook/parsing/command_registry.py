"""
Registry of command words.

Maps each command word to the command class it invokes and the parser that
builds that command from its arguments. The registry is populated once by
``build_command_registry`` and is closed afterwards: there is no plugin
discovery.
"""

from __future__ import annotations

import logging

from src.addressbook.domain.commands.base_command import Command
from src.addressbook.domain.commands.general.clear_command import ClearCommand
from src.addressbook.domain.commands.general.copy_command import CopyCommand
from src.addressbook.domain.commands.general.exit_command import ExitCommand
from src.addressbook.domain.commands.general.help_command import HelpCommand
from src.addressbook.domain.commands.general.list_command import ListCommand
from src.addressbook.domain.commands.meeting.add_meeting_command import (
    AddMeetingCommand,
)
from src.addressbook.domain.commands.meeting.delete_meeting_command import (
    DeleteMeetingCommand,
)
from src.addressbook.domain.commands.meeting.edit_meeting_command import (
    EditMeetingCommand,
)
from src.addressbook.domain.commands.meeting.meeting_view_commands import (
    ClearMeetingCommand,
    FindMeetingCommand,
    ListMeetingCommand,
)
from src.addressbook.domain.commands.student.add_student_command import (
    AddStudentCommand,
)
from src.addressbook.domain.commands.student.delete_student_command import (
    DeleteStudentCommand,
)
from src.addressbook.domain.commands.student.edit_student_command import (
    EditStudentCommand,
)
from src.addressbook.domain.commands.student.medical_history_command import (
    MedicalHistoryCommand,
)
from src.addressbook.domain.commands.student.student_view_commands import (
    ClearStudentCommand,
    FindCommand,
    ListStudentCommand,
)
from src.addressbook.domain.commands.teacher.add_teacher_command import (
    AddTeacherCommand,
)
from src.addressbook.domain.commands.teacher.delete_teacher_command import (
    DeleteTeacherCommand,
)
from src.addressbook.domain.commands.teacher.edit_teacher_command import (
    EditTeacherCommand,
)
from src.addressbook.domain.commands.teacher.teacher_view_commands import (
    ClearTeacherCommand,
    FindTeacherCommand,
    ListTeacherCommand,
)
from src.addressbook.interfaces.parser_interface import IParser
from src.addressbook.parsing.parsers.add_meeting_command_parser import (
    AddMeetingCommandParser,
)
from src.addressbook.parsing.parsers.add_person_parsers import (
    AddStudentCommandParser,
    AddTeacherCommandParser,
)
from src.addressbook.parsing.parsers.edit_parsers import (
    EditMeetingCommandParser,
    EditStudentCommandParser,
    EditTeacherCommandParser,
)
from src.addressbook.parsing.parsers.index_parsers import (
    DeleteMeetingCommandParser,
    DeleteStudentCommandParser,
    DeleteTeacherCommandParser,
    MedicalHistoryCommandParser,
)
from src.addressbook.parsing.parsers.keyword_parsers import (
    CopyCommandParser,
    FindCommandParser,
    FindMeetingCommandParser,
    FindTeacherCommandParser,
)
from src.addressbook.parsing.parsers.no_argument_parser import (
    NoArgumentCommandParser,
)

logger = logging.getLogger(__name__)


class CommandRegistry:
    """
    Registry for command words.

    Each entry pairs a command class with the parser for its arguments.
    """

    def __init__(self) -> None:
        self._commands: dict[str, type[Command]] = {}
        self._parsers: dict[str, IParser[Command]] = {}

    def register_command(
        self, command_type: type[Command], parser: IParser[Command] | None = None
    ) -> None:
        """
        Register a command under its ``COMMAND_WORD``.

        Args:
            command_type: The command class
            parser: Parser for the command's arguments; commands without
                arguments get a ``NoArgumentCommandParser``

        Raises:
            ValueError: If the command word is empty or already registered
        """
        word = getattr(command_type, "COMMAND_WORD", "")
        if not isinstance(word, str) or not word:
            raise ValueError("Command word must be a non-empty string.")
        if word in self._commands:
            raise ValueError(f"Command '{word}' is already registered.")

        self._commands[word] = command_type
        self._parsers[word] = parser or NoArgumentCommandParser(command_type)
        logger.debug("Registered command: %s", word)

    def get_parser(self, word: str) -> IParser[Command]:
        """
        Get the parser for a command word.

        Raises:
            KeyError: If the word is not registered
        """
        return self._parsers[word]

    def has_command(self, word: str) -> bool:
        return word in self._commands

    def get_registered_commands(self) -> list[str]:
        """Command words in registration order."""
        return list(self._commands)

    def get_usages(self) -> list[str]:
        """Usage text of every registered command, in registration order."""
        return [command.MESSAGE_USAGE for command in self._commands.values()]


def build_command_registry() -> CommandRegistry:
    """Create the registry holding every command the address book understands."""
    registry = CommandRegistry()

    registry.register_command(AddStudentCommand, AddStudentCommandParser())
    registry.register_command(EditStudentCommand, EditStudentCommandParser())
    registry.register_command(DeleteStudentCommand, DeleteStudentCommandParser())
    registry.register_command(MedicalHistoryCommand, MedicalHistoryCommandParser())
    registry.register_command(FindCommand, FindCommandParser())
    registry.register_command(ListStudentCommand)
    registry.register_command(ClearStudentCommand)

    registry.register_command(AddTeacherCommand, AddTeacherCommandParser())
    registry.register_command(EditTeacherCommand, EditTeacherCommandParser())
    registry.register_command(DeleteTeacherCommand, DeleteTeacherCommandParser())
    registry.register_command(FindTeacherCommand, FindTeacherCommandParser())
    registry.register_command(ListTeacherCommand)
    registry.register_command(ClearTeacherCommand)

    registry.register_command(AddMeetingCommand, AddMeetingCommandParser())
    registry.register_command(EditMeetingCommand, EditMeetingCommandParser())
    registry.register_command(DeleteMeetingCommand, DeleteMeetingCommandParser())
    registry.register_command(FindMeetingCommand, FindMeetingCommandParser())
    registry.register_command(ListMeetingCommand)
    registry.register_command(ClearMeetingCommand)

    registry.register_command(ListCommand)
    registry.register_command(ClearCommand)
    registry.register_command(CopyCommand, CopyCommandParser())
    registry.register_command(HelpCommand)
    registry.register_command(ExitCommand)

    return registry
