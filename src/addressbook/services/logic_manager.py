"""
Application logic facade.

Runs one line of user input through the parser and executes the resulting
command against the model.
"""

from __future__ import annotations

from src.addressbook.common.exceptions import AddressBookError
from src.addressbook.common.logging_utils import get_logger
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.meeting import Meeting
from src.addressbook.domain.person import Person, Student, Teacher
from src.addressbook.interfaces.model_interface import IModel
from src.addressbook.parsing.address_book_parser import AddressBookParser

logger = get_logger(__name__)


class LogicManager:
    """Parses and executes commands against a model."""

    def __init__(self, model: IModel, parser: AddressBookParser | None = None) -> None:
        self._model = model
        self._parser = parser or AddressBookParser()

    @property
    def model(self) -> IModel:
        return self._model

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and execute one line of user input.

        Raises:
            ParseError: If the line cannot be parsed
            CommandError: If the command cannot be applied
        """
        logger.info("user_command", command_text=command_text)
        try:
            command = self._parser.parse_command(command_text)
            result = command.execute(self._model)
        except AddressBookError as exc:
            logger.info(
                "command_failed",
                error_type=type(exc).__name__,
                error=exc.message,
            )
            raise

        logger.info("command_succeeded", command=result.name)
        return result

    def get_command_usages(self) -> list[str]:
        return self._parser.registry.get_usages()

    def get_filtered_person_list(self) -> list[Person]:
        return self._model.get_filtered_person_list()

    def get_filtered_student_list(self) -> list[Student]:
        return self._model.get_filtered_student_list()

    def get_filtered_teacher_list(self) -> list[Teacher]:
        return self._model.get_filtered_teacher_list()

    def get_meeting_list(self) -> list[Meeting]:
        return self._model.get_meeting_list()
