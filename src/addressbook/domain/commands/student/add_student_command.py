from __future__ import annotations

import logging
from dataclasses import dataclass

from src.addressbook.common.exceptions import CommandError, DuplicatePersonError
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.domain.person import Student
from src.addressbook.interfaces.model_interface import IModel
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
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddStudentCommand(Command):
    """Adds a student to the address book."""

    COMMAND_WORD = "student"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a student to the address book.\n"
        f"Parameters: {PREFIX_NAME}NAME {PREFIX_PHONE}PHONE {PREFIX_EMAIL}EMAIL "
        f"{PREFIX_ADDRESS}ADDRESS {PREFIX_GENDER}GENDER {PREFIX_INVOLVEMENT}INVOLVEMENT "
        f"{PREFIX_EMERGENCY_CONTACT}EMERGENCY_CONTACT {PREFIX_FORM_CLASS}FORM_CLASS "
        f"[{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} {PREFIX_NAME}John Doe {PREFIX_PHONE}98765432 "
        f"{PREFIX_EMAIL}johnd@example.com {PREFIX_ADDRESS}311, Clementi Ave 2, #02-25 "
        f"{PREFIX_GENDER}M {PREFIX_INVOLVEMENT}Chess club "
        f"{PREFIX_EMERGENCY_CONTACT}91234567 {PREFIX_FORM_CLASS}4A {PREFIX_TAG}prefect"
    )

    MESSAGE_SUCCESS = "New student added: {}"
    MESSAGE_DUPLICATE_STUDENT = "This student already exists in the address book"

    student: Student

    def execute(self, model: IModel) -> CommandResult:
        try:
            model.add_person(self.student)
        except DuplicatePersonError as exc:
            raise CommandError(self.MESSAGE_DUPLICATE_STUDENT) from exc

        logger.info("Added student %s", self.student.name)
        return CommandResult(
            name=self.name, message=self.MESSAGE_SUCCESS.format(self.student)
        )
