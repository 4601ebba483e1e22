from __future__ import annotations

import logging
from dataclasses import dataclass

from src.addressbook.common.exceptions import CommandError, DuplicatePersonError
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.domain.person import Teacher
from src.addressbook.interfaces.model_interface import IModel
from src.addressbook.parsing.cli_syntax import (
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_GENDER,
    PREFIX_INVOLVEMENT,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddTeacherCommand(Command):
    """Adds a teacher to the address book."""

    COMMAND_WORD = "teacher"

    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a teacher to the address book.\n"
        f"Parameters: {PREFIX_NAME}NAME {PREFIX_PHONE}PHONE {PREFIX_EMAIL}EMAIL "
        f"{PREFIX_ADDRESS}ADDRESS {PREFIX_GENDER}GENDER {PREFIX_INVOLVEMENT}INVOLVEMENT "
        f"[{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} {PREFIX_NAME}Mary Tan {PREFIX_PHONE}91234567 "
        f"{PREFIX_EMAIL}marytan@example.com {PREFIX_ADDRESS}Blk 30 Lorong 3 Serangoon "
        f"{PREFIX_GENDER}F {PREFIX_INVOLVEMENT}Mathematics {PREFIX_TAG}formTeacher"
    )

    MESSAGE_SUCCESS = "New teacher added: {}"
    MESSAGE_DUPLICATE_TEACHER = "This teacher already exists in the address book"

    teacher: Teacher

    def execute(self, model: IModel) -> CommandResult:
        try:
            model.add_person(self.teacher)
        except DuplicatePersonError as exc:
            raise CommandError(self.MESSAGE_DUPLICATE_TEACHER) from exc

        logger.info("Added teacher %s", self.teacher.name)
        return CommandResult(
            name=self.name, message=self.MESSAGE_SUCCESS.format(self.teacher)
        )
