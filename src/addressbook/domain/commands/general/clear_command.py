from __future__ import annotations

import logging
from dataclasses import dataclass

from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.interfaces.model_interface import IModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClearCommand(Command):
    """Empties the whole address book, meetings included."""

    COMMAND_WORD = "clear"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Removes every person and meeting from the address book.\n"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_SUCCESS = "Address book has been cleared!"

    def execute(self, model: IModel) -> CommandResult:
        model.reset_address_book()
        logger.info("Address book cleared")
        return CommandResult(name=self.name, message=self.MESSAGE_SUCCESS)
