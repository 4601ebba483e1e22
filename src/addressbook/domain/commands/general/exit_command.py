from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.interfaces.model_interface import IModel


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Exits the program.\nExample: {COMMAND_WORD}"
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Address Book as requested ..."

    def execute(self, model: IModel) -> CommandResult:
        return CommandResult(
            name=self.name, message=self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True
        )
