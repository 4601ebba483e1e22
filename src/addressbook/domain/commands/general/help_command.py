from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.interfaces.model_interface import IModel


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows program usage instructions.\nExample: {COMMAND_WORD}"
    )
    SHOWING_HELP_MESSAGE = "Opened help window."

    def execute(self, model: IModel) -> CommandResult:
        return CommandResult(
            name=self.name, message=self.SHOWING_HELP_MESSAGE, show_help=True
        )
