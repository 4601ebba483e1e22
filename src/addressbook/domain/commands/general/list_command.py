from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.domain.predicates import PREDICATE_SHOW_ALL_PERSONS
from src.addressbook.interfaces.model_interface import IModel


@dataclass(frozen=True)
class ListCommand(Command):
    """Shows every student and teacher."""

    COMMAND_WORD = "list"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all persons.\nExample: {COMMAND_WORD}"
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, model: IModel) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_PERSONS)
        return CommandResult(name=self.name, message=self.MESSAGE_SUCCESS)
