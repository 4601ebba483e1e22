"""List, find and clear commands scoped to meetings."""

from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.constants import MESSAGE_MEETINGS_LISTED_OVERVIEW
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.domain.predicates import (
    PREDICATE_SHOW_ALL_MEETINGS,
    DescriptionContainsKeywordsPredicate,
)
from src.addressbook.interfaces.model_interface import IModel


@dataclass(frozen=True)
class ListMeetingCommand(Command):
    COMMAND_WORD = "list-m"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all meetings.\nExample: {COMMAND_WORD}"
    MESSAGE_SUCCESS = "Listed all meetings"

    def execute(self, model: IModel) -> CommandResult:
        model.update_filtered_meeting_list(PREDICATE_SHOW_ALL_MEETINGS)
        return CommandResult(name=self.name, message=self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class FindMeetingCommand(Command):
    COMMAND_WORD = "find-m"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all meetings whose descriptions contain any of "
        "the specified keywords (case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} parent"
    )

    predicate: DescriptionContainsKeywordsPredicate

    def execute(self, model: IModel) -> CommandResult:
        model.update_filtered_meeting_list(self.predicate)
        shown = len(model.get_meeting_list())
        return CommandResult(
            name=self.name, message=MESSAGE_MEETINGS_LISTED_OVERVIEW.format(shown)
        )


@dataclass(frozen=True)
class ClearMeetingCommand(Command):
    COMMAND_WORD = "clear-m"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Removes every meeting from the address book.\n"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_SUCCESS = "All meetings have been cleared!"

    def execute(self, model: IModel) -> CommandResult:
        model.clear_meetings()
        return CommandResult(name=self.name, message=self.MESSAGE_SUCCESS)
