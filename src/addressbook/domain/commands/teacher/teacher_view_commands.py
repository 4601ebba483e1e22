"""List, find and clear commands scoped to teachers."""

from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.constants import MESSAGE_TEACHERS_LISTED_OVERVIEW
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.domain.person import Teacher
from src.addressbook.domain.predicates import (
    PREDICATE_SHOW_ALL_TEACHERS,
    TeacherNameContainsKeywordsPredicate,
)
from src.addressbook.interfaces.model_interface import IModel


@dataclass(frozen=True)
class ListTeacherCommand(Command):
    COMMAND_WORD = "list-t"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all teachers.\nExample: {COMMAND_WORD}"
    MESSAGE_SUCCESS = "Listed all teachers"

    def execute(self, model: IModel) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_TEACHERS)
        return CommandResult(name=self.name, message=self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class FindTeacherCommand(Command):
    COMMAND_WORD = "find-t"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all teachers whose names contain any of "
        "the specified keywords (case-insensitive) and displays them as a list "
        "with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} mary tan"
    )

    predicate: TeacherNameContainsKeywordsPredicate

    def execute(self, model: IModel) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        shown = len(model.get_filtered_teacher_list())
        return CommandResult(
            name=self.name, message=MESSAGE_TEACHERS_LISTED_OVERVIEW.format(shown)
        )


@dataclass(frozen=True)
class ClearTeacherCommand(Command):
    COMMAND_WORD = "clear-t"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Removes every teacher from the address book.\n"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_SUCCESS = "All teachers have been cleared!"

    def execute(self, model: IModel) -> CommandResult:
        model.clear_persons(Teacher)
        return CommandResult(name=self.name, message=self.MESSAGE_SUCCESS)
