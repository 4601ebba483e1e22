"""List, find and clear commands scoped to students."""

from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.constants import MESSAGE_STUDENTS_LISTED_OVERVIEW
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.domain.person import Student
from src.addressbook.domain.predicates import (
    PREDICATE_SHOW_ALL_STUDENTS,
    StudentNameContainsKeywordsPredicate,
)
from src.addressbook.interfaces.model_interface import IModel


@dataclass(frozen=True)
class ListStudentCommand(Command):
    COMMAND_WORD = "list-s"
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all students.\nExample: {COMMAND_WORD}"
    MESSAGE_SUCCESS = "Listed all students"

    def execute(self, model: IModel) -> CommandResult:
        model.update_filtered_person_list(PREDICATE_SHOW_ALL_STUDENTS)
        return CommandResult(name=self.name, message=self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class FindCommand(Command):
    """Finds students whose name contains any of the keywords."""

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all students whose names contain any of "
        "the specified keywords (case-insensitive) and displays them as a list "
        "with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )

    predicate: StudentNameContainsKeywordsPredicate

    def execute(self, model: IModel) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        shown = len(model.get_filtered_student_list())
        return CommandResult(
            name=self.name, message=MESSAGE_STUDENTS_LISTED_OVERVIEW.format(shown)
        )


@dataclass(frozen=True)
class ClearStudentCommand(Command):
    COMMAND_WORD = "clear-s"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Removes every student from the address book.\n"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_SUCCESS = "All students have been cleared!"

    def execute(self, model: IModel) -> CommandResult:
        model.clear_persons(Student)
        return CommandResult(name=self.name, message=self.MESSAGE_SUCCESS)
