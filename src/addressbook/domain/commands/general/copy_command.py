"""
Copy command.

Collects one field of every displayed person into a single space-separated
string, e.g. all phone numbers for a bulk SMS. The text is handed back in
``CommandResult.data["copied"]`` for the front end to place on a clipboard.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.domain.descriptors import CopyCommandDescriptor
from src.addressbook.domain.person import Person
from src.addressbook.interfaces.model_interface import IModel

_FIELD_GETTERS: dict[str, Callable[[Person], str]] = {
    "name": lambda person: person.name.value,
    "phone": lambda person: person.phone.value,
    "email": lambda person: person.email.value,
    "address": lambda person: person.address.value,
    "gender": lambda person: person.gender.value,
    "involvement": lambda person: person.involvement.value,
}

SUPPORTED_FIELDS: tuple[str, ...] = tuple(_FIELD_GETTERS)


@dataclass(frozen=True)
class CopyCommand(Command):
    COMMAND_WORD = "copy"
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Copies the given field of every displayed person, "
        "separated by spaces.\n"
        f"Parameters: FIELD (one of {', '.join(SUPPORTED_FIELDS)})\n"
        f"Example: {COMMAND_WORD} phone"
    )
    MESSAGE_SUCCESS = "Copied {} of {} persons: {}"

    descriptor: CopyCommandDescriptor

    def get_copy_content(self, persons: Sequence[Person]) -> str:
        """Join the requested field of ``persons`` with single spaces.

        An unsupported field name yields an empty string.
        """
        getter = _FIELD_GETTERS.get(self.descriptor.field)
        if getter is None:
            return ""
        return " ".join(getter(person) for person in persons)

    def execute(self, model: IModel) -> CommandResult:
        persons = model.get_filtered_person_list()
        content = self.get_copy_content(persons)
        return CommandResult(
            name=self.name,
            message=self.MESSAGE_SUCCESS.format(
                self.descriptor.field, len(persons), content
            ),
            data={"copied": content},
        )
