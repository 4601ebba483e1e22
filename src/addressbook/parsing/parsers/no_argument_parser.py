from __future__ import annotations

from src.addressbook.domain.commands.base_command import Command
from src.addressbook.interfaces.parser_interface import IParser


class NoArgumentCommandParser(IParser[Command]):
    """Builds a command that takes no arguments. Trailing text is ignored."""

    def __init__(self, command_type: type[Command]) -> None:
        self._command_type = command_type

    def parse(self, args: str) -> Command:
        return self._command_type()
