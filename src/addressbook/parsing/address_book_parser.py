"""
Command dispatcher.

Splits a line of user input into its command word and arguments and hands
the arguments to the parser registered for that word.
"""

from __future__ import annotations

import logging
import re

from src.addressbook.common.exceptions import ParseError
from src.addressbook.constants import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
)
from src.addressbook.domain.commands.base_command import Command
from src.addressbook.domain.commands.general.help_command import HelpCommand
from src.addressbook.parsing.command_registry import (
    CommandRegistry,
    build_command_registry,
)

logger = logging.getLogger(__name__)

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


class AddressBookParser:
    """Parses user input into commands."""

    def __init__(self, registry: CommandRegistry | None = None) -> None:
        self._registry = registry or build_command_registry()

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def parse_command(self, user_input: str) -> Command:
        """
        Parse a full line of user input.

        Args:
            user_input: The raw line, e.g. ``"delete-s 3"``

        Returns:
            The command for the line

        Raises:
            ParseError: If the line is blank, names an unknown command, or
                its arguments do not fit the command
        """
        matcher = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if matcher is None:
            raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE))

        command_word = matcher.group("command_word")
        arguments = matcher.group("arguments")
        logger.debug("Command word: %s; Arguments: %s", command_word, arguments)

        if not self._registry.has_command(command_word):
            logger.warning("Unknown command word: %s", command_word)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND, {"command_word": command_word})

        return self._registry.get_parser(command_word).parse(arguments)
