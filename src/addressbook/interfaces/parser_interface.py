"""Interface for command argument parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.addressbook.domain.commands.base_command import Command

CommandT = TypeVar("CommandT", bound=Command, covariant=True)


class IParser(ABC, Generic[CommandT]):
    """Turns the argument part of a command line into a command object."""

    @abstractmethod
    def parse(self, args: str) -> CommandT:
        """Parse ``args`` into a command.

        Args:
            args: Everything after the command word, leading space included

        Returns:
            The command, ready to execute

        Raises:
            ParseError: If ``args`` does not match the command's usage
        """
