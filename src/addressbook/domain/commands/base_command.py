"""
Base command implementation.

This module provides the base class for all commands. A command is an
immutable description of a validated request; ``execute`` applies it to the
model.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar, TypeVar

from src.addressbook.common.exceptions import CommandError
from src.addressbook.domain.command_results import CommandResult
from src.addressbook.domain.index import Index

if TYPE_CHECKING:
    from src.addressbook.interfaces.model_interface import IModel

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Command(ABC):
    """
    Base class for all commands.

    Subclasses are frozen dataclasses so that two commands built from the
    same input compare equal. Each declares the word that invokes it and a
    usage text quoted in format errors.
    """

    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]

    @property
    def name(self) -> str:
        """Command name."""
        return self.COMMAND_WORD

    @abstractmethod
    def execute(self, model: IModel) -> CommandResult:
        """
        Execute the command.

        Args:
            model: The model to read and mutate

        Returns:
            The command result

        Raises:
            CommandError: If the command cannot be applied; the model is
                left unchanged
        """


def resolve_index(displayed: Sequence[T], index: Index, message: str) -> T:
    """Return the element of ``displayed`` at ``index``.

    Raises:
        CommandError: With ``message`` if the index is past the end of the list
    """
    if index.zero_based >= len(displayed):
        raise CommandError(message)
    return displayed[index.zero_based]
