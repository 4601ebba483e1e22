"""
Command Results Domain Model

This module defines the value returned by every successfully executed command.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CommandResult:
    """
    Result of a command execution.

    ``message`` is the feedback shown to the user. ``show_help`` and ``exit``
    ask the front end to display the command reference or to stop.
    """

    message: str
    name: str = ""
    show_help: bool = False
    exit: bool = False
    data: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        """Initialize default values."""
        if self.data is None:
            self.data = {}
