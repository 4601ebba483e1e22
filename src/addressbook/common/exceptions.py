"""
Common exception classes for the class address book.

This module defines custom exception classes used throughout the application
for better error handling and categorization.
"""

from __future__ import annotations


class AddressBookError(Exception):
    """Base exception class for all address book errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }
        return {"error": error_dict}


class ParseError(AddressBookError):
    """Raised when user input does not conform to the expected format."""


class CommandError(AddressBookError):
    """Raised when a well-formed command cannot be applied to the model."""


class DuplicatePersonError(AddressBookError):
    """Raised when adding a person that already exists in the address book."""

    def __init__(
        self,
        message: str = "Operation would result in duplicate persons",
        details: dict | None = None,
    ):
        super().__init__(message, details)


class PersonNotFoundError(AddressBookError):
    """Raised when a person is not present in the address book."""

    def __init__(
        self,
        message: str = "Person not found",
        details: dict | None = None,
    ):
        super().__init__(message, details)


class DuplicateMeetingError(AddressBookError):
    """Raised when adding a meeting that already exists in the address book."""

    def __init__(
        self,
        message: str = "Operation would result in duplicate meetings",
        details: dict | None = None,
    ):
        super().__init__(message, details)


class MeetingNotFoundError(AddressBookError):
    """Raised when a meeting is not present in the address book."""

    def __init__(
        self,
        message: str = "Meeting not found",
        details: dict | None = None,
    ):
        super().__init__(message, details)


class ConfigurationError(AddressBookError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
    ):
        super().__init__(message, details)
