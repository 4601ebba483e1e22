"""Constants module for the class address book.

This module contains the message constants used throughout the application
and tests to make the codebase more maintainable and the tests less fragile.
"""

from .messages import *  # noqa: F403
