"""Helpers for matching words and numbers in user input."""

from __future__ import annotations

import re

_UNSIGNED_INTEGER = re.compile(r"[0-9]+")

# Largest value a one-based index may take.
MAX_INDEX_VALUE = 2_147_483_647


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """Return True if ``sentence`` contains ``word`` as a whole word.

    The match ignores case; ``word`` must be a single non-empty word.

    Examples:
        >>> contains_word_ignore_case("ABc def", "abc")
        True
        >>> contains_word_ignore_case("ABc def", "AB")
        False

    Raises:
        ValueError: If ``word`` is empty or contains whitespace
    """
    prepared_word = word.strip()
    if not prepared_word:
        raise ValueError("Word parameter cannot be empty")
    if len(prepared_word.split()) != 1:
        raise ValueError("Word parameter should be a single word")

    target = prepared_word.casefold()
    return any(candidate.casefold() == target for candidate in sentence.split())


def is_non_zero_unsigned_integer(value: str) -> bool:
    """Return True if ``value`` is a plain decimal number between 1 and 2147483647.

    Signs, inner whitespace and non-ASCII digits are rejected.
    """
    if not _UNSIGNED_INTEGER.fullmatch(value):
        return False
    number = int(value)
    return 0 < number <= MAX_INDEX_VALUE
