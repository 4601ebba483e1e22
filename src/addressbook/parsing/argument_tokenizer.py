"""
Argument tokenizer.

Splits the argument part of a command line into a preamble and the values of
each recognised prefix, e.g. ``" 1 n/John p/123"`` with prefixes ``n/`` and
``p/`` becomes preamble ``"1"``, ``n/ -> ["John"]``, ``p/ -> ["123"]``.

A prefix only counts when it is preceded by a whitespace character, so
``"abc/n/def"`` contains no ``n/`` prefix. Values are trimmed. When a prefix
appears more than once every value is kept in input order.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.addressbook.parsing.cli_syntax import Prefix

_PREAMBLE = Prefix("")


class ArgumentMultimap:
    """Maps prefixes to the list of values that followed them."""

    def __init__(self) -> None:
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value given for ``prefix``, or None if it never appeared."""
        values = self._values.get(prefix)
        if not values:
            return None
        return values[-1]

    def get_all_values(self, prefix: Prefix) -> list[str]:
        """Return a copy of every value given for ``prefix``."""
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        return self.get_value(_PREAMBLE) or ""

    def __repr__(self) -> str:
        return f"ArgumentMultimap({self._values!r})"


@dataclass(frozen=True)
class _PrefixPosition:
    start: int
    prefix: Prefix


def _find_prefix_positions(args: str, prefix: Prefix) -> list[_PrefixPosition]:
    positions: list[_PrefixPosition] = []
    marker = f" {prefix}"
    found = args.find(marker)
    while found != -1:
        positions.append(_PrefixPosition(found + 1, prefix))
        found = args.find(marker, found + 1)
    return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize ``args`` into an ``ArgumentMultimap`` keyed by ``prefixes``.

    Args:
        args: The argument string, usually starting with a space
        prefixes: The prefixes to recognise; anything else is plain text

    Returns:
        A fresh multimap holding the preamble and every prefix value
    """
    positions = sorted(
        (pos for prefix in prefixes for pos in _find_prefix_positions(args, prefix)),
        key=lambda pos: pos.start,
    )

    multimap = ArgumentMultimap()
    boundaries = [_PrefixPosition(0, _PREAMBLE), *positions, _PrefixPosition(len(args), _PREAMBLE)]
    for current, following in zip(boundaries, boundaries[1:]):
        value_start = current.start + len(current.prefix.prefix)
        multimap.put(current.prefix, args[value_start : following.start].strip())
    return multimap
