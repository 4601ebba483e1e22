"""Positional index into a displayed list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Index:
    """A one-based position as typed by the user.

    Commands that act on an entity hold an ``Index`` and resolve it against
    the currently displayed list when they execute. Use ``from_one_based``
    or ``from_zero_based`` to build one.
    """

    one_based: int

    def __post_init__(self) -> None:
        if self.one_based < 1:
            raise ValueError(f"Index must be at least 1, got {self.one_based}")

    @classmethod
    def from_one_based(cls, one_based_index: int) -> Index:
        return cls(one_based_index)

    @classmethod
    def from_zero_based(cls, zero_based_index: int) -> Index:
        return cls(zero_based_index + 1)

    @property
    def zero_based(self) -> int:
        return self.one_based - 1

    def __str__(self) -> str:
        return str(self.one_based)
