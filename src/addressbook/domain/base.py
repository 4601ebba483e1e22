"""Base classes for the pydantic domain models.

`DomainModel` is the nominal marker for every pydantic model in the address
book; `ValueObject` adds immutability and value equality on top of it.
"""

from __future__ import annotations

from abc import ABC
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain models."""

    def __repr__(self) -> str:
        """Provide a concise, one-line summary of the object."""
        class_name = self.__class__.__name__

        repr_attrs = ("name", "description", "value")
        for attr in repr_attrs:
            if attr in type(self).model_fields:
                attr_value = getattr(self, attr)
                if attr_value is not None:
                    return f'<{class_name} {attr}="{attr_value}">'

        return f"<{class_name}>"


class ValueObject(DomainModel, ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their values,
    not their identities.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True, frozen=True  # Value objects are immutable
    )


class SingleValueField(ValueObject):
    """A validated, immutable wrapper around one string.

    Subclasses declare ``MESSAGE_CONSTRAINTS`` and override ``is_valid``.
    Construction runs the check, so every instance is well-formed.
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""

    value: str

    def __init__(self, value: str, **data: Any) -> None:
        super().__init__(value=value, **data)

    @model_validator(mode="after")
    def _check_value(self) -> SingleValueField:
        if not type(self).is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)
        return self

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return True

    def __str__(self) -> str:
        return self.value
