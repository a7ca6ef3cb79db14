"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Self

from medcore.core.domain.exceptions import ValidationException


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity

    Subclasses validate (and normalize through ``object.__setattr__``) in
    ``_validate``, so every instance that exists has passed its checks.

    Example:
        ```python
        @dataclass(frozen=True)
        class RoomNumber(ValueObject):
            value: str

            def _validate(self) -> None:
                if not self.value.isdigit():
                    raise ValidationException("Room number must be numeric", field="room")
        ```
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise ValidationException(
            f"Invalid {cls.__name__}: {value}. Expected one of: {', '.join(cls.values())}",
            rule="allowed_values",
        )
