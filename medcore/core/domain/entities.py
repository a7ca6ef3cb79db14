"""
Base Entity Classes for Domain-Driven Design

Entities are domain objects with identity and lifecycle.
They maintain their identity regardless of their attributes.

Entities are not thread-safe. The service layer owning an aggregate must
serialize mutations per identifier (one writer at a time); nothing in this
module locks.
"""

from abc import ABC
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID, uuid4

from medcore.core.domain.exceptions import InvalidOperationException

# Type variable for entity ID (int, str, UUID, etc.)
TId = TypeVar("TId")


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


@dataclass(eq=False)
class Entity(ABC, Generic[TId]):
    """
    Base class for all domain entities.

    An entity is a domain object that has a distinct identity
    that runs through time and different states.

    Fields listed in ``_immutable_fields`` can be assigned once (by the
    constructor) and never again. Every assignment to a field listed in
    ``_field_validators``, constructor included, goes through its validator
    first, and the validator's return value is what gets stored.

    Type Parameters:
        TId: Type of entity identifier (int, str, UUID)

    Example:
        ```python
        @dataclass(eq=False)
        class Clinic(Entity[UUID]):
            _field_validators = {"name": lambda v: Validator.text(v, "name", 100)}

            name: str = ""

            def set_name(self, name: str) -> None:
                self.name = name
                self.touch()
        ```
    """

    _immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "created_at"})
    _field_validators: ClassVar[Mapping[str, Callable[[Any], Any]]] = {}

    id: TId | None = field(default=None)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._immutable_fields and name in self.__dict__:
            raise InvalidOperationException(
                operation=f"set {name}",
                current_state="immutable",
                message=f"{type(self).__name__}.{name} cannot be reassigned",
            )
        validator = self._field_validators.get(name)
        if validator is not None:
            value = validator(value)
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, type(self)):
            return False
        if self.id is None or other.id is None:
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id) if self.id is not None else id(self)

    def is_new(self) -> bool:
        """Check if entity is new (not yet persisted)."""
        return self.id is None

    def touch(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()


@dataclass(eq=False)
class AggregateRoot(Entity[TId], Generic[TId]):
    """
    Base class for aggregate roots.

    An aggregate root is the entry point to an aggregate.
    It controls access to all members of the aggregate
    and ensures invariants are maintained.

    Example:
        ```python
        @dataclass(eq=False)
        class Ward(AggregateRoot[UUID]):
            beds: list[Bed] = field(default_factory=list)

            def add_bed(self, bed: Bed) -> None:
                self.beds.append(bed)
                self._record_event(BedAdded(ward_id=self.id, bed_id=bed.id))
        ```
    """

    _domain_events: list[Any] = field(default_factory=list, init=False, repr=False, compare=False)

    def _record_event(self, event: Any) -> None:
        """Record a domain event to be published later."""
        self._domain_events.append(event)

    def get_domain_events(self) -> list[Any]:
        """Get all recorded domain events."""
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear all recorded domain events (after publishing)."""
        self._domain_events.clear()


def generate_uuid() -> UUID:
    """Generate a new UUID for entity identification."""
    return uuid4()
