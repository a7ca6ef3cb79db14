"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Events: Domain events recorded by aggregates
- Exceptions: Domain-specific error handling
"""

from medcore.core.domain.entities import (
    AggregateRoot,
    Entity,
    generate_uuid,
    utc_now,
)
from medcore.core.domain.events import DomainEvent
from medcore.core.domain.exceptions import (
    DomainException,
    InvalidOperationException,
    ValidationException,
)
from medcore.core.domain.value_objects import StatusEnum, ValueObject

__all__ = [
    # Entities
    "Entity",
    "AggregateRoot",
    "generate_uuid",
    "utc_now",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    # Events
    "DomainEvent",
    # Exceptions
    "DomainException",
    "ValidationException",
    "InvalidOperationException",
]
