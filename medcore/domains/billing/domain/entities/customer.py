"""
Customer Entity for Billing Domain
"""

from dataclasses import dataclass
from typing import Any, ClassVar
from uuid import UUID

from medcore.core.domain import AggregateRoot, generate_uuid, utc_now
from medcore.core.shared.validators import EmailValidator, Validator

MAX_NAME_LENGTH = 100


@dataclass(eq=False)
class Customer(AggregateRoot[UUID]):
    """
    A billable customer. Equality is by identifier only.

    Name and email are checked on every assignment, setters or not.

    Example:
        ```python
        customer = Customer.create("Ana Silva", "ana.silva@example.com")
        customer.set_email("ana@example.org")
        ```
    """

    _field_validators: ClassVar[dict[str, Any]] = {
        "name": lambda name: Validator.text(name, "name", MAX_NAME_LENGTH),
        "email": EmailValidator.validate,
    }

    name: str = ""
    email: str = ""

    def __post_init__(self):
        Validator.required(self.id, "id")
        Validator.required(self.created_at, "created_at")
        Validator.required(self.updated_at, "updated_at")

    @classmethod
    def create(cls, name: str, email: str) -> "Customer":
        """Factory method for a new customer."""
        now = utc_now()
        return cls(id=generate_uuid(), name=name, email=email, created_at=now, updated_at=now)

    def set_name(self, name: str) -> None:
        self.name = name
        self.touch()

    def set_email(self, email: str) -> None:
        self.email = email
        self.touch()
