"""
Organization Entity for Healthcare Domain

A clinic or practice that owns patients and medical records.
"""

from dataclasses import dataclass
from typing import Any, ClassVar
from uuid import UUID

from medcore.core.domain import AggregateRoot, ValidationException, generate_uuid, utc_now
from medcore.core.shared.validators import Validator

from ..value_objects.identifiers import OrgTaxId

MAX_NAME_LENGTH = 100
MAX_ADDRESS_LENGTH = 200


def coerce_tax_id(value: Any) -> OrgTaxId:
    """Accept an OrgTaxId or a raw string; anything else is rejected."""
    if isinstance(value, OrgTaxId):
        return value
    if value is None:
        raise ValidationException("Tax ID cannot be null", field="tax_id", rule="required")
    return OrgTaxId.of(value)


@dataclass(eq=False)
class Organization(AggregateRoot[UUID]):
    """
    Organization aggregate root.

    The tax identifier is fixed for the lifetime of the entity.
    """

    _immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "created_at", "tax_id"})
    _field_validators: ClassVar[dict[str, Any]] = {
        "name": lambda name: Validator.text(name, "name", MAX_NAME_LENGTH),
        "address": lambda address: Validator.text(address, "address", MAX_ADDRESS_LENGTH),
        "tax_id": coerce_tax_id,
    }

    name: str = ""
    address: str = ""
    tax_id: OrgTaxId | None = None

    def __post_init__(self):
        Validator.required(self.id, "id")
        Validator.required(self.created_at, "created_at")
        Validator.required(self.updated_at, "updated_at")

    @classmethod
    def create(cls, name: str, address: str, tax_id: OrgTaxId | str) -> "Organization":
        """Factory method for a new organization."""
        now = utc_now()
        return cls(
            id=generate_uuid(),
            name=name,
            address=address,
            tax_id=coerce_tax_id(tax_id),
            created_at=now,
            updated_at=now,
        )

    def set_name(self, name: str) -> None:
        self.name = name
        self.touch()

    def set_address(self, address: str) -> None:
        self.address = address
        self.touch()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Organization):
            return False
        return self.id == other.id and self.tax_id == other.tax_id

    def __hash__(self) -> int:
        return hash((self.id, self.tax_id))
