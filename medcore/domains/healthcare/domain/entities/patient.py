"""
Patient Entity for Healthcare Domain

Represents a patient registered with an organization.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, ClassVar
from uuid import UUID

from medcore.core.domain import AggregateRoot, ValidationException, generate_uuid, utc_now
from medcore.core.shared.validators import PhoneValidator, Validator

from ..value_objects.identifiers import PersonId
from ..value_objects.statuses import Gender

MAX_NAME_LENGTH = 100
MAX_ADDRESS_LENGTH = 200


def coerce_person_id(value: Any) -> PersonId:
    """Accept a PersonId or a raw string; anything else is rejected."""
    if isinstance(value, PersonId):
        return value
    if value is None:
        raise ValidationException("Person ID cannot be null", field="person_id", rule="required")
    return PersonId.of(value)


def _validate_name(name: Any) -> str:
    return Validator.text(name, "name", MAX_NAME_LENGTH)


def _validate_address(address: Any) -> str:
    return Validator.text(address, "address", MAX_ADDRESS_LENGTH)


def _validate_date_of_birth(date_of_birth: Any) -> date:
    return Validator.past_or_today(date_of_birth, "date_of_birth")


def _validate_gender(gender: Any) -> Gender:
    Validator.required(gender, "gender")
    return Gender.from_string(gender)


@dataclass(eq=False)
class Patient(AggregateRoot[UUID]):
    """
    Patient aggregate root for healthcare domain.

    The person identifier is fixed for the lifetime of the entity. Every
    other field is validated with its construction rule on each assignment,
    so ``patient.name = ""`` fails the same way ``set_name("")`` does.

    Example:
        ```python
        patient = Patient.create(
            organization_id=org.id,
            name="Ana Silva",
            person_id="219-09-9999",
            date_of_birth=date(1985, 3, 15),
            gender="f",
            address="12 Main St",
            contact="+1 555-123-4567",
        )
        patient.set_address("34 Oak Ave")
        ```
    """

    _immutable_fields: ClassVar[frozenset[str]] = frozenset({"id", "created_at", "person_id"})
    _field_validators: ClassVar[dict[str, Any]] = {
        "name": _validate_name,
        "person_id": coerce_person_id,
        "date_of_birth": _validate_date_of_birth,
        "gender": _validate_gender,
        "address": _validate_address,
        "contact": PhoneValidator.validate,
    }

    organization_id: UUID | None = None
    name: str = ""
    person_id: PersonId | None = None
    date_of_birth: date | None = None
    gender: Gender | None = None
    address: str = ""
    contact: str = ""

    def __post_init__(self):
        """Check the fields that have no per-assignment validator."""
        Validator.required(self.id, "id")
        Validator.required(self.organization_id, "organization_id")
        Validator.required(self.created_at, "created_at")
        Validator.required(self.updated_at, "updated_at")

    @classmethod
    def create(
        cls,
        organization_id: UUID,
        name: str,
        person_id: PersonId | str,
        date_of_birth: date,
        gender: Gender | str,
        address: str,
        contact: str,
    ) -> "Patient":
        """Factory method for a new patient."""
        now = utc_now()
        return cls(
            id=generate_uuid(),
            organization_id=organization_id,
            name=name,
            person_id=coerce_person_id(person_id),
            date_of_birth=date_of_birth,
            gender=gender,
            address=address,
            contact=contact,
            created_at=now,
            updated_at=now,
        )

    @property
    def age(self) -> int:
        """Calculate age from date of birth."""
        today = date.today()
        age = today.year - self.date_of_birth.year
        if (today.month, today.day) < (self.date_of_birth.month, self.date_of_birth.day):
            age -= 1
        return age

    # Mutators (assignment validates; a rejected value leaves updated_at alone)

    def set_name(self, name: str) -> None:
        self.name = name
        self.touch()

    def set_date_of_birth(self, date_of_birth: date) -> None:
        self.date_of_birth = date_of_birth
        self.touch()

    def set_gender(self, gender: Gender | str) -> None:
        self.gender = gender
        self.touch()

    def set_address(self, address: str) -> None:
        self.address = address
        self.touch()

    def set_contact(self, contact: str) -> None:
        self.contact = contact
        self.touch()

    # Identity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Patient):
            return False
        return self.id == other.id and self.person_id == other.person_id

    def __hash__(self) -> int:
        return hash((self.id, self.person_id))

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to summary dictionary."""
        return {
            "id": str(self.id),
            "organization_id": str(self.organization_id),
            "name": self.name,
            "person_id": self.person_id.masked(),
            "age": self.age,
            "gender": self.gender.value,
        }
