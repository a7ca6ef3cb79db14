"""
Doctor Entity for Healthcare Domain

Represents a medical professional. Profile fields are free-form.
"""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from medcore.core.domain import AggregateRoot, generate_uuid, utc_now


@dataclass(eq=False)
class Doctor(AggregateRoot[UUID]):
    """
    Doctor aggregate root for healthcare domain.

    Example:
        ```python
        doctor = Doctor.create(
            name="Carlos Rodríguez",
            specialty="cardiology",
            registration_code="CRM-12345",
        )
        doctor.deactivate()
        ```
    """

    name: str | None = None
    specialty: str | None = None
    registration_code: str | None = None  # Professional registration (CRM)
    email: str | None = None
    phone: str | None = None
    active: bool = True

    @classmethod
    def create(
        cls,
        name: str | None = None,
        specialty: str | None = None,
        registration_code: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> "Doctor":
        """Factory method to create an active doctor."""
        now = utc_now()
        return cls(
            id=generate_uuid(),
            name=name,
            specialty=specialty,
            registration_code=registration_code,
            email=email,
            phone=phone,
            created_at=now,
            updated_at=now,
        )

    def activate(self) -> None:
        """Activate doctor profile."""
        self.active = True
        self.touch()

    def deactivate(self) -> None:
        """Deactivate doctor profile."""
        self.active = False
        self.touch()

    def to_summary_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id) if self.id else None,
            "name": self.name,
            "specialty": self.specialty,
            "registration_code": self.registration_code,
            "active": self.active,
        }
