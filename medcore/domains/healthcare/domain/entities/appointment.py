"""
Appointment Entity for Healthcare Domain

Represents a scheduled visit of a patient to a doctor. Patient and doctor
are referenced by identifier only; this module never looks them up.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from medcore.core.domain import AggregateRoot, InvalidOperationException, generate_uuid, utc_now

from ..value_objects.statuses import AppointmentStatus


@dataclass(eq=False)
class Appointment(AggregateRoot[UUID]):
    """
    Appointment aggregate root for healthcare domain.

    ``status`` follows the appointment lifecycle; assigning a status the
    current one cannot move to raises ``InvalidOperationException``.

    Example:
        ```python
        appointment = Appointment.create(
            patient_id=patient.id,
            doctor_id=doctor.id,
            scheduled_at=datetime(2024, 1, 15, 10, 0),
            reason="Annual checkup",
        )
        appointment.confirm()
        appointment.complete()
        ```
    """

    patient_id: UUID | None = None
    doctor_id: UUID | None = None
    scheduled_at: datetime | None = None
    reason: str | None = None
    status: AppointmentStatus = AppointmentStatus.SCHEDULED

    def __post_init__(self):
        object.__setattr__(self, "status", AppointmentStatus.from_string(self.status))

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "status" and "status" in self.__dict__:
            value = AppointmentStatus.from_string(value)
            if not self.status.can_transition_to(value):
                raise InvalidOperationException(
                    operation=f"transition to {value.value}",
                    current_state=self.status.value,
                )
        super().__setattr__(name, value)

    @classmethod
    def create(
        cls,
        patient_id: UUID,
        doctor_id: UUID,
        scheduled_at: datetime,
        reason: str | None = None,
    ) -> "Appointment":
        """Factory method for a newly scheduled appointment."""
        now = utc_now()
        return cls(
            id=generate_uuid(),
            patient_id=patient_id,
            doctor_id=doctor_id,
            scheduled_at=scheduled_at,
            reason=reason,
            status=AppointmentStatus.SCHEDULED,
            created_at=now,
            updated_at=now,
        )

    # Status Transitions

    def transition_to(self, new_status: AppointmentStatus | str) -> None:
        """Move to ``new_status`` if the lifecycle allows it."""
        self.status = new_status
        self.touch()

    def confirm(self) -> None:
        self.transition_to(AppointmentStatus.CONFIRMED)

    def complete(self) -> None:
        self.transition_to(AppointmentStatus.COMPLETED)

    def cancel(self) -> None:
        self.transition_to(AppointmentStatus.CANCELLED)

    def mark_no_show(self) -> None:
        self.transition_to(AppointmentStatus.NO_SHOW)

    def reschedule(self, scheduled_at: datetime) -> None:
        """Move an active appointment to a new date and time."""
        if not self.status.is_active():
            raise InvalidOperationException(operation="reschedule", current_state=self.status.value)
        self.scheduled_at = scheduled_at
        self.touch()

    def update_reason(self, reason: str | None) -> None:
        self.reason = reason
        self.touch()
