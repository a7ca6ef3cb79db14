"""
Healthcare Domain Enumerations

Closed value sets used by healthcare entities.
"""

from medcore.core.domain import StatusEnum


class Gender(StatusEnum):
    """Patient gender. Input is case-insensitive ("f" -> F)."""

    MALE = "M"
    FEMALE = "F"
    NON_BINARY = "NB"
    OTHER = "OTHER"


class AppointmentStatus(StatusEnum):
    """
    Appointment lifecycle states.

    Valid transitions:
    - SCHEDULED -> CONFIRMED, CANCELLED, NO_SHOW
    - CONFIRMED -> COMPLETED, CANCELLED, NO_SHOW
    - COMPLETED, CANCELLED, NO_SHOW -> (terminal)
    """

    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"

    def allowed_transitions(self) -> frozenset["AppointmentStatus"]:
        return _APPOINTMENT_TRANSITIONS[self]

    def can_transition_to(self, new_status: "AppointmentStatus") -> bool:
        """Check if transition to new status is valid."""
        return new_status in _APPOINTMENT_TRANSITIONS[self]

    def is_terminal(self) -> bool:
        """Check if this is a terminal state."""
        return not _APPOINTMENT_TRANSITIONS[self]

    def is_active(self) -> bool:
        """Check if appointment is still active."""
        return self in (AppointmentStatus.SCHEDULED, AppointmentStatus.CONFIRMED)


_APPOINTMENT_TRANSITIONS: dict[AppointmentStatus, frozenset[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: frozenset(
        {AppointmentStatus.CONFIRMED, AppointmentStatus.CANCELLED, AppointmentStatus.NO_SHOW}
    ),
    AppointmentStatus.CONFIRMED: frozenset(
        {AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED, AppointmentStatus.NO_SHOW}
    ),
    AppointmentStatus.COMPLETED: frozenset(),
    AppointmentStatus.CANCELLED: frozenset(),
    AppointmentStatus.NO_SHOW: frozenset(),
}
