"""
Unit tests for the Doctor and Appointment entities.
"""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from medcore.core.domain import InvalidOperationException, ValidationException
from medcore.domains.healthcare.domain import Appointment, AppointmentStatus, Doctor
from tests.utils.factories import create_doctor


@pytest.fixture
def appointment(patient, doctor):
    """A freshly scheduled appointment."""
    return Appointment.create(
        patient_id=patient.id,
        doctor_id=doctor.id,
        scheduled_at=datetime(2030, 1, 15, 10, 0, tzinfo=UTC),
        reason="Annual checkup",
    )


# ============================================================================
# Doctor
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
def test_create_doctor_is_active(doctor):
    assert doctor.active is True
    assert doctor.specialty == "cardiology"
    assert doctor.id is not None


@pytest.mark.unit
@pytest.mark.domain
def test_doctor_fields_are_optional():
    doctor = Doctor.create()

    assert doctor.name is None
    assert doctor.registration_code is None
    assert doctor.to_summary_dict()["name"] is None


@pytest.mark.unit
@pytest.mark.domain
def test_deactivate_and_activate(doctor):
    before = doctor.updated_at

    doctor.deactivate()
    assert doctor.active is False
    assert doctor.updated_at >= before

    doctor.activate()
    assert doctor.active is True


@pytest.mark.unit
@pytest.mark.domain
def test_doctor_equality_by_id():
    doctor = create_doctor()
    copy = Doctor(id=doctor.id, name="Other Name")

    assert doctor == copy
    assert doctor != create_doctor()


# ============================================================================
# Appointment lifecycle
# ============================================================================


@pytest.mark.unit
@pytest.mark.domain
def test_new_appointment_is_scheduled(appointment):
    assert appointment.status is AppointmentStatus.SCHEDULED
    assert appointment.status.is_active()


@pytest.mark.unit
@pytest.mark.domain
def test_happy_path_confirm_then_complete(appointment):
    # Act
    appointment.confirm()
    appointment.complete()

    # Assert
    assert appointment.status is AppointmentStatus.COMPLETED
    assert appointment.status.is_terminal()


@pytest.mark.unit
@pytest.mark.domain
@pytest.mark.parametrize("action", ["cancel", "mark_no_show"])
def test_scheduled_can_be_cancelled_or_missed(appointment, action):
    getattr(appointment, action)()

    assert appointment.status.is_terminal()


@pytest.mark.unit
@pytest.mark.domain
def test_cannot_complete_unconfirmed_appointment(appointment):
    with pytest.raises(InvalidOperationException) as exc_info:
        appointment.complete()

    assert exc_info.value.current_state == "scheduled"
    assert appointment.status is AppointmentStatus.SCHEDULED


@pytest.mark.unit
@pytest.mark.domain
@pytest.mark.parametrize("terminal", ["completed", "cancelled", "no_show"])
def test_terminal_states_reject_every_transition(terminal):
    appointment = Appointment(
        id=uuid4(),
        patient_id=uuid4(),
        doctor_id=uuid4(),
        scheduled_at=datetime(2030, 1, 15, 10, 0, tzinfo=UTC),
        status=terminal,
    )

    for target in AppointmentStatus:
        with pytest.raises(InvalidOperationException):
            appointment.transition_to(target)


@pytest.mark.unit
@pytest.mark.domain
def test_transition_to_accepts_strings(appointment):
    appointment.transition_to("CONFIRMED")

    assert appointment.status is AppointmentStatus.CONFIRMED


@pytest.mark.unit
@pytest.mark.domain
def test_transition_to_unknown_status(appointment):
    with pytest.raises(ValidationException):
        appointment.transition_to("postponed")


@pytest.mark.unit
@pytest.mark.domain
def test_status_assignment_follows_lifecycle(appointment):
    appointment.cancel()

    with pytest.raises(InvalidOperationException):
        appointment.status = AppointmentStatus.SCHEDULED

    assert appointment.status is AppointmentStatus.CANCELLED


@pytest.mark.unit
@pytest.mark.domain
def test_reschedule_active_appointment(appointment):
    new_time = appointment.scheduled_at + timedelta(days=7)

    appointment.reschedule(new_time)

    assert appointment.scheduled_at == new_time


@pytest.mark.unit
@pytest.mark.domain
def test_reschedule_cancelled_appointment_fails(appointment):
    appointment.cancel()
    original = appointment.scheduled_at

    with pytest.raises(InvalidOperationException):
        appointment.reschedule(original + timedelta(days=1))

    assert appointment.scheduled_at == original


@pytest.mark.unit
@pytest.mark.domain
def test_update_reason(appointment):
    appointment.update_reason("Follow-up")

    assert appointment.reason == "Follow-up"


@pytest.mark.unit
@pytest.mark.domain
def test_allowed_transitions_table():
    assert AppointmentStatus.SCHEDULED.allowed_transitions() == {
        AppointmentStatus.CONFIRMED,
        AppointmentStatus.CANCELLED,
        AppointmentStatus.NO_SHOW,
    }
    assert AppointmentStatus.CONFIRMED.can_transition_to(AppointmentStatus.COMPLETED)
    assert not AppointmentStatus.SCHEDULED.can_transition_to(AppointmentStatus.SCHEDULED)
