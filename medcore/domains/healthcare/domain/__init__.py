"""
Healthcare Domain Layer

This module contains the core business rules for the Healthcare bounded context,
following Domain-Driven Design (DDD) principles.

Components:
- Entities: Patient, Organization, Doctor, Appointment, MedicalRecord, HistoryRecord
- Value Objects: PersonId, OrgTaxId, Gender, AppointmentStatus
- Events: HistoryRecordAdded
"""

from medcore.domains.healthcare.domain.entities import (
    Appointment,
    Doctor,
    HistoryRecord,
    MedicalRecord,
    Organization,
    Patient,
)
from medcore.domains.healthcare.domain.events import HistoryRecordAdded
from medcore.domains.healthcare.domain.value_objects import (
    AppointmentStatus,
    Gender,
    OrgTaxId,
    PersonId,
)

__all__ = [
    # Entities
    "Patient",
    "Organization",
    "Doctor",
    "Appointment",
    "MedicalRecord",
    "HistoryRecord",
    # Value Objects
    "PersonId",
    "OrgTaxId",
    "Gender",
    "AppointmentStatus",
    # Events
    "HistoryRecordAdded",
]
