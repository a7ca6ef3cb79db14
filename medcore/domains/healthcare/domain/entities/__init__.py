"""
Healthcare Domain Entities

Business entities with identity and lifecycle for the healthcare domain.
"""

from medcore.domains.healthcare.domain.entities.appointment import Appointment
from medcore.domains.healthcare.domain.entities.doctor import Doctor
from medcore.domains.healthcare.domain.entities.history_record import HistoryRecord
from medcore.domains.healthcare.domain.entities.medical_record import MedicalRecord
from medcore.domains.healthcare.domain.entities.organization import Organization
from medcore.domains.healthcare.domain.entities.patient import Patient

__all__ = [
    "Patient",
    "Organization",
    "Doctor",
    "Appointment",
    "MedicalRecord",
    "HistoryRecord",
]
