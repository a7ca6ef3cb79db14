"""
Healthcare Ports

Repository interfaces implemented by the persistence layer.
"""

from medcore.domains.healthcare.application.ports.repositories import (
    IMedicalRecordRepository,
    IOrganizationRepository,
    IPatientRepository,
)

__all__ = [
    "IPatientRepository",
    "IOrganizationRepository",
    "IMedicalRecordRepository",
]
