"""
Healthcare Domain Value Objects

Immutable value objects for the healthcare domain.
"""

from medcore.domains.healthcare.domain.value_objects.identifiers import OrgTaxId, PersonId
from medcore.domains.healthcare.domain.value_objects.statuses import AppointmentStatus, Gender

__all__ = [
    "PersonId",
    "OrgTaxId",
    "Gender",
    "AppointmentStatus",
]
