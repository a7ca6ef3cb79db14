"""
Healthcare Repository Ports

Interfaces for healthcare data access following Clean Architecture.
Implementations persist aggregates exactly as the entities hand them over;
they do not re-validate.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from medcore.domains.healthcare.domain.entities import MedicalRecord, Organization, Patient
from medcore.domains.healthcare.domain.value_objects import OrgTaxId, PersonId


@runtime_checkable
class IPatientRepository(Protocol):
    """
    Patient repository interface.

    Example:
        ```python
        class SQLAlchemyPatientRepository(IPatientRepository):
            async def find_by_id(self, patient_id: UUID) -> Patient | None:
                ...
        ```
    """

    async def find_by_id(self, patient_id: UUID) -> Patient | None:
        """
        Find patient by ID.

        Args:
            patient_id: Unique patient identifier

        Returns:
            Patient if found, None otherwise
        """
        ...

    async def find_by_person_id(self, person_id: PersonId) -> Patient | None:
        """Find patient by national person identifier."""
        ...

    async def save(self, patient: Patient) -> Patient:
        """Insert or update a patient."""
        ...

    async def delete(self, patient_id: UUID) -> bool:
        """
        Delete patient by ID.

        Returns:
            True if deleted, False if not found
        """
        ...


@runtime_checkable
class IOrganizationRepository(Protocol):
    """Organization repository interface."""

    async def find_by_id(self, organization_id: UUID) -> Organization | None:
        ...

    async def find_by_tax_id(self, tax_id: OrgTaxId) -> Organization | None:
        ...

    async def save(self, organization: Organization) -> Organization:
        ...

    async def delete(self, organization_id: UUID) -> bool:
        ...


@runtime_checkable
class IMedicalRecordRepository(Protocol):
    """
    Medical record repository interface.

    ``save`` stores the record together with its full history; history
    entries already stored are never updated or removed.
    """

    async def find_by_id(self, record_id: UUID) -> MedicalRecord | None:
        ...

    async def find_by_patient_id(self, patient_id: UUID) -> list[MedicalRecord]:
        ...

    async def save(self, record: MedicalRecord) -> MedicalRecord:
        ...

    async def delete(self, record_id: UUID) -> bool:
        ...
