"""
Medical Record Entity for Healthcare Domain

A diagnosis for a patient within an organization, with an append-only
history of everything that happened to it.
"""

from collections.abc import Iterable
from dataclasses import InitVar, dataclass, field
from typing import Any, ClassVar
from uuid import UUID

from medcore.core.domain import AggregateRoot, ValidationException, generate_uuid, utc_now
from medcore.core.shared.logger import get_domain_logger
from medcore.core.shared.validators import Validator

from ..events import HistoryRecordAdded
from .history_record import HistoryRecord

MAX_DIAGNOSIS_LENGTH = 10000
MAX_TEXT_LENGTH = 10000

logger = get_domain_logger("healthcare")


@dataclass(eq=False)
class MedicalRecord(AggregateRoot[UUID]):
    """
    Medical record aggregate root.

    The history list is owned by the record. ``history_records`` returns a
    new list on every read, so callers holding it cannot change the trail;
    entries are only ever appended.

    Example:
        ```python
        record = MedicalRecord.create(patient.id, org.id, doctor.id, "Hypertension")
        record.update_treatment("Lisinopril 10mg daily")
        record.record_history("Treatment updated", "Started Lisinopril")
        ```
    """

    _field_validators: ClassVar[dict[str, Any]] = {
        "diagnosis": lambda diagnosis: _validate_diagnosis(diagnosis),
        "treatment": lambda treatment: Validator.optional_text(treatment, "treatment", MAX_TEXT_LENGTH),
        "notes": lambda notes: Validator.optional_text(notes, "notes", MAX_TEXT_LENGTH),
    }

    patient_id: UUID | None = None
    organization_id: UUID | None = None
    patient_name: str | None = None  # Display cache, filled by the service layer
    doctor_id: UUID | None = None
    diagnosis: str = ""
    treatment: str | None = None
    notes: str | None = None
    history: InitVar[Iterable[HistoryRecord] | None] = None

    _history: list[HistoryRecord] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self, history: Iterable[HistoryRecord] | None):
        Validator.required(self.id, "id")
        Validator.required(self.patient_id, "patient_id")
        Validator.required(self.organization_id, "organization_id")
        Validator.required(self.doctor_id, "doctor_id")
        Validator.required(self.created_at, "created_at")
        Validator.required(self.updated_at, "updated_at")
        self._history = [self._require_own_entry(entry) for entry in (history or [])]

    @classmethod
    def create(
        cls,
        patient_id: UUID,
        organization_id: UUID,
        doctor_id: UUID,
        diagnosis: str,
    ) -> "MedicalRecord":
        """Factory method for a new record with an empty history."""
        now = utc_now()
        return cls(
            id=generate_uuid(),
            patient_id=patient_id,
            organization_id=organization_id,
            doctor_id=doctor_id,
            diagnosis=diagnosis,
            created_at=now,
            updated_at=now,
        )

    # History

    @property
    def history_records(self) -> list[HistoryRecord]:
        """Snapshot of the history in insertion (chronological) order."""
        return list(self._history)

    def add_history_record(self, record: HistoryRecord) -> None:
        """Append an entry to the history."""
        self._history.append(self._require_own_entry(record))
        self.touch()
        self._record_event(
            HistoryRecordAdded(
                medical_record_id=self.id,
                history_record_id=record.id,
                action=record.action,
            )
        )
        logger.debug("History record added", medical_record_id=str(self.id), action=record.action)

    def record_history(self, action: str, details: str | None = None) -> HistoryRecord:
        """Create a history entry for this record and append it."""
        entry = HistoryRecord.create(self.id, action, details)
        self.add_history_record(entry)
        return entry

    def _require_own_entry(self, record: Any) -> HistoryRecord:
        record = _require_history_record(record)
        if record.medical_record_id != self.id:
            raise ValidationException(
                "History record belongs to another medical record",
                field="medical_record_id",
                rule="owner",
            )
        return record

    def audit_trail(self) -> list[str]:
        """Audit strings for every history entry, oldest first."""
        return [entry.to_audit_string() for entry in self._history]

    # Mutators

    def update_diagnosis(self, diagnosis: str) -> None:
        self.diagnosis = diagnosis
        self.touch()

    def update_treatment(self, treatment: str | None) -> None:
        self.treatment = treatment
        self.touch()

    def update_notes(self, notes: str | None) -> None:
        self.notes = notes
        self.touch()

    def set_patient_name(self, name: str | None) -> None:
        """Cache the patient's display name. Not a change to the record itself."""
        self.patient_name = name

    def to_summary_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "patient_id": str(self.patient_id),
            "patient_name": self.patient_name,
            "doctor_id": str(self.doctor_id),
            "diagnosis": self.diagnosis,
            "history_count": len(self._history),
            "updated_at": self.updated_at.isoformat(),
        }


def _validate_diagnosis(diagnosis: Any) -> str:
    return Validator.text(diagnosis, "diagnosis", MAX_DIAGNOSIS_LENGTH)


def _require_history_record(record: Any) -> HistoryRecord:
    if record is None:
        raise ValidationException("History record cannot be null", field="history_record", rule="required")
    if not isinstance(record, HistoryRecord):
        raise ValidationException("Expected a HistoryRecord", field="history_record", rule="type")
    return record
