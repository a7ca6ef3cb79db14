"""
History Record for Healthcare Domain

One immutable entry of a medical record's audit trail.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from medcore.core.domain import InvalidOperationException, generate_uuid, utc_now
from medcore.core.shared.validators import Validator

MAX_ACTION_LENGTH = 255
MAX_DETAILS_LENGTH = 10000
AUDIT_SUMMARY_LENGTH = 50
ELLIPSIS = "..."
NO_DETAILS = "No details"


def truncate_details(details: str) -> str:
    """Cut ``details`` to the audit summary length, by characters."""
    if len(details) > AUDIT_SUMMARY_LENGTH:
        return details[:AUDIT_SUMMARY_LENGTH] + ELLIPSIS
    return details


@dataclass(unsafe_hash=True)
class HistoryRecord:
    """
    Audit trail entry attached to a MedicalRecord.

    ``action`` and ``details`` are stored trimmed; missing details become
    an empty string. Each field is written once by the constructor; any
    later assignment raises InvalidOperationException. A correction is a
    new record.

    Example:
        ```python
        entry = HistoryRecord.create(record.id, "Prescription", "Amoxicillin 500mg")
        entry.to_audit_string()  # "[2024-01-15T10:00:00+00:00] Prescription - Amoxicillin 500mg"
        entry.get_summary()      # "Prescription: Amoxicillin 500mg"
        ```
    """

    id: UUID
    medical_record_id: UUID
    action: str
    details: str | None = ""
    timestamp: datetime | None = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__ or name not in self.__dataclass_fields__:
            raise InvalidOperationException(
                operation=f"set {name}",
                current_state="immutable",
                message=f"HistoryRecord.{name} cannot be reassigned",
            )
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        raise InvalidOperationException(operation=f"delete {name}", current_state="immutable")

    def __post_init__(self):
        Validator.required(self.id, "id")
        Validator.required(self.medical_record_id, "medical_record_id")
        object.__setattr__(self, "action", _validate_action(self.action))
        object.__setattr__(self, "details", _validate_details(self.details))
        Validator.required(self.timestamp, "timestamp")

    @classmethod
    def create(cls, medical_record_id: UUID, action: str, details: str | None = None) -> "HistoryRecord":
        """Factory method stamping a fresh id and the current time."""
        return cls(
            id=generate_uuid(),
            medical_record_id=medical_record_id,
            action=action,
            details=details,
            timestamp=utc_now(),
        )

    def to_audit_string(self) -> str:
        """Render as ``[<timestamp>] <action> - <details>`` with details truncated."""
        return f"[{self.timestamp.isoformat()}] {self.action} - {truncate_details(self.details)}"

    def get_summary(self) -> str:
        """Render as ``<action>: <details>``, or "No details" when empty."""
        summary = truncate_details(self.details) if self.details else NO_DETAILS
        return f"{self.action}: {summary}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "medical_record_id": str(self.medical_record_id),
            "action": self.action,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


def _validate_action(action: Any) -> str:
    return Validator.text(action, "action", MAX_ACTION_LENGTH).strip()


def _validate_details(details: Any) -> str:
    if details is None:
        return ""
    return Validator.optional_text(details, "details", MAX_DETAILS_LENGTH).strip()
