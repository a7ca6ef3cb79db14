"""
Healthcare Domain Events
"""

from dataclasses import dataclass
from uuid import UUID

from medcore.core.domain import DomainEvent


@dataclass(frozen=True)
class HistoryRecordAdded(DomainEvent):
    """A history entry was appended to a medical record."""

    medical_record_id: UUID | None = None
    history_record_id: UUID | None = None
    action: str = ""
