"""
Billing Domain Events
"""

from dataclasses import dataclass
from uuid import UUID

from medcore.core.domain import DomainEvent


@dataclass(frozen=True)
class ChargeSucceeded(DomainEvent):
    """A pending charge was captured."""

    charge_id: UUID | None = None
    customer_id: UUID | None = None
    amount: str = ""
    currency: str = ""


@dataclass(frozen=True)
class ChargeFailed(DomainEvent):
    """A pending charge was declined or errored."""

    charge_id: UUID | None = None
    customer_id: UUID | None = None
    reason: str | None = None
