"""
Billing Repository Ports

Interfaces for billing data access. Implementations store what the
entities hand over without re-validating it.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from medcore.domains.billing.domain.entities import Charge, Customer


@runtime_checkable
class ICustomerRepository(Protocol):
    """Customer repository interface."""

    async def find_by_id(self, customer_id: UUID) -> Customer | None:
        ...

    async def find_by_email(self, email: str) -> Customer | None:
        ...

    async def save(self, customer: Customer) -> Customer:
        ...


@runtime_checkable
class IChargeRepository(Protocol):
    """
    Charge repository interface.

    ``save`` is called after every status transition; the stored status
    must never move back to PENDING.
    """

    async def find_by_id(self, charge_id: UUID) -> Charge | None:
        ...

    async def find_by_customer_id(self, customer_id: UUID) -> list[Charge]:
        ...

    async def save(self, charge: Charge) -> Charge:
        ...
