"""
Billing Domain Layer

Components:
- Entities: Customer, Charge
- Value Objects: MonetaryAmount, CurrencyCode, ChargeStatus
- Events: ChargeSucceeded, ChargeFailed
"""

from medcore.domains.billing.domain.entities import Charge, Customer
from medcore.domains.billing.domain.events import ChargeFailed, ChargeSucceeded
from medcore.domains.billing.domain.value_objects import ChargeStatus, CurrencyCode, MonetaryAmount

__all__ = [
    # Entities
    "Customer",
    "Charge",
    # Value Objects
    "MonetaryAmount",
    "CurrencyCode",
    "ChargeStatus",
    # Events
    "ChargeSucceeded",
    "ChargeFailed",
]
