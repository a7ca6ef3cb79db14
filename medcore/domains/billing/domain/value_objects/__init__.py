"""
Billing Domain Value Objects

Immutable value objects for the billing domain.
"""

from medcore.domains.billing.domain.value_objects.charge_status import ChargeStatus
from medcore.domains.billing.domain.value_objects.money import CurrencyCode, MonetaryAmount

__all__ = [
    "MonetaryAmount",
    "CurrencyCode",
    "ChargeStatus",
]
