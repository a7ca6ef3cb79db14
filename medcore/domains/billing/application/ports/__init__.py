"""
Billing Ports

Repository interfaces implemented by the persistence layer.
"""

from medcore.domains.billing.application.ports.repositories import (
    IChargeRepository,
    ICustomerRepository,
)

__all__ = [
    "ICustomerRepository",
    "IChargeRepository",
]
