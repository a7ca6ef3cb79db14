"""
Billing Domain Entities
"""

from medcore.domains.billing.domain.entities.charge import Charge
from medcore.domains.billing.domain.entities.customer import Customer

__all__ = [
    "Customer",
    "Charge",
]
