"""
Charge Entity for Billing Domain

A payment attempt against a customer. Starts PENDING and ends either
SUCCEEDED or FAILED; both outcomes are final.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar
from uuid import UUID

from medcore.core.domain import (
    AggregateRoot,
    InvalidOperationException,
    ValidationException,
    generate_uuid,
    utc_now,
)
from medcore.core.shared.logger import get_domain_logger
from medcore.core.shared.validators import Validator

from ..events import ChargeFailed, ChargeSucceeded
from ..value_objects.charge_status import ChargeStatus
from ..value_objects.money import CurrencyCode, MonetaryAmount
from .customer import Customer

MAX_PAYMENT_METHOD_LENGTH = 50

logger = get_domain_logger("billing")


@dataclass(eq=False)
class Charge(AggregateRoot[UUID]):
    """
    Charge aggregate root.

    Everything except the status is fixed at creation. The status only
    moves along PENDING -> SUCCEEDED or PENDING -> FAILED, whether through
    the ``mark_as_*`` methods or plain assignment; anything else raises
    ``InvalidOperationException``. Corrections are new charges.

    Example:
        ```python
        charge = Charge.create(Decimal("100.005"), "USD", "Consultation", customer, "card")
        charge.amount.amount  # Decimal("100.01")
        charge.mark_as_succeeded()
        ```
    """

    _immutable_fields: ClassVar[frozenset[str]] = frozenset(
        {"id", "created_at", "amount", "currency", "description", "customer", "payment_method"}
    )

    amount: MonetaryAmount | None = None
    currency: CurrencyCode | None = None
    description: str | None = None
    customer: Customer | None = None
    payment_method: str = ""
    status: ChargeStatus = ChargeStatus.PENDING

    def __post_init__(self):
        Validator.required(self.id, "id")
        Validator.required(self.created_at, "created_at")
        Validator.required(self.updated_at, "updated_at")
        object.__setattr__(self, "amount", _coerce_amount(self.amount))
        object.__setattr__(self, "currency", _coerce_currency(self.currency))
        if self.description is not None:
            Validator.string(self.description, "description")
        if not isinstance(self.customer, Customer):
            raise ValidationException("Customer cannot be null", field="customer", rule="required")
        object.__setattr__(self, "payment_method", _validate_payment_method(self.payment_method))
        Validator.required(self.status, "status")
        object.__setattr__(self, "status", ChargeStatus.from_string(self.status))

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "status" and "status" in self.__dict__:
            value = ChargeStatus.from_string(value)
            if not self.status.can_transition_to(value):
                raise InvalidOperationException(
                    operation=f"mark charge as {value.value}",
                    current_state=self.status.value,
                )
        super().__setattr__(name, value)

    @classmethod
    def create(
        cls,
        amount: MonetaryAmount | Decimal | int | float | str,
        currency: CurrencyCode | str,
        description: str | None,
        customer: Customer,
        payment_method: str,
    ) -> "Charge":
        """Factory method for a new PENDING charge."""
        now = utc_now()
        return cls(
            id=generate_uuid(),
            amount=_coerce_amount(amount),
            currency=_coerce_currency(currency),
            description=description,
            customer=customer,
            payment_method=payment_method,
            status=ChargeStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

    # Status Transitions

    def mark_as_succeeded(self) -> None:
        """Record that the payment went through."""
        self._transition(ChargeStatus.SUCCEEDED)
        self._record_event(
            ChargeSucceeded(
                charge_id=self.id,
                customer_id=self.customer.id,
                amount=str(self.amount),
                currency=str(self.currency),
            )
        )

    def mark_as_failed(self, reason: str | None = None) -> None:
        """Record that the payment was declined or errored."""
        self._transition(ChargeStatus.FAILED)
        self._record_event(ChargeFailed(charge_id=self.id, customer_id=self.customer.id, reason=reason))

    def _transition(self, target: ChargeStatus) -> None:
        previous = self.status
        self.status = target
        self.touch()
        logger.debug(
            "Charge status changed",
            charge_id=str(self.id),
            from_status=previous.value,
            to_status=target.value,
        )

    def is_pending(self) -> bool:
        return self.status is ChargeStatus.PENDING

    def to_summary_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "amount": str(self.amount),
            "currency": str(self.currency),
            "description": self.description,
            "customer_id": str(self.customer.id),
            "payment_method": self.payment_method,
            "status": self.status.value,
        }


def _coerce_amount(value: Any) -> MonetaryAmount:
    if isinstance(value, MonetaryAmount):
        return value
    return MonetaryAmount.create(value)


def _coerce_currency(value: Any) -> CurrencyCode:
    if isinstance(value, CurrencyCode):
        return value
    return CurrencyCode.create(value)


def _validate_payment_method(payment_method: Any) -> str:
    return Validator.text(payment_method, "payment_method", MAX_PAYMENT_METHOD_LENGTH)
