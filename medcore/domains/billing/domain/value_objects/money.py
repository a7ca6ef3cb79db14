"""
Billing Value Objects: amounts and currencies.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Self

from medcore.core.domain import ValidationException, ValueObject

CENTS = Decimal("0.01")


@dataclass(frozen=True)
class MonetaryAmount(ValueObject):
    """
    Strictly positive amount with exactly two decimal places.

    Accepts Decimal, int, float (converted through ``str`` to avoid binary
    noise) or a numeric string. Rounds half up. Amounts too large to carry
    two decimal places are rejected with rule ``range``.

    Example:
        ```python
        MonetaryAmount.create(10).amount        # Decimal("10.00")
        MonetaryAmount.create(100.005).amount   # Decimal("100.01")
        ```
    """

    amount: Decimal

    def _validate(self) -> None:
        try:
            value = _to_decimal(self.amount).quantize(CENTS, ROUND_HALF_UP)
        except InvalidOperation as e:
            raise ValidationException("Amount is out of range", field="amount", rule="range") from e
        if value <= 0:
            raise ValidationException("Amount must be positive", field="amount", rule="positive")
        object.__setattr__(self, "amount", value)

    @classmethod
    def create(cls, raw: Decimal | int | float | str) -> Self:
        """Validate and normalize a raw amount."""
        return cls(raw)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    def __repr__(self) -> str:
        return f"MonetaryAmount(amount={self.amount})"


@dataclass(frozen=True)
class CurrencyCode(ValueObject):
    """Three uppercase Latin letters, e.g. "USD". Input is not normalized."""

    code: str

    CODE_PATTERN = re.compile(r"^[A-Z]{3}$")

    def _validate(self) -> None:
        if not isinstance(self.code, str) or not self.CODE_PATTERN.fullmatch(self.code):
            raise ValidationException(
                "Currency must be 3 uppercase letters",
                field="currency",
                rule="format",
            )

    @classmethod
    def create(cls, raw: str) -> Self:
        return cls(raw)

    def __str__(self) -> str:
        return self.code


def _to_decimal(raw: Any) -> Decimal:
    if raw is None:
        raise ValidationException("Amount is required", field="amount", rule="required")
    if isinstance(raw, bool):
        raise ValidationException("Amount must be a number", field="amount", rule="type")
    if isinstance(raw, Decimal):
        value = raw
    elif isinstance(raw, (int, float, str)):
        try:
            value = Decimal(str(raw).strip())
        except InvalidOperation as e:
            raise ValidationException(f"Invalid amount: {raw!r}", field="amount", rule="format") from e
    else:
        raise ValidationException("Amount must be a number", field="amount", rule="type")
    if not value.is_finite():
        raise ValidationException("Amount must be finite", field="amount", rule="format")
    return value
