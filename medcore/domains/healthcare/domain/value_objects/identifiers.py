"""
Regulated Identifier Value Objects

PersonId (SSN-style) and OrgTaxId (EIN-style). Both store only the 9 digits;
the hyphenated form is derived.
"""

from dataclasses import dataclass
from typing import Self

from medcore.core.domain import ValueObject
from medcore.core.shared.validators import OrgTaxIdValidator, PersonIdValidator


@dataclass(frozen=True)
class PersonId(ValueObject):
    """
    National person identifier.

    Example:
        ```python
        person_id = PersonId.of("219-09-9999")
        person_id.raw()        # "219099999"
        person_id.formatted()  # "219-09-9999"
        ```
    """

    value: str

    def _validate(self) -> None:
        object.__setattr__(self, "value", PersonIdValidator.validate(self.value))

    @classmethod
    def of(cls, raw: str) -> Self:
        """Parse and validate a person identifier."""
        return cls(raw)

    @staticmethod
    def is_valid(raw: str) -> bool:
        """Check a raw identifier without raising."""
        return PersonIdValidator.is_valid(raw)

    def raw(self) -> str:
        return self.value

    def formatted(self) -> str:
        return f"{self.value[:3]}-{self.value[3:5]}-{self.value[5:]}"

    def masked(self) -> str:
        """Only the serial segment visible, for logs."""
        return f"***-**-{self.value[5:]}"

    def __str__(self) -> str:
        return self.formatted()

    def __repr__(self) -> str:
        return f"PersonId('{self.masked()}')"


@dataclass(frozen=True)
class OrgTaxId(ValueObject):
    """
    Organization tax identifier.

    Example:
        ```python
        tax_id = OrgTaxId.of("12-3456789")
        tax_id.formatted()  # "12-3456789"
        ```
    """

    value: str

    def _validate(self) -> None:
        object.__setattr__(self, "value", OrgTaxIdValidator.validate(self.value))

    @classmethod
    def of(cls, raw: str) -> Self:
        """Parse and validate a tax identifier."""
        return cls(raw)

    @staticmethod
    def is_valid(raw: str) -> bool:
        """Check a raw identifier without raising."""
        return OrgTaxIdValidator.is_valid(raw)

    def raw(self) -> str:
        return self.value

    def formatted(self) -> str:
        return f"{self.value[:2]}-{self.value[2:]}"

    def masked(self) -> str:
        return f"**-***{self.value[5:]}"

    def __str__(self) -> str:
        return self.formatted()

    def __repr__(self) -> str:
        return f"OrgTaxId('{self.masked()}')"
