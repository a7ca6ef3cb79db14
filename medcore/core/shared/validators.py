"""
Shared Validators

Field and identifier validation used by entities and value objects.

Every check raises ``ValidationException`` on the first rule it finds
violated; ``is_valid`` helpers are the only place a failure becomes ``False``.
"""

import re
from datetime import date, datetime
from typing import Any

from medcore.core.domain.exceptions import ValidationException


class Validator:
    """Base validator class."""

    @staticmethod
    def required(value: Any, field_name: str = "field") -> Any:
        """Validate that value is not None or blank."""
        if value is None:
            raise ValidationException(f"{field_name} is required", field=field_name, rule="required")
        if isinstance(value, str) and not value.strip():
            raise ValidationException(f"{field_name} cannot be blank", field=field_name, rule="blank")
        return value

    @staticmethod
    def max_length(value: str, max_len: int, field_name: str = "field") -> str:
        """Validate maximum string length."""
        if len(value) > max_len:
            raise ValidationException(
                f"{field_name} exceeds maximum length ({max_len} chars)",
                field=field_name,
                rule="max_length",
            )
        return value

    @staticmethod
    def string(value: Any, field_name: str = "field") -> str:
        """Validate that value is a string."""
        if not isinstance(value, str):
            raise ValidationException(f"{field_name} must be a string", field=field_name, rule="type")
        return value

    @classmethod
    def text(cls, value: Any, field_name: str, max_len: int) -> str:
        """Required, non-blank string of at most ``max_len`` characters."""
        cls.required(value, field_name)
        cls.string(value, field_name)
        return cls.max_length(value, max_len, field_name)

    @classmethod
    def optional_text(cls, value: Any, field_name: str, max_len: int) -> str | None:
        """Like ``text`` but ``None`` passes through."""
        if value is None:
            return None
        cls.string(value, field_name)
        return cls.max_length(value, max_len, field_name)

    @staticmethod
    def past_or_today(value: Any, field_name: str = "date") -> date:
        """Validate a date that is not in the future."""
        if value is None:
            raise ValidationException(f"{field_name} is required", field=field_name, rule="required")
        if isinstance(value, datetime):
            raise ValidationException(f"{field_name} must be a date, not a datetime", field=field_name, rule="type")
        if not isinstance(value, date):
            raise ValidationException(f"{field_name} must be a date", field=field_name, rule="type")
        if value > date.today():
            raise ValidationException(
                f"{field_name} cannot be in the future",
                field=field_name,
                rule="not_future",
            )
        return value


class EmailValidator:
    """Email validation utilities."""

    EMAIL_PATTERN = re.compile(r"^[\w.-]+@[\w.-]+\.[a-zA-Z]{2,}$")
    MAX_LENGTH = 100

    @classmethod
    def validate(cls, email: Any, field_name: str = "email") -> str:
        """Validate email format and length."""
        Validator.required(email, field_name)
        Validator.string(email, field_name)

        if not cls.EMAIL_PATTERN.fullmatch(email):
            raise ValidationException("Invalid email format", field=field_name, rule="format")
        return Validator.max_length(email, cls.MAX_LENGTH, field_name)

    @classmethod
    def is_valid(cls, email: Any) -> bool:
        """Check if email is valid without raising."""
        try:
            cls.validate(email)
            return True
        except ValidationException:
            return False


class PhoneValidator:
    """Contact phone validation: 10-15 digits, spaces or hyphens, optional leading +."""

    CONTACT_PATTERN = re.compile(r"^\+?[0-9\s-]{10,15}$")

    @classmethod
    def validate(cls, phone: Any, field_name: str = "contact") -> str:
        """Validate a contact phone number (stored as given)."""
        Validator.required(phone, field_name)
        Validator.string(phone, field_name)

        if not cls.CONTACT_PATTERN.fullmatch(phone):
            raise ValidationException("Invalid contact format", field=field_name, rule="format")
        return phone


class PersonIdValidator:
    """
    National person identifier (SSN-style) validation.

    Layout is AAA-GG-SSSS: area, group and serial segments. Hyphens and
    whitespace are accepted as separators and removed before checking.
    """

    DIGITS_PATTERN = re.compile(r"^[0-9]{9}$")
    INVALID_AREAS = frozenset({"000", "666"})
    RESERVED_AREA_START = 900
    DENYLIST = frozenset({"111111111", "123456789", "999999999", "000000000", "123123123"})

    @staticmethod
    def clean(raw: str) -> str:
        """Remove separators (hyphens and whitespace)."""
        return re.sub(r"[\s-]", "", raw)

    @classmethod
    def validate(cls, raw: Any, field_name: str = "person_id") -> str:
        """
        Validate a person identifier.

        Args:
            raw: Identifier as typed, e.g. "123-45-6789" or "123456789"
            field_name: Field name reported in the error

        Returns:
            The 9-digit normalized value

        Raises:
            ValidationException: on the first failed check
        """
        if raw is None:
            raise ValidationException("Person ID cannot be null", field=field_name, rule="required")
        Validator.string(raw, field_name)

        value = cls.clean(raw)
        if len(value) != 9:
            raise ValidationException("Person ID must contain exactly 9 digits", field=field_name, rule="length")
        if not cls.DIGITS_PATTERN.fullmatch(value):
            raise ValidationException("Person ID must contain only digits", field=field_name, rule="digits_only")

        area, group, serial = value[:3], value[3:5], value[5:]
        if area in cls.INVALID_AREAS:
            raise ValidationException(f"Area {area} is invalid for a person ID", field=field_name, rule="area")
        if int(area) >= cls.RESERVED_AREA_START:
            raise ValidationException(f"Area {area} is reserved", field=field_name, rule="area")
        if group == "00":
            raise ValidationException("Group number cannot be 00", field=field_name, rule="group")
        if serial == "0000":
            raise ValidationException("Serial number cannot be 0000", field=field_name, rule="serial")

        if value in cls.DENYLIST:
            raise ValidationException(f"Person ID {value} is invalid or reserved", field=field_name, rule="denylist")
        return value

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        """Check if a person identifier is valid without raising."""
        try:
            cls.validate(raw)
            return True
        except ValidationException:
            return False


class OrgTaxIdValidator:
    """
    Organization tax identifier (EIN-style) validation.

    Layout is PP-NNNNNNN: a two digit prefix followed by seven digits.
    Only hyphens are accepted as separators.
    """

    DIGITS_PATTERN = re.compile(r"^[0-9]{9}$")
    DENYLIST = frozenset(
        value.replace("-", "")
        for value in (
            "00-0000000",
            "07-7777777",
            "11-1111111",
            "22-2222222",
            "33-3333333",
            "44-4444444",
            "55-5555555",
            "66-6666666",
            "77-7777777",
            "88-8888888",
            "99-9999999",
        )
    )

    @staticmethod
    def clean(raw: str) -> str:
        """Remove hyphen separators."""
        return raw.replace("-", "")

    @classmethod
    def validate(cls, raw: Any, field_name: str = "tax_id") -> str:
        """
        Validate an organization tax identifier.

        Returns:
            The 9-digit normalized value

        Raises:
            ValidationException: on the first failed check
        """
        if raw is None:
            raise ValidationException("Tax ID cannot be null", field=field_name, rule="required")
        Validator.string(raw, field_name)

        value = cls.clean(raw)
        if len(value) != 9:
            raise ValidationException("Tax ID must contain exactly 9 digits", field=field_name, rule="length")
        if not cls.DIGITS_PATTERN.fullmatch(value):
            raise ValidationException(
                "Invalid tax ID format (use XX-XXXXXXX or XXXXXXXXX)",
                field=field_name,
                rule="digits_only",
            )

        prefix = value[:2]
        if prefix == "00":
            raise ValidationException("Tax ID cannot start with 00", field=field_name, rule="prefix")
        if prefix.startswith("0"):
            raise ValidationException("Tax ID cannot start with 0", field=field_name, rule="prefix")

        if value in cls.DENYLIST:
            raise ValidationException(
                f"Sequential tax ID is invalid: {prefix}-{value[2:]}",
                field=field_name,
                rule="denylist",
            )
        return value

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        """Check if a tax identifier is valid without raising."""
        try:
            cls.validate(raw)
            return True
        except ValidationException:
            return False
