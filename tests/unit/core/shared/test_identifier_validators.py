"""
Unit tests for the person and organization identifier validators.

Tests:
- PersonIdValidator: separators, length, digits, area/group/serial, denylist
- OrgTaxIdValidator: separators, length, digits, prefix, denylist
- is_valid never raises
"""

import pytest

from medcore.core.domain import ValidationException
from medcore.core.shared.validators import OrgTaxIdValidator, PersonIdValidator

# ============================================================================
# PersonIdValidator
# ============================================================================


@pytest.mark.unit
class TestPersonIdValidator:
    """Person identifier rules, checked in order."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("219-09-9999", "219099999"),
            ("219099999", "219099999"),
            ("219 09 9999", "219099999"),
            (" 001-01-0001 ", "001010001"),
            ("899-99-9998", "899999998"),
            ("665-12-3456", "665123456"),
        ],
    )
    def test_valid_values_are_normalized(self, raw, expected):
        assert PersonIdValidator.validate(raw) == expected

    @pytest.mark.parametrize(
        "raw, rule",
        [
            ("12345678", "length"),
            ("1234567890", "length"),
            ("", "length"),
            ("12345678a", "digits_only"),
            ("12345.678", "digits_only"),
            ("000-12-3456", "area"),
            ("666-12-3456", "area"),
            ("900-12-3456", "area"),
            ("987-65-4321", "area"),
            ("123-00-4567", "group"),
            ("123-45-0000", "serial"),
            ("123-45-6789", "denylist"),
            ("111-11-1111", "denylist"),
            ("123-12-3123", "denylist"),
        ],
    )
    def test_invalid_values_report_the_failed_rule(self, raw, rule):
        with pytest.raises(ValidationException) as exc_info:
            PersonIdValidator.validate(raw)

        assert exc_info.value.rule == rule
        assert exc_info.value.field == "person_id"
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_first_failing_rule_wins(self):
        """999999999 is on the denylist but the reserved area is checked first."""
        with pytest.raises(ValidationException) as exc_info:
            PersonIdValidator.validate("999-99-9999")

        assert exc_info.value.rule == "area"

    def test_none_is_rejected(self):
        with pytest.raises(ValidationException) as exc_info:
            PersonIdValidator.validate(None)

        assert exc_info.value.rule == "required"

    def test_non_string_is_rejected(self):
        with pytest.raises(ValidationException) as exc_info:
            PersonIdValidator.validate(219099999)

        assert exc_info.value.rule == "type"

    def test_unicode_digits_are_not_digits(self):
        # Arabic-Indic digits pass str.isdigit() but are not accepted
        with pytest.raises(ValidationException) as exc_info:
            PersonIdValidator.validate("٢١٩٠٩٩٩٩٩")

        assert exc_info.value.rule == "digits_only"

    @pytest.mark.parametrize("raw", ["219-09-9999", "001010001"])
    def test_is_valid_true(self, raw):
        assert PersonIdValidator.is_valid(raw) is True

    @pytest.mark.parametrize("raw", ["123-45-6789", "abc", "", None, 12345, object()])
    def test_is_valid_false_never_raises(self, raw):
        assert PersonIdValidator.is_valid(raw) is False


# ============================================================================
# OrgTaxIdValidator
# ============================================================================


ORG_DENYLIST = [
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
]


@pytest.mark.unit
class TestOrgTaxIdValidator:
    """Organization tax identifier rules."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("12-3456789", "123456789"),
            ("123456789", "123456789"),
            ("98-7654321", "987654321"),
            ("10-0000001", "100000001"),
        ],
    )
    def test_valid_values_are_normalized(self, raw, expected):
        assert OrgTaxIdValidator.validate(raw) == expected

    @pytest.mark.parametrize(
        "raw, rule",
        [
            ("12-345678", "length"),
            ("12-34567890", "length"),
            ("12 3456789", "length"),
            ("1A-3456789", "digits_only"),
            ("01-2345678", "prefix"),
            ("09-8765432", "prefix"),
            ("00-1234567", "prefix"),
            ("11-1111111", "denylist"),
            ("99-9999999", "denylist"),
        ],
    )
    def test_invalid_values_report_the_failed_rule(self, raw, rule):
        with pytest.raises(ValidationException) as exc_info:
            OrgTaxIdValidator.validate(raw)

        assert exc_info.value.rule == rule
        assert exc_info.value.field == "tax_id"

    @pytest.mark.parametrize("raw", ORG_DENYLIST)
    def test_every_denylisted_value_fails(self, raw):
        assert len(OrgTaxIdValidator.DENYLIST) == 11

        with pytest.raises(ValidationException) as exc_info:
            OrgTaxIdValidator.validate(raw)

        # Entries starting with 0 are caught by the prefix rule first
        assert exc_info.value.rule in {"prefix", "denylist"}

    @pytest.mark.parametrize("prefix", [f"0{d}" for d in range(10)])
    def test_any_prefix_starting_with_zero_fails(self, prefix):
        assert OrgTaxIdValidator.is_valid(f"{prefix}-1234567") is False

    def test_whitespace_is_not_a_separator(self):
        """Only hyphens are stripped, unlike person identifiers."""
        assert OrgTaxIdValidator.is_valid("12 3456789") is False
        assert OrgTaxIdValidator.is_valid("12-3456789") is True

    @pytest.mark.parametrize("raw", ["", None, 123456789, "00-0000000"])
    def test_is_valid_false_never_raises(self, raw):
        assert OrgTaxIdValidator.is_valid(raw) is False
