"""Test utilities and helpers."""

from tests.utils.factories import (
    VALID_PERSON_ID,
    VALID_TAX_ID,
    create_charge,
    create_customer,
    create_doctor,
    create_history_record,
    create_medical_record,
    create_organization,
    create_patient,
)

__all__ = [
    "VALID_PERSON_ID",
    "VALID_TAX_ID",
    "create_organization",
    "create_patient",
    "create_doctor",
    "create_medical_record",
    "create_history_record",
    "create_customer",
    "create_charge",
]
