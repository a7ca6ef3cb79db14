"""
Shared pytest fixtures for all tests.

This module provides ready-made valid domain objects and settings/logging
isolation so individual tests only spell out what they exercise.
"""

import logging
import os

import pytest

from medcore.config import settings as settings_module
from tests.utils.factories import (
    create_charge,
    create_customer,
    create_doctor,
    create_medical_record,
    create_organization,
    create_patient,
)

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"


# ============================================================================
# SETTINGS / LOGGING ISOLATION
# ============================================================================


@pytest.fixture(autouse=True)
def reset_settings_singleton():
    """Drop the cached Settings so each test reads its own environment."""
    settings_module._settings_instance = None
    yield
    settings_module._settings_instance = None


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a logging test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


# ============================================================================
# HEALTHCARE FIXTURES
# ============================================================================


@pytest.fixture
def organization():
    """A valid organization."""
    return create_organization()


@pytest.fixture
def patient(organization):
    """A valid patient belonging to ``organization``."""
    return create_patient(organization_id=organization.id)


@pytest.fixture
def doctor():
    """An active doctor."""
    return create_doctor()


@pytest.fixture
def medical_record(patient, organization, doctor):
    """A medical record with an empty history."""
    return create_medical_record(
        patient_id=patient.id,
        organization_id=organization.id,
        doctor_id=doctor.id,
    )


# ============================================================================
# BILLING FIXTURES
# ============================================================================


@pytest.fixture
def customer():
    """A valid customer."""
    return create_customer()


@pytest.fixture
def charge(customer):
    """A pending charge for ``customer``."""
    return create_charge(customer=customer)
