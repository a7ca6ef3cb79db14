"""
Shared Utilities

Validators and logging shared by all bounded contexts.
"""

from medcore.core.shared.logger import (
    DomainLogger,
    configure_logging,
    configure_logging_from_settings,
    get_domain_logger,
    get_logger,
)
from medcore.core.shared.validators import (
    EmailValidator,
    OrgTaxIdValidator,
    PersonIdValidator,
    PhoneValidator,
    Validator,
)

__all__ = [
    # Validators
    "Validator",
    "EmailValidator",
    "PhoneValidator",
    "PersonIdValidator",
    "OrgTaxIdValidator",
    # Logging
    "DomainLogger",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "get_domain_logger",
]
