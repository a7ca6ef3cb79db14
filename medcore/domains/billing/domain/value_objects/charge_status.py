"""
Charge lifecycle states.
"""

from medcore.core.domain import StatusEnum


class ChargeStatus(StatusEnum):
    """
    Charge lifecycle states.

    Valid transitions:
    - PENDING -> SUCCEEDED, FAILED
    - SUCCEEDED, FAILED -> (terminal)
    """

    PENDING = "PENDING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

    def can_transition_to(self, new_status: "ChargeStatus") -> bool:
        """Check if transition to new status is valid."""
        return self is ChargeStatus.PENDING and new_status is not ChargeStatus.PENDING

    def is_terminal(self) -> bool:
        return self is not ChargeStatus.PENDING
