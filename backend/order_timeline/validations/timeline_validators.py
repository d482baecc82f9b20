"""
timeline_validators.py
- Purpose: Validations specific to timeline request inputs.
- Design: Normalize + validate at the boundary, keep the engine total.
"""

from order_timeline.constants.statuses import Role, TransactionKind
from order_timeline.core import ErrorCode, ErrorReason
from order_timeline.core.errors import unprocessable


def normalize_transaction_kind(kind: str) -> TransactionKind:
    value = (kind or "").strip().lower()
    try:
        return TransactionKind(value)
    except ValueError:
        raise unprocessable(
            ErrorReason.INVALID_TRANSACTION_KIND,
            code=ErrorCode.INVALID_TRANSACTION_KIND,
            details={"transaction_kind": kind},
        )


def normalize_role(role: str) -> Role:
    value = (role or "").strip().lower()
    try:
        return Role(value)
    except ValueError:
        raise unprocessable(
            ErrorReason.INVALID_ROLE,
            code=ErrorCode.INVALID_ROLE,
            details={"role": role},
        )


def normalize_status(status: str | None) -> str | None:
    """Trim + lowercase; stored values are lowercase snake_case."""
    if status is None:
        return None
    return status.strip().lower()
