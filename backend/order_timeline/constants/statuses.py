"""
statuses.py
- Purpose: Central source of truth for purchase statuses, kinds, roles and step states.
- Design: Keep FE-facing values stable and explicit (they are the stored/wire values).
"""

from enum import Enum


class RawStatus(str, Enum):
    # Product orders
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    RETURNED = "returned"

    # Service bookings
    REQUESTED = "requested"
    CONFIRMED = "confirmed"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    NO_SHOW = "no_show"
    RESCHEDULED = "rescheduled"

    # Shared terminal
    CANCELLED = "cancelled"


class TransactionKind(str, Enum):
    PRODUCT = "product"
    SERVICE = "service"


class Role(str, Enum):
    BUYER = "buyer"
    SELLER = "seller"


class StepState(str, Enum):
    COMPLETED = "completed"
    CURRENT = "current"
    FUTURE = "future"
    SKIPPED = "skipped"


# Statuses that are not positions in any happy path.
BRANCH_STATUSES = frozenset(
    {
        RawStatus.CANCELLED.value,
        RawStatus.RETURNED.value,
        RawStatus.RESCHEDULED.value,
        RawStatus.NO_SHOW.value,
    }
)

# Which branches make sense for which transaction kind.
BRANCHES_BY_KIND = {
    TransactionKind.PRODUCT: frozenset({RawStatus.CANCELLED.value, RawStatus.RETURNED.value}),
    TransactionKind.SERVICE: frozenset(
        {RawStatus.CANCELLED.value, RawStatus.RESCHEDULED.value, RawStatus.NO_SHOW.value}
    ),
}

UNKNOWN_STEP_ID = "unknown"
