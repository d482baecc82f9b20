"""
flows.py
- Purpose: Static happy-path step sequences, one per (transaction kind, role).
- Design: Built once at import into tuples/MappingProxyType; treat as read-only
  process-wide configuration.
"""

from types import MappingProxyType

from order_timeline.constants.statuses import Role, TransactionKind
from order_timeline.timeline.errors import FlowTableError
from order_timeline.timeline.mapper import status_value
from order_timeline.timeline.types import FlowStep

STEPS = MappingProxyType(
    {
        # Product orders
        "pending": FlowStep("pending", "Order Placed", "Order received and being processed"),
        "processing": FlowStep("processing", "Processing", "Preparing your order for shipment"),
        "shipped": FlowStep("shipped", "Shipped", "Order is on its way to you"),
        "delivered": FlowStep("delivered", "Delivered", "Order successfully delivered"),
        # Service bookings
        "requested": FlowStep("requested", "Booking Requested", "Service booking request submitted"),
        "confirmed": FlowStep("confirmed", "Confirmed", "Provider confirmed your booking"),
        "scheduled": FlowStep("scheduled", "Scheduled", "Appointment scheduled and ready"),
        "in_progress": FlowStep("in_progress", "In Progress", "Service is currently being performed"),
        "completed": FlowStep("completed", "Completed", "Service completed successfully"),
    }
)


def _seq(*ids: str) -> tuple[FlowStep, ...]:
    return tuple(STEPS[i] for i in ids)


_PRODUCT = _seq("pending", "processing", "shipped", "delivered")

FLOW_TABLE = MappingProxyType(
    {
        (TransactionKind.PRODUCT, Role.BUYER): _PRODUCT,
        (TransactionKind.PRODUCT, Role.SELLER): _PRODUCT,
        (TransactionKind.SERVICE, Role.BUYER): _seq("requested", "confirmed", "in_progress", "completed"),
        (TransactionKind.SERVICE, Role.SELLER): _seq(
            "requested", "confirmed", "scheduled", "in_progress", "completed"
        ),
    }
)


def flow_for(kind: TransactionKind, role: Role) -> tuple[FlowStep, ...]:
    try:
        key = (TransactionKind(status_value(kind)), Role(status_value(role)))
        return FLOW_TABLE[key]
    except (ValueError, KeyError) as e:
        raise FlowTableError(f"no flow defined for kind={kind!r} role={role!r}") from e


def index_of(flow: tuple[FlowStep, ...], step_id: str) -> int:
    for i, step in enumerate(flow):
        if step.id == step_id:
            return i
    return -1
