"""
badges.py
- Purpose: Fixed human strings keyed by display status (badge label) and the
  per-role status panel config (title, description, allowed actions).
- Keep these stable; they are surfaced in UI copy.
"""

from types import MappingProxyType

from order_timeline.constants.statuses import Role, TransactionKind
from order_timeline.timeline.mapper import status_value
from order_timeline.timeline.types import Badge, StatusConfig

UNKNOWN_TITLE = "Unknown Status"

BADGE_TITLES = MappingProxyType(
    {
        "pending": "Pending",
        "processing": "Processing",
        "shipped": "Shipped",
        "delivered": "Delivered",
        "returned": "Returned",
        "requested": "Booking Requested",
        "confirmed": "Confirmed",
        "scheduled": "Scheduled",
        "in_progress": "Service in Progress",
        "completed": "Service Completed",
        "cancelled": "Cancelled",
        "no_show": "No Show",
        "rescheduled": "Rescheduled",
    }
)


def badge_for(display_status, *, known: bool = True) -> Badge:
    value = status_value(display_status)
    title = BADGE_TITLES.get(value, UNKNOWN_TITLE) if known else UNKNOWN_TITLE
    return Badge(label=f"Status: {title}", display_status=value)


def _cfg(title: str, description: str, *actions: str) -> StatusConfig:
    return StatusConfig(title=title, description=description, actions=tuple(actions))


_PRODUCT_BUYER = {
    "pending": _cfg("Order Placed", "Order received and being processed", "cancel", "view_details"),
    "processing": _cfg("Processing", "Preparing your order for shipment", "view_details"),
    "shipped": _cfg("Shipped", "Order is on its way to you", "track", "view_details"),
    "delivered": _cfg("Delivered", "Order successfully delivered", "review", "reorder", "view_details"),
    "cancelled": _cfg("Cancelled", "Order has been cancelled", "reorder", "view_details"),
    "returned": _cfg("Returned", "Order has been returned", "view_details"),
}

_PRODUCT_SELLER = {
    "pending": _cfg("Awaiting Action", "Customer order needs your attention", "accept", "decline", "message"),
    "processing": _cfg(
        "Processing", "Order accepted, preparing for shipment", "add_tracking", "mark_shipped", "message"
    ),
    "shipped": _cfg("Shipped", "Order is on its way to customer", "add_tracking", "message"),
    "delivered": _cfg("Delivered", "Order successfully delivered to customer", "message"),
    "cancelled": _cfg("Cancelled", "This order has been cancelled", "message"),
    "returned": _cfg("Returned", "Order has been returned by customer", "message"),
}

_SERVICE_BUYER = {
    "requested": _cfg("Booking Requested", "Waiting for provider confirmation", "cancel", "message"),
    "confirmed": _cfg(
        "Booking Confirmed", "Your appointment is confirmed", "cancel", "reschedule", "message", "view_details"
    ),
    "in_progress": _cfg(
        "Service in Progress", "Your service is currently being performed", "message", "view_details"
    ),
    "completed": _cfg(
        "Service Completed", "Service has been successfully completed", "message", "view_details", "review"
    ),
    "cancelled": _cfg("Cancelled", "This booking has been cancelled", "message"),
    "no_show": _cfg("No Show", "Appointment missed", "reschedule", "message"),
    "rescheduled": _cfg(
        "Rescheduled", "Appointment has been moved to a new time", "cancel", "reschedule", "message", "view_details"
    ),
}

_SERVICE_SELLER = {
    "requested": _cfg(
        "Booking Confirmation Required",
        "Customer is waiting for you to confirm this booking",
        "accept",
        "decline",
        "message",
    ),
    "scheduled": _cfg(
        "Appointment Scheduled", "Booking confirmed, appointment upcoming", "reschedule", "message", "view_details"
    ),
    "in_progress": _cfg("Service in Progress", "Service is currently being performed", "message", "view_details"),
    "completed": _cfg(
        "Service Completed", "Service has been completed successfully", "message", "view_details", "review"
    ),
    "cancelled": _cfg("Booking Cancelled", "This booking has been cancelled", "message"),
    "no_show": _cfg("Customer No Show", "Customer did not attend", "reschedule", "message"),
    "rescheduled": _cfg(
        "Rescheduled", "Appointment has been moved to a new time", "reschedule", "message", "view_details"
    ),
}

STATUS_CONFIGS = MappingProxyType(
    {
        (TransactionKind.PRODUCT, Role.BUYER): MappingProxyType(_PRODUCT_BUYER),
        (TransactionKind.PRODUCT, Role.SELLER): MappingProxyType(_PRODUCT_SELLER),
        (TransactionKind.SERVICE, Role.BUYER): MappingProxyType(_SERVICE_BUYER),
        (TransactionKind.SERVICE, Role.SELLER): MappingProxyType(_SERVICE_SELLER),
    }
)

UNKNOWN_CONFIG = _cfg(UNKNOWN_TITLE, "Status information unavailable")


def status_config_for(kind: TransactionKind, role: Role, display_status) -> StatusConfig:
    configs = STATUS_CONFIGS.get((kind, role), {})
    return configs.get(status_value(display_status), UNKNOWN_CONFIG)
