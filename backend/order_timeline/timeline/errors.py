# order_timeline/timeline/errors.py
class TimelineError(Exception):
    """Base timeline engine error."""

class FlowTableError(TimelineError):
    """No flow defined for a (kind, role) pair. Programming error, never recovered."""
