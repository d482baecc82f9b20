# order_timeline/timeline/__init__.py
from order_timeline.timeline.engine import build_timeline
from order_timeline.timeline.errors import FlowTableError, TimelineError
from order_timeline.timeline.flows import flow_for
from order_timeline.timeline.mapper import resolve
from order_timeline.timeline.types import Badge, Step, StatusConfig, Timeline, TimelineResult

__all__ = [
    "build_timeline",
    "flow_for",
    "resolve",
    "Badge",
    "Step",
    "StatusConfig",
    "Timeline",
    "TimelineResult",
    "FlowTableError",
    "TimelineError",
]
