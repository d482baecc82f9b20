"""order_timeline/timeline/types.py

Immutable value types produced by the timeline projection engine.
Design goals:
- every call builds fresh objects (no shared mutable arrays)
- tuples instead of lists so a produced Timeline cannot be edited in place
"""

from dataclasses import dataclass, field, replace
from datetime import datetime

from order_timeline.constants.statuses import StepState


@dataclass(frozen=True)
class FlowStep:
    id: str
    label: str
    description: str


@dataclass(frozen=True)
class Step:
    id: str
    label: str
    state: StepState
    description: str
    # Synthetic for most completed steps, see annotate.synthetic_date
    occurred_at: datetime | None = None

    def with_state(self, state: StepState) -> "Step":
        return replace(self, state=state)


Timeline = tuple[Step, ...]


@dataclass(frozen=True)
class Badge:
    label: str  # e.g. "Status: Confirmed"
    display_status: str


@dataclass(frozen=True)
class StatusConfig:
    title: str
    description: str
    actions: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TimelineResult:
    badge: Badge
    timeline: Timeline
    status_config: StatusConfig


class _NotInFlow:
    """Sentinel returned by annotate() when the display status is not a happy-path position."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_IN_FLOW"

    def __bool__(self) -> bool:
        return False


NOT_IN_FLOW = _NotInFlow()
