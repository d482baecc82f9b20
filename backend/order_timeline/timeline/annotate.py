"""
annotate.py
- Purpose: Mark happy-path steps completed / current / future by position.

Occurrence dates:
The store only keeps the creation timestamp. The first step carries it; every
other completed step gets `created_at + position * step_days`. These synthetic
dates are a display placeholder for ordering, NOT a record of when the step
happened.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from order_timeline.constants.statuses import StepState
from order_timeline.timeline.flows import index_of
from order_timeline.timeline.types import NOT_IN_FLOW, FlowStep, Step, Timeline

logger = logging.getLogger("app.timeline")


def synthetic_date(created_at: datetime | None, position: int, step_days: int = 1) -> datetime | None:
    """Best-effort placeholder date; None when it cannot be computed."""
    if not isinstance(created_at, datetime):
        return None
    try:
        return created_at + timedelta(days=position * step_days)
    except OverflowError:
        logger.warning(
            "timeline.synthetic_date_skipped",
            extra={"position": position, "created_at": created_at.isoformat()},
        )
        return None


def make_step(
    flow_step: FlowStep,
    state: StepState,
    position: int,
    created_at: datetime | None,
    *,
    step_days: int = 1,
) -> Step:
    occurred_at = None
    if position == 0:
        occurred_at = created_at if isinstance(created_at, datetime) else None
    elif state == StepState.COMPLETED:
        occurred_at = synthetic_date(created_at, position, step_days)

    return Step(
        id=flow_step.id,
        label=flow_step.label,
        state=state,
        description=flow_step.description,
        occurred_at=occurred_at,
    )


def annotate(
    flow: tuple[FlowStep, ...],
    display_status: str,
    created_at: datetime | None = None,
    *,
    step_days: int = 1,
):
    """
    Returns a Timeline, or NOT_IN_FLOW when display_status has no position in `flow`.
    """
    idx = index_of(flow, display_status)
    if idx < 0:
        return NOT_IN_FLOW

    steps: list[Step] = []
    for p, fs in enumerate(flow):
        if p < idx:
            state = StepState.COMPLETED
        elif p == idx:
            state = StepState.CURRENT
        else:
            state = StepState.FUTURE
        steps.append(make_step(fs, state, p, created_at, step_days=step_days))

    timeline: Timeline = tuple(steps)
    return timeline
