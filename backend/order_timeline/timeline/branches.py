"""
branches.py
- Purpose: Project branch statuses (cancelled / returned / rescheduled / no_show)
  onto the happy path.

A branch is not a position in the flow, so each policy decides a cutoff: how far
the transaction got before it diverged. Steps before the cutoff are completed,
steps after it are skipped (or future, for rescheduled), and a synthetic branch
step is appended as the current one.

Caller precondition: the store keeps a single status field. For `cancelled` the
cutoff is inferred from the pre-branch status (`previous_status`). If the caller
overwrote the status without recording what it was before, the cutoff falls
back to the earliest step and the rendered progress understates reality.
"""

from __future__ import annotations

import logging
from datetime import datetime

from order_timeline.constants.statuses import (
    BRANCHES_BY_KIND,
    RawStatus,
    Role,
    StepState,
    TransactionKind,
)
from order_timeline.timeline.annotate import make_step
from order_timeline.timeline.flows import index_of
from order_timeline.timeline.mapper import status_value
from order_timeline.timeline.types import FlowStep, Step, Timeline

logger = logging.getLogger("app.timeline")

CANCELLED = RawStatus.CANCELLED.value
RETURNED = RawStatus.RETURNED.value
RESCHEDULED = RawStatus.RESCHEDULED.value
NO_SHOW = RawStatus.NO_SHOW.value

REQUESTED = RawStatus.REQUESTED.value
CONFIRMED = RawStatus.CONFIRMED.value
SCHEDULED = RawStatus.SCHEDULED.value
IN_PROGRESS = RawStatus.IN_PROGRESS.value

_CANCELLED_DESCRIPTION = {
    TransactionKind.PRODUCT: "Order has been cancelled",
    TransactionKind.SERVICE: "Booking has been cancelled",
}

_NO_SHOW_DESCRIPTION = {
    Role.BUYER: "Appointment missed",
    Role.SELLER: "Customer did not attend",
}


def _branch_step(step_id: str, label: str, description: str) -> Step:
    return Step(id=step_id, label=label, state=StepState.CURRENT, description=description)


def _partition(
    flow: tuple[FlowStep, ...],
    cutoff: int,
    created_at: datetime | None,
    *,
    cutoff_state: StepState = StepState.COMPLETED,
    step_days: int = 1,
) -> list[Step]:
    """Before cutoff -> completed, cutoff -> cutoff_state, after -> skipped."""
    steps: list[Step] = []
    for p, fs in enumerate(flow):
        if p < cutoff:
            state = StepState.COMPLETED
        elif p == cutoff:
            state = cutoff_state
        else:
            state = StepState.SKIPPED
        steps.append(make_step(fs, state, p, created_at, step_days=step_days))
    return steps


def cancel_cutoff(flow: tuple[FlowStep, ...], pre_branch: str, role: Role) -> int:
    if pre_branch == CONFIRMED or (role == Role.BUYER and pre_branch == SCHEDULED):
        cutoff_id = CONFIRMED
    elif pre_branch == IN_PROGRESS:
        cutoff_id = IN_PROGRESS
    else:
        cutoff_id = REQUESTED

    idx = index_of(flow, cutoff_id)
    if idx < 0:
        # Product flows have none of the booking ids; use the pre-branch position.
        idx = max(index_of(flow, pre_branch), 0)
    return idx


def no_show_cutoff(flow: tuple[FlowStep, ...], role: Role) -> int:
    cutoff_id = CONFIRMED
    if role == Role.SELLER and index_of(flow, SCHEDULED) >= 0:
        cutoff_id = SCHEDULED
    return max(index_of(flow, cutoff_id), 0)


def _cancelled(flow, raw_status, pre_branch, role, kind, created_at, step_days) -> list[Step]:
    cutoff = cancel_cutoff(flow, pre_branch, role)
    cutoff_state = StepState.CURRENT if raw_status == flow[cutoff].id else StepState.COMPLETED
    steps = _partition(flow, cutoff, created_at, cutoff_state=cutoff_state, step_days=step_days)
    steps.append(_branch_step(CANCELLED, "Cancelled", _CANCELLED_DESCRIPTION[kind]))
    return steps


def _returned(flow, created_at, step_days) -> list[Step]:
    steps = [make_step(fs, StepState.COMPLETED, p, created_at, step_days=step_days) for p, fs in enumerate(flow)]
    steps.append(_branch_step(RETURNED, "Returned", "Order has been returned"))
    return steps


def _rescheduled(flow, created_at) -> list[Step]:
    steps: list[Step] = []
    for p, fs in enumerate(flow):
        if fs.id in (REQUESTED, CONFIRMED):
            # confirmed is dated one day after creation, whatever the step unit
            steps.append(make_step(fs, StepState.COMPLETED, p, created_at, step_days=1))
        else:
            steps.append(make_step(fs, StepState.FUTURE, p, created_at))
    steps.append(_branch_step(RESCHEDULED, "Rescheduled", "Appointment has been rescheduled"))
    return steps


def _no_show(flow, role, created_at, step_days) -> list[Step]:
    cutoff = no_show_cutoff(flow, role)
    steps = _partition(flow, cutoff, created_at, step_days=step_days)
    steps.append(_branch_step(NO_SHOW, "No Show", _NO_SHOW_DESCRIPTION[role]))
    return steps


def is_branch(display_status: str, kind: TransactionKind) -> bool:
    return display_status in BRANCHES_BY_KIND[kind]


def apply_branch(
    flow: tuple[FlowStep, ...],
    raw_status,
    display_status: str,
    role: Role,
    kind: TransactionKind,
    created_at: datetime | None = None,
    *,
    previous_status=None,
    step_days: int = 1,
) -> Timeline | None:
    """
    Returns None when display_status is not a branch for this transaction kind.
    The returned Timeline may still need dedupe().
    """
    role = Role(status_value(role))
    kind = TransactionKind(status_value(kind))
    if not is_branch(display_status, kind):
        return None

    raw = status_value(raw_status)
    pre_branch = status_value(previous_status) or raw

    if display_status == CANCELLED:
        steps = _cancelled(flow, raw, pre_branch, role, kind, created_at, step_days)
    elif display_status == RETURNED:
        steps = _returned(flow, created_at, step_days)
    elif display_status == RESCHEDULED:
        steps = _rescheduled(flow, created_at)
    else:
        steps = _no_show(flow, role, created_at, step_days)

    logger.debug(
        "timeline.branch_applied",
        extra={"branch": display_status, "pre_branch": pre_branch, "kind": kind.value, "role": role.value},
    )
    return tuple(steps)
