"""
engine.py
- Purpose: Project one stored status onto a role-specific progress timeline.
- Flow: resolve -> flow lookup -> annotate -> (not in flow) apply_branch -> dedupe.

Pure and synchronous: output depends only on the arguments, so calls can run
concurrently without coordination. Never raises for an unknown status or a
missing/unusable creation timestamp; an undefined (kind, role) pair raises
FlowTableError because the table is meant to be total.
"""

from __future__ import annotations

import logging
from datetime import datetime

from order_timeline.constants.statuses import UNKNOWN_STEP_ID, Role, StepState, TransactionKind
from order_timeline.timeline.annotate import annotate
from order_timeline.timeline.badges import UNKNOWN_CONFIG, UNKNOWN_TITLE, badge_for, status_config_for
from order_timeline.timeline.branches import apply_branch
from order_timeline.timeline.dedupe import dedupe
from order_timeline.timeline.flows import flow_for
from order_timeline.timeline.mapper import resolve, status_value
from order_timeline.timeline.types import NOT_IN_FLOW, Step, Timeline, TimelineResult

logger = logging.getLogger("app.timeline")


def unknown_timeline() -> Timeline:
    return (
        Step(
            id=UNKNOWN_STEP_ID,
            label=UNKNOWN_TITLE,
            state=StepState.CURRENT,
            description="Status information unavailable",
        ),
    )


def build_timeline(
    raw_status,
    transaction_kind: TransactionKind,
    role: Role,
    created_at: datetime | None = None,
    *,
    transaction_id: str | None = None,
    previous_status=None,
    step_days: int = 1,
) -> TimelineResult:
    """
    Args:
        raw_status: stored status value (enum or free text).
        previous_status: last normal-flow status before a branch transition,
            used to place the cutoff for `cancelled`. Defaults to raw_status.
        step_days: unit for synthetic dates of completed steps.
    """
    flow = flow_for(transaction_kind, role)
    kind = TransactionKind(status_value(transaction_kind))
    role = Role(status_value(role))

    raw = status_value(raw_status)
    display = resolve(raw, role)

    steps = annotate(flow, display, created_at, step_days=step_days)
    if steps is NOT_IN_FLOW:
        steps = apply_branch(
            flow,
            raw,
            display,
            role,
            kind,
            created_at,
            previous_status=previous_status,
            step_days=step_days,
        )

    if steps is None:
        logger.warning(
            "timeline.unknown_status",
            extra={
                "raw_status": raw,
                "kind": kind.value,
                "role": role.value,
                "transaction_id": transaction_id,
            },
        )
        return TimelineResult(
            badge=badge_for(display, known=False),
            timeline=unknown_timeline(),
            status_config=UNKNOWN_CONFIG,
        )

    return TimelineResult(
        badge=badge_for(display),
        timeline=dedupe(steps),
        status_config=status_config_for(kind, role, display),
    )
