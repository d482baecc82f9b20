"""
timeline.py (schemas)
- Purpose: Request/response DTOs for the purchase progress timeline.
- Design: Keep API DTOs stable; include helper constructors for DRY mapping.
"""

import logging
from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from order_timeline.timeline.types import FlowStep, TimelineResult

logger = logging.getLogger("app.schemas")

_DATETIME = TypeAdapter(datetime)

MAX_STATUS_LENGTH = 64

StepStateLiteral = Literal["completed", "current", "future", "skipped"]


class TimelineRequest(BaseModel):
    """
    kind/role are validated by the service so errors use the AppError envelope.
    raw_status is free text: unknown values render an "Unknown Status" timeline.
    """
    raw_status: str
    transaction_kind: str
    role: str = "buyer"
    created_at: Optional[datetime] = None
    transaction_id: Optional[str] = Field(default=None, max_length=128)
    previous_status: Optional[str] = Field(
        default=None,
        description="Last normal-flow status before a cancellation; places the cutoff.",
    )

    @field_validator("created_at", mode="before")
    @classmethod
    def _lenient_created_at(cls, value: Any) -> Optional[datetime]:
        # Dates are best-effort; an unparseable timestamp only drops them.
        if value is None or value == "":
            return None
        try:
            return _DATETIME.validate_python(value)
        except ValidationError:
            logger.warning("timeline.created_at_unparseable", extra={"created_at": str(value)[:64]})
            return None

    @field_validator("raw_status", mode="before")
    @classmethod
    def _clip_raw_status(cls, value: Any) -> Any:
        # No known status is this long; keep it unknown without echoing unbounded input.
        if isinstance(value, str) and len(value) > MAX_STATUS_LENGTH:
            return value[:MAX_STATUS_LENGTH]
        return value

    @field_validator("previous_status", mode="before")
    @classmethod
    def _drop_oversized_previous_status(cls, value: Any) -> Any:
        if isinstance(value, str) and len(value) > MAX_STATUS_LENGTH:
            logger.warning("timeline.previous_status_dropped", extra={"length": len(value)})
            return None
        return value


class StepOut(BaseModel):
    id: str
    label: str
    state: StepStateLiteral
    description: str
    occurred_at: Optional[datetime] = Field(
        default=None,
        description="First step: creation time. Other completed steps: synthetic placeholder, not a real event time.",
    )


class BadgeOut(BaseModel):
    label: str
    display_status: str


class StatusConfigOut(BaseModel):
    title: str
    description: str
    actions: list[str]


class TimelineResponse(BaseModel):
    transaction_id: Optional[str] = None
    badge: BadgeOut
    timeline: list[StepOut]
    status_config: StatusConfigOut

    @classmethod
    def from_result(cls, result: TimelineResult, *, transaction_id: Optional[str] = None) -> "TimelineResponse":
        """
        DRY mapper from engine result -> response DTO.
        """
        return cls(
            transaction_id=transaction_id,
            badge=BadgeOut(label=result.badge.label, display_status=result.badge.display_status),
            timeline=[
                StepOut(
                    id=s.id,
                    label=s.label,
                    state=s.state.value,
                    description=s.description,
                    occurred_at=s.occurred_at,
                )
                for s in result.timeline
            ],
            status_config=StatusConfigOut(
                title=result.status_config.title,
                description=result.status_config.description,
                actions=list(result.status_config.actions),
            ),
        )


class FlowStepOut(BaseModel):
    id: str
    label: str
    description: str


class FlowResponse(BaseModel):
    transaction_kind: str
    role: str
    steps: list[FlowStepOut]

    @classmethod
    def from_flow(cls, kind: str, role: str, flow: tuple[FlowStep, ...]) -> "FlowResponse":
        return cls(
            transaction_kind=kind,
            role=role,
            steps=[FlowStepOut(id=f.id, label=f.label, description=f.description) for f in flow],
        )
