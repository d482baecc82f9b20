"""
timeline_service.py
- Purpose: Turn a timeline request into the engine call and the response DTO.
- Owns: boundary normalization, request context, mapping engine errors to AppError.
- Design: Routers stay thin; the engine stays pure (no settings, no HTTP).
"""

import logging

from order_timeline.core import AppError, ErrorCode, ErrorReason
from order_timeline.core.config import settings
from order_timeline.core.request_context import set_context
from order_timeline.schemas.timeline import FlowResponse, TimelineRequest, TimelineResponse
from order_timeline.timeline import FlowTableError, build_timeline, flow_for
from order_timeline.validations.timeline_validators import (
    normalize_role,
    normalize_status,
    normalize_transaction_kind,
)

logger = logging.getLogger("app.timeline_service")


class TimelineService:
    def __init__(self, *, step_days: int | None = None):
        self.step_days = step_days if step_days is not None else settings.TIMELINE_SYNTHETIC_STEP_DAYS

    def render(self, req: TimelineRequest) -> TimelineResponse:
        kind = normalize_transaction_kind(req.transaction_kind)
        role = normalize_role(req.role)
        if req.transaction_id:
            set_context(transaction_id=req.transaction_id)

        try:
            result = build_timeline(
                normalize_status(req.raw_status),
                kind,
                role,
                req.created_at,
                transaction_id=req.transaction_id,
                previous_status=normalize_status(req.previous_status),
                step_days=self.step_days,
            )
        except FlowTableError as e:
            raise self._flow_missing(kind.value, role.value) from e

        logger.info(
            "timeline.rendered",
            extra={
                "kind": kind.value,
                "role": role.value,
                "display_status": result.badge.display_status,
                "steps": len(result.timeline),
            },
        )
        return TimelineResponse.from_result(result, transaction_id=req.transaction_id)

    def flow(self, transaction_kind: str, role: str) -> FlowResponse:
        kind = normalize_transaction_kind(transaction_kind)
        r = normalize_role(role)
        try:
            steps = flow_for(kind, r)
        except FlowTableError as e:
            raise self._flow_missing(kind.value, r.value) from e
        return FlowResponse.from_flow(kind.value, r.value, steps)

    @staticmethod
    def _flow_missing(kind: str, role: str) -> AppError:
        return AppError(
            code=ErrorCode.FLOW_NOT_DEFINED,
            reason=ErrorReason.FLOW_NOT_DEFINED.value,
            message=f"No timeline flow for kind={kind} role={role}",
            status_code=500,
        )
