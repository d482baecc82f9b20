"""
timeline.py
- Purpose: API routes for rendering purchase progress timelines.
- Design: Keep router thin. Delegate to TimelineService.
"""

from fastapi import APIRouter, Depends, Query

from order_timeline.api.deps import get_timeline_service
from order_timeline.schemas.timeline import FlowResponse, TimelineRequest, TimelineResponse
from order_timeline.services.timeline_service import TimelineService

router = APIRouter(prefix="/api/timelines", tags=["Timelines"])


@router.post("", response_model=TimelineResponse)
def render_timeline(req: TimelineRequest, svc: TimelineService = Depends(get_timeline_service)):
    return svc.render(req)


@router.get("/flows/{transaction_kind}", response_model=FlowResponse)
def get_flow(
    transaction_kind: str,
    role: str = Query("buyer"),
    svc: TimelineService = Depends(get_timeline_service),
):
    """Happy-path steps for a (kind, role), without states."""
    return svc.flow(transaction_kind, role)
