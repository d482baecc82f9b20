from fastapi import APIRouter

from order_timeline.core.config import settings

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok", "env": settings.env}
