from fastapi import APIRouter

from order_timeline.core.config import settings

router = APIRouter(prefix="/api", tags=["Root"])

@router.get("/")
def root():
    return {"message": f"{settings.app_name} running", "docs": "/docs"}
