from order_timeline.services.timeline_service import TimelineService


def get_timeline_service() -> TimelineService:
    """
    Provides the timeline service.
    Using Depends(get_timeline_service) allows for easy overriding in tests.
    """
    return TimelineService()
