from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from orderdesk.config import Settings
from orderdesk.dependencies import get_app_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(settings: Settings = Depends(get_app_settings)):
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "time": datetime.now(timezone.utc).isoformat(),
    }
