from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from orderdesk.dependencies import get_db, require_auth
from orderdesk.schemas.dashboard import DashboardRead
from orderdesk.services.dashboard_service import dashboard_stats

router = APIRouter(prefix="/dashboard", tags=["Dashboard"], dependencies=[Depends(require_auth)])


@router.get("/stats", response_model=DashboardRead)
def get_dashboard_stats(db: Session = Depends(get_db)):
    return dashboard_stats(db)
