from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from orderdesk.config import Settings
from orderdesk.dependencies import get_app_settings, get_db, require_auth
from orderdesk.schemas.settings import CompanySettingsRead, CompanySettingsUpdate
from orderdesk.services.settings_service import get_company_settings, update_company_settings

router = APIRouter(prefix="/settings", tags=["Settings"], dependencies=[Depends(require_auth)])


@router.get("", response_model=CompanySettingsRead)
def read_settings(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    return get_company_settings(db, settings)


@router.put("", response_model=CompanySettingsRead)
def write_settings(
    payload: CompanySettingsUpdate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    return update_company_settings(db, payload, settings)
