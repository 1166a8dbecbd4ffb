import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from orderdesk.config import Settings
from orderdesk.models.company_settings import CompanySettings
from orderdesk.schemas.settings import CompanySettingsRead, CompanySettingsUpdate

logger = logging.getLogger(__name__)


def _current(db: Session):
    return (
        db.execute(select(CompanySettings).order_by(CompanySettings.updated_at.desc()))
        .scalars()
        .first()
    )


def get_company_settings(db: Session, app_settings: Settings) -> CompanySettingsRead:
    current = _current(db)
    if current is None:
        return CompanySettingsRead(
            company_name=app_settings.DEFAULT_COMPANY_NAME,
            email=app_settings.DEFAULT_COMPANY_EMAIL,
            is_default=True,
        )
    return CompanySettingsRead.model_validate(current)


def update_company_settings(
    db: Session,
    payload: CompanySettingsUpdate,
    app_settings: Settings,
) -> CompanySettingsRead:
    values = payload.model_dump(exclude_unset=True)
    if values.get("company_name") is None:
        values.pop("company_name", None)

    current = _current(db)
    if current is None:
        values.setdefault("company_name", app_settings.DEFAULT_COMPANY_NAME)
        current = CompanySettings(**values)
        db.add(current)
        logger.info("Created company settings.")
    else:
        for key, value in values.items():
            setattr(current, key, value)
    db.commit()
    db.refresh(current)
    return CompanySettingsRead.model_validate(current)


__all__ = ["get_company_settings", "update_company_settings"]
