from typing import Optional

from fastapi import Header, Request

from orderdesk.config import Settings
from orderdesk.core.security import Principal
from orderdesk.database.session import get_db


def require_auth(
    request: Request,
    authorization: Optional[str] = Header(None),
) -> Principal:
    principal = request.app.state.identity_verifier.authenticate(authorization)
    request.state.principal = principal
    return principal


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


__all__ = ["get_app_settings", "get_db", "require_auth"]
