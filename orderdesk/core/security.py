from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Optional
from urllib import error, request
from urllib.parse import urlparse

import jwt
from fastapi import HTTPException, status

from orderdesk.config import Settings
from orderdesk.core.errors import CollaboratorFailure

logger = logging.getLogger(__name__)

_ALLOWED_HTTP_SCHEMES = {"http", "https"}


@dataclass(frozen=True)
class Principal:
    subject: Optional[str]
    auth_type: str
    email: Optional[str] = None
    claims: dict = field(default_factory=dict)

    @property
    def is_anonymous(self) -> bool:
        return self.auth_type == "anonymous"


ANONYMOUS = Principal(subject=None, auth_type="anonymous")


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def _forbidden(detail: str = "Unauthorized / Invalid Token") -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def get_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def _validate_user_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme.lower() not in _ALLOWED_HTTP_SCHEMES or not parsed.netloc:
        raise RuntimeError("IDENTITY_USER_URL must be an absolute HTTP(S) URL")
    return url


class IdentityVerifier:
    """Turns a bearer token into a Principal.

    With ``JWT_SECRET`` set the token is verified locally; otherwise, with
    ``IDENTITY_USER_URL`` set, the identity provider is asked who the token
    belongs to (Supabase style ``GET /auth/v1/user``).
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.user_url = (settings.IDENTITY_USER_URL or "").strip() or None
        if self.user_url:
            _validate_user_url(self.user_url)

    @property
    def configured(self) -> bool:
        return bool(self.settings.JWT_SECRET or self.user_url)

    def authenticate(self, authorization: Optional[str]) -> Principal:
        if not authorization:
            if not self.settings.AUTH_REQUIRED:
                return ANONYMOUS
            raise _unauthenticated("Missing authorization header")

        token = get_bearer_token(authorization)
        if not token:
            raise _unauthenticated("Invalid token format")

        if not self.configured:
            if not self.settings.AUTH_REQUIRED:
                return ANONYMOUS
            raise _unauthenticated("Authentication is not configured")

        if self.settings.JWT_SECRET:
            return self._verify_jwt(token)
        return self._verify_remote(token)

    def _verify_jwt(self, token: str) -> Principal:
        settings = self.settings
        options = {"verify_aud": bool(settings.JWT_AUDIENCE)}
        try:
            claims = jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=[settings.JWT_ALGORITHM],
                audience=settings.JWT_AUDIENCE,
                issuer=settings.JWT_ISSUER,
                options=options,
            )
        except jwt.PyJWTError as exc:
            logger.warning("Rejected bearer token: %s", exc)
            raise _forbidden() from exc
        return Principal(
            subject=claims.get("sub"),
            auth_type="jwt",
            email=claims.get("email"),
            claims=claims,
        )

    def _verify_remote(self, token: str) -> Principal:
        headers = {
            "Authorization": "Bearer {}".format(token),
            "Accept": "application/json",
        }
        if self.settings.IDENTITY_API_KEY:
            headers["apikey"] = self.settings.IDENTITY_API_KEY

        req = request.Request(self.user_url, method="GET", headers=headers)
        try:
            with request.urlopen(req, timeout=self.settings.IDENTITY_TIMEOUT_SECONDS) as response:  # nosec B310
                body = response.read()
        except error.HTTPError as exc:
            if exc.code in (400, 401, 403, 404):
                logger.warning("Identity provider rejected token: HTTP %s", exc.code)
                raise _forbidden() from exc
            raise CollaboratorFailure(
                "Identity provider error",
                details={"status": exc.code},
            ) from exc
        except error.URLError as exc:
            raise CollaboratorFailure(
                "Identity provider unreachable",
                details={"reason": str(exc.reason)},
            ) from exc

        try:
            user = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, ValueError) as exc:
            raise CollaboratorFailure("Identity provider returned invalid JSON") from exc

        if not isinstance(user, dict) or not user.get("id"):
            raise _forbidden()
        return Principal(
            subject=user["id"],
            auth_type="remote",
            email=user.get("email"),
            claims=user,
        )


__all__ = ["ANONYMOUS", "IdentityVerifier", "Principal", "get_bearer_token"]
