from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Order Desk"
    ENVIRONMENT: str = "local"
    CORS_ORIGINS: str = "*"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./orderdesk.db"
    DATABASE_ECHO: bool = False

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Security
    # ==============================
    AUTH_REQUIRED: bool = True
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: Optional[str] = None
    JWT_ISSUER: Optional[str] = None
    IDENTITY_USER_URL: Optional[str] = None
    IDENTITY_API_KEY: Optional[str] = None
    IDENTITY_TIMEOUT_SECONDS: float = 10.0

    # ==============================
    # Orders
    # ==============================
    ORDER_FORWARD_ONLY: bool = False

    # ==============================
    # Company settings fallback
    # ==============================
    DEFAULT_COMPANY_NAME: str = "Print Shop"
    DEFAULT_COMPANY_EMAIL: Optional[str] = None

    def cors_origins(self) -> list[str]:
        return [value.strip() for value in self.CORS_ORIGINS.split(",") if value.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
