from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orderdesk import __version__
from orderdesk.config import Settings, get_settings
from orderdesk.core.exception_handlers import setup_exception_handlers
from orderdesk.core.logging import setup_logging
from orderdesk.core.security import IdentityVerifier
from orderdesk.database import Database
from orderdesk.routers import (
    clients_router,
    dashboard_router,
    health_router,
    inventory_router,
    orders_router,
    products_router,
    settings_router,
)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings)
    database = database or Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        database.create_all()
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(title=settings.APP_NAME, version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.identity_verifier = IdentityVerifier(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(clients_router)
    app.include_router(products_router)
    app.include_router(inventory_router)
    app.include_router(orders_router)
    app.include_router(dashboard_router)
    app.include_router(settings_router)
    return app


app = create_app()


__all__ = ["app", "create_app"]
