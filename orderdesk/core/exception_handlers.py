import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from orderdesk.core.errors import CollaboratorFailure, OrderDeskError

logger = logging.getLogger(__name__)


def _field_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for item in exc.errors():
        location = [str(part) for part in item.get("loc", ()) if part != "body"]
        errors.append({"field": ".".join(location), "message": item.get("msg", "")})
    return errors


def setup_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(OrderDeskError)
    async def order_desk_error_handler(request: Request, exc: OrderDeskError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(content=exc.to_payload(), status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            content={"error": str(exc.detail)},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    # Malformed bodies are client errors like any other validation failure.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        payload = {
            "error": "Invalid request",
            "kind": "validation_failure",
            "details": _field_errors(exc),
        }
        return JSONResponse(content=payload, status_code=400)

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception(
            "Database error on %s %s",
            request.method,
            request.url.path,
            extra={"db_error_code": getattr(exc, "code", None), "db_error": str(getattr(exc, "orig", exc))},
        )
        failure = CollaboratorFailure("Database error", details={"reason": exc.__class__.__name__})
        return JSONResponse(content=failure.to_payload(), status_code=failure.status_code)


__all__ = ["setup_exception_handlers"]
