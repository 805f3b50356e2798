"""
Traduction des exceptions en réponses {status: "error", message}.

NotFound garde toujours le même message ; toute autre erreur serveur
devient un message générique.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from proptrack.core.exceptions import (
    AUTHENTICATION_REQUIRED_MESSAGE,
    NOT_FOUND_MESSAGE,
    OPERATION_FAILED_MESSAGE,
    AuthenticationRequiredError,
    PersistenceError,
    PropertyNotFoundError,
)
from proptrack.models import error_body

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Données invalides"


async def not_found_handler(request: Request, exc: PropertyNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(NOT_FOUND_MESSAGE),
    )


async def authentication_handler(request: Request, exc: AuthenticationRequiredError):
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body(AUTHENTICATION_REQUIRED_MESSAGE),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def persistence_handler(request: Request, exc: PersistenceError):
    logger.error(f"✗ {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(OPERATION_FAILED_MESSAGE),
    )


async def validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": [str(part) for part in error["loc"]], "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_body(VALIDATION_MESSAGE, errors),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"✗ Erreur inattendue sur {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(OPERATION_FAILED_MESSAGE),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PropertyNotFoundError, not_found_handler)
    app.add_exception_handler(AuthenticationRequiredError, authentication_handler)
    app.add_exception_handler(PersistenceError, persistence_handler)
    app.add_exception_handler(RequestValidationError, validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
