"""Exception handlers — render every failure as a ``{msg: "failed", err}`` envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from app.application.schemas import ErrorEnvelope
from app.domain.exceptions import ArticlePersistenceError, ClientDisconnectedError

logger = logging.getLogger(__name__)


def _failed(status_code: int, err: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(err=err).model_dump(),
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "invalid request"


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.detail)
    return _failed(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.warning("%s %s invalid request: %s", request.method, request.url.path, message)
    return _failed(status.HTTP_400_BAD_REQUEST, message)


async def persistence_exception_handler(
    request: Request, exc: ArticlePersistenceError
) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _failed(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("%s %s storage error", request.method, request.url.path)
    cause = getattr(exc, "orig", None) or exc
    return _failed(status.HTTP_500_INTERNAL_SERVER_ERROR, str(cause))


async def disconnect_exception_handler(
    request: Request, exc: ClientDisconnectedError
) -> JSONResponse:
    # Nobody reads this response; 499 mirrors nginx's "client closed request"
    return _failed(499, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the envelope-producing handlers to the application."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ArticlePersistenceError, persistence_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(ClientDisconnectedError, disconnect_exception_handler)
