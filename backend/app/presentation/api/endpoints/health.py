"""Health check endpoint — reports app metadata and database liveness."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.domain.exceptions import DatabaseUnavailableError
from app.infrastructure.database.session import check_connection

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> JSONResponse:
    """Returns the current application health status.

    Responds 503 when the shared pool cannot run ``SELECT 1``.
    """
    settings = request.app.state.settings
    body = {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": "ok",
    }
    try:
        await check_connection(request.app.state.engine)
    except DatabaseUnavailableError as e:
        logger.warning("Health check failed: %s", e)
        body.update(status="unhealthy", database=str(e.cause))
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return JSONResponse(content=body)
