"""Tests for the health check endpoint and the startup liveness check."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.domain.exceptions import DatabaseUnavailableError
from app.main import create_app, lifespan

_UNREACHABLE = "sqlite:////nonexistent-directory/blog/blog.db"


@pytest.mark.asyncio
async def test_health_check_returns_200(client: AsyncClient):
    """Health endpoint should return 200 with status, version, environment and database."""
    response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "ok"
    assert "version" in data
    assert "environment" in data


@pytest.mark.asyncio
async def test_health_check_reports_unreachable_database():
    app = create_app(Settings(database_url=_UNREACHABLE))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    await app.state.engine.dispose()


@pytest.mark.asyncio
async def test_startup_fails_when_database_unreachable():
    app = create_app(Settings(database_url=_UNREACHABLE))
    with pytest.raises(DatabaseUnavailableError):
        async with lifespan(app):
            pass
    await app.state.engine.dispose()


@pytest.mark.asyncio
async def test_lifespan_runs_against_reachable_database(app):
    async with lifespan(app):
        assert app.state.engine is not None


class _RecordingEngine:
    def __init__(self):
        self.disposed = False

    async def dispose(self):
        self.disposed = True


@pytest.mark.asyncio
async def test_pool_released_when_startup_check_fails(app, monkeypatch):
    async def refuse(engine):
        raise DatabaseUnavailableError(OSError("connection refused"))

    real_engine = app.state.engine
    app.state.engine = _RecordingEngine()
    monkeypatch.setattr("app.main.check_connection", refuse)
    try:
        with pytest.raises(DatabaseUnavailableError):
            async with lifespan(app):
                pass
        assert app.state.engine.disposed is True
    finally:
        app.state.engine = real_engine
