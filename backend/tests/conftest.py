"""Shared fixtures — every test app gets its own temporary SQLite database."""

import os

# app.main builds a module-level app at import time and DATABASE_URL is required
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.infrastructure.database import Base
from app.main import create_app


@pytest_asyncio.fixture
async def app(tmp_path):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'blog.db'}")
    application = create_app(settings)
    async with application.state.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
