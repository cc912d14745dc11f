"""Shared fixtures: an app backed by a throwaway SQLite store and upload dir."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from site_api.main import create_app
from site_api.settings import Settings
from site_api.stores import RecordStore


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'site.db'}",
        upload_dir=tmp_path / "uploads",
    )


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """App with an opened store and empty tables.

    ASGITransport does not run the lifespan, so the store is opened here.
    """
    application = create_app(settings)
    store: RecordStore = application.state.store
    await store.open()
    await store.create_tables()
    application.state.uploads.ensure_dir()
    yield application
    await store.close()


@pytest.fixture
def store(app: FastAPI) -> RecordStore:
    return app.state.store


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
