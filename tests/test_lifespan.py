"""Tests for application startup and shutdown."""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from site_api.main import create_app
from site_api.settings import Settings
from site_api.stores import RecordStore

APPOINTMENT = {"name": "A", "phone": "1", "date": "2024-01-01", "service": "Haircut"}


def _settings(tmp_path: Path, database_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{database_path}",
        upload_dir=tmp_path / "uploads",
        create_tables=True,
    )


@pytest.mark.asyncio
async def test_startup_opens_store_and_shutdown_closes_it(tmp_path: Path):
    app = create_app(_settings(tmp_path, tmp_path / "site.db"))
    store: RecordStore = app.state.store
    assert not store.is_open

    async with app.router.lifespan_context(app):
        assert store.is_open
        assert (tmp_path / "uploads").is_dir()

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            created = await client.post("/api/appointments", json=APPOINTMENT)
            assert created.status_code == 201

            listing = (await client.get("/api/appointments")).json()
            assert listing == [created.json()["appointment"]]

    assert not store.is_open


@pytest.mark.asyncio
async def test_unreachable_database_does_not_block_startup(tmp_path: Path):
    app = create_app(_settings(tmp_path, tmp_path / "missing" / "site.db"))

    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            assert (await client.get("/health")).json() == {"ok": True}

            response = await client.post("/api/appointments", json=APPOINTMENT)
            assert response.status_code == 500
            assert response.json()["error"]["code"] == "STORAGE_ERROR"

    assert not app.state.store.is_open
