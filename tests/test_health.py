"""Tests for health endpoint."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health endpoint returns ok."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_openapi_lists_api_routes(client: AsyncClient):
    response = await client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    for path in (
        "/api/appointments",
        "/api/messages",
        "/api/blogs",
        "/api/blogs/{blog_id}",
        "/api/open-hours",
        "/api/open-hours/{hour_id}",
        "/api/upload",
        "/api/export/{export_type}",
    ):
        assert path in paths
