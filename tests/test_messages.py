"""Tests for contact message endpoints."""

import pytest
from httpx import AsyncClient

VALID = {"name": "Jane", "email": "jane@example.com", "phone": "555-0100", "message": "Hello there"}


@pytest.mark.asyncio
async def test_create_message_confirms_without_echo(client: AsyncClient):
    response = await client.post("/api/messages", json=VALID)
    assert response.status_code == 201
    assert response.json() == {"message": "Message received successfully!"}


@pytest.mark.asyncio
async def test_messages_listed_newest_first(client: AsyncClient):
    await client.post("/api/messages", json={**VALID, "message": "first"})
    await client.post("/api/messages", json={**VALID, "message": "second"})

    listing = (await client.get("/api/messages")).json()
    assert [m["message"] for m in listing] == ["second", "first"]
    assert listing[0]["email"] == "jane@example.com"
    assert listing[0]["_id"] != listing[1]["_id"]
    assert "createdAt" in listing[0]


@pytest.mark.asyncio
async def test_message_requires_all_fields(client: AsyncClient):
    response = await client.post("/api/messages", json={"name": "Jane", "message": "Hi"})
    assert response.status_code == 400
    assert response.json()["error"]["detail"] == {"missing": ["email", "phone"]}

    assert (await client.get("/api/messages")).json() == []


@pytest.mark.asyncio
async def test_no_body_is_client_error(client: AsyncClient):
    response = await client.post("/api/messages")
    assert response.status_code == 400
