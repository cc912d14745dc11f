"""Tests for appointment endpoints."""

import pytest
from httpx import AsyncClient

from site_api.errors import StorageError
from site_api.stores import RecordStore

VALID = {"name": "A", "phone": "1", "date": "2024-01-01", "service": "Haircut"}


@pytest.mark.asyncio
async def test_create_appointment_returns_saved_record(client: AsyncClient):
    response = await client.post("/api/appointments", json=VALID)
    assert response.status_code == 201

    data = response.json()
    assert data["message"] == "Appointment saved successfully"
    appointment = data["appointment"]
    assert appointment["_id"]
    assert appointment["createdAt"]
    for key, value in VALID.items():
        assert appointment[key] == value


@pytest.mark.asyncio
async def test_created_appointment_is_listed_first(client: AsyncClient):
    await client.post("/api/appointments", json={**VALID, "name": "Older"})
    created = (await client.post("/api/appointments", json=VALID)).json()["appointment"]

    response = await client.get("/api/appointments")
    assert response.status_code == 200
    listing = response.json()
    assert len(listing) == 2
    assert listing[0] == created
    assert listing[1]["name"] == "Older"


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["name", "phone", "date", "service"])
async def test_missing_field_is_rejected_without_persisting(client: AsyncClient, missing: str):
    payload = {k: v for k, v in VALID.items() if k != missing}

    response = await client.post("/api/appointments", json=payload)
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert error["message"] == "All fields are required."
    assert error["detail"] == {"missing": [missing]}

    assert (await client.get("/api/appointments")).json() == []


@pytest.mark.asyncio
async def test_empty_string_counts_as_missing(client: AsyncClient):
    response = await client.post("/api/appointments", json={**VALID, "phone": ""})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_malformed_body_is_client_error(client: AsyncClient):
    response = await client.post(
        "/api/appointments",
        content="{not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.asyncio
async def test_storage_fault_is_server_error(
    client: AsyncClient, store: RecordStore, monkeypatch: pytest.MonkeyPatch
):
    async def failing_insert(fields):
        raise StorageError("connection refused")

    monkeypatch.setattr(store.appointments, "insert", failing_insert)

    response = await client.post("/api/appointments", json=VALID)
    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "STORAGE_ERROR"
    assert error["message"] == "Server error"
    assert error["detail"] == {"error": "connection refused"}


@pytest.mark.asyncio
async def test_numeric_field_is_stored_as_text(client: AsyncClient):
    response = await client.post("/api/appointments", json={**VALID, "phone": 5551234})
    assert response.status_code == 201
    assert response.json()["appointment"]["phone"] == "5551234"

    listing = (await client.get("/api/appointments")).json()
    assert listing[0]["phone"] == "5551234"


@pytest.mark.asyncio
@pytest.mark.parametrize("falsy", [0, False])
async def test_falsy_scalar_counts_as_missing(client: AsyncClient, falsy):
    response = await client.post("/api/appointments", json={**VALID, "phone": falsy})
    assert response.status_code == 400
    assert response.json()["error"]["detail"] == {"missing": ["phone"]}


@pytest.mark.asyncio
async def test_nested_value_is_client_error(client: AsyncClient):
    response = await client.post("/api/appointments", json={**VALID, "phone": ["555"]})
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Invalid request payload."
