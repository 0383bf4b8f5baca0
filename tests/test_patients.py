"""Tests for patient endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient


async def create_patient(client: AsyncClient, headers: dict, data: dict) -> dict:
    response = await client.post("/api/v1/patients/upsert", json=data, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_patient(client: AsyncClient, auth_headers, sample_patient_data):
    """Test creating a patient; the email is stored lowercased."""
    data = await create_patient(client, auth_headers, sample_patient_data)

    assert data["name"] == "Carlos Lima"
    assert data["email"] == "carlos.lima@example.com"
    assert data["sex"] == "male"
    assert "id" in data


@pytest.mark.asyncio
async def test_update_patient(client: AsyncClient, auth_headers, sample_patient_data):
    """Test that an upsert with id updates the same patient."""
    created = await create_patient(client, auth_headers, sample_patient_data)

    updated = await create_patient(
        client,
        auth_headers,
        {**sample_patient_data, "id": created["id"], "phone_number": "(11) 3333-4444"},
    )

    assert updated["id"] == created["id"]
    assert updated["phone_number"] == "(11) 3333-4444"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field,value",
    [
        ("email", "not-an-email"),
        ("phone_number", "call me maybe"),
        ("sex", "other"),
        ("name", ""),
    ],
)
async def test_create_patient_invalid(
    client: AsyncClient, auth_headers, sample_patient_data, field, value
):
    """Test request validation of patient values."""
    response = await client.post(
        "/api/v1/patients/upsert",
        json={**sample_patient_data, field: value},
        headers=auth_headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_and_get_patients(client: AsyncClient, auth_headers, sample_patient_data):
    """Test listing patients ordered by name and fetching one."""
    await create_patient(client, auth_headers, {**sample_patient_data, "name": "Marina Reis"})
    created = await create_patient(client, auth_headers, sample_patient_data)

    response = await client.get("/api/v1/patients/", headers=auth_headers)
    assert [patient["name"] for patient in response.json()] == ["Carlos Lima", "Marina Reis"]

    response = await client.get(f"/api/v1/patients/{created['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]


@pytest.mark.asyncio
async def test_delete_patient(client: AsyncClient, auth_headers, sample_patient_data):
    """Test deleting a patient."""
    created = await create_patient(client, auth_headers, sample_patient_data)

    response = await client.delete(f"/api/v1/patients/{created['id']}", headers=auth_headers)
    assert response.status_code == 204

    response = await client.get(f"/api/v1/patients/{created['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Patient not found"


@pytest.mark.asyncio
async def test_update_unknown_patient(client: AsyncClient, auth_headers, sample_patient_data):
    """Test that updating a patient of no clinic returns 404."""
    response = await client.post(
        "/api/v1/patients/upsert",
        json={**sample_patient_data, "id": str(uuid4())},
        headers=auth_headers,
    )

    assert response.status_code == 404
