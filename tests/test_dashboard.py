"""Tests for the clinic dashboard."""

import pytest
from httpx import AsyncClient


async def post(client: AsyncClient, path: str, headers: dict, data: dict) -> dict:
    response = await client.post(f"/api/v1{path}", json=data, headers=headers)
    assert response.status_code in (200, 201), response.text
    return response.json()


@pytest.fixture
async def booked_clinic(client: AsyncClient, auth_headers, sample_doctor_data, sample_patient_data):
    """Two doctors, one patient and three appointments in October 2026."""
    cardiologist = await post(client, "/doctors/upsert", auth_headers, sample_doctor_data)
    pediatrician = await post(
        client,
        "/doctors/upsert",
        auth_headers,
        {
            **sample_doctor_data,
            "name": "Dr. Bruno Alves",
            "specialty": "pediatrics",
            "appointment_price_in_cents": 20000,
        },
    )
    patient = await post(client, "/patients/upsert", auth_headers, sample_patient_data)

    for doctor, day, slot in [
        (cardiologist, "2026-10-19", "08:00:00"),
        (cardiologist, "2026-10-20", "08:00:00"),
        (pediatrician, "2026-10-26", "10:00:00"),
    ]:
        await post(
            client,
            "/appointments/",
            auth_headers,
            {
                "doctor_id": doctor["id"],
                "patient_id": patient["id"],
                "appointment_date": day,
                "appointment_time": slot,
            },
        )
    return {"cardiologist": cardiologist, "pediatrician": pediatrician}


@pytest.mark.asyncio
async def test_empty_dashboard(client: AsyncClient, auth_headers):
    """Test a clinic without data."""
    response = await client.get("/api/v1/dashboard/", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total_revenue"] is None
    assert data["total_appointments"] == 0
    assert data["top_doctors"] == []
    assert [card["value"] for card in data["stats"]] == ["R$ 0,00", "0", "0", "0"]


@pytest.mark.asyncio
async def test_dashboard_totals(client: AsyncClient, auth_headers, booked_clinic):
    """Test totals, stat cards and rankings over all time."""
    response = await client.get("/api/v1/dashboard/", headers=auth_headers)

    data = response.json()
    assert data["total_revenue"] == 50000
    assert data["total_appointments"] == 3
    assert data["total_patients"] == 1
    assert data["total_doctors"] == 2
    assert data["stats"][0] == {"title": "Revenue", "value": "R$ 500,00"}
    assert data["top_doctors"][0]["name"] == "Dr. Ana Souza"
    assert data["top_doctors"][0]["appointments"] == 2
    assert data["top_specialties"] == [
        {"specialty": "cardiology", "appointments": 2},
        {"specialty": "pediatrics", "appointments": 1},
    ]


@pytest.mark.asyncio
async def test_dashboard_period_is_inclusive(client: AsyncClient, auth_headers, booked_clinic):
    """Test that both ends of the period count, and clinic totals ignore it."""
    response = await client.get(
        "/api/v1/dashboard/",
        params={"from": "2026-10-20", "to": "2026-10-26"},
        headers=auth_headers,
    )

    data = response.json()
    assert data["total_appointments"] == 2
    assert data["total_revenue"] == 35000
    assert data["total_doctors"] == 2
    assert len(data["top_doctors"]) == 2


@pytest.mark.asyncio
async def test_dashboard_rejects_inverted_period(client: AsyncClient, auth_headers):
    """Test that 'from' after 'to' is a bad request."""
    response = await client.get(
        "/api/v1/dashboard/",
        params={"from": "2026-10-26", "to": "2026-10-20"},
        headers=auth_headers,
    )

    assert response.status_code == 400
