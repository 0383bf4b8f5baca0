"""Tests for the HTTP doctor actions used by the doctor form."""

import json
from datetime import time
from uuid import uuid4

import httpx
import pytest

from clinic_admin.constants import MedicalSpecialty
from clinic_admin.core.exceptions import RemoteCallError
from clinic_admin.schemas.doctors import DoctorUpsert
from clinic_admin.services.doctor_actions import HttpDoctorActions, LoggingNotifier


def make_payload(**overrides) -> DoctorUpsert:
    data = {
        "name": "Dr. Ana Souza",
        "specialty": MedicalSpecialty.CARDIOLOGY,
        "appointment_price_in_cents": 15000,
        "available_from_week_day": 1,
        "available_to_week_day": 5,
        "available_from_time": time(8, 0),
        "available_to_time": time(12, 0),
    }
    data.update(overrides)
    return DoctorUpsert(**data)


def doctor_body(payload: dict) -> dict:
    return {
        **payload,
        "id": payload.get("id") or str(uuid4()),
        "clinic_id": str(uuid4()),
        "created_at": "2026-10-19T12:00:00Z",
        "updated_at": "2026-10-19T12:00:00Z",
    }


@pytest.mark.asyncio
async def test_upsert_posts_storage_payload():
    """Test that the upsert sends cents, weekday integers and HH:MM:SS times."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=doctor_body(json.loads(request.content)))

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://clinic.test"
    ) as client:
        saved = await HttpDoctorActions(client).upsert(make_payload())

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert request.url.path == "/api/v1/doctors/upsert"
    body = json.loads(request.content)
    assert "id" not in body
    assert body["appointment_price_in_cents"] == 15000
    assert body["available_from_week_day"] == 1
    assert body["available_from_time"] == "08:00:00"
    assert body["specialty"] == "cardiology"
    assert saved.name == "Dr. Ana Souza"
    assert saved.available_to_time == time(12, 0)


@pytest.mark.asyncio
async def test_upsert_sends_identity_when_editing():
    """Test that an edit carries the doctor's id."""
    doctor_id = uuid4()
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json=doctor_body(bodies[-1]))

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://clinic.test"
    ) as client:
        saved = await HttpDoctorActions(client).upsert(make_payload(id=doctor_id))

    assert bodies[0]["id"] == str(doctor_id)
    assert saved.id == doctor_id


@pytest.mark.asyncio
async def test_delete_targets_doctor():
    """Test the delete request path."""
    doctor_id = uuid4()
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(204)

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://clinic.test"
    ) as client:
        await HttpDoctorActions(client, api_prefix="/api/v2").delete(doctor_id)

    assert requests[0].method == "DELETE"
    assert requests[0].url.path == f"/api/v2/doctors/{doctor_id}"


@pytest.mark.asyncio
async def test_server_error_raises_remote_call_error():
    """Test that a non-success status becomes a RemoteCallError."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"message": "An unexpected error occurred"})

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://clinic.test"
    ) as client:
        with pytest.raises(RemoteCallError) as exc_info:
            await HttpDoctorActions(client).upsert(make_payload())

    assert "500" in exc_info.value.message


@pytest.mark.asyncio
async def test_network_error_raises_remote_call_error():
    """Test that a transport failure becomes a RemoteCallError."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://clinic.test"
    ) as client:
        with pytest.raises(RemoteCallError):
            await HttpDoctorActions(client).delete(uuid4())


def test_logging_notifier_accepts_messages():
    """Test that notifications are emitted without raising."""
    notifier = LoggingNotifier()

    notifier.success("Doctor added successfully")
    notifier.error("Error adding doctor")
