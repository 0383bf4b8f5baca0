"""Appointment endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from clinic_admin.dependencies import CurrentSession, DatabaseSession
from clinic_admin.schemas.appointments import AppointmentCreate, AppointmentResponse
from clinic_admin.services.appointment_service import AppointmentService

router = APIRouter()


@router.post(
    "/",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create new appointment",
)
async def create_appointment(
    data: AppointmentCreate,
    session: CurrentSession,
    db: DatabaseSession,
) -> AppointmentResponse:
    """
    Book an appointment with a doctor of the clinic.

    Args:
        data: Appointment creation data
        session: Authenticated clinic session
        db: Database session

    Returns:
        Created appointment
    """
    return await AppointmentService(db).create_appointment(session.clinic_id, data)


@router.get("/", response_model=list[AppointmentResponse], summary="List appointments")
async def list_appointments(
    session: CurrentSession,
    db: DatabaseSession,
) -> list[AppointmentResponse]:
    """List the clinic's appointments with their patient and doctor."""
    return await AppointmentService(db).list_appointments(session.clinic_id)


@router.get(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    summary="Get appointment by ID",
)
async def get_appointment(
    appointment_id: UUID,
    session: CurrentSession,
    db: DatabaseSession,
) -> AppointmentResponse:
    """Get a specific appointment by ID."""
    return await AppointmentService(db).get_appointment(session.clinic_id, appointment_id)


@router.delete(
    "/{appointment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete appointment",
)
async def delete_appointment(
    appointment_id: UUID,
    session: CurrentSession,
    db: DatabaseSession,
) -> None:
    """Delete an appointment."""
    await AppointmentService(db).delete_appointment(session.clinic_id, appointment_id)
