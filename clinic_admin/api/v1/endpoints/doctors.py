"""Doctor management endpoints."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError

from clinic_admin.constants import MEDICAL_SPECIALTIES, WEEKDAYS
from clinic_admin.core.schedule import time_slot_groups
from clinic_admin.dependencies import CurrentSession, DatabaseSession
from clinic_admin.schemas.doctors import (
    AvailableTimeSlot,
    DoctorFormOptions,
    DoctorResponse,
    DoctorUpsert,
)
from clinic_admin.services.doctor_service import DoctorService

router = APIRouter()


@router.get(
    "/options",
    response_model=DoctorFormOptions,
    summary="Options offered by the doctor form",
)
async def get_doctor_form_options(session: CurrentSession) -> DoctorFormOptions:
    """
    Specialty catalogue, weekday labels and the grouped time palette.

    Time slots run every 30 minutes from 05:00 to 23:30, grouped into
    Morning, Afternoon and Night.
    """
    return DoctorFormOptions(
        specialties=MEDICAL_SPECIALTIES,
        weekdays=WEEKDAYS,
        time_slot_groups=time_slot_groups(),
    )


@router.post(
    "/upsert",
    response_model=DoctorResponse,
    status_code=status.HTTP_200_OK,
    summary="Create or update a doctor",
)
async def upsert_doctor(
    data: DoctorUpsert,
    session: CurrentSession,
    db: DatabaseSession,
) -> DoctorResponse:
    """
    Create a doctor, or update one when ``id`` is given.

    - **appointment_price_in_cents**: Price as integer cents
    - **available_from_week_day / available_to_week_day**: Sunday=0 ... Saturday=6
    - **available_from_time / available_to_time**: HH:MM:SS, start before end
    """
    try:
        return await DoctorService(db).upsert_doctor(session.clinic_id, data)
    except IntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to save doctor"
        ) from e


@router.get("/", response_model=list[DoctorResponse], summary="List doctors")
async def list_doctors(session: CurrentSession, db: DatabaseSession) -> list[DoctorResponse]:
    """List the clinic's doctors ordered by name."""
    return await DoctorService(db).list_doctors(session.clinic_id)


@router.get("/{doctor_id}", response_model=DoctorResponse, summary="Get doctor by ID")
async def get_doctor(
    doctor_id: UUID,
    session: CurrentSession,
    db: DatabaseSession,
) -> DoctorResponse:
    """Get a doctor of the clinic."""
    return await DoctorService(db).get_doctor(session.clinic_id, doctor_id)


@router.delete(
    "/{doctor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete doctor",
)
async def delete_doctor(
    doctor_id: UUID,
    session: CurrentSession,
    db: DatabaseSession,
) -> None:
    """Delete a doctor and all of their scheduled appointments."""
    await DoctorService(db).delete_doctor(session.clinic_id, doctor_id)


@router.get(
    "/{doctor_id}/available-times",
    response_model=list[AvailableTimeSlot],
    summary="Doctor time slots for a date",
)
async def get_available_times(
    doctor_id: UUID,
    session: CurrentSession,
    db: DatabaseSession,
    day: date = Query(..., alias="date", description="Date as YYYY-MM-DD"),
) -> list[AvailableTimeSlot]:
    """
    List the doctor's time slots for a date, flagging booked ones.

    Returns an empty list when the doctor does not work on that weekday.
    """
    return await DoctorService(db).get_available_times(session.clinic_id, doctor_id, day)
