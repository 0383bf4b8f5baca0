"""Appointment service for business logic."""

from datetime import datetime
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_admin.core.exceptions import BadRequestException, ConflictException, NotFoundException
from clinic_admin.core.schedule import doctor_slot_times, is_doctor_available_on
from clinic_admin.models.appointments import appointments
from clinic_admin.models.doctors import doctors
from clinic_admin.models.patients import patients
from clinic_admin.schemas.appointments import AppointmentCreate, AppointmentResponse
from clinic_admin.services.doctor_service import DoctorService
from clinic_admin.services.patient_service import PatientService

logger = structlog.get_logger(__name__)


def _joined_select() -> Any:
    return select(
        appointments,
        patients.c.name.label("patient_name"),
        patients.c.email.label("patient_email"),
        patients.c.phone_number.label("patient_phone_number"),
        patients.c.sex.label("patient_sex"),
        doctors.c.name.label("doctor_name"),
        doctors.c.specialty.label("doctor_specialty"),
    ).select_from(
        appointments.join(patients, appointments.c.patient_id == patients.c.id).join(
            doctors, appointments.c.doctor_id == doctors.c.id
        )
    )


def _to_response(row: Any) -> AppointmentResponse:
    return AppointmentResponse.model_validate(
        {
            "id": row["id"],
            "clinic_id": row["clinic_id"],
            "date": row["date"],
            "appointment_price_in_cents": row["appointment_price_in_cents"],
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
            "patient": {
                "id": row["patient_id"],
                "name": row["patient_name"],
                "email": row["patient_email"],
                "phone_number": row["patient_phone_number"],
                "sex": row["patient_sex"],
            },
            "doctor": {
                "id": row["doctor_id"],
                "name": row["doctor_name"],
                "specialty": row["doctor_specialty"],
            },
        }
    )


class AppointmentService:
    """Service for managing appointments."""

    def __init__(self, db: AsyncSession):
        """Initialize service with database session."""
        self.db = db

    async def create_appointment(
        self,
        clinic_id: UUID,
        data: AppointmentCreate,
    ) -> AppointmentResponse:
        """
        Book an appointment.

        Args:
            clinic_id: Clinic of the caller
            data: Appointment creation data

        Returns:
            Created appointment

        Raises:
            NotFoundException: If patient or doctor is not in this clinic
            BadRequestException: If the doctor does not work at that date and time
            ConflictException: If the doctor already has an appointment in that slot
        """
        patient = await PatientService(self.db).get_patient(clinic_id, data.patient_id)
        doctor = (await DoctorService(self.db).get_doctor(clinic_id, data.doctor_id)).model_dump()

        if not is_doctor_available_on(doctor, data.appointment_date):
            raise BadRequestException("Doctor is not available on the selected day")
        if data.appointment_time not in doctor_slot_times(doctor):
            raise BadRequestException("Doctor is not available at the selected time")

        scheduled_at = datetime.combine(data.appointment_date, data.appointment_time)

        taken_stmt = (
            select(func.count())
            .select_from(appointments)
            .where(
                and_(
                    appointments.c.doctor_id == data.doctor_id,
                    appointments.c.date == scheduled_at,
                )
            )
        )
        if (await self.db.execute(taken_stmt)).scalar_one() > 0:
            raise ConflictException("Time slot is already booked")

        price = data.appointment_price_in_cents
        if price is None:
            price = doctor["appointment_price_in_cents"]

        stmt = (
            insert(appointments)
            .values(
                clinic_id=clinic_id,
                patient_id=patient.id,
                doctor_id=data.doctor_id,
                date=scheduled_at,
                appointment_price_in_cents=price,
            )
            .returning(appointments.c.id)
        )
        result = await self.db.execute(stmt)
        appointment_id = result.scalar_one()
        await self.db.commit()

        logger.info(
            "appointment_created",
            appointment_id=str(appointment_id),
            doctor_id=str(data.doctor_id),
            date=scheduled_at.isoformat(),
        )
        return await self.get_appointment(clinic_id, appointment_id)

    async def get_appointment(self, clinic_id: UUID, appointment_id: UUID) -> AppointmentResponse:
        """
        Get appointment by ID.

        Raises:
            NotFoundException: If appointment not found in this clinic
        """
        stmt = _joined_select().where(
            and_(
                appointments.c.id == appointment_id,
                appointments.c.clinic_id == clinic_id,
            )
        )
        result = await self.db.execute(stmt)
        row = result.mappings().first()

        if not row:
            raise NotFoundException("Appointment not found")

        return _to_response(row)

    async def list_appointments(self, clinic_id: UUID) -> list[AppointmentResponse]:
        """List the clinic's appointments with patient and doctor, newest first."""
        stmt = (
            _joined_select()
            .where(appointments.c.clinic_id == clinic_id)
            .order_by(appointments.c.date.desc())
        )
        result = await self.db.execute(stmt)
        return [_to_response(row) for row in result.mappings().all()]

    async def delete_appointment(self, clinic_id: UUID, appointment_id: UUID) -> None:
        """
        Delete an appointment.

        Raises:
            NotFoundException: If appointment not found in this clinic
        """
        await self.get_appointment(clinic_id, appointment_id)

        await self.db.execute(delete(appointments).where(appointments.c.id == appointment_id))
        await self.db.commit()

        logger.info("appointment_deleted", appointment_id=str(appointment_id))
