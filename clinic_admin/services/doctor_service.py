"""Doctor service for business logic."""

from datetime import UTC, date, datetime, time, timedelta
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_admin.core.exceptions import NotFoundException
from clinic_admin.core.schedule import doctor_slot_times, is_doctor_available_on
from clinic_admin.models.appointments import appointments
from clinic_admin.models.doctors import doctors
from clinic_admin.schemas.doctors import AvailableTimeSlot, DoctorResponse, DoctorUpsert

logger = structlog.get_logger(__name__)


class DoctorService:
    """Service for managing a clinic's doctors."""

    def __init__(self, db: AsyncSession):
        """Initialize service with database session."""
        self.db = db

    async def _get_row(self, clinic_id: UUID, doctor_id: UUID) -> dict[str, Any]:
        stmt = select(doctors).where(
            and_(
                doctors.c.id == doctor_id,
                doctors.c.clinic_id == clinic_id,
            )
        )
        result = await self.db.execute(stmt)
        row = result.mappings().first()

        if not row:
            raise NotFoundException("Doctor not found")

        return dict(row)

    async def upsert_doctor(self, clinic_id: UUID, data: DoctorUpsert) -> DoctorResponse:
        """
        Create a doctor, or update it when ``data.id`` is set.

        Args:
            clinic_id: Clinic that owns the doctor
            data: Doctor values in storage representation

        Returns:
            Stored doctor

        Raises:
            NotFoundException: If ``data.id`` names no doctor of this clinic
        """
        values = data.model_dump(exclude={"id"})
        values["specialty"] = data.specialty.value

        if data.id is None:
            stmt = insert(doctors).values(clinic_id=clinic_id, **values).returning(doctors)
        else:
            # Ensures the doctor belongs to the caller's clinic
            await self._get_row(clinic_id, data.id)
            stmt = (
                update(doctors)  # type: ignore[assignment]
                .where(doctors.c.id == data.id)
                .values(updated_at=datetime.now(UTC), **values)
                .returning(doctors)
            )

        result = await self.db.execute(stmt)
        row = result.mappings().first()
        await self.db.commit()

        if not row:
            raise ValueError("Failed to save doctor")

        logger.info("doctor_upserted", doctor_id=str(row["id"]), created=data.id is None)
        return DoctorResponse.model_validate(dict(row))

    async def get_doctor(self, clinic_id: UUID, doctor_id: UUID) -> DoctorResponse:
        """
        Get doctor by ID.

        Raises:
            NotFoundException: If doctor not found in this clinic
        """
        return DoctorResponse.model_validate(await self._get_row(clinic_id, doctor_id))

    async def list_doctors(self, clinic_id: UUID) -> list[DoctorResponse]:
        """List the clinic's doctors ordered by name."""
        stmt = select(doctors).where(doctors.c.clinic_id == clinic_id).order_by(doctors.c.name)
        result = await self.db.execute(stmt)
        return [DoctorResponse.model_validate(dict(row)) for row in result.mappings().all()]

    async def delete_doctor(self, clinic_id: UUID, doctor_id: UUID) -> None:
        """
        Delete a doctor together with all of their appointments.

        Raises:
            NotFoundException: If doctor not found in this clinic
        """
        await self._get_row(clinic_id, doctor_id)

        deleted = await self.db.execute(
            delete(appointments).where(appointments.c.doctor_id == doctor_id)
        )
        await self.db.execute(delete(doctors).where(doctors.c.id == doctor_id))
        await self.db.commit()

        logger.info(
            "doctor_deleted",
            doctor_id=str(doctor_id),
            appointments_deleted=deleted.rowcount,
        )

    async def get_available_times(
        self,
        clinic_id: UUID,
        doctor_id: UUID,
        day: date,
    ) -> list[AvailableTimeSlot]:
        """
        List the doctor's slots for a date.

        Slots come from the clinic time palette, restricted to the doctor's
        daily window. A slot is unavailable once an appointment takes it.
        Days outside the doctor's weekday range have no slots.
        """
        doctor = await self._get_row(clinic_id, doctor_id)
        if not is_doctor_available_on(doctor, day):
            return []

        day_start = datetime.combine(day, time.min)
        stmt = select(appointments.c.date).where(
            and_(
                appointments.c.doctor_id == doctor_id,
                appointments.c.date >= day_start,
                appointments.c.date < day_start + timedelta(days=1),
            )
        )
        result = await self.db.execute(stmt)
        booked = {booked_at.time().replace(microsecond=0) for booked_at in result.scalars()}

        return [
            AvailableTimeSlot(
                value=slot.strftime("%H:%M:%S"),
                label=slot.strftime("%H:%M"),
                available=slot not in booked,
            )
            for slot in doctor_slot_times(doctor)
        ]
