"""Patient service for business logic."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_admin.core.exceptions import NotFoundException
from clinic_admin.models.appointments import appointments
from clinic_admin.models.patients import patients
from clinic_admin.schemas.patients import PatientResponse, PatientUpsert

logger = structlog.get_logger(__name__)


class PatientService:
    """Service for managing a clinic's patients."""

    def __init__(self, db: AsyncSession):
        """Initialize service with database session."""
        self.db = db

    async def _get_row(self, clinic_id: UUID, patient_id: UUID) -> dict[str, Any]:
        stmt = select(patients).where(
            and_(
                patients.c.id == patient_id,
                patients.c.clinic_id == clinic_id,
            )
        )
        result = await self.db.execute(stmt)
        row = result.mappings().first()

        if not row:
            raise NotFoundException("Patient not found")

        return dict(row)

    async def upsert_patient(self, clinic_id: UUID, data: PatientUpsert) -> PatientResponse:
        """
        Create a patient, or update it when ``data.id`` is set.

        Raises:
            NotFoundException: If ``data.id`` names no patient of this clinic
        """
        values = data.model_dump(exclude={"id"})
        values["sex"] = data.sex.value

        if data.id is None:
            stmt = insert(patients).values(clinic_id=clinic_id, **values).returning(patients)
        else:
            await self._get_row(clinic_id, data.id)
            stmt = (
                update(patients)  # type: ignore[assignment]
                .where(patients.c.id == data.id)
                .values(updated_at=datetime.now(UTC), **values)
                .returning(patients)
            )

        result = await self.db.execute(stmt)
        row = result.mappings().first()
        await self.db.commit()

        if not row:
            raise ValueError("Failed to save patient")

        logger.info("patient_upserted", patient_id=str(row["id"]), created=data.id is None)
        return PatientResponse.model_validate(dict(row))

    async def get_patient(self, clinic_id: UUID, patient_id: UUID) -> PatientResponse:
        """Get patient by ID."""
        return PatientResponse.model_validate(await self._get_row(clinic_id, patient_id))

    async def list_patients(self, clinic_id: UUID) -> list[PatientResponse]:
        """List the clinic's patients ordered by name."""
        stmt = select(patients).where(patients.c.clinic_id == clinic_id).order_by(patients.c.name)
        result = await self.db.execute(stmt)
        return [PatientResponse.model_validate(dict(row)) for row in result.mappings().all()]

    async def delete_patient(self, clinic_id: UUID, patient_id: UUID) -> None:
        """Delete a patient together with all of their appointments."""
        await self._get_row(clinic_id, patient_id)

        await self.db.execute(delete(appointments).where(appointments.c.patient_id == patient_id))
        await self.db.execute(delete(patients).where(patients.c.id == patient_id))
        await self.db.commit()

        logger.info("patient_deleted", patient_id=str(patient_id))
